from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenKind(Enum):
    LEFT_PAREN = "lparen"
    RIGHT_PAREN = "rparen"
    SYMBOL = "symbol"
    NUMBER = "number"
    STRING = "string"


# Decimal literals only: `inf`, `nan` and a lone sign stay symbols
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str) -> Optional[float]:
    """Return `text` as a float if it is a finite decimal literal, else None.

    Literals that overflow to infinity, such as `1e999`, are not numbers.
    """
    if NUMBER_RE.fullmatch(text):
        n = float(text)
        if math.isfinite(n):
            return n
    return None


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    @classmethod
    def left_paren(cls) -> Token:
        return cls(TokenKind.LEFT_PAREN, "(")

    @classmethod
    def right_paren(cls) -> Token:
        return cls(TokenKind.RIGHT_PAREN, ")")

    @classmethod
    def symbol(cls, text: str) -> Token:
        return cls(TokenKind.SYMBOL, text)

    @classmethod
    def number(cls, text: str) -> Token:
        return cls(TokenKind.NUMBER, text)

    @classmethod
    def string(cls, text: str) -> Token:
        return cls(TokenKind.STRING, text)

    def __str__(self) -> str:
        if self.kind is TokenKind.STRING:
            return f'"{self.text}"'
        return self.text
