"""
  Eta Parser

Recursive descent over a TokenStream with one token of lookahead.
Emits Python primitives instead of Cons cells:

    - lists   -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> float (one numeric kind)
    - true / false -> bool
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from eta import SExpression
from eta.errors import TrailingTokens, UnexpectedEof, UnmatchedParen
from eta.reader.tokens import Token, TokenKind
from eta.types.symbol import Symbol

logger = logging.getLogger(__name__)

BOOLEAN_LITERALS: dict[str, bool] = {
    "true": True,
    "false": False,
}


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(tokens)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def at_end(self) -> bool:
        return self.peek() is None

    def parse_expr(self) -> SExpression:
        """Parse exactly one form; raises UnexpectedEof on empty input."""
        token = self.advance()
        if token is None:
            raise UnexpectedEof()

        match token.kind:
            case TokenKind.LEFT_PAREN:
                items = []
                while True:
                    nxt = self.peek()
                    if nxt is None:
                        raise UnexpectedEof("missing closing parenthesis")
                    if nxt.kind is TokenKind.RIGHT_PAREN:
                        self.advance()
                        return items
                    items.append(self.parse_expr())
            case TokenKind.RIGHT_PAREN:
                raise UnmatchedParen()
            case TokenKind.NUMBER:
                return float(token.text)
            case TokenKind.STRING:
                return token.text
            case TokenKind.SYMBOL:
                if token.text in BOOLEAN_LITERALS:
                    return BOOLEAN_LITERALS[token.text]
                return Symbol(token.text)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Iterable[Token]) -> SExpression:
    """Parse one top-level form that must consume every token."""
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    leftover = stream.peek()
    if leftover is not None:
        if leftover.kind is TokenKind.RIGHT_PAREN:
            raise UnmatchedParen()
        raise TrailingTokens(f"unexpected token after complete form: {leftover}")
    logger.debug("parsed %r", expr)
    return expr
