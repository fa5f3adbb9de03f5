"""
  Eta Lexer

Splits source text into Tokens:

    - ( and )         -> LEFT_PAREN / RIGHT_PAREN, always one character
    - "..."           -> STRING, contents taken verbatim (no escapes)
    - anything else   -> a maximal run of non-space, non-paren, non-quote
                         characters, classified after it is collected:
                         NUMBER if the whole run is a decimal literal,
                         SYMBOL otherwise (so `1a` is a symbol)
"""

from __future__ import annotations

import logging
from typing import Iterator

from eta.errors import UnterminatedString
from eta.reader.tokens import Token, parse_number

logger = logging.getLogger(__name__)

DELIMITERS = frozenset('()"')


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens in source order."""
    pos = 0
    n = len(source)

    while pos < n:
        current_char = source[pos]

        if current_char.isspace():
            pos += 1
            continue

        if current_char == "(":
            pos += 1
            yield Token.left_paren()
            continue

        if current_char == ")":
            pos += 1
            yield Token.right_paren()
            continue

        if current_char == '"':
            end = source.find('"', pos + 1)
            if end == -1:
                raise UnterminatedString(pos)
            yield Token.string(source[pos + 1:end])
            pos = end + 1
            continue

        start = pos
        while pos < n and not source[pos].isspace() and source[pos] not in DELIMITERS:
            pos += 1
        run = source[start:pos]
        if parse_number(run) is not None:
            yield Token.number(run)
        else:
            yield Token.symbol(run)


def tokenize(source: str) -> list[Token]:
    """Eagerly tokenize `source`; raises UnterminatedString on an open string."""
    tokens = list(lex(source))
    logger.debug("tokenized %d token(s): %s", len(tokens), " ".join(map(str, tokens)))
    return tokens
