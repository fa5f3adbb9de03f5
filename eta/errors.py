"""Exception hierarchy for the Eta reader and evaluator.

Each stage raises its own family: LexError from the tokenizer, ParseError
from the parser and EvalError from evaluation. All of them derive from
EtaError so a shell can catch one type per input line and keep going.
"""

from __future__ import annotations

from typing import Any


class EtaError(Exception):
    """ Base class for all Eta errors"""
    pass


# -------------------------------
# Lexing
# -------------------------------
class LexError(EtaError):
    """ Raised when source text cannot be split into tokens"""


class UnterminatedString(LexError):
    """ Raised when a string literal has no closing quote"""

    def __init__(self, position: int):
        super().__init__(f"unterminated string literal starting at {position}")
        self.position = position


# -------------------------------
# Parsing
# -------------------------------
class ParseError(EtaError):
    """ Raised when a token sequence is not a well-formed expression"""


class UnexpectedEof(ParseError):
    """ Raised when the tokens end before an expression is complete"""

    def __init__(self, message: str = "token stream ended unexpectedly"):
        super().__init__(message)


class UnmatchedParen(ParseError):
    """ Raised on a ')' that closes nothing"""

    def __init__(self, message: str = "encountered an unexpected closing parenthesis"):
        super().__init__(message)


class TrailingTokens(ParseError):
    """ Raised when tokens remain after a complete top-level form"""


# -------------------------------
# Evaluation
# -------------------------------
class EvalError(EtaError):
    """ Raised when a well-formed expression cannot be evaluated"""


class UndefinedSymbol(EvalError):
    """ Raised when a symbol is not bound in any enclosing scope"""

    def __init__(self, name: str):
        super().__init__(f"symbol `{name}` is not defined")
        self.name = name


class NotCallable(EvalError):
    """ Raised when the head of a list is neither a lambda nor a builtin"""

    def __init__(self, value: Any):
        super().__init__(f"`{value}` is not callable")
        self.value = value


class ArityMismatch(EvalError):
    """ Raised when a procedure or form receives the wrong number of arguments"""

    def __init__(self, expected: int | str, got: int, name: str | None = None):
        who = f"{name}: " if name else ""
        super().__init__(f"{who}expected {expected} argument(s), got {got}")
        self.expected = expected
        self.got = got
        self.name = name


class TypeMismatch(EvalError):
    """ Raised when a value cannot be used or coerced as the required type"""


class DivisionByZero(EvalError):
    """ Raised when dividing by a value that is or coerces to zero"""

    def __init__(self, message: str = "division by zero"):
        super().__init__(message)


class IndexOutOfBounds(EvalError):
    """ Raised when a list index is outside the list"""

    def __init__(self, index: int):
        super().__init__(f"index `{index}` is out of bounds")
        self.index = index
