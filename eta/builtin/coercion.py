"""Implicit conversions used inside builtins.

Coercion is one level deep: a List is never converted, and nothing inside a
List is converted either.
"""

from __future__ import annotations

import math

from eta import LispValue
from eta.errors import TypeMismatch
from eta.printer import format_number, to_display
from eta.reader.tokens import parse_number

TRUE_STRINGS = frozenset({"true", "1"})
FALSE_STRINGS = frozenset({"false", "0", ""})


def to_number(value: LispValue) -> float:
    match value:
        case bool():
            return 1.0 if value else 0.0
        case float():
            return value
        case str():
            n = parse_number(value.strip())
            if n is None:
                raise TypeMismatch(f"cannot coerce {value!r} to a number")
            return n
    raise TypeMismatch(f"cannot coerce {to_display(value)} to a number")


def to_string(value: LispValue) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case float():
            return format_number(value)
        case str():
            return value
    raise TypeMismatch(f"cannot coerce {to_display(value)} to a string")


def to_bool(value: LispValue) -> bool:
    match value:
        case bool():
            return value
        case float():
            return value != 0.0
        case str() if value.strip() in TRUE_STRINGS:
            return True
        case str() if value.strip() in FALSE_STRINGS:
            return False
    raise TypeMismatch(f"cannot coerce {to_display(value)} to a boolean")


def to_index(value: LispValue) -> int:
    """Coerce to a non-negative integer index (fraction truncated)."""
    n = to_number(value)
    if not math.isfinite(n) or n < 0:
        raise TypeMismatch(f"invalid index {to_display(value)}")
    return int(n)
