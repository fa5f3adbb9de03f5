"""Text rendering for Eta expressions and values.

`to_source` writes a parsed Expression back as source text that parses to an
equal tree. `to_display` is what the shell prints for a result Value.
"""

from __future__ import annotations

from eta import LispValue, SExpression
from eta.types.builtin import Builtin
from eta.types.lambda_fn import Lambda
from eta.types.symbol import Symbol


def format_number(n: float) -> str:
    """Canonical decimal form: integral values drop the fraction, `5.0` -> `5`."""
    if n.is_integer() and abs(n) < 1e16:
        return str(int(n))
    return repr(n)


def to_source(expr: SExpression) -> str:
    match expr:
        case bool():
            return "true" if expr else "false"
        case float() | int():
            return format_number(float(expr))
        case str():
            return f'"{expr}"'
        case Symbol():
            return expr.id
        case list():
            return "(" + " ".join(to_source(e) for e in expr) + ")"
    raise TypeError(f"not an expression: {expr!r}")


def to_display(value: LispValue) -> str:
    match value:
        case Lambda() | Builtin():
            return str(value)
        case list():
            return "(" + " ".join(to_display(v) for v in value) + ")"
    return to_source(value)
