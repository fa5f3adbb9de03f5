# Core type aliases for Eta's data model.
# Plain Python types represent both code (forms) and runtime values:
#   numbers -> float, strings -> str, booleans -> bool, lists -> list,
#   symbols -> eta.types.symbol.Symbol.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; runtime-only values (Lambda, Builtin) are
# defined under eta.types.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parsed forms (Symbol, float, str, bool or a list of forms)
SExpression = Any

# Evaluator function type: Python evaluator passed into special forms
EvaluatorFn = Callable[..., LispValue]
