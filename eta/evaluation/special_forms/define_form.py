from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.errors import ArityMismatch, TypeMismatch
from eta.types.environment import Environment
from eta.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the current frame only and returns the bound value.
    """
    if len(tail) != 2:
        raise ArityMismatch(2, len(tail), "def")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise TypeMismatch(f"def: cannot bind to non-symbol {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
