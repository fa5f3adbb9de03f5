from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.errors import ArityMismatch, TypeMismatch
from eta.types.environment import Environment
from eta.types.lambda_fn import Lambda
from eta.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (func (params) body): exactly one body expression, not evaluated here.
    # Sequencing goes through the `begin` builtin.
    if len(tail) != 2:
        raise ArityMismatch(2, len(tail), "func")

    params, body = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise TypeMismatch("func: parameters must be a list of symbols")

    return Lambda(list(params), body, env)
