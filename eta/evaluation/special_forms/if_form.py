from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.builtin.coercion import to_bool
from eta.errors import ArityMismatch
from eta.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise ArityMismatch(3, len(tail), "if")

    test, then_branch, else_branch = tail
    # Raises TypeMismatch when the test has no boolean reading
    if to_bool(evaluate_fn(test, env)):
        return evaluate_fn(then_branch, env)
    return evaluate_fn(else_branch, env)
