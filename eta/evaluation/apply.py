"""Application engine for Eta.

Centralizes procedure application so the evaluator and builtins that call
back into Eta code share one set of rules:
- Lambda: arity must match exactly; a fresh frame whose parent is the
  captured environment holds the parameters.
- Builtin: arity is checked against the builtin's declared bounds, then the
  Python function runs on the already-evaluated arguments.
"""

from eta import LispValue, EvaluatorFn
from eta.errors import NotCallable
from eta.types.builtin import Builtin
from eta.types.lambda_fn import Lambda


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lambda to already-evaluated arguments."""
    frame = fn.extend_env(args)
    return evaluate_fn(fn.body, frame)


def apply(head: object, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Lambda or a Builtin; anything else is NotCallable."""
    match head:
        case Lambda():
            return apply_lambda(head, args, evaluate_fn)
        case Builtin():
            return head(args)
    raise NotCallable(head)
