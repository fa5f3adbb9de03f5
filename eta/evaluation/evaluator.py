"""Core evaluator for the Eta interpreter.

A plain recursive tree walker: atoms are self-evaluating, symbols are looked
up through the scope chain, lists are either special forms (dispatched by
head symbol through SPECIAL_FORMS) or procedure applications.

There is no tail-call elimination; deep recursion in Eta code ends in
Python's RecursionError.
"""

from __future__ import annotations

from eta import SExpression, LispValue
from eta.errors import NotCallable
from eta.evaluation.apply import apply
from eta.evaluation.special_forms import SPECIAL_FORMS
from eta.types.builtin import Builtin
from eta.types.environment import Environment
from eta.types.lambda_fn import Lambda
from eta.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case []:
            return []

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [head_expr, *tail]:
            head = evaluate(head_expr, env)
            if not isinstance(head, (Lambda, Builtin)):
                raise NotCallable(head)
            # Left to right: observable through side-effecting builtins
            args = [evaluate(arg, env) for arg in tail]
            return apply(head, args, evaluate)

        case Symbol():
            return env.lookup(expr)

    # --- Atoms return as-is ---
    return expr
