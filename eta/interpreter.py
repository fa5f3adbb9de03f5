"""Entry points that run Eta source text.

`run_one` is the whole pipeline for a single form: tokenize, parse, evaluate,
stopping at the first stage that raises. `Interpreter` keeps one root
Environment alive so definitions persist between calls.
"""

from __future__ import annotations

import logging

from eta import LispValue
from eta.builtin.prelude import register
from eta.errors import UnexpectedEof
from eta.evaluation.evaluator import evaluate
from eta.printer import to_display
from eta.reader.lexer import lex, tokenize
from eta.reader.parser import TokenStream, parse
from eta.types.environment import Environment

logger = logging.getLogger(__name__)


def new_root_environment() -> Environment:
    """A fresh top-level Environment holding the prelude builtins."""
    env = Environment()
    register(env)
    return env


def run_one(source: str, env: Environment) -> LispValue:
    """Evaluate exactly one top-level form from `source` in `env`.

    Raises LexError, ParseError or EvalError from whichever stage fails first.
    """
    expr = parse(tokenize(source))
    result = evaluate(expr, env)
    logger.debug("%s => %s", source.strip(), to_display(result))
    return result


class Interpreter:
    """
    Owns a root Environment and evaluates source text against it.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else new_root_environment()

    def eval(self, code: str) -> LispValue:
        """Evaluate a single form."""
        return run_one(code, self.env)

    def eval_all(self, code: str) -> LispValue:
        """Evaluate every top-level form in order and return the last result.

        Raises UnexpectedEof if `code` holds no form at all.
        """
        stream = TokenStream(lex(code))
        if stream.at_end():
            raise UnexpectedEof()
        result: LispValue = None
        for expr in stream.parse_all():
            result = evaluate(expr, self.env)
        return result
