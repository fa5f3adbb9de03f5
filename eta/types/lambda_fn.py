"""Lambda function representation and argument binding for Eta."""

from __future__ import annotations

from io import StringIO

from eta import SExpression, LispValue
from eta.errors import ArityMismatch
from eta.types.environment import Environment
from eta.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Captured by reference: later defs in `env` stay visible
        self.env: Environment = env

    def __str__(self) -> str:
        # Imported here: the printer renders Lambda values too
        from eta.printer import to_source

        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_source(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment for evaluating the body.

        The new frame's parent is the captured environment, not the caller's,
        which is what makes scoping lexical.
        """
        if len(args) != len(self.formals):
            raise ArityMismatch(len(self.formals), len(args), "lambda")
        frame = Environment(outer=self.env)
        for name, value in zip(self.formals, args):
            frame.define(name, value)
        return frame
