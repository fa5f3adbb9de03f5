"""Built-in procedure values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from eta import LispValue
from eta.errors import ArityMismatch


@dataclass(frozen=True)
class Builtin:
    """A named Python procedure exposed to Eta code.

    `max_args` of None means the procedure is variadic.
    """

    name: str
    fn: Callable[[list[LispValue]], LispValue]
    min_args: int = 0
    max_args: Optional[int] = None

    def check_arity(self, got: int) -> None:
        if got < self.min_args or (self.max_args is not None and got > self.max_args):
            raise ArityMismatch(self.expected, got, self.name)

    @property
    def expected(self) -> int | str:
        if self.max_args is None:
            return f"at least {self.min_args}"
        if self.min_args == self.max_args:
            return self.min_args
        return f"{self.min_args} to {self.max_args}"

    def __call__(self, args: list[LispValue]) -> LispValue:
        self.check_arity(len(args))
        return self.fn(args)

    def __str__(self) -> str:
        return f"<builtin {self.name}>"
