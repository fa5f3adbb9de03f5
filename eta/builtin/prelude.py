"""Built-in procedures for the Eta runtime environment.

This module defines arithmetic, comparison, logic, string and list utilities
and the process-level `read`, `print` and `exit` procedures, plus `register`,
which installs all of them into an Environment.

Numeric and string arguments go through eta.builtin.coercion, so `(+ "100" 5)`
is 105 and `(concat "n=" 3)` is "n=3".
"""
from __future__ import annotations

import math
import sys
from functools import reduce

from eta import LispValue
from eta.builtin.coercion import to_bool, to_index, to_number, to_string
from eta.errors import DivisionByZero, IndexOutOfBounds, TypeMismatch
from eta.printer import to_display
from eta.types.builtin import Builtin
from eta.types.environment import Environment
from eta.types.symbol import Symbol


# -------------------------------
# Arithmetic
# -------------------------------
def _add_pair(a: LispValue, b: LispValue) -> LispValue:
    try:
        return to_number(a) + to_number(b)
    except TypeMismatch:
        return to_string(a) + to_string(b)


def add(args: list[LispValue]) -> LispValue:
    """Sum left to right; a pair that does not coerce to numbers is concatenated."""
    if len(args) == 1:
        # A lone operand still has to be a number or a string
        try:
            return to_number(args[0])
        except TypeMismatch:
            return to_string(args[0])
    return reduce(_add_pair, args)


def sub(args: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    nums = [to_number(a) for a in args]
    if len(nums) == 1:
        return -nums[0]
    return reduce(lambda a, b: a - b, nums)


def mul(args: list[LispValue]) -> float:
    return reduce(lambda a, b: a * b, (to_number(a) for a in args))


def _checked_divisor(d: float, op: str) -> float:
    if d == 0.0:
        raise DivisionByZero(f"{op}: division by zero")
    return d


def div(args: list[LispValue]) -> float:
    """Divide left to right; with one arg returns the reciprocal."""
    nums = [to_number(a) for a in args]
    if len(nums) == 1:
        return 1.0 / _checked_divisor(nums[0], "/")
    result = nums[0]
    for d in nums[1:]:
        result /= _checked_divisor(d, "/")
    return result


def mod(args: list[LispValue]) -> float:
    """Remainder left to right; the result takes the sign of the dividend."""
    nums = [to_number(a) for a in args]
    result = nums[0]
    for d in nums[1:]:
        result = math.fmod(result, _checked_divisor(d, "%"))
    return result


# -------------------------------
# Comparison
# -------------------------------
def _chain(args: list[LispValue], cmp) -> bool:
    nums = [to_number(a) for a in args]
    return all(cmp(a, b) for a, b in zip(nums, nums[1:]))


def num_eq(args: list[LispValue]) -> bool:
    return _chain(args, lambda a, b: a == b)


def lt(args: list[LispValue]) -> bool:
    """Chainable less-than: true if a0 < a1 < a2 ... holds for all pairs."""
    return _chain(args, lambda a, b: a < b)


def lte(args: list[LispValue]) -> bool:
    return _chain(args, lambda a, b: a <= b)


def gt(args: list[LispValue]) -> bool:
    return _chain(args, lambda a, b: a > b)


def gte(args: list[LispValue]) -> bool:
    return _chain(args, lambda a, b: a >= b)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Strict equality: same type and value, element-wise for lists."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


def strict_equals(args: list[LispValue]) -> bool:
    return all(is_equal(a, b) for a, b in zip(args, args[1:]))


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(args: list[LispValue]) -> bool:
    # Every argument is coerced, so a bad operand fails even after a false one
    return all([to_bool(a) for a in args])


def logical_or(args: list[LispValue]) -> bool:
    return any([to_bool(a) for a in args])


def logical_not(args: list[LispValue]) -> bool:
    return not to_bool(args[0])


# -------------------------------
# Strings and lists
# -------------------------------
def concat(args: list[LispValue]) -> str:
    """Join the string form of every argument."""
    return "".join(to_string(a) for a in args)


def list_builtin(args: list[LispValue]) -> list[LispValue]:
    return list(args)


def _expect_list(value: LispValue, op: str) -> list[LispValue]:
    if not isinstance(value, list):
        raise TypeMismatch(f"{op}: expected a list, got {to_display(value)}")
    return value


def nth(args: list[LispValue]) -> LispValue:
    """(nth index list) => the element at `index`, counting from zero."""
    index, items = args
    items = _expect_list(items, "nth")
    i = to_index(index)
    if i >= len(items):
        raise IndexOutOfBounds(i)
    return items[i]


def append(args: list[LispValue]) -> list[LispValue]:
    """(append elem list) => a new list with `elem` at the end."""
    elem, items = args
    return _expect_list(items, "append") + [elem]


def length(args: list[LispValue]) -> float:
    (value,) = args
    if isinstance(value, (list, str)):
        return float(len(value))
    raise TypeMismatch(f"len: expected a list or string, got {to_display(value)}")


def begin(args: list[LispValue]) -> LispValue:
    """Arguments are already evaluated in order; the last one is the result."""
    return args[-1]


# -------------------------------
# Process and I/O
# -------------------------------
def read_line(args: list[LispValue]) -> str:
    return sys.stdin.readline().removesuffix("\n")


def print_builtin(args: list[LispValue]) -> LispValue:
    print(" ".join(a if isinstance(a, str) else to_display(a) for a in args))
    return args[-1]


def exit_builtin(args: list[LispValue]) -> LispValue:
    """Terminate the process; the status defaults to 0."""
    if not args:
        sys.exit(0)
    status = to_number(args[0])
    if not math.isfinite(status):
        raise TypeMismatch(f"exit: invalid status {to_display(args[0])}")
    sys.exit(int(status))


# -------------------------------
# Registration
# -------------------------------
PRELUDE: list[Builtin] = [
    Builtin("+", add, 1),
    Builtin("-", sub, 1),
    Builtin("*", mul, 1),
    Builtin("/", div, 1),
    Builtin("%", mod, 1),
    Builtin("=", num_eq, 1),
    Builtin("<", lt, 1),
    Builtin("<=", lte, 1),
    Builtin(">", gt, 1),
    Builtin(">=", gte, 1),
    Builtin("==", strict_equals, 1),
    Builtin("and", logical_and, 1),
    Builtin("or", logical_or, 1),
    Builtin("not", logical_not, 1, 1),
    Builtin("concat", concat, 1),
    Builtin("list", list_builtin),
    Builtin("nth", nth, 2, 2),
    Builtin("append", append, 2, 2),
    Builtin("len", length, 1, 1),
    Builtin("begin", begin, 1),
    Builtin("read", read_line, 0, 0),
    Builtin("print", print_builtin, 1),
    Builtin("exit", exit_builtin, 0, 1),
]


def register(env: Environment) -> None:
    env.update({Symbol(b.name): b for b in PRELUDE})
