import pytest

from eta.errors import NotCallable, UndefinedSymbol
from eta.evaluation.evaluator import evaluate
from eta.types import Builtin, Environment, Lambda, Symbol


# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

def do_sum(args):
    return sum(args)


@pytest.fixture
def env():
    env = Environment()
    env.define(Symbol("+"), Builtin("+", do_sum))
    env.define(Symbol("-"), Builtin("-", lambda args: args[0] - sum(args[1:]), 1))
    env.define(Symbol("x"), 42.0)
    env.define(Symbol("y"), 100.0)
    return env


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1.0, env) == 1.0
    assert evaluate(3.14, env) == 3.14
    assert evaluate("hello", env) == "hello"
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False


def test_symbol_lookup(env):
    assert evaluate(Symbol("x"), env) == 42
    assert evaluate(Symbol("y"), env) == 100
    with pytest.raises(UndefinedSymbol) as info:
        evaluate(Symbol("z"), env)
    assert info.value.name == "z"


def test_empty_list_evaluates_to_empty_list(env):
    assert evaluate([], env) == []


def test_simple_expression(env):
    assert evaluate([Symbol("+"), 1.0, 2.0], env) == 3


def test_nested_expression(env):
    expr = [Symbol("+"), 4.0, 5.0, [Symbol("+"), 10.0, 5.0]]
    assert evaluate(expr, env) == 24


def test_head_may_be_any_expression(env):
    lam = [Symbol("func"), [Symbol("a")], [Symbol("-"), Symbol("a"), 1.0]]
    assert evaluate([lam, 10.0], env) == 9


def test_head_may_be_a_value(env):
    lam = Lambda([Symbol("a")], [Symbol("+"), Symbol("a"), Symbol("a")], env)
    assert evaluate([lam, 4.0], env) == 8


@pytest.mark.parametrize("head", [1.0, "str", True, [Symbol("+"), 1.0]])
def test_not_callable(env, head):
    with pytest.raises(NotCallable):
        evaluate([head, 1.0], env)


def test_not_callable_after_lookup(env):
    with pytest.raises(NotCallable) as info:
        evaluate([Symbol("x"), 1.0], env)
    assert info.value.value == 42


def test_unbound_head_is_undefined_symbol(env):
    with pytest.raises(UndefinedSymbol):
        evaluate([Symbol("foo"), 1.0], env)


def test_arguments_evaluated_left_to_right(env):
    seen = []

    def record(args):
        seen.append(args[0])
        return args[0]

    env.define(Symbol("rec"), Builtin("rec", record, 1, 1))
    expr = [Symbol("+"), [Symbol("rec"), 1.0], [Symbol("rec"), 2.0], [Symbol("rec"), 3.0]]
    assert evaluate(expr, env) == 6
    assert seen == [1.0, 2.0, 3.0]


def test_expression_not_consumed_by_evaluation(env):
    expr = [Symbol("+"), [Symbol("-"), 10.0, 4.0], Symbol("x")]
    snapshot = [Symbol("+"), [Symbol("-"), 10.0, 4.0], Symbol("x")]
    assert evaluate(expr, env) == 48
    assert evaluate(expr, env) == 48
    assert expr == snapshot


def test_arguments_not_evaluated_when_head_fails(env):
    with pytest.raises(NotCallable):
        evaluate([1.0, Symbol("missing")], env)
