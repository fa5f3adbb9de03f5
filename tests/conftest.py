import pytest

from eta.interpreter import Interpreter, new_root_environment


@pytest.fixture
def env():
    """Fresh root environment with the prelude loaded."""
    return new_root_environment()


@pytest.fixture
def interp():
    return Interpreter()
