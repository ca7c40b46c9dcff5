import pytest

from lispcell.builtin.env_builtin import register
from lispcell.interpreter import Interpreter
from lispcell.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
