import pytest

from simplisp.interpreter import Interpreter
from simplisp.types.environment import Environment
from simplisp.types.symbol import SymbolTable
from simplisp.builtin.primitives import register


@pytest.fixture
def interp():
    """Fresh interpreter with primitives loaded."""
    return Interpreter()


@pytest.fixture
def symbols():
    return SymbolTable()


@pytest.fixture
def env(symbols):
    """Global environment with primitives registered against `symbols`."""
    e = Environment()
    register(e, symbols)
    return e
