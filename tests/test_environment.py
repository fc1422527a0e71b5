import pytest

from simplisp.errors import LispTypeError
from simplisp.types.environment import Environment
from simplisp.types.expressions import Number, Primitive


def test_define_and_lookup(symbols):
    env = Environment()
    x = symbols.intern("x")
    env.define(x, Number(1))
    assert env.lookup(x) == Number(1)


def test_lookup_unbound_returns_none(symbols):
    assert Environment().lookup(symbols.intern("missing")) is None


def test_define_overwrites_in_same_frame(symbols):
    env = Environment()
    x = symbols.intern("x")
    env.define(x, Number(1))
    env.define(x, Number(2))
    assert env.lookup(x) == Number(2)
    assert len(env.vars) == 1


def test_lookup_walks_outer_frames(symbols):
    root = Environment()
    middle = Environment(outer=root)
    inner = Environment(outer=middle)
    x, y = symbols.intern("x"), symbols.intern("y")
    root.define(x, Number(1))
    middle.define(y, Number(2))
    assert inner.lookup(x) == Number(1)
    assert inner.lookup(y) == Number(2)
    assert root.lookup(y) is None
    assert inner.find(x) is root


def test_inner_binding_shadows_outer(symbols):
    root = Environment()
    inner = Environment(outer=root)
    x = symbols.intern("x")
    root.define(x, Number(1))
    inner.define(x, Number(2))
    assert inner.lookup(x) == Number(2)
    assert root.lookup(x) == Number(1)


def test_root_is_the_global_frame():
    root = Environment()
    inner = Environment(outer=Environment(outer=root))
    assert inner.root is root
    assert root.root is root


def test_define_requires_symbol():
    with pytest.raises(LispTypeError, match="Not a symbol: x"):
        Environment().define("x", Number(1))


def test_registered_primitives(env, symbols):
    for name in ["+", "-", "*", "/", "CONS", "CAR", "CDR", "NUMBER?", "SYMBOL?",
                 "LIST?", "NIL?", "AND?", "OR?", "EQ?", "=", "<", ">"]:
        value = env.lookup(symbols.intern(name))
        assert isinstance(value, Primitive)
        assert value.name == name
    assert env.lookup(symbols.intern("car")) is env.lookup(symbols.intern("CAR"))
    assert len(env.vars) == 17


def test_str_and_repr(symbols):
    root = Environment()
    root.define(symbols.intern("x"), Number(1))
    inner = Environment(outer=root)
    assert str(root) == "{X: 1}"
    assert str(inner) == "{} -> ..."
    assert repr(inner) == "<Environment chain: {} -> {X: 1}>"
