import copy
import dataclasses

import numpy as np
import pytest
from hypothesis import given, strategies as st

from simplisp.types.expressions import Function, Number, Pair, Primitive, String, split_list
from simplisp.types.nil import Nil, NilType, T, TrueType, truth


@pytest.mark.parametrize(
    "value,expected",
    [
        (3, "3"),
        (-5, "-5"),
        (0, "0"),
        (0.5, "0.5"),
        (2.25, "2.25"),
        (1 / 3, "0.333333"),
        (123456, "123456"),
        (1234567, "1.23457e+06"),
        (1e7, "1e+07"),
    ],
)
def test_number_rendering(value, expected):
    assert str(Number(value)) == expected


def test_numbers_are_single_precision():
    n = Number(0.1)
    assert isinstance(n.value, np.float32)
    assert float(n.value) != 0.1
    assert Number(16777217).value == np.float32(16777216)


@given(st.integers(min_value=-999999, max_value=999999))
def test_integral_numbers_print_stably(n):
    assert str(Number(n)) == str(n)


def test_string_rendering_has_no_escaping():
    assert str(String("hi")) == '"hi"'
    assert str(String('a"b')) == '"a"b"'
    assert str(String("")) == '""'


def test_singletons():
    assert NilType() is Nil
    assert TrueType() is T
    assert copy.copy(Nil) is Nil
    assert copy.deepcopy(T) is T
    assert str(Nil) == "()"
    assert str(T) == "T"
    assert not Nil
    assert truth(True) is T
    assert truth(False) is Nil


def test_pair_rendering(symbols):
    one, two, three = Number(1), Number(2), Number(3)
    assert str(Pair(one, two)) == "(1 . 2)"
    assert str(Pair(one, Nil)) == "(1)"
    assert str(Pair.from_iterable([one, two, three])) == "(1 2 3)"
    assert str(Pair(one, Pair(two, three))) == "(1 2 . 3)"
    assert str(Pair(Pair(one, Nil), Pair(two, Nil))) == "((1) 2)"
    assert str(Pair(Nil, Nil)) == "(())"
    assert str(Pair.from_iterable([symbols.intern("a"), String("s"), T])) == '(A "s" T)'


def test_pair_from_iterable_with_tail():
    lst = Pair.from_iterable([Number(1), Number(2)], tail=Number(3))
    assert str(lst) == "(1 2 . 3)"
    assert Pair.from_iterable([]) is Nil


def test_pairs_are_immutable():
    p = Pair(Number(1), Nil)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.first = Number(2)


def test_split_list():
    lst = Pair.from_iterable([Number(1), Number(2)])
    items, terminator = split_list(lst)
    assert items == [Number(1), Number(2)]
    assert terminator is Nil

    items, terminator = split_list(Pair(Number(1), Number(2)))
    assert items == [Number(1)]
    assert terminator == Number(2)

    assert split_list(Nil) == ([], Nil)


def test_procedure_rendering(symbols):
    body = Nil
    assert str(Function((), body)) == "<procedure>"
    assert str(Function((), body, symbols.intern("square"))) == "<procedure:SQUARE>"
    assert Function((), body).label == "<procedure>"
    assert Function((), body, symbols.intern("f")).label == "F"


def test_primitive_rendering_and_call():
    prim = Primitive("FIRST", lambda args: args[0])
    assert str(prim) == "<primitive:FIRST>"
    assert prim([Number(4), Number(5)]) == Number(4)


def test_procedures_compare_by_identity():
    f = Function((), Nil)
    g = Function((), Nil)
    assert f == f
    assert f != g
