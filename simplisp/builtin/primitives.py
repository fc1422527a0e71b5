"""Built-in primitives for the simplisp runtime environment.

Each primitive takes the list of already-evaluated arguments and returns one
expression. Primitives check their own arity and argument kinds; the errors
name the primitive, and kind errors show the offending value.
"""
from __future__ import annotations

import numpy as np

from simplisp import LispValue
from simplisp.errors import LispArityError, LispTypeError, LispZeroDivisionError
from simplisp.types.environment import Environment
from simplisp.types.expressions import Number, Pair, Primitive
from simplisp.types.nil import Nil, NilType, truth
from simplisp.types.symbol import Symbol, SymbolTable


def expect_args(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise LispArityError(f"{name}: Wrong number of arguments.")


def num(value: LispValue) -> np.float32:
    """Unwrap a Number, or fail naming the value."""
    if not isinstance(value, Number):
        raise LispTypeError(f"Not a number: {value}")
    return value.value


def pair(value: LispValue) -> Pair:
    if not isinstance(value, Pair):
        raise LispTypeError(f"Not a pair: {value}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> LispValue:
    """Sum of all arguments; 0 when called with none."""
    acc = np.float32(0)
    with np.errstate(over="ignore", invalid="ignore"):
        for x in args:
            acc = acc + num(x)
    return Number(acc)


def sub(args: list[LispValue]) -> LispValue:
    """Negate a single argument, otherwise subtract the rest from the first."""
    if not args:
        raise LispArityError("-: Expects at least one argument.")
    acc = num(args[0])
    if len(args) == 1:
        return Number(-acc)
    with np.errstate(over="ignore", invalid="ignore"):
        for x in args[1:]:
            acc = acc - num(x)
    return Number(acc)


def mul(args: list[LispValue]) -> LispValue:
    """Product of all arguments; 1 when called with none."""
    acc = np.float32(1)
    with np.errstate(over="ignore", invalid="ignore"):
        for x in args:
            acc = acc * num(x)
    return Number(acc)


def _divide(n: np.float32, d: np.float32) -> np.float32:
    if d == 0:
        raise LispZeroDivisionError("/: Division by zero.")
    with np.errstate(over="ignore", under="ignore", invalid="ignore"):
        return n / d


def div(args: list[LispValue]) -> LispValue:
    """Reciprocal of a single argument, otherwise divide the first by the rest."""
    if not args:
        raise LispArityError("/: Expects at least one argument.")
    acc = num(args[0])
    if len(args) == 1:
        return Number(_divide(np.float32(1), acc))
    for x in args[1:]:
        acc = _divide(acc, num(x))
    return Number(acc)


# -------------------------------
# Pairs
# -------------------------------
def cons(args: list[LispValue]) -> LispValue:
    expect_args("CONS", args, 2)
    return Pair(args[0], args[1])


def car(args: list[LispValue]) -> LispValue:
    expect_args("CAR", args, 1)
    return pair(args[0]).first


def cdr(args: list[LispValue]) -> LispValue:
    expect_args("CDR", args, 1)
    return pair(args[0]).second


# -------------------------------
# Predicates
# -------------------------------
def _type_predicate(name: str, kind: type) -> Primitive:
    def predicate(args: list[LispValue]) -> LispValue:
        expect_args(name, args, 1)
        return truth(isinstance(args[0], kind))
    predicate.__name__ = f"is_{kind.__name__.lower()}"
    return Primitive(name, predicate)


def logical_and(args: list[LispValue]) -> LispValue:
    """T when both arguments are non-Nil."""
    expect_args("AND?", args, 2)
    return truth(args[0] is not Nil and args[1] is not Nil)


def logical_or(args: list[LispValue]) -> LispValue:
    """Nil only when both arguments are Nil."""
    expect_args("OR?", args, 2)
    return truth(args[0] is not Nil or args[1] is not Nil)


def is_eq(args: list[LispValue]) -> LispValue:
    """Same kind, and equal value for Numbers or the same object otherwise."""
    expect_args("EQ?", args, 2)
    a, b = args
    if type(a) is not type(b):
        return Nil
    if isinstance(a, Number):
        return truth(bool(a.value == b.value))
    return truth(a is b)


# -------------------------------
# Numeric comparison
# -------------------------------
def num_eq(args: list[LispValue]) -> LispValue:
    expect_args("=", args, 2)
    return truth(bool(num(args[0]) == num(args[1])))


def num_lt(args: list[LispValue]) -> LispValue:
    expect_args("<", args, 2)
    return truth(bool(num(args[0]) < num(args[1])))


def num_gt(args: list[LispValue]) -> LispValue:
    expect_args(">", args, 2)
    return truth(bool(num(args[0]) > num(args[1])))


PRIMITIVES: list[Primitive] = [
    Primitive("+", add),
    Primitive("-", sub),
    Primitive("*", mul),
    Primitive("/", div),
    Primitive("CONS", cons),
    Primitive("CAR", car),
    Primitive("CDR", cdr),
    _type_predicate("NUMBER?", Number),
    _type_predicate("SYMBOL?", Symbol),
    _type_predicate("LIST?", Pair),
    _type_predicate("NIL?", NilType),
    Primitive("AND?", logical_and),
    Primitive("OR?", logical_or),
    Primitive("EQ?", is_eq),
    Primitive("=", num_eq),
    Primitive("<", num_lt),
    Primitive(">", num_gt),
]


def register(env: Environment, symbols: SymbolTable) -> None:
    """Bind every primitive in `env` under its interned name."""
    env.update({symbols.intern(p.name): p for p in PRIMITIVES})
