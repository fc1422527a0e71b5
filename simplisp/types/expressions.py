"""Expression values for simplisp.

Every value the reader produces or the evaluator returns is one of:
Number, String, Symbol, Nil, T, Pair, Function or Primitive. All of them are
immutable once built; sub-trees are shared freely between expressions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Callable, Iterable

import numpy as np

from simplisp import LispValue
from simplisp.types.nil import Nil
from simplisp.types.symbol import Symbol


def format_number(value: np.float32) -> str:
    """Render a float the way a C stream does by default (%g, 6 digits)."""
    return format(float(value), "g")


@dataclass(frozen=True, slots=True)
class Number:
    """Single-precision float."""

    value: np.float32

    def __post_init__(self):
        object.__setattr__(self, "value", np.float32(self.value))

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True, slots=True)
class String:
    """Immutable text, printed between double quotes without escaping."""

    text: str

    def __str__(self) -> str:
        return f'"{self.text}"'


@dataclass(frozen=True, slots=True)
class Pair:
    """The cons cell."""

    first: LispValue
    second: LispValue

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
        """Build a right-nested chain of Pairs ending in `tail`."""
        result = tail
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            p = self
            while True:
                buffer.write(str(p.first))
                if isinstance(p.second, Pair):
                    buffer.write(" ")
                    p = p.second
                    continue
                if p.second is not Nil:
                    buffer.write(" . ")
                    buffer.write(str(p.second))
                break
            buffer.write(")")
            return buffer.getvalue()


def split_list(expr: LispValue) -> tuple[list[LispValue], LispValue]:
    """Split a Pair chain into its elements and whatever terminates it.

    A proper list ends in Nil; anything else means a dotted chain. A non-Pair
    argument yields no elements and is itself the terminator.
    """
    items: list[LispValue] = []
    while isinstance(expr, Pair):
        items.append(expr.first)
        expr = expr.second
    return items, expr


@dataclass(frozen=True, slots=True, eq=False)
class Function:
    """A user-defined procedure. `name` is only used for printing and errors."""

    params: tuple[Symbol, ...]
    body: LispValue
    name: Symbol | None = None

    @property
    def label(self) -> str:
        return "<procedure>" if self.name is None else str(self.name)

    def __str__(self) -> str:
        if self.name is None:
            return "<procedure>"
        return f"<procedure:{self.name}>"


@dataclass(frozen=True, slots=True, eq=False)
class Primitive:
    """A native operation over already-evaluated arguments."""

    name: str
    fn: Callable[[list[LispValue]], LispValue] = field(repr=False)

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return f"<primitive:{self.name}>"
