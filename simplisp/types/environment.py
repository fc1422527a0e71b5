"""Runtime environment for simplisp.

An Environment is one frame of Symbol bindings with a link to the frame it
was chained onto. The frame without an `outer` link is the global frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from simplisp import LispValue
from simplisp.errors import LispTypeError
from simplisp.types.symbol import Symbol


class Environment:
    """Chain of frames mapping Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @property
    def root(self) -> Environment:
        """The global frame at the end of the chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any earlier binding."""
        if not isinstance(name, Symbol):
            raise LispTypeError(f"Not a symbol: {name}")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue | None:
        """Return the first binding of `name` walking toward the root, or None."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in this frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            env: Optional[Environment] = self
            while env is not None:
                frame = StringIO()
                env._write_vars(frame)
                frames.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
