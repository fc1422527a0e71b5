from __future__ import annotations

import sys
from typing import Iterator

from loguru import logger

from simplisp import LispValue
from simplisp.config import get_recursion_limit
from simplisp.errors import LispError
from simplisp.reader.parser import Parser
from simplisp.reader.tokenizer import tokenize
from simplisp.types.environment import Environment
from simplisp.types.nil import Nil
from simplisp.types.symbol import SymbolTable
from simplisp.evaluation.evaluator import Evaluator
from simplisp.builtin.primitives import register


class Interpreter:
    """
    Owns one interpreter state: the symbol table, the global environment
    populated with the primitives, and the evaluator. Input is processed one
    top-level form at a time; global definitions persist across calls.
    """

    def __init__(self):
        self.symbols = SymbolTable()
        self.env = Environment()
        register(self.env, self.symbols)
        self.evaluator = Evaluator(self.symbols)

        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

    def iter_values(self, code: str) -> Iterator[LispValue]:
        """Yield the value of each top-level form in `code`.

        The whole input is tokenized first. Forms are then parsed and evaluated
        one after the other, so an error stops the iteration after the values
        already produced, and definitions made by earlier forms stay in effect.
        """
        parser = Parser(tokenize(code), self.symbols)
        count = 0
        while not parser.at_end():
            count += 1
            try:
                expr = parser.parse_expr()
                logger.debug("eval form #{}: {}", count, expr)
                value = self.evaluator.evaluate(expr, self.env)
            except RecursionError:
                raise LispError("Maximum recursion depth exceeded.") from None
            except LispError as e:
                logger.debug("form #{} failed: {}", count, e.message)
                raise
            yield value

    def process(self, code: str) -> Iterator[str]:
        """Yield the printed form of each top-level result in `code`."""
        for value in self.iter_values(code):
            yield str(value)

    def process_all(self, code: str) -> list[str]:
        return list(self.process(code))

    def eval(self, code: str) -> LispValue:
        """Evaluate all forms in `code` and return the last value (Nil if none)."""
        result: LispValue = Nil
        for result in self.iter_values(code):
            pass
        return result

    def lookup(self, name: str) -> LispValue | None:
        """Global binding for `name`, or None when unbound."""
        return self.env.lookup(self.symbols.intern(name))
