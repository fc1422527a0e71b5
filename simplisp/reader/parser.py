"""
  Recursive-descent parser

Consumes a token list produced by the tokenizer and builds one expression
tree per top-level form:

    - NUMBER      -> Number
    - STRING      -> String
    - NIL         -> Nil
    - TRUE        -> T
    - SYMBOL      -> Symbol, interned through the SymbolTable
    - 'x          -> (QUOTE x), expanded here rather than at evaluation time
    - ( a b ... ) -> proper list of Pairs ending in Nil
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from simplisp import SExpression
from simplisp.errors import LispSyntaxError
from simplisp.reader.tokenizer import Token, TokenKind, tokenize
from simplisp.types.expressions import Number, Pair, String
from simplisp.types.nil import Nil, T
from simplisp.types.symbol import SymbolTable


class Parser:
    """Cursor over a token list; each parse_expr call consumes one form."""

    def __init__(self, tokens: list[Token], symbols: SymbolTable):
        self.tokens = tokens
        self.symbols = symbols
        self.cursor = 0
        self._quote = symbols.intern("QUOTE")

    def at_end(self) -> bool:
        return self.cursor >= len(self.tokens)

    def peek(self) -> Token | None:
        if self.at_end():
            return None
        return self.tokens[self.cursor]

    def advance(self) -> Token:
        if self.at_end():
            raise LispSyntaxError("Unexpected end of the input.")
        tok = self.tokens[self.cursor]
        self.cursor += 1
        return tok

    def parse_expr(self) -> SExpression:
        tok = self.advance()

        match tok.kind:
            case TokenKind.NUMBER:
                return self._parse_number(tok.value)
            case TokenKind.STRING:
                return String(tok.value)
            case TokenKind.NIL:
                return Nil
            case TokenKind.TRUE:
                return T
            case TokenKind.SYMBOL:
                return self.symbols.intern(tok.value)
            case TokenKind.QUOTE:
                quoted = self.parse_expr()
                return Pair(self._quote, Pair(quoted, Nil))
            case TokenKind.BEGIN_PAREN:
                return self._parse_list()
            case _:
                raise LispSyntaxError(f"Unexpected kind: {tok.value}")

    def _parse_number(self, text: str) -> Number:
        with np.errstate(over="ignore"):
            value = np.float32(float(text))
        # a literal made only of digits is finite, so inf means overflow
        if np.isinf(value):
            raise LispSyntaxError(f"Number out of range: {text}")
        return Number(value)

    def _parse_list(self) -> SExpression:
        items = []
        while True:
            items.append(self.parse_expr())
            nxt = self.peek()
            if nxt is None:
                raise LispSyntaxError("Missing closing ')'.")
            if nxt.kind is TokenKind.END_PAREN:
                self.cursor += 1
                return Pair.from_iterable(items)

    def parse_all(self) -> Iterator[SExpression]:
        """Yield top-level forms until the tokens run out."""
        while not self.at_end():
            yield self.parse_expr()


def parse(source: str, symbols: SymbolTable) -> list[SExpression]:
    """Tokenize and parse every top-level form in `source`."""
    return list(Parser(tokenize(source), symbols).parse_all())
