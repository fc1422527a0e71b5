"""Core evaluator for the simplisp interpreter.

Structurally recursive over the expression kinds: atoms evaluate to
themselves, symbols are looked up through the environment chain, and lists
are either special forms (dispatched by keyword identity) or applications.
"""

from __future__ import annotations

from typing import Callable

from simplisp import SExpression, LispValue
from simplisp.errors import LispTypeError, LispUnboundSymbol
from simplisp.types.environment import Environment
from simplisp.types.expressions import Number, Pair, String, split_list
from simplisp.types.nil import Nil, NilType, TrueType
from simplisp.types.symbol import Symbol, SymbolTable
from simplisp.evaluation.apply import apply
from simplisp.evaluation.special_forms import build_special_forms
from simplisp.evaluation.special_forms.shape import malformed


class Evaluator:
    """Evaluates expressions against an environment chain."""

    def __init__(self, symbols: SymbolTable):
        self.special_forms: dict[Symbol, Callable] = build_special_forms(symbols)

    def evaluate(self, expr: SExpression, env: Environment) -> LispValue:
        match expr:
            case Number() | String() | NilType() | TrueType():
                return expr

            case Symbol():
                value = env.lookup(expr)
                if value is None:
                    raise LispUnboundSymbol(f"Unbound variable: {expr}")
                return value

            case Pair(first=head):
                if isinstance(head, Symbol):
                    handler = self.special_forms.get(head)
                    if handler is not None:
                        items, terminator = split_list(expr)
                        if terminator is not Nil:
                            raise malformed(expr)
                        return handler(expr, items[1:], env, self.evaluate)
                return self.evaluate_application(expr, env)

        raise LispTypeError(f"Unexpected expression: {expr}")

    def evaluate_application(self, form: Pair, env: Environment) -> LispValue:
        """Evaluate the operator, then each operand left to right, then apply."""
        fn = self.evaluate(form.first, env)
        args: list[LispValue] = []
        rest = form.second
        while rest is not Nil:
            if not isinstance(rest, Pair):
                raise LispTypeError(f"Not a pair: {rest}")
            args.append(self.evaluate(rest.first, env))
            rest = rest.second
        return apply(fn, args, env, self.evaluate)
