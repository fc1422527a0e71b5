"""Registry of special forms for the simplisp evaluator.

Keywords are matched by Symbol identity, so the table is built per
SymbolTable. Every handler has the signature

    handler(form, tail, env, evaluate_fn) -> value

where `form` is the whole list (used in error messages) and `tail` holds the
elements after the keyword.
"""

from typing import Callable

from simplisp.types.symbol import Symbol, SymbolTable
from simplisp.evaluation.special_forms.if_form import if_form
from simplisp.evaluation.special_forms.cond_form import cond_form
from simplisp.evaluation.special_forms.set_form import set_form
from simplisp.evaluation.special_forms.quote_form import quote_form
from simplisp.evaluation.special_forms.define_form import define_form
from simplisp.evaluation.special_forms.lambda_form import lambda_form
from simplisp.evaluation.special_forms.apply_form import apply_form
from simplisp.evaluation.special_forms.eval_form import eval_form

SPECIAL_FORM_HANDLERS: dict[str, Callable] = {
    "IF": if_form,
    "COND": cond_form,
    "SET": set_form,
    "QUOTE": quote_form,
    "DEFINE": define_form,
    "LAMBDA": lambda_form,
    "APPLY": apply_form,
    "EVAL": eval_form,
}


def build_special_forms(symbols: SymbolTable) -> dict[Symbol, Callable]:
    """Intern every keyword in `symbols` and map it to its handler."""
    return {symbols.intern(name): handler for name, handler in SPECIAL_FORM_HANDLERS.items()}
