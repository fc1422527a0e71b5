from loguru import logger

from simplisp import EvaluatorFn
from simplisp import SExpression, LispValue
from simplisp.errors import LispTypeError
from simplisp.types.environment import Environment
from simplisp.types.expressions import Pair
from simplisp.types.symbol import Symbol
from simplisp.evaluation.special_forms.shape import require_length


def set_form(
    form: Pair,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(SET name value) binds in the global frame whatever the current scope."""
    require_length(form, tail, 3)
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LispTypeError(f"Not a symbol: {var_sym}")
    value = evaluate_fn(val_expr, env)
    env.root.define(var_sym, value)
    logger.debug("set {} = {}", var_sym, value)
    return value
