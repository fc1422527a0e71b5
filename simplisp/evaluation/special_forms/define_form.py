from loguru import logger

from simplisp import EvaluatorFn
from simplisp import SExpression, LispValue
from simplisp.errors import LispTypeError
from simplisp.types.environment import Environment
from simplisp.types.expressions import Function, Pair
from simplisp.types.nil import Nil
from simplisp.types.symbol import Symbol
from simplisp.evaluation.special_forms.shape import require_length
from simplisp.evaluation.special_forms.lambda_form import parameter_list


def define_form(
    form: Pair,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (DEFINE name (params...) body)
    Binds a named Function in the global frame, even when evaluated inside a
    procedure body. Returns Nil.
    """
    require_length(form, tail, 4)
    name, params, body = tail
    if not isinstance(name, Symbol):
        raise LispTypeError(f"Not a symbol: {name}")
    fn = Function(parameter_list(params), body, name)
    env.root.define(name, fn)
    logger.debug("define {} with {} parameter(s)", name, len(fn.params))
    return Nil
