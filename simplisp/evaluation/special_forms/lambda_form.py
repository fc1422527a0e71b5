from simplisp import EvaluatorFn
from simplisp import SExpression, LispValue
from simplisp.errors import LispTypeError
from simplisp.types.environment import Environment
from simplisp.types.expressions import Function, Pair
from simplisp.types.nil import Nil
from simplisp.types.symbol import Symbol
from simplisp.evaluation.special_forms.shape import require_length


def parameter_list(params: SExpression) -> tuple[Symbol, ...]:
    """Read a parameter list: Nil, or a proper list of Symbols."""
    result: list[Symbol] = []
    while params is not Nil:
        if not isinstance(params, Pair):
            raise LispTypeError(f"Not a pair: {params}")
        if not isinstance(params.first, Symbol):
            raise LispTypeError(f"Not a symbol: {params.first}")
        result.append(params.first)
        params = params.second
    return tuple(result)


def lambda_form(
    form: Pair,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(LAMBDA (params...) body) -> an unnamed Function. Nothing is bound."""
    require_length(form, tail, 3)
    params, body = tail
    return Function(parameter_list(params), body)
