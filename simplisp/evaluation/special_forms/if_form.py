from simplisp import EvaluatorFn
from simplisp import SExpression, LispValue
from simplisp.types.environment import Environment
from simplisp.types.expressions import Pair
from simplisp.types.nil import Nil
from simplisp.evaluation.special_forms.shape import require_length


def if_form(
    form: Pair,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(IF test then else). Only Nil is false."""
    require_length(form, tail, 4)
    test, then_expr, else_expr = tail
    if evaluate_fn(test, env) is Nil:
        return evaluate_fn(else_expr, env)
    return evaluate_fn(then_expr, env)
