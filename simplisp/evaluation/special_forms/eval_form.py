from simplisp import EvaluatorFn
from simplisp import SExpression, LispValue
from simplisp.types.environment import Environment
from simplisp.types.expressions import Pair
from simplisp.evaluation.special_forms.shape import require_length


def eval_form(
    form: Pair,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(EVAL expr): evaluate expr, then evaluate the result in the same scope."""
    require_length(form, tail, 2)
    expr_to_eval = evaluate_fn(tail[0], env)
    return evaluate_fn(expr_to_eval, env)
