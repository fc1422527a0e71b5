from simplisp import EvaluatorFn
from simplisp import SExpression, LispValue
from simplisp.types.environment import Environment
from simplisp.types.expressions import Pair
from simplisp.evaluation.special_forms.shape import require_length


def quote_form(
    form: Pair,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # The quoted tree is returned as-is, shared with the parsed form.
    require_length(form, tail, 2)
    return tail[0]
