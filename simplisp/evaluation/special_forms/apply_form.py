from simplisp import EvaluatorFn
from simplisp import SExpression, LispValue
from simplisp.errors import LispTypeError
from simplisp.types.environment import Environment
from simplisp.types.expressions import Pair, split_list
from simplisp.types.nil import Nil
from simplisp.evaluation.apply import apply as apply_engine
from simplisp.evaluation.special_forms.shape import require_length


def apply_form(
    form: Pair,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (APPLY fn list)
    Evaluates both operands, spreads the list into positional arguments and
    delegates to the central application engine.
    """
    require_length(form, tail, 3)
    fn_expr, args_expr = tail

    fn_val = evaluate_fn(fn_expr, env)
    args_val = evaluate_fn(args_expr, env)

    args, terminator = split_list(args_val)
    if terminator is not Nil:
        raise LispTypeError(f"Not a pair: {terminator}")

    return apply_engine(fn_val, args, env, evaluate_fn)
