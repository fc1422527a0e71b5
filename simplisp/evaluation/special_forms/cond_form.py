from simplisp import EvaluatorFn
from simplisp import SExpression, LispValue
from simplisp.types.environment import Environment
from simplisp.types.expressions import Pair
from simplisp.types.nil import Nil
from simplisp.evaluation.special_forms.shape import malformed


def cond_form(
    form: Pair,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (COND test1 result1 test2 result2 ...)
    Clauses are flat test/result pairs, not parenthesized. Tests run in order;
    the result paired with the first non-Nil test is evaluated and returned.
    Returns Nil when nothing matches.
    """
    if not tail or len(tail) % 2 != 0:
        raise malformed(form)

    for test, result in zip(tail[::2], tail[1::2]):
        if evaluate_fn(test, env) is not Nil:
            return evaluate_fn(result, env)
    return Nil
