"""Application engine for simplisp.

Both ordinary calls and the APPLY special form go through `apply`, so the
binding rules live in one place:

- Primitives receive the evaluated arguments directly and check their own arity.
- Functions require an exact argument count. Their parameters are bound in a
  new frame chained onto the frame active at the call site, so free variables
  in the body resolve through the dynamic call chain, not the definition site.
"""

from simplisp import LispValue, EvaluatorFn
from simplisp.errors import LispArityError, LispTypeError
from simplisp.types.environment import Environment
from simplisp.types.expressions import Function, Primitive


def bind_arguments(fn: Function, args: list[LispValue], caller_env: Environment) -> Environment:
    """Return a new frame over `caller_env` binding fn's parameters positionally."""
    if len(args) != len(fn.params):
        raise LispArityError(
            f"{fn.label}: given {len(args)} arguments instead of {len(fn.params)}."
        )
    new_env = Environment(outer=caller_env)
    for param, arg in zip(fn.params, args):
        # duplicate parameter names: the later one wins
        new_env.define(param, arg)
    return new_env


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Primitive or Function to already-evaluated arguments."""
    if isinstance(head, Primitive):
        return head(args)
    if isinstance(head, Function):
        new_env = bind_arguments(head, args, env)
        return evaluate_fn(head.body, new_env)
    raise LispTypeError(f"Not a procedure: {head}")
