from simplisp import SExpression
from simplisp.errors import LispMalformedForm
from simplisp.types.expressions import Pair


def malformed(form: Pair) -> LispMalformedForm:
    return LispMalformedForm(f"Malformed special form: {form}")


def require_length(form: Pair, tail: list[SExpression], length: int) -> None:
    """Check the total element count of `form`, keyword included."""
    if len(tail) + 1 != length:
        raise malformed(form)
