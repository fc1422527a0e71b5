# Core type aliases for simplisp's data model.
# Expressions are the closed set of classes in simplisp.types (Number, String,
# Symbol, Nil, T, Pair, Function, Primitive). The same objects serve as parsed
# code and as evaluated runtime values.

from typing import Any, Callable

from loguru import logger

__version__ = "0.1.0"

# Library code only emits; configure_logging() turns output on.
logger.disable("simplisp")

# Runtime value alias
LispValue = Any
# Forms alias, used in reader/parser code to denote syntactic trees
SExpression = LispValue

# Evaluator function type passed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]

from simplisp.errors import LispError  # noqa: E402
from simplisp.interpreter import Interpreter  # noqa: E402

__all__ = ["LispValue", "SExpression", "EvaluatorFn", "LispError", "Interpreter"]
