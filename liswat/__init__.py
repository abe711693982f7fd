# Core type aliases for the liswat data model.
# Runtime values are plain Python objects (int, float, complex, str, bool, list
# for vectors) plus the small set of classes in liswat.types (Symbol, Pair,
# Nil, Character, Primitive, Lambda).
#
# Naming guidance:
# - SExpression: Use in reader/expander code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (code and data share one representation)
SExpression = LispValue

# Evaluator function type: passed to special forms, apply and the expander
EvaluatorFn = Callable[..., LispValue]

from liswat.interpreter import Interpreter, interpret  # noqa: E402
from liswat.printer import stringify  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "Interpreter",
    "interpret",
    "stringify",
]
