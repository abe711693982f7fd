from liswat import EvaluatorFn
from liswat import SExpression, LispValue
from liswat.errors import LiswatSyntaxError
from liswat.types.environment import Environment
from liswat.types.nil import Nil
from liswat.types.symbol import Symbol


def define_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (define name value)
    Binds in the current frame only; the form itself yields ().
    """
    if len(tail) != 2:
        raise LiswatSyntaxError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LiswatSyntaxError(f"can define only a symbol: {name}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Nil


def define_syntax_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    raise LiswatSyntaxError("define-syntax only allowed at top level")
