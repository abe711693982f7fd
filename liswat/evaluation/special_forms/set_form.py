from liswat import EvaluatorFn
from liswat import SExpression, LispValue
from liswat.errors import LiswatSyntaxError
from liswat.types.environment import Environment
from liswat.types.nil import Nil
from liswat.types.symbol import Symbol


def set_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 2:
        raise LiswatSyntaxError("set requires 2 arguments")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LiswatSyntaxError(f"can only set! a symbol: {var_sym}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return Nil
