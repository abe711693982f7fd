from liswat import EvaluatorFn
from liswat import SExpression, LispValue
from liswat.errors import LiswatSyntaxError
from liswat.types.environment import Environment
from liswat.types.nil import Nil


def if_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(if test consequent alternate); the expander always supplies the alternate."""
    args = list(tail)
    if len(args) not in (2, 3):
        raise LiswatSyntaxError("if too many/few arguments")

    # Only #f is false: (), 0 and "" all count as true
    if evaluate_fn(args[0], env) is not False:
        return evaluate_fn(args[1], env)
    if len(args) == 3:
        return evaluate_fn(args[2], env)
    return Nil
