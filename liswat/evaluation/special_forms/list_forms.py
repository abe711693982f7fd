"""cons and append are syntactic keywords (quasiquote lowers to them), so they
are evaluated here rather than looked up in the environment."""

from liswat import EvaluatorFn
from liswat import SExpression, LispValue
from liswat.errors import LiswatSyntaxError, LiswatTypeError
from liswat.printer import stringify
from liswat.types.environment import Environment
from liswat.types.nil import Nil
from liswat.types.pair import Pair, is_list, list_from


def cons_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 2:
        raise LiswatSyntaxError("cons requires 2 arguments")
    head, rest = (evaluate_fn(x, env) for x in tail)
    return Pair(head, rest)


def append_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(append l1 ... ln): copies l1..l(n-1); the last argument is shared."""
    values = [evaluate_fn(x, env) for x in tail]
    if not values:
        return Nil
    result = values[-1]
    for lst in reversed(values[:-1]):
        if not is_list(lst):
            raise LiswatTypeError(f"append requires proper lists: {stringify(lst)}")
        result = list_from(lst, result)
    return result
