from liswat import EvaluatorFn
from liswat import SExpression, LispValue
from liswat.types.environment import Environment
from liswat.types.nil import Nil


def begin_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
