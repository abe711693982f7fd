from liswat import EvaluatorFn
from liswat import SExpression, LispValue
from liswat.errors import LiswatSyntaxError
from liswat.types.environment import Environment
from liswat.types.lambda_fn import Lambda
from liswat.types.pair import Pair
from liswat.types.symbol import BEGIN


def lambda_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # The expander folds several body forms into one (begin ...), but tolerate
    # unexpanded input the same way.
    if len(tail) < 2:
        raise LiswatSyntaxError("lambda requires 2+ arguments")

    params = tail.first
    body_forms = tail.rest
    if len(body_forms) == 1:
        body = body_forms.first
    else:
        body = Pair(BEGIN, body_forms)

    # Capture the live frame, not a copy
    return Lambda(params, body, env)
