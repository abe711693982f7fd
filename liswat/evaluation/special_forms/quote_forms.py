from liswat import SExpression, LispValue, EvaluatorFn
from liswat.errors import LiswatSyntaxError
from liswat.types.environment import Environment


def quote_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise LiswatSyntaxError("quote requires datum")
    return tail.first


# Quasiquote is lowered to quote/cons/append by the expander; these handlers
# only fire when unexpanded code reaches the evaluator.
def quasiquote_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    raise LiswatSyntaxError("quasiquote must be expanded before evaluation")


def unquote_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    raise LiswatSyntaxError("unquote not valid outside of quasiquote")


def unquote_splice_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    raise LiswatSyntaxError("unquote-splicing not valid outside of quasiquote")
