"""Core evaluator for liswat.

Evaluates forms that have already been through the expander, so only the
core grammar is handled here: self-evaluating atoms, variable references,
the forms in SPECIAL_FORMS and procedure application.
"""

from __future__ import annotations

from liswat import SExpression, LispValue
from liswat.errors import LiswatSyntaxError, LiswatUndefinedVariable
from liswat.evaluation.apply import apply
from liswat.evaluation.special_forms import SPECIAL_FORMS
from liswat.printer import stringify
from liswat.types.environment import Environment
from liswat.types.pair import Pair, list_from
from liswat.types.symbol import KEYWORDS, Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expanded form in `env`."""
    match expr:
        case Symbol():
            if expr in KEYWORDS:
                raise LiswatSyntaxError(f"syntactic keyword used as a variable: {expr}")
            value = env.find(expr)
            if value is None:
                raise LiswatUndefinedVariable(f"undefined variable: {expr}")
            return value

        case Pair(first=head, rest=tail):
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail, env, evaluate)

            if not expr.is_proper():
                raise LiswatSyntaxError(f"procedure call must be a proper list: {stringify(expr)}")
            proc = evaluate(head, env)
            args = list_from(evaluate(arg, env) for arg in tail)
            return apply(proc, args, evaluate)

    # --- Atoms return as-is ---
    return expr
