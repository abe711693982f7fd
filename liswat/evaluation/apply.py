"""Application engine for liswat.

Centralizes procedure application so the evaluator, the expander (which runs
macro transformers) and the `apply` builtin share one code path:
- Primitives receive the evaluated argument list directly.
- Lambdas bind their parameters in a fresh frame whose parent is the
  captured environment, then evaluate their body there.
"""

from liswat import LispValue, EvaluatorFn
from liswat.errors import LiswatNotApplicable
from liswat.printer import stringify
from liswat.types.lambda_fn import Lambda, Primitive


def apply(proc: LispValue, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply `proc` to the argument list `args` (a Pair or Nil).

    Raises LiswatNotApplicable for anything that is not a procedure, which
    includes quoted syntactic keywords.
    """
    if isinstance(proc, Primitive):
        return proc.fn(args)
    if isinstance(proc, Lambda):
        new_env = proc.extend_env(args)
        return evaluate_fn(proc.body, new_env)
    raise LiswatNotApplicable(f"{stringify(proc)} is not applicable")
