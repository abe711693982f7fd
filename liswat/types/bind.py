from __future__ import annotations

from liswat import LispValue, SExpression
from liswat.errors import LiswatArityError, LiswatSyntaxError
from liswat.types.environment import Environment
from liswat.types.pair import Pair
from liswat.types.symbol import Symbol


def bind_arguments(
    params: SExpression,
    supplied_args: LispValue,
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for parameter binding.

    Supports:
    - a single Symbol, bound to the entire argument list (variadic)
    - a proper list of Symbols, bound positionally; the counts must match

    Returns a new Environment whose outer is the closure_env, populated with
    the bindings for evaluating the callee body.
    """
    local_env = Environment(outer=closure_env)

    if isinstance(params, Symbol):
        local_env.define(params, supplied_args)
        return local_env

    if isinstance(params, Pair) and not params.is_proper():
        raise LiswatSyntaxError(f"lambda arguments must be symbols: {params}")

    formals = list(params) if isinstance(params, Pair) else []
    supplied = list(supplied_args) if isinstance(supplied_args, Pair) else []

    if len(formals) != len(supplied):
        raise LiswatArityError(
            f"expected {len(formals)} argument(s) but got {len(supplied)}: "
            f"{[str(s) for s in formals]}"
        )

    for formal, value in zip(formals, supplied):
        if not isinstance(formal, Symbol):
            raise LiswatSyntaxError(f"lambda arguments must be symbols: {formal}")
        local_env.define(formal, value)
    return local_env
