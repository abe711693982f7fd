"""Syntactic expansion for liswat.

Runs once over every top-level form before it is evaluated and lowers the
surface syntax to the core grammar understood by the evaluator:

- (if t c)                  => (if t c ())
- (define (f . args) b...)  => (define f (lambda args b...))
- (lambda args b1 b2 ...)   => (lambda args (begin b1 b2 ...))
- `template                 => quote/cons/append code
- (m arg...)                => the expansion of macro m, expanded again

Shape errors in core forms are reported here rather than at run time.
`define-syntax` is handled entirely by the expander: the transformer is
evaluated in the global environment and installed in the macro table, and
the form itself is replaced by ().

Macros are not hygienic. A transformer receives its operands unevaluated
and whatever it returns is spliced in place of the call.
"""

from __future__ import annotations

import logging

from liswat import SExpression
from liswat.errors import LiswatSyntaxError, LiswatTypeError
from liswat.evaluation.apply import apply
from liswat.evaluation.evaluator import evaluate
from liswat.evaluation.quasiquote import expand_quasiquote
from liswat.printer import stringify
from liswat.types.environment import Environment
from liswat.types.lambda_fn import is_procedure
from liswat.types.macro_environment import MacroEnvironment
from liswat.types.nil import Nil
from liswat.types.pair import Pair, list_from, new_list
from liswat.types.symbol import (
    BEGIN,
    DEFINE,
    DEFINE_SYNTAX,
    IF,
    KEYWORDS,
    LAMBDA,
    QUASIQUOTE,
    QUOTE,
    SET,
    Symbol,
)

logger = logging.getLogger(__name__)


def _syntax_error(msg: str, form: SExpression) -> LiswatSyntaxError:
    return LiswatSyntaxError(f"{msg}: {stringify(form)}")


def _is_variable(x: SExpression) -> bool:
    return isinstance(x, Symbol) and x not in KEYWORDS


def _check_params(params: SExpression, form: Pair) -> None:
    """Parameters are a proper list of variables or a single variable."""
    if params is Nil:
        return
    if isinstance(params, Symbol):
        if not _is_variable(params):
            raise _syntax_error("lambda arguments must be symbols", form)
        return
    if not isinstance(params, Pair):
        raise _syntax_error("lambda arguments must be a list or a symbol", form)
    if not params.is_proper():
        raise _syntax_error("lambda arguments must be symbols", form)
    for p in params:
        if not _is_variable(p):
            raise _syntax_error("lambda arguments must be symbols", form)


def expand(
    x: SExpression,
    env: Environment,
    macros: MacroEnvironment,
    toplevel: bool = False,
) -> SExpression:
    """Expand form `x`.

    `env` is the global environment, used to evaluate define-syntax
    transformers. `toplevel` is true only for forms read directly from the
    input and for the elements of a top-level begin.
    """
    if x is None:
        raise LiswatSyntaxError("empty input")
    if not isinstance(x, Pair):
        return x
    if not x.is_proper():
        raise _syntax_error("improper list in form", x)

    def expand_all(form: Pair, top: bool = False) -> SExpression:
        return form.map(lambda e: expand(e, env, macros, top))

    head = x.first

    if head == QUOTE:
        if len(x) != 2:
            raise _syntax_error("quote requires datum", x)
        return x

    if head == IF:
        if len(x) == 3:
            x = list_from(x, new_list(Nil))
        if len(x) != 4:
            raise _syntax_error("if too many/few arguments", x)
        return expand_all(x)

    if head == SET:
        if len(x) != 3:
            raise _syntax_error("set requires 2 arguments", x)
        name = x.second()
        if not _is_variable(name):
            raise _syntax_error("can only set! a symbol", name)
        return new_list(SET, name, expand(x.third(), env, macros))

    if head == DEFINE or head == DEFINE_SYNTAX:
        return _expand_define(x, env, macros, toplevel)

    if head == BEGIN:
        if len(x) == 1:
            return Nil
        return expand_all(x, toplevel)

    if head == LAMBDA:
        if len(x) < 3:
            raise _syntax_error("lambda requires 2+ arguments", x)
        params = x.second()
        _check_params(params, x)
        body_forms = x.rest.rest
        if len(body_forms) == 1:
            body = body_forms.first
        else:
            body = Pair(BEGIN, body_forms)
        return new_list(LAMBDA, params, expand(body, env, macros))

    if head == QUASIQUOTE:
        if len(x) != 2:
            raise _syntax_error("quasiquote (`) requires 1 argument", x)
        return expand(expand_quasiquote(x.second()), env, macros, toplevel)

    if macros.is_macro(head):
        transformer = macros.get(head)
        result = apply(transformer, x.rest, evaluate)
        logger.debug("macro %s: %s => %s", head, stringify(x), stringify(result))
        return expand(result, env, macros, toplevel)

    # a procedure call
    return expand_all(x)


def _expand_define(
    x: Pair,
    env: Environment,
    macros: MacroEnvironment,
    toplevel: bool,
) -> SExpression:
    head = x.first
    if len(x) < 3:
        raise _syntax_error("define/define-syntax require 2+ arguments", x)

    target = x.second()
    if isinstance(target, Pair):
        # (define (f . args) body...) => (define f (lambda args body...))
        fn = new_list(LAMBDA, target.rest)
        fn.join(x.rest.rest)
        return expand(new_list(head, target.first, fn), env, macros, toplevel)

    if not _is_variable(target):
        raise _syntax_error("can define only a symbol", target)
    if len(x) != 3:
        raise _syntax_error("define of a symbol takes exactly one value", x)
    value = expand(x.third(), env, macros)

    if head == DEFINE:
        return new_list(DEFINE, target, value)

    if not toplevel:
        raise _syntax_error("define-syntax only allowed at top level", x)
    transformer = evaluate(value, env)
    if not is_procedure(transformer):
        raise LiswatTypeError(f"macro must be a procedure: {stringify(x)}")
    macros.define_macro(target, transformer)
    logger.debug("registered macro %s", target)
    return Nil
