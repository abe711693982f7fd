"""Quasiquote lowering.

Rewrites the template of a quasiquote into ordinary code built from quote,
cons and append:

    `x          => (quote x)
    `,x         => x
    `(,@x . y)  => (append x `y)
    `(x . y)    => (cons `x `y)

Nested quasiquotes are not tracked; an inner unquote is lowered at the
outermost level.
"""

from __future__ import annotations

from liswat import SExpression
from liswat.errors import LiswatSyntaxError
from liswat.printer import stringify
from liswat.types.pair import Pair, new_list
from liswat.types.symbol import APPEND, CONS, QUOTE, UNQUOTE, UNQUOTE_SPLICING


def expand_quasiquote(x: SExpression) -> SExpression:
    if not isinstance(x, Pair):
        return new_list(QUOTE, x)

    head = x.first
    if head == UNQUOTE_SPLICING:
        raise LiswatSyntaxError(f"can't splice here: {stringify(x)}")
    if head == UNQUOTE:
        if len(x) != 2:
            raise LiswatSyntaxError(f"unquote requires 1 argument: {stringify(x)}")
        return x.second()

    if isinstance(head, Pair) and head.first == UNQUOTE_SPLICING:
        if len(head) != 2:
            raise LiswatSyntaxError(f"unquote splicing requires 1 argument: {stringify(x)}")
        return new_list(APPEND, head.second(), expand_quasiquote(x.rest))

    return new_list(CONS, expand_quasiquote(head), expand_quasiquote(x.rest))
