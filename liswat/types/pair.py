"""Cons cells.

A list is a chain of Pairs whose last `rest` is Nil; an improper (dotted) list
ends in any other value instead. Pairs are shared by reference: the expander
and quasiquote lowering build new lists whose elements alias sub-structure of
their input, so nothing here copies unless it says so.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from liswat import LispValue
from liswat.types.nil import Nil


class Pair:
    """A mutable cons cell holding `first` and `rest`."""

    __slots__ = ("first", "rest")

    def __init__(self, first: LispValue, rest: LispValue = Nil):
        self.first: LispValue = first
        self.rest: LispValue = rest

    def __iter__(self) -> Iterator[LispValue]:
        """Iterate over the elements of the proper part of the list."""
        p: LispValue = self
        while isinstance(p, Pair):
            yield p.first
            p = p.rest

    def __len__(self) -> int:
        length = 0
        p: LispValue = self
        while isinstance(p, Pair):
            length += 1
            p = p.rest
        return length

    def __eq__(self, other: object) -> bool:
        a: LispValue = self
        b: LispValue = other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.first != b.first:
                return False
            a, b = a.rest, b.rest
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a == b

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from liswat.printer import stringify
        return f"Pair({stringify(self)})"

    def __str__(self) -> str:
        from liswat.printer import stringify
        return stringify(self)

    def second(self) -> LispValue:
        """Second element, or None if the list is shorter."""
        if isinstance(self.rest, Pair):
            return self.rest.first
        return None

    def third(self) -> LispValue:
        """Third element, or None if the list is shorter."""
        if isinstance(self.rest, Pair) and isinstance(self.rest.rest, Pair):
            return self.rest.rest.first
        return None

    def last_pair(self) -> Pair:
        p = self
        while isinstance(p.rest, Pair):
            p = p.rest
        return p

    def tail(self) -> LispValue:
        """The terminating value of the spine: Nil for a proper list."""
        return self.last_pair().rest

    def is_proper(self) -> bool:
        return self.tail() is Nil

    def append(self, value: LispValue) -> None:
        """Add `value` as a new last element, in place."""
        self.last_pair().rest = Pair(value)

    def join(self, other: LispValue) -> None:
        """Attach the list `other` to the end of this one, in place.

        The joined cells are shared with `other`, not copied.
        """
        self.last_pair().rest = other

    def map(self, fn: Callable[[LispValue], LispValue]) -> Pair:
        """Return a new list of fn applied to each element; a dotted tail is kept as-is."""
        return list_from((fn(x) for x in self), self.tail())

    def reverse(self) -> LispValue:
        result: LispValue = Nil
        for x in self:
            result = Pair(x, result)
        return result


def cons(first: LispValue, rest: LispValue) -> Pair:
    return Pair(first, rest)


def new_list(*items: LispValue) -> LispValue:
    """Build a proper list of the given items; Nil when there are none."""
    return list_from(items)


def list_from(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list of `items` in order, terminated by `tail`."""
    head: LispValue = tail
    last: Pair | None = None
    for item in items:
        cell = Pair(item, tail)
        if last is None:
            head = cell
        else:
            last.rest = cell
        last = cell
    return head


def is_list(x: LispValue) -> bool:
    """True for Nil and proper lists."""
    return x is Nil or (isinstance(x, Pair) and x.is_proper())
