"""Procedure values: host primitives and closures."""

from __future__ import annotations

from typing import Callable

from liswat import SExpression, LispValue
from liswat.types.environment import Environment


class Primitive:
    """A procedure implemented in Python.

    `fn` receives the evaluated argument list (a Pair, or Nil when there are
    no arguments) and returns a Lisp value.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[LispValue], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: LispValue) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return f"#<procedure {self.name}>"

    __repr__ = __str__


class Lambda:
    """A closure: parameter list, single expanded body, and captured env.

    `params` is a proper list of Symbols, Nil, or a single Symbol which
    binds the whole argument list.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params: SExpression = params
        self.body: SExpression = body
        # Shared with every other closure created in the same frame
        self.env: Environment = env

    def __str__(self) -> str:
        from liswat.printer import stringify
        return f"#<lambda {stringify(self.params)}>"

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: LispValue) -> Environment:
        """
        Bind the given argument values to this lambda's parameters and
        return a new Environment, parented at the captured one, for
        evaluating the body.
        """
        from liswat.types.bind import bind_arguments
        return bind_arguments(self.params, args, self.env)


def is_procedure(x: LispValue) -> bool:
    return isinstance(x, (Primitive, Lambda))
