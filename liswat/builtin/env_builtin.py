"""Built-in procedures for the liswat global environment.

Each builtin is a plain function taking the evaluated argument list (a Pair,
or Nil for no arguments) and returning a Lisp value. `register` wraps them in
Primitive objects and binds them in an Environment.

cons and append are not here: they are syntactic keywords handled by the
evaluator, because quasiquote expands into them.
"""
from __future__ import annotations

import sys
from numbers import Number
from typing import Callable, TextIO

from liswat import LispValue
from liswat.errors import LiswatArityError, LiswatNumberRange, LiswatTypeError
from liswat.evaluation.apply import apply as apply_engine
from liswat.evaluation.evaluator import evaluate
from liswat.printer import stringify
from liswat.reader.numbers import INT64_MAX, INT64_MIN
from liswat.types.character import Character
from liswat.types.environment import Environment
from liswat.types.lambda_fn import Primitive, is_procedure
from liswat.types.nil import Nil
from liswat.types.pair import Pair, is_list, list_from
from liswat.types.symbol import Symbol


def _expect(name: str, args: LispValue, count: int) -> list[LispValue]:
    """Return the arguments as a Python list, checking there are exactly `count`."""
    values = list(args)
    if len(values) != count:
        raise LiswatArityError(
            f"{name} requires exactly {count} argument(s), got {len(values)}"
        )
    return values


def _is_number(x: LispValue) -> bool:
    return isinstance(x, Number) and not isinstance(x, bool)


def _numbers(name: str, args: LispValue) -> list[LispValue]:
    values = list(args)
    for x in values:
        if not _is_number(x):
            raise LiswatTypeError(f"All arguments to {name} must be numbers: {stringify(x)}")
    return values


# -------------------------------
# Arithmetic
# -------------------------------
def _fits(name: str, value: LispValue) -> LispValue:
    """Integers stay within the signed 64-bit range."""
    if isinstance(value, int) and not INT64_MIN <= value <= INT64_MAX:
        raise LiswatNumberRange(f"integer overflow in {name}: {value}")
    return value


def add(args: LispValue) -> LispValue:
    """Return the numeric sum of all arguments; 0 for none."""
    result = 0
    for x in _numbers("+", args):
        result = _fits("+", result + x)
    return result


def sub(args: LispValue) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    values = _numbers("-", args)
    if not values:
        raise LiswatArityError("- requires at least 1 argument")
    if len(values) == 1:
        return _fits("-", -values[0])
    result = values[0]
    for x in values[1:]:
        result = _fits("-", result - x)
    return result


def mul(args: LispValue) -> LispValue:
    result = 1
    for x in _numbers("*", args):
        result = _fits("*", result * x)
    return result


def div(args: LispValue) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal.

    Division is always inexact, (/ 6 3) is 2.0. Division by zero raises
    ZeroDivisionError.
    """
    values = _numbers("/", args)
    if not values:
        raise LiswatArityError("/ requires at least 1 argument")
    if len(values) == 1:
        return 1 / values[0]
    result = values[0]
    for x in values[1:]:
        result /= x
    return result


def _comparison(name: str, op: Callable[[LispValue, LispValue], bool]) -> Callable[[LispValue], bool]:
    """Build a chainable numeric comparison: #t if op holds for every adjacent pair."""

    def compare(args: LispValue) -> bool:
        values = _numbers(name, args)
        try:
            return all(op(a, b) for a, b in zip(values, values[1:]))
        except TypeError:
            raise LiswatTypeError(f"{name} cannot order complex numbers")

    return compare


num_eq = _comparison("=", lambda a, b: a == b)
lt = _comparison("<", lambda a, b: a < b)
gt = _comparison(">", lambda a, b: a > b)
lte = _comparison("<=", lambda a, b: a <= b)
gte = _comparison(">=", lambda a, b: a >= b)


# -------------------------------
# Equivalence
# -------------------------------
def is_eqv(a: LispValue, b: LispValue) -> bool:
    """Identity for pairs, vectors, strings and procedures; value equality of
    the same type for everything else (symbols, numbers, characters, booleans)."""
    if a is b:
        return True
    if isinstance(a, (Pair, list, str)) or is_procedure(a):
        return False
    return type(a) is type(b) and a == b


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: recurses into pairs and vectors, compares strings by value."""
    while isinstance(a, Pair) and isinstance(b, Pair):
        if a is b:
            return True
        if not is_equal(a.first, b.first):
            return False
        a, b = a.rest, b.rest
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return is_eqv(a, b)


def eqv(args: LispValue) -> bool:
    a, b = _expect("eqv?", args, 2)
    return is_eqv(a, b)


def eq(args: LispValue) -> bool:
    a, b = _expect("eq?", args, 2)
    return is_eqv(a, b)


def equal(args: LispValue) -> bool:
    a, b = _expect("equal?", args, 2)
    return is_equal(a, b)


def logical_not(args: LispValue) -> bool:
    """Only #f is false, so (not x) is #t for #f alone."""
    (x,) = _expect("not", args, 1)
    return x is False


# -------------------------------
# Pairs and lists
# -------------------------------
def _pair(name: str, x: LispValue) -> Pair:
    if not isinstance(x, Pair):
        raise LiswatTypeError(f"{name} requires a pair: {stringify(x)}")
    return x


def car(args: LispValue) -> LispValue:
    (x,) = _expect("car", args, 1)
    return _pair("car", x).first


def cdr(args: LispValue) -> LispValue:
    (x,) = _expect("cdr", args, 1)
    return _pair("cdr", x).rest


def set_car(args: LispValue) -> LispValue:
    p, value = _expect("set-car!", args, 2)
    _pair("set-car!", p).first = value
    return Nil


def set_cdr(args: LispValue) -> LispValue:
    p, value = _expect("set-cdr!", args, 2)
    _pair("set-cdr!", p).rest = value
    return Nil


def list_builtin(args: LispValue) -> LispValue:
    """Return a fresh list of the arguments."""
    return list_from(args)


def length(args: LispValue) -> int:
    (xs,) = _expect("length", args, 1)
    if not is_list(xs):
        raise LiswatTypeError(f"length requires a proper list: {stringify(xs)}")
    return len(xs)


def null(args: LispValue) -> bool:
    (x,) = _expect("null?", args, 1)
    return x is Nil


def pair_p(args: LispValue) -> bool:
    (x,) = _expect("pair?", args, 1)
    return isinstance(x, Pair)


def list_p(args: LispValue) -> bool:
    (x,) = _expect("list?", args, 1)
    return is_list(x)


# -------------------------------
# Type predicates
# -------------------------------
def _predicate(name: str, test: Callable[[LispValue], bool]) -> Callable[[LispValue], bool]:
    def check(args: LispValue) -> bool:
        (x,) = _expect(name, args, 1)
        return test(x)

    return check


def _is_integer(x: LispValue) -> bool:
    if isinstance(x, bool):
        return False
    if isinstance(x, int):
        return True
    return isinstance(x, float) and x.is_integer()


PREDICATES: dict[str, Callable[[LispValue], bool]] = {
    "symbol?": lambda x: isinstance(x, Symbol),
    "string?": lambda x: isinstance(x, str),
    "number?": _is_number,
    "integer?": _is_integer,
    "boolean?": lambda x: isinstance(x, bool),
    "char?": lambda x: isinstance(x, Character),
    "procedure?": is_procedure,
    "vector?": lambda x: isinstance(x, list),
}


# -------------------------------
# Vectors
# -------------------------------
def vector(args: LispValue) -> list[LispValue]:
    return list(args)


def vector_ref(args: LispValue) -> LispValue:
    vec, k = _expect("vector-ref", args, 2)
    if not isinstance(vec, list):
        raise LiswatTypeError(f"vector-ref requires a vector: {stringify(vec)}")
    if not _is_integer(k) or not 0 <= k < len(vec):
        raise LiswatTypeError(f"vector-ref index out of range: {stringify(k)}")
    return vec[int(k)]


def vector_length(args: LispValue) -> int:
    (vec,) = _expect("vector-length", args, 1)
    if not isinstance(vec, list):
        raise LiswatTypeError(f"vector-length requires a vector: {stringify(vec)}")
    return len(vec)


# -------------------------------
# Control
# -------------------------------
def apply(args: LispValue) -> LispValue:
    """(apply f a ... lst): call f with a ... followed by the elements of lst."""
    values = list(args)
    if len(values) < 2:
        raise LiswatArityError("apply requires a procedure and an argument list")
    proc, *leading, last = values
    if not is_list(last):
        raise LiswatTypeError(f"Last argument to apply must be a list: {stringify(last)}")
    return apply_engine(proc, list_from(leading, list_from(last)), evaluate)


# -------------------------------
# Output
# -------------------------------
def _display_text(x: LispValue) -> str:
    """Like stringify, but strings and characters are written raw."""
    if isinstance(x, str):
        return x
    if isinstance(x, Character):
        return x.char
    return stringify(x)


def make_output_builtins(out: TextIO | None) -> dict[str, Callable[[LispValue], LispValue]]:
    """display and newline bound to `out`; sys.stdout is looked up per call when None."""

    def stream() -> TextIO:
        return out if out is not None else sys.stdout

    def display(args: LispValue) -> LispValue:
        (x,) = _expect("display", args, 1)
        stream().write(_display_text(x))
        return Nil

    def newline(args: LispValue) -> LispValue:
        _expect("newline", args, 0)
        stream().write("\n")
        return Nil

    return {"display": display, "newline": newline}


BUILTINS: dict[str, Callable[[LispValue], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": num_eq,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "not": logical_not,
    "eq?": eq,
    "eqv?": eqv,
    "equal?": equal,
    "car": car,
    "cdr": cdr,
    "set-car!": set_car,
    "set-cdr!": set_cdr,
    "list": list_builtin,
    "length": length,
    "null?": null,
    "pair?": pair_p,
    "list?": list_p,
    "vector": vector,
    "vector-ref": vector_ref,
    "vector-length": vector_length,
    "apply": apply,
}


def register(env: Environment, out: TextIO | None = None) -> None:
    """Register all builtin procedures into the given environment."""
    table = dict(BUILTINS)
    table.update({name: _predicate(name, test) for name, test in PREDICATES.items()})
    table.update(make_output_builtins(out))
    for name, fn in table.items():
        env.define(Symbol(name), Primitive(name, fn))
