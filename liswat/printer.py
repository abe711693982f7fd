"""External representation of Lisp values.

`stringify` is total and has no side effects. Numbers follow a fixed layout
so that printed output is stable across platforms:

- floats use the shortest digits that read back to the same value, in fixed
  notation when the decimal exponent is in [-4, 6) and as d.ddde+XX
  otherwise; a zero fraction is dropped (3.0 prints as 3);
- complex numbers print as <real><sign><imag>i without brackets.
"""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from liswat import LispValue
from liswat.types.character import Character
from liswat.types.nil import NilType
from liswat.types.pair import Pair
from liswat.types.symbol import Symbol


def format_float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, x) < 0 else ""
    if x == 0:
        return sign + "0"
    _, digit_tuple, exponent = Decimal(repr(abs(x))).as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exponent  # position of the decimal point
    digits = digits.rstrip("0")
    exp10 = point - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return f"{sign}{mantissa}e{'-' if exp10 < 0 else '+'}{abs(exp10):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"


def format_complex(z: complex) -> str:
    imag = format_float(z.imag)
    if not imag.startswith("-"):
        imag = "+" + imag
    return f"{format_float(z.real)}{imag}i"


def _write(x: LispValue, buffer: StringIO) -> None:
    if x is None or isinstance(x, NilType):
        buffer.write("()")
    elif isinstance(x, Pair):
        buffer.write("(")
        _write(x.first, buffer)
        rest = x.rest
        while isinstance(rest, Pair):
            buffer.write(" ")
            _write(rest.first, buffer)
            rest = rest.rest
        if not isinstance(rest, NilType):
            buffer.write(" . ")
            _write(rest, buffer)
        buffer.write(")")
    elif isinstance(x, list):
        buffer.write("#(")
        for i, item in enumerate(x):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    elif isinstance(x, bool):
        buffer.write("#t" if x else "#f")
    elif isinstance(x, Symbol):
        buffer.write(x.name)
    elif isinstance(x, str):
        # no escaping, mirrors the reader which does not decode escapes
        buffer.write(f'"{x}"')
    elif isinstance(x, Character):
        buffer.write(str(x))
    elif isinstance(x, float):
        buffer.write(format_float(x))
    elif isinstance(x, complex):
        buffer.write(format_complex(x))
    else:
        buffer.write(str(x))


def stringify(x: LispValue) -> str:
    """Convert a Lisp value to its external text form."""
    with StringIO() as buffer:
        _write(x, buffer)
        return buffer.getvalue()
