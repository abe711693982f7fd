"""Decoding of numeric literal text produced by the lexer.

Limitations kept on purpose:
- rationals are converted to float immediately, exactness is lost;
- `a@b` complex literals are read as rectangular components, not polar
  magnitude/angle.
"""

from __future__ import annotations

import math
import re

from liswat.errors import (
    LiswatInvalidNumber,
    LiswatNumberRange,
    LiswatSyntaxError,
    LiswatUnsupported,
)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

RADIX_PREFIXES: dict[str, int] = {"b": 2, "o": 8, "d": 10, "x": 16}
EXACTNESS_PREFIXES = "ei"

DIGITS_RE: dict[int, re.Pattern] = {
    2: re.compile(r"[+-]?[01]+"),
    8: re.compile(r"[+-]?[0-7]+"),
    10: re.compile(r"[+-]?[0-9]+"),
    16: re.compile(r"[+-]?[0-9a-fA-F]+"),
}

FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_integer(text: str) -> int:
    """Decode an integer literal with optional #b #o #d #x #e #i prefixes."""
    base = 10
    idx = 0
    while text.startswith("#", idx):
        if idx + 1 >= len(text):
            raise LiswatInvalidNumber(text)
        prefix = text[idx + 1].lower()
        if prefix in RADIX_PREFIXES:
            base = RADIX_PREFIXES[prefix]
        elif prefix not in EXACTNESS_PREFIXES:
            # the lexer only lets known prefixes through
            raise LiswatInvalidNumber(text)
        # exactness prefixes are ignored, all integers are exact
        idx += 2
    digits = text[idx:]
    if not DIGITS_RE[base].fullmatch(digits):
        raise LiswatInvalidNumber(text)
    value = int(digits, base)
    if not INT64_MIN <= value <= INT64_MAX:
        raise LiswatNumberRange(text)
    return value


def parse_float(text: str) -> float:
    """Decode a decimal floating point literal."""
    if len(text) > 2 and text[0] == "#":
        if text[1] in "eEiI":
            raise LiswatUnsupported(f"exactness prefix unsupported: {text}")
        raise LiswatInvalidNumber(text)
    if not FLOAT_RE.fullmatch(text):
        raise LiswatInvalidNumber(text)
    value = float(text)
    if math.isinf(value):
        raise LiswatNumberRange(text)
    return value


def parse_rational(text: str) -> float:
    """Decode `<int>/<int>` as the floating point quotient."""
    split = text.find("/")
    if split <= 0:
        raise LiswatSyntaxError(f"invalid rational number: {text}")
    numerator = parse_integer(text[:split])
    denominator = parse_integer(text[split + 1:])
    if denominator == 0:
        raise LiswatInvalidNumber(f"zero denominator in rational: {text}")
    return float(numerator) / float(denominator)


def _find_imaginary_sign(text: str) -> int:
    """Index of the sign that starts the imaginary part, skipping a leading
    sign and signs that belong to an exponent."""
    for i in range(1, len(text)):
        if text[i] in "+-" and text[i - 1] not in "eE":
            return i
    if text and text[0] in "+-":
        return 0
    return -1


def parse_complex(text: str) -> complex:
    """Decode `a@b` or rectangular `[a](+|-)[b]i` complex literals."""
    split = text.find("@")
    if split > 0:
        # <real> @ <real>, combined component-wise
        real = parse_float(text[:split])
        imag = parse_float(text[split + 1:])
        return complex(real, imag)

    # <real> + <ureal> i | <real> - <ureal> i |
    # <real> + i | <real> - i |
    # + <ureal> i | - <ureal> i |
    # + i | - i
    if not text.lower().endswith("i"):
        raise LiswatInvalidNumber(text)
    split = _find_imaginary_sign(text)
    if split == -1:
        # there must be a sign, otherwise the lexer messed up
        raise LiswatInvalidNumber(text)
    real = parse_float(text[:split]) if split > 0 else 0.0
    imag_text = text[split:-1]
    if imag_text == "+":
        imag = 1.0
    elif imag_text == "-":
        imag = -1.0
    else:
        imag = parse_float(imag_text)
    return complex(real, imag)
