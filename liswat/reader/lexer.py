"""
  Lisp Lexer

- Streaming, lazy tokenizing: `lex` is a generator, so the reader pulls one
  token at a time and only as much text as one top-level form needs is
  scanned before that form can be evaluated.
- Whitespace and `;` comments are discarded.
- Atoms (maximal runs of non-delimiter text) are classified by matching the
  whole atom against the patterns below, in order.
- A malformed atom produces a single ERROR token whose value is the message,
  after which the generator stops. Clean end of input produces one EOF token.
"""

from __future__ import annotations

import re
from enum import Enum, auto
from typing import Iterator, NamedTuple


class TokenType(Enum):
    ERROR = auto()
    STRING = auto()
    QUOTE = auto()
    CHARACTER = auto()
    IDENTIFIER = auto()
    INTEGER = auto()
    FLOAT = auto()
    COMPLEX = auto()
    RATIONAL = auto()
    BOOLEAN = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    START_VECTOR = auto()
    EOF = auto()


class Token(NamedTuple):
    typ: TokenType
    val: str

    def __str__(self) -> str:
        if self.typ is TokenType.EOF:
            return "EOF"
        if self.typ is TokenType.ERROR:
            return self.val
        if len(self.val) > 10:
            return f"{self.val[:10]!r}..."
        return repr(self.val)


EOF_TOKEN = Token(TokenType.EOF, "")

SKIP_RE = re.compile(r"(?:\s+|;[^\n\r]*)*")
STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"', re.DOTALL)
ATOM_RE = re.compile(r"[^\s()\";'`,]+")

_REAL = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
_UREAL = r"(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
_INITIAL = r"(?:[^\W\d]|[!$%&*/:<=>?^~])"
_SUBSEQUENT = r"(?:\w|[!$%&*/:<=>?^~+\-.@])"

# (token type, pattern) pairs, tried in order against a whole atom
ATOM_PATTERNS: list[tuple[TokenType, re.Pattern]] = [
    (TokenType.BOOLEAN, re.compile(r"#(?:t|f|true|false)", re.I)),
    (TokenType.INTEGER, re.compile(r"[+-]?\d+")),
    (TokenType.INTEGER, re.compile(r"(?:#[eidbox])+[+-]?[0-9a-f]+", re.I)),
    (TokenType.RATIONAL, re.compile(r"(?:(?:#[eidbox])+[+-]?[0-9a-f]+|[+-]?\d+)/\d+", re.I)),
    (TokenType.FLOAT, re.compile(r"(?:#[ei])?" + _REAL, re.I)),
    (TokenType.COMPLEX, re.compile(_REAL + "@" + _REAL, re.I)),
    (TokenType.COMPLEX, re.compile(rf"(?:{_REAL})?[+-](?:{_UREAL})?i", re.I)),
    (
        TokenType.IDENTIFIER,
        re.compile(rf"[+-]|\.|\.\.\.|{_INITIAL}{_SUBSEQUENT}*"),
    ),
]

CHARACTER_NAMES = ("space", "newline")


def classify(text: str) -> Token:
    """Classify one atom, returning an ERROR token if it fits no pattern."""
    for typ, pattern in ATOM_PATTERNS:
        if pattern.fullmatch(text):
            return Token(typ, text)
    if text.startswith("#"):
        return Token(TokenType.ERROR, f"unrecognized hash value: {text!r}")
    if text[0].isdigit() or (len(text) > 1 and text[0] in "+-." and text[1].isdigit()):
        return Token(TokenType.ERROR, f"malformed number: {text!r}")
    return Token(TokenType.ERROR, f"malformed identifier: {text!r}")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(type, value) tuples ending in EOF or ERROR."""
    pos = 0
    n = len(source)

    while True:
        pos = SKIP_RE.match(source, pos).end()
        if pos >= n:
            yield EOF_TOKEN
            return

        current_char = source[pos]

        if current_char == "(":
            yield Token(TokenType.OPEN_PAREN, "(")
            pos += 1
            continue

        if current_char == ")":
            yield Token(TokenType.CLOSE_PAREN, ")")
            pos += 1
            continue

        # ----------------------
        # Quote markers: ' ` , ,@
        # ----------------------
        if current_char in "'`":
            yield Token(TokenType.QUOTE, current_char)
            pos += 1
            continue

        if current_char == ",":
            if source.startswith(",@", pos):
                yield Token(TokenType.QUOTE, ",@")
                pos += 2
            else:
                yield Token(TokenType.QUOTE, ",")
                pos += 1
            continue

        if current_char == '"':
            m = STRING_RE.match(source, pos)
            if m is None:
                yield Token(TokenType.ERROR, f"unclosed quoted string: {source[pos:]!r}")
                return
            yield Token(TokenType.STRING, m.group())
            pos = m.end()
            continue

        if source.startswith("#(", pos):
            yield Token(TokenType.START_VECTOR, "#(")
            pos += 2
            continue

        # ----------------------
        # Character literals: the character itself may be a delimiter
        # ----------------------
        if source.startswith("#\\", pos):
            start = pos
            pos += 2
            if pos >= n:
                yield Token(TokenType.ERROR, f"malformed character escape: {source[start:]!r}")
                return
            pos += 1
            m = ATOM_RE.match(source, pos)
            if m is not None:
                pos = m.end()
            text = source[start:pos]
            name = text[2:]
            if len(name) == 1 or name.lower() in CHARACTER_NAMES:
                yield Token(TokenType.CHARACTER, text)
                continue
            yield Token(TokenType.ERROR, f"malformed character escape: {text!r}")
            return

        m = ATOM_RE.match(source, pos)
        pos = m.end()
        token = classify(m.group())
        yield token
        if token.typ is TokenType.ERROR:
            return
