"""Symbols and the reserved words of the core grammar.

Symbols are interned: reading the same name twice gives the same object, so
eq? on symbols is an identity test.
"""
from __future__ import annotations


class Symbol:
    """An identifier, compared by name."""

    __slots__ = ("name",)

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.name = name
            cls._table[name] = sym
        return sym

    def __eq__(self, other: object) -> bool:
        return self is other or (isinstance(other, Symbol) and self.name == other.name)

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name


# Syntactic keywords: recognized structurally, never bound as values.
QUOTE = Symbol("quote")
QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")
IF = Symbol("if")
DEFINE = Symbol("define")
DEFINE_SYNTAX = Symbol("define-syntax")
LAMBDA = Symbol("lambda")
SET = Symbol("set!")
BEGIN = Symbol("begin")
APPEND = Symbol("append")
CONS = Symbol("cons")

KEYWORDS: frozenset[Symbol] = frozenset(
    {
        QUOTE,
        QUASIQUOTE,
        UNQUOTE,
        UNQUOTE_SPLICING,
        IF,
        DEFINE,
        DEFINE_SYNTAX,
        LAMBDA,
        SET,
        BEGIN,
        APPEND,
        CONS,
    }
)

# Returned by the reader when the input is exhausted
EOF_OBJECT = Symbol("#<eof-object>")
