"""
  Lisp Reader

Turns the lexer's token stream into Lisp values:

    - () -> Nil
    - lists -> chains of Pair, dotted lists end in their tail value
    - vectors #(...) -> Python list (read eagerly)
    - identifiers -> Symbol
    - strings -> str (escapes are not decoded)
    - characters -> Character
    - booleans -> bool
    - integers -> int, floats and rationals -> float, complex -> complex
    - quote markers -> (quote x), (quasiquote x), (unquote x), (unquote-splicing x)
"""

from __future__ import annotations

from typing import Iterable, Iterator

from liswat import SExpression
from liswat.errors import LiswatLexError, LiswatSyntaxError
from liswat.reader.lexer import EOF_TOKEN, Token, TokenType, lex
from liswat.reader.numbers import parse_complex, parse_float, parse_integer, parse_rational
from liswat.types.character import NAMED_CHARS, Character
from liswat.types.pair import list_from, new_list
from liswat.types.symbol import EOF_OBJECT, QUASIQUOTE, QUOTE, UNQUOTE, UNQUOTE_SPLICING, Symbol


QUOTE_FORMS: dict[str, Symbol] = {
    "'": QUOTE,
    "`": QUASIQUOTE,
    ",": UNQUOTE,
    ",@": UNQUOTE_SPLICING,
}

NUMBER_DECODERS = {
    TokenType.INTEGER: parse_integer,
    TokenType.FLOAT: parse_float,
    TokenType.RATIONAL: parse_rational,
    TokenType.COMPLEX: parse_complex,
}


class TokenStream:
    """Pull-based reader over a token iterator.

    Tokens are taken from the iterator only when a form needs them. Once the
    iterator is exhausted every further request answers the EOF token.
    """

    def __init__(self, tokens: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(tokens)

    def next_token(self) -> Token:
        return next(self.tokens, EOF_TOKEN)

    def parse_expr(self) -> SExpression:
        """Read one top-level form, or EOF_OBJECT when the input is exhausted."""
        tok = self.next_token()
        if tok.typ is TokenType.EOF:
            return EOF_OBJECT
        return self.read(tok)

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not EOF_OBJECT:
            yield expr

    def read(self, tok: Token) -> SExpression:
        """Read a complete form whose first token has already been pulled."""
        typ, val = tok

        if typ is TokenType.ERROR:
            raise LiswatLexError(val)

        if typ is TokenType.EOF:
            raise LiswatLexError("unexpected EOF in list")

        if typ is TokenType.OPEN_PAREN:
            return self._read_list()

        if typ is TokenType.CLOSE_PAREN:
            raise LiswatSyntaxError("unexpected )")

        if typ is TokenType.START_VECTOR:
            return self._read_vector()

        if typ is TokenType.QUOTE:
            datum = self.read(self.next_token())
            return new_list(QUOTE_FORMS[val], datum)

        if typ in NUMBER_DECODERS:
            return NUMBER_DECODERS[typ](val)

        if typ is TokenType.STRING:
            # TODO: decode backslash escapes once the printer escapes on output
            return val[1:-1]

        if typ is TokenType.BOOLEAN:
            # lexer already validated that it is #t/#true or #f/#false
            return val[1] in "tT"

        if typ is TokenType.CHARACTER:
            name = val[2:]
            if len(name) == 1:
                return Character(name)
            return Character(NAMED_CHARS[name.lower()])

        if typ is TokenType.IDENTIFIER:
            return Symbol(val)

        raise LiswatSyntaxError(f"unrecognized token: {tok}")

    def _read_list(self) -> SExpression:
        items: list[SExpression] = []
        while True:
            tok = self.next_token()
            if tok.typ is TokenType.CLOSE_PAREN:
                return list_from(items)
            if tok.typ is TokenType.IDENTIFIER and tok.val == ".":
                if not items:
                    raise LiswatSyntaxError("unexpected . at start of list")
                tail = self.read(self.next_token())
                closing = self.next_token()
                if closing.typ is TokenType.ERROR:
                    raise LiswatLexError(closing.val)
                if closing.typ is TokenType.EOF:
                    raise LiswatLexError("unexpected EOF in list")
                if closing.typ is not TokenType.CLOSE_PAREN:
                    raise LiswatSyntaxError("expected ) after dotted tail")
                return list_from(items, tail)
            items.append(self.read(tok))

    def _read_vector(self) -> list[SExpression]:
        vec: list[SExpression] = []
        while True:
            tok = self.next_token()
            if tok.typ is TokenType.CLOSE_PAREN:
                return vec
            if tok.typ is TokenType.IDENTIFIER and tok.val == ".":
                raise LiswatSyntaxError("unexpected . in vector")
            vec.append(self.read(tok))


def parse(source: str) -> SExpression:
    """Read the first form in `source`; EOF_OBJECT if there is none."""
    return TokenStream(lex(source)).parse_expr()


def parse_all(source: str) -> list[SExpression]:
    return list(TokenStream(lex(source)).parse_all())
