import pytest
from hypothesis import given, strategies as st

from liswat.reader.lexer import EOF_TOKEN, Token, TokenType, classify, lex

T = TokenType


def _tokens(source):
    return [(tok.typ, tok.val) for tok in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", [(T.EOF, "")]),
        ("   ; just a comment\n", [(T.EOF, "")]),
        (
            "(set foo bar)",
            [
                (T.OPEN_PAREN, "("),
                (T.IDENTIFIER, "set"),
                (T.IDENTIFIER, "foo"),
                (T.IDENTIFIER, "bar"),
                (T.CLOSE_PAREN, ")"),
                (T.EOF, ""),
            ],
        ),
        (
            "'(foo) `(bar) ,baz ,@qux",
            [
                (T.QUOTE, "'"),
                (T.OPEN_PAREN, "("),
                (T.IDENTIFIER, "foo"),
                (T.CLOSE_PAREN, ")"),
                (T.QUOTE, "`"),
                (T.OPEN_PAREN, "("),
                (T.IDENTIFIER, "bar"),
                (T.CLOSE_PAREN, ")"),
                (T.QUOTE, ","),
                (T.IDENTIFIER, "baz"),
                (T.QUOTE, ",@"),
                (T.IDENTIFIER, "qux"),
                (T.EOF, ""),
            ],
        ),
        (
            '"foo" "a \\" b"',
            [(T.STRING, '"foo"'), (T.STRING, '"a \\" b"'), (T.EOF, "")],
        ),
        (
            "#(1 #t)",
            [
                (T.START_VECTOR, "#("),
                (T.INTEGER, "1"),
                (T.BOOLEAN, "#t"),
                (T.CLOSE_PAREN, ")"),
                (T.EOF, ""),
            ],
        ),
        (
            "#t #f #true #FALSE",
            [(T.BOOLEAN, "#t"), (T.BOOLEAN, "#f"), (T.BOOLEAN, "#true"), (T.BOOLEAN, "#FALSE"), (T.EOF, "")],
        ),
        (
            "#\\a #\\space #\\newline #\\t #\\(",
            [
                (T.CHARACTER, "#\\a"),
                (T.CHARACTER, "#\\space"),
                (T.CHARACTER, "#\\newline"),
                (T.CHARACTER, "#\\t"),
                (T.CHARACTER, "#\\("),
                (T.EOF, ""),
            ],
        ),
    ],
)
def test_lexer_basic(source, expected):
    assert _tokens(source) == expected


def test_lexer_factorial():
    source = """
    (define fact
      (lambda (n)
        (if (<= n 1)
            1
            (* n (fact (- n 1))))))
    """
    types = [typ for typ, _ in _tokens(source)]
    assert types.count(T.OPEN_PAREN) == types.count(T.CLOSE_PAREN) == 8
    assert types[-1] is T.EOF
    idents = [val for typ, val in _tokens(source) if typ is T.IDENTIFIER]
    assert idents == ["define", "fact", "lambda", "n", "if", "<=", "n", "*", "n", "fact", "-", "n"]


@pytest.mark.parametrize(
    "text,typ",
    [
        (".01", T.FLOAT),
        ("0", T.INTEGER),
        ("0.1", T.FLOAT),
        ("1.00", T.FLOAT),
        ("123", T.INTEGER),
        ("-45", T.INTEGER),
        ("6e4", T.FLOAT),
        ("7.91e+16", T.FLOAT),
        ("0366", T.INTEGER),
        ("3.", T.FLOAT),
        ("#b1010", T.INTEGER),
        ("#x4dfCF0", T.INTEGER),
        ("#d#e12345", T.INTEGER),
        ("#e1.5", T.FLOAT),
        ("1/3", T.RATIONAL),
        ("-6/10", T.RATIONAL),
        ("3+4i", T.COMPLEX),
        ("3.0-4.0i", T.COMPLEX),
        ("+i", T.COMPLEX),
        ("-4i", T.COMPLEX),
        ("1.5@2", T.COMPLEX),
        ("1e3+2e-2i", T.COMPLEX),
    ],
)
def test_lexer_numbers(text, typ):
    assert list(lex(text)) == [Token(typ, text), EOF_TOKEN]


@pytest.mark.parametrize(
    "text",
    ["lambda", "list->vector", "q", "soup", "V17a", "+", "-", "<=?", "a34kTMNs",
     "the-word-recursion-has-many-meanings", ".", "...", "set!", "vector-ref", "_x"],
)
def test_lexer_identifiers(text):
    assert classify(text) == Token(T.IDENTIFIER, text)


@pytest.mark.parametrize(
    "source,message",
    [
        ('"foo', "unclosed quoted string"),
        ("#\\abc", "malformed character escape"),
        ("#\\a1", "malformed character escape"),
        ("0.a", "malformed number"),
        ("0a", "malformed number"),
        ("0x7b5", "malformed number"),
        (".a", "malformed identifier"),
        ("+a", "malformed identifier"),
        ("-a", "malformed identifier"),
        ("..", "malformed identifier"),
        ("...a", "malformed identifier"),
        ("....", "malformed identifier"),
        ("#q", "unrecognized hash value"),
    ],
)
def test_lexer_errors(source, message):
    tokens = list(lex(source))
    assert tokens[-1].typ is T.ERROR
    assert message in tokens[-1].val


def test_lexer_stops_after_error():
    tokens = list(lex("(foo 0a bar baz)"))
    assert [t.typ for t in tokens] == [T.OPEN_PAREN, T.IDENTIFIER, T.ERROR]


def test_lexer_is_lazy():
    # nothing past the first form is scanned until asked for
    tokens = lex('(a) "unclosed')
    assert next(tokens) == Token(T.OPEN_PAREN, "(")
    assert next(tokens) == Token(T.IDENTIFIER, "a")
    assert next(tokens) == Token(T.CLOSE_PAREN, ")")
    assert next(tokens).typ is T.ERROR


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.text())
def test_lexer_no_crash(source):
    tokens = list(lex(source))
    assert tokens
    assert tokens[-1].typ in (T.EOF, T.ERROR)
    assert all(t.typ not in (T.EOF, T.ERROR) for t in tokens[:-1])


@given(st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1))
def test_lexer_integers(n):
    assert list(lex(str(n))) == [Token(T.INTEGER, str(n)), EOF_TOKEN]
