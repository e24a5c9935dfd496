import pytest

from lispy.types.cons import ConsList
from lispy.types.nil import Nil
from lispy.types.symbol import Symbol
from lispy.reader.parser import lex, TokenStream, parse_one, parse_program, parse_integer


def L(*items):
    return ConsList.from_iterable(items)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", ["a"]),
        ("(a b c)", ["(", "a", "b", "c", ")"]),
        ("  (+   1\n\t2)  ", ["(", "+", "1", "2", ")"]),
        ("((a)(b))", ["(", "(", "a", ")", "(", "b", ")", ")"]),
        ("set! #t 'x", ["set!", "#t", "'x"]),
        ('"hello world"', ['"hello', 'world"']),
        ("a;comment", ["a;comment"]),
        ("", []),
        ("   \n ", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


def test_lexer_is_lazy():
    tokens = lex("(a b")
    assert next(tokens) == "("
    assert next(tokens) == "a"


@pytest.mark.parametrize(
    "token,expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("0", 0),
        ("-0", 0),
        ("0x1A", 26),
        ("0XfF", 255),
        ("-0x10", -16),
        ("017", 15),
        ("08", None),
        ("1a", None),
        ("abc", None),
        ("+", None),
        ("-", None),
        ("0x", None),
    ]
)
def test_parse_integer(token, expected):
    assert parse_integer(token) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("0x20", 32),
        ("nil", Nil),
        ("NIL", Nil),
        ("(1 nil)", L(1, Nil)),
        ("#f", Symbol("#f")),
        ("(a b c)", L(Symbol("a"), Symbol("b"), Symbol("c"))),
        ("()", ConsList()),
        ("(1 (2 3) ())", L(1, L(2, 3), ConsList())),
        ("(quote (1 2 3))", L(Symbol("quote"), L(1, 2, 3))),
    ]
)
def test_parser(source, expected):
    stream = TokenStream(lex(source))
    assert parse_one(stream) == expected


def test_parse_one_on_exhausted_stream_returns_nil():
    assert parse_one(TokenStream(lex(""))) is Nil
    assert parse_one(TokenStream(lex("   "))) is Nil


def test_unterminated_list_returns_partial_list():
    stream = TokenStream(lex("(+ 1 (2 3"))
    assert parse_one(stream) == L(Symbol("+"), 1, L(2, 3))


def test_stray_close_paren_is_a_symbol():
    assert list(parse_program(")")) == [Symbol(")")]


def test_parse_program_yields_each_top_level_form():
    forms = list(parse_program("(define x 5) (+ x 1) x 42"))
    assert forms == [
        L(Symbol("define"), Symbol("x"), 5),
        L(Symbol("+"), Symbol("x"), 1),
        Symbol("x"),
        42,
    ]


def test_parse_program_empty():
    assert list(parse_program("")) == []


def test_nested_lists():
    (form,) = parse_program("((a b) (c d))")
    assert form.size() == 2
    assert form.front() == L(Symbol("a"), Symbol("b"))
    assert form.nth(1) == L(Symbol("c"), Symbol("d"))


def test_token_stream_peek_does_not_consume():
    stream = TokenStream(lex("(a)"))
    assert stream.peek() == "("
    assert stream.peek() == "("
    assert stream.advance() == "("
    assert stream.advance() == "a"
    assert stream.advance() == ")"
    assert stream.advance() is None
    assert not stream.has_next()
