import pytest

from tinylisp.printer import to_str
from tinylisp.reader.parser import ParseFailure, TokenStream, lex, parse_one
from tinylisp.types import diagnostics
from tinylisp.types.integer import Integer
from tinylisp.types.nil import Nil, T
from tinylisp.types.pair import Pair, iter_list
from tinylisp.types.store import ValueStore
from tinylisp.types.symbol import Symbol


@pytest.fixture
def store():
    return ValueStore()


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(+ 1 -2)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "-2"), ("rparen", ")")]),
        ("a;b", [("symbol", "a;b")]),
        ("a'b", [("symbol", "a'b")]),
        ("(f)(g)", [("lparen", "("), ("symbol", "f"), ("rparen", ")"), ("lparen", "("), ("symbol", "g"), ("rparen", ")")]),
        ("   \n\t ", []),
        ("; only a comment", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("0", 0),
        ("-0", 0),
        ("007", 7),
    ]
)
def test_parse_integers(store, source, expected):
    result, _ = parse_one(source, store)
    assert isinstance(result, Integer)
    assert result.value == expected


@pytest.mark.parametrize("source", ["-", "--5", "5a", "1-2", "+5", "abc", "<"])
def test_parse_symbols(store, source):
    result, _ = parse_one(source, store)
    assert isinstance(result, Symbol)
    assert result.name == source


def test_reserved_names_read_as_singletons(store):
    assert parse_one("nil", store)[0] is Nil
    assert parse_one("t", store)[0] is T
    assert parse_one("()", store)[0] is Nil


def test_symbols_are_not_interned(store):
    a1, a2 = TokenStream("a a", store).parse_all()
    assert a1.name == a2.name == "a"
    assert a1 is not a2


def test_list_is_right_nested_pair_chain(store):
    result, _ = parse_one("(1 (2 3) x)", store)
    assert isinstance(result, Pair)
    items = list(iter_list(result))
    assert [to_str(i) for i in items] == ["1", "(2 3)", "x"]
    assert result.cdr.cdr.cdr is Nil


def test_quote_shorthand_expands_to_quote_list(store):
    result, _ = parse_one("'(a b)", store)
    assert to_str(result) == "(quote (a b))"
    assert result.car.name == "quote"


def test_nested_quote(store):
    result, _ = parse_one("''x", store)
    assert to_str(result) == "(quote (quote x))"


def test_parse_one_stops_after_one_expression(store):
    source = "(a) 42 ; trailing\n"
    first, pos = parse_one(source, store)
    assert to_str(first) == "(a)"
    assert pos == 3
    second, pos = parse_one(source, store, pos)
    assert to_str(second) == "42"
    third, end = parse_one(source, store, pos)
    assert third is None
    assert end == pos


def test_end_of_input_is_distinct_from_nil(store):
    assert parse_one("", store)[0] is None
    assert parse_one("  ; nothing here", store)[0] is None
    assert parse_one("nil", store)[0] is Nil


def test_parse_all(store):
    exprs = list(TokenStream("1 (2) '3", store).parse_all())
    assert [to_str(e) for e in exprs] == ["1", "(2)", "(quote 3)"]


def test_unclosed_list_degrades(store, caplog):
    with diagnostics.collecting() as errors:
        result, _ = parse_one("(+ 1 (2", store)
    assert isinstance(result, ParseFailure)
    assert to_str(result.expr) == "(+ 1 (2))"
    assert [e.message for e in errors] == [
        "Unexpected EOF in list",
        "Expected ')'",
        "Unexpected EOF in list",
        "Expected ')'",
    ]
    assert "Unexpected EOF in list" in caplog.text


def test_stray_close_paren_degrades_to_nil(store):
    result, pos = parse_one(")", store)
    assert isinstance(result, ParseFailure)
    assert result.expr is Nil
    assert pos == 1


def test_quote_without_operand(store):
    result, _ = parse_one("'", store)
    assert isinstance(result, ParseFailure)
    assert to_str(result.expr) == "(quote nil)"

    result, _ = parse_one("(a ')", store)
    assert isinstance(result, ParseFailure)
    assert to_str(result.expr) == "(a (quote nil))"


def test_out_of_range_literal_wraps(store):
    result, _ = parse_one("9223372036854775808", store)
    assert result.value == -9223372036854775808
