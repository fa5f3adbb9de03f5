import pytest
from hypothesis import given, strategies as st

from eta.errors import TrailingTokens, UnexpectedEof, UnmatchedParen, UnterminatedString
from eta.printer import to_source
from eta.reader.lexer import lex, tokenize
from eta.reader.parser import TokenStream, parse
from eta.reader.tokens import Token, TokenKind
from eta.types.symbol import Symbol

L, R = Token.left_paren(), Token.right_paren()


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", []),
        ("   \n\t ", []),
        ("()", [L, R]),
        ("(+ 1 2)", [L, Token.symbol("+"), Token.number("1"), Token.number("2"), R]),
        ("1.234", [Token.number("1.234")]),
        ("-7", [Token.number("-7")]),
        (".5", [Token.number(".5")]),
        ("2e3", [Token.number("2e3")]),
        ('"foo"', [Token.string("foo")]),
        ('"a (b) c"', [Token.string("a (b) c")]),
        ('""', [Token.string("")]),
        ("1a", [Token.symbol("1a")]),
        ("-", [Token.symbol("-")]),
        ("inf", [Token.symbol("inf")]),
        ("1e999", [Token.symbol("1e999")]),
        ("true", [Token.symbol("true")]),
        ("(foo 1 \"bar\" false 2)", [
            L,
            Token.symbol("foo"),
            Token.number("1"),
            Token.string("bar"),
            Token.symbol("false"),
            Token.number("2"),
            R,
        ]),
        ("((a)b)", [L, L, Token.symbol("a"), R, Token.symbol("b"), R]),
        ('x"y"', [Token.symbol("x"), Token.string("y")]),
    ]
)
def test_tokenize(source, expected):
    assert tokenize(source) == expected


def test_tokens_keep_kind_and_text():
    (tok,) = tokenize("12.5")
    assert tok.kind is TokenKind.NUMBER
    assert tok.text == "12.5"


@pytest.mark.parametrize("source", ['"abc', '(concat "a', '"'])
def test_unterminated_string(source):
    with pytest.raises(UnterminatedString):
        tokenize(source)


def test_lex_is_lazy():
    # The error is only raised once the generator reaches the bad string
    tokens = lex('(a "oops')
    assert next(tokens) == L
    assert next(tokens) == Token.symbol("a")
    with pytest.raises(UnterminatedString):
        next(tokens)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123.0),
        ("-45", -45.0),
        ("3.14", 3.14),
        ('"hello"', "hello"),
        ("true", True),
        ("false", False),
        ("abc", Symbol("abc")),
        ("()", []),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
        (
            "(if (and true true) 2 4)",
            [Symbol("if"), [Symbol("and"), True, True], 2.0, 4.0],
        ),
        (
            "(def add1 (func (a) (+ a 1)))",
            [
                Symbol("def"),
                Symbol("add1"),
                [Symbol("func"), [Symbol("a")], [Symbol("+"), Symbol("a"), 1.0]],
            ],
        ),
    ]
)
def test_parser(source, expected):
    assert parse(tokenize(source)) == expected


def test_parsed_numbers_are_floats():
    assert isinstance(parse(tokenize("7")), float)


def test_string_atom_is_not_a_symbol():
    assert parse(tokenize('"x"')) != Symbol("x")


@pytest.mark.parametrize(
    "tokens,error",
    [
        ([], UnexpectedEof),
        ([L], UnexpectedEof),
        ([L, Token.number("4")], UnexpectedEof),
        ([R], UnmatchedParen),
        ([L, R, R], UnmatchedParen),
        ([Token.number("1"), Token.number("2")], TrailingTokens),
    ]
)
def test_parse_errors(tokens, error):
    with pytest.raises(error):
        parse(tokens)


def test_parse_all_yields_each_top_level_form():
    stream = TokenStream(lex("(def x 1) x 2"))
    assert list(stream.parse_all()) == [[Symbol("def"), Symbol("x"), 1.0], Symbol("x"), 2.0]


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(
    st.characters(categories=("Ll", "Lu"), include_characters="-_+*/<>=?!"),
    min_size=1, max_size=10
).filter(lambda s: s not in ("true", "false", "+", "-") and not s[0] in "+-")

string_strat = st.text(
    st.characters(exclude_characters='"', exclude_categories=("Cs",)),
    max_size=20,
)

number_strat = st.one_of(
    st.integers(min_value=-10**6, max_value=10**6).map(float),
    st.floats(min_value=-1e6, max_value=1e6, allow_infinity=False, allow_nan=False),
)

atom_strat = st.one_of(
    symbol_strat.map(Symbol),
    string_strat,
    number_strat,
    st.booleans(),
)

expr_strat = st.recursive(atom_strat, lambda children: st.lists(children, max_size=5), max_leaves=25)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(expr_strat)
def test_print_then_parse_round_trip(expr):
    assert parse(tokenize(to_source(expr))) == expr


def test_overflowing_literal_is_symbol_and_round_trips():
    expr = parse(tokenize("(+ 1e999 1)"))
    assert expr == [Symbol("+"), Symbol("1e999"), 1.0]
    assert parse(tokenize(to_source(expr))) == expr


@given(st.text(max_size=40))
def test_lexer_only_raises_unterminated_string(source):
    try:
        tokenize(source)
    except UnterminatedString:
        assert source.count('"') % 2 == 1
