import pytest
from hypothesis import given, strategies as st

from simplisp.errors import LispSyntaxError
from simplisp.reader.tokenizer import Token, TokenKind as K, is_number, tokenize


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", [Token(K.BEGIN_PAREN, "("), Token(K.SYMBOL, "+"), Token(K.NUMBER, "1"),
                     Token(K.NUMBER, "2"), Token(K.END_PAREN, ")")]),
        ("()", [Token(K.NIL, "()")]),
        ("( )", [Token(K.BEGIN_PAREN, "("), Token(K.END_PAREN, ")")]),
        ("'x", [Token(K.QUOTE, "'"), Token(K.SYMBOL, "x")]),
        ('"hi there"', [Token(K.STRING, "hi there")]),
        ('""', [Token(K.STRING, "")]),
        ('"a\\n"', [Token(K.STRING, "a\\n")]),
        ("t T", [Token(K.TRUE, "t"), Token(K.TRUE, "T")]),
        ("tt nil", [Token(K.SYMBOL, "tt"), Token(K.SYMBOL, "nil")]),
        ("-5 -x - 1.5", [Token(K.NUMBER, "-5"), Token(K.SYMBOL, "-x"), Token(K.SYMBOL, "-"),
                         Token(K.NUMBER, "1.5")]),
        ("1.2.3 .5 12.", [Token(K.SYMBOL, "1.2.3"), Token(K.SYMBOL, ".5"), Token(K.NUMBER, "12.")]),
        ('abc"def"', [Token(K.SYMBOL, "abc"), Token(K.STRING, "def")]),
        ("a'b", [Token(K.SYMBOL, "a"), Token(K.QUOTE, "'"), Token(K.SYMBOL, "b")]),
        ("  \t\n ", []),
        ("(())", [Token(K.BEGIN_PAREN, "("), Token(K.NIL, "()"), Token(K.END_PAREN, ")")]),
        ("NUMBER? 12a", [Token(K.SYMBOL, "NUMBER?"), Token(K.SYMBOL, "12a")]),
    ],
)
def test_tokenize(source, expected):
    assert tokenize(source) == expected


def test_tokenize_returns_a_list():
    assert isinstance(tokenize("(a b)"), list)


@pytest.mark.parametrize("source", ['"abc', '(print "x)', '"'])
def test_unterminated_string(source):
    with pytest.raises(LispSyntaxError, match="Unmatched string quote."):
        tokenize(source)


@given(st.integers(min_value=-10**9, max_value=10**9))
def test_integers_are_numbers(n):
    assert is_number(str(n))
    assert tokenize(str(n)) == [Token(K.NUMBER, str(n))]


@given(st.integers(min_value=0, max_value=10**6), st.integers(min_value=0, max_value=10**6))
def test_decimals_are_numbers(whole, frac):
    assert is_number(f"{whole}.{frac}")
    assert is_number(f"-{whole}.{frac}")


@pytest.mark.parametrize("text", ["-", "-.5", ".", "1..2", "1-2", "+1", "abc"])
def test_not_numbers(text):
    assert not is_number(text)
