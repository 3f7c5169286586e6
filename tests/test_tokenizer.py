import pytest

from skalog.tokenizer import (
    PatternError,
    Token,
    TokenType,
    Tokenizer,
    tokenize,
)


def test_literal():
    tokenizer = Tokenizer("pure litteral string")
    assert len(tokenizer) == 1
    first = tokenizer[0]
    assert first.type is TokenType.LITERAL
    assert first.value == "pure litteral string"
    assert first.length == len("pure litteral string")


PLACEHOLDERS = [
    ("c", TokenType.COLOR),
    ("C", TokenType.CLASS),
    ("F", TokenType.FILE),
    ("f", TokenType.FUNCTION),
    ("l", TokenType.LINE),
    ("i", TokenType.IDENTIFIER),
    ("v", TokenType.VALUE),
    ("y", TokenType.YEAR),
    ("M", TokenType.MONTH),
    ("d", TokenType.DAY),
    ("h", TokenType.HOUR),
    ("m", TokenType.MINUTE),
    ("s", TokenType.SECOND),
    ("T", TokenType.MILLISECOND),
]


@pytest.mark.parametrize("symbol,token_type", PLACEHOLDERS)
def test_placeholder_with_length(symbol, token_type):
    tokenizer = Tokenizer(f"%5{symbol}")
    assert len(tokenizer) == 1
    first = next(iter(tokenizer))
    assert first.type is token_type
    assert first.value == ""
    assert first.length == 5


@pytest.mark.parametrize("symbol,token_type", PLACEHOLDERS)
def test_placeholder_without_length(symbol, token_type):
    tokenizer = Tokenizer(f"%{symbol}")
    assert len(tokenizer) == 1
    first = tokenizer[0]
    assert first.type is token_type
    assert first.value == ""
    assert first.length == 0


def test_color_with_id():
    first = Tokenizer("%7c")[0]
    assert first.type is TokenType.COLOR
    assert first.length == 7


@pytest.mark.parametrize("pattern", ["%5?", "%?"])
def test_unknown_symbol_raises(pattern):
    with pytest.raises(PatternError, match="Error while parsing the log pattern"):
        Tokenizer(pattern)


@pytest.mark.parametrize("pattern", ["%", "abc %12"])
def test_early_end_raises(pattern):
    with pytest.raises(PatternError, match="unexpected early end of input"):
        tokenize(pattern)


def test_mixed_pattern():
    tokens = tokenize("[%h:%m] %v 1")
    assert [t.type for t in tokens] == [
        TokenType.LITERAL,
        TokenType.HOUR,
        TokenType.LITERAL,
        TokenType.MINUTE,
        TokenType.LITERAL,
        TokenType.VALUE,
        TokenType.LITERAL,
    ]
    assert tokens[0].value == "["
    assert tokens[-1].value == " 1"


def test_default_pattern_round_trips_literals():
    pattern = "%10c[%h:%m:%s:%T]%10c[Debug]%8c(%12F l.%4l) %15c%v"
    tokens = tokenize(pattern)
    literal_text = "".join(t.value for t in tokens if t.type is TokenType.LITERAL)
    assert literal_text == "[:::][Debug]( l.) "
    assert [t.length for t in tokens if t.type is TokenType.COLOR] == [10, 10, 8, 15]


def test_empty_pattern():
    assert len(Tokenizer("")) == 0


def test_token_defaults():
    token = Token()
    assert token.type is TokenType.EMPTY
    assert token.length == 0
    assert Token("abc", TokenType.LITERAL).length == 3
    assert Token("abc", TokenType.LITERAL, 7).length == 7