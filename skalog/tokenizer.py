"""Parsing of log output patterns into tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    """Kind of a pattern token."""

    COLOR = auto()
    CLASS = auto()
    FILE = auto()
    FUNCTION = auto()
    LINE = auto()
    IDENTIFIER = auto()
    VALUE = auto()
    YEAR = auto()
    MONTH = auto()
    DAY = auto()
    HOUR = auto()
    MINUTE = auto()
    SECOND = auto()
    MILLISECOND = auto()
    LITERAL = auto()
    EMPTY = auto()


class TokenConsumeType(Enum):
    """What an output target did with a token."""

    CONSUMED = auto()
    COMPLEX_PATTERN = auto()


@dataclass(frozen=True)
class Token:
    """One piece of a pattern; ``length`` defaults to the length of ``value``."""

    value: str = ""
    type: TokenType = TokenType.EMPTY
    length: int = 0

    def __post_init__(self) -> None:
        if self.length == 0:
            object.__setattr__(self, "length", len(self.value))


class PatternError(ValueError):
    """Raised when a log pattern cannot be parsed."""


_SYMBOLS = {
    "C": TokenType.CLASS,
    "c": TokenType.COLOR,
    "i": TokenType.IDENTIFIER,
    "v": TokenType.VALUE,
    "y": TokenType.YEAR,
    "M": TokenType.MONTH,
    "d": TokenType.DAY,
    "h": TokenType.HOUR,
    "m": TokenType.MINUTE,
    "s": TokenType.SECOND,
    "l": TokenType.LINE,
    "f": TokenType.FUNCTION,
    "F": TokenType.FILE,
    "T": TokenType.MILLISECOND,
}

_TOKEN_RE = re.compile(
    r"(?P<literal>[^%]+)|%(?P<width>[0-9]*)(?P<symbol>.?)",
    re.DOTALL,
)


def _placeholder(width: str, symbol: str) -> Token:
    if not symbol:
        raise PatternError("unexpected early end of input")
    try:
        token_type = _SYMBOLS[symbol]
    except KeyError:
        raise PatternError(f"unknown symbol : {symbol}") from None
    return Token("", token_type, int(width) if width else 0)


def tokenize(pattern: str) -> list[Token]:
    """Split ``pattern`` into literal and placeholder tokens."""
    tokens = []
    try:
        for match in _TOKEN_RE.finditer(pattern):
            literal = match["literal"]
            if literal is not None:
                tokens.append(Token(literal, TokenType.LITERAL))
            else:
                tokens.append(_placeholder(match["width"], match["symbol"]))
    except PatternError as error:
        raise PatternError(f"Error while parsing the log pattern : {error}") from error
    return tokens


class Tokenizer:
    """A parsed pattern: an immutable sequence of tokens."""

    def __init__(self, pattern: str) -> None:
        self._tokens = tuple(tokenize(pattern))

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index):
        return self._tokens[index]