import io

import pytest

from skalog.colors import Color, color_escape
from skalog.entry import LogContext, LogEntry, LogLevel
from skalog.target import LogTarget, extract_file_name
from skalog.tokenizer import Token, TokenConsumeType, TokenType


@pytest.fixture
def entry():
    context = LogContext(LogLevel.INFO, "Abc", "func", "dir/sub\\file.cpp", 42)
    e = LogEntry(None, context)
    e << "hello"
    return e


def render(entry, token, **kwargs):
    out = io.StringIO()
    result = LogTarget(out, **kwargs).apply_token(entry, token)
    return out.getvalue(), result


def test_extract_file_name_handles_both_separators():
    assert extract_file_name("a/b\\c.cpp") == "c.cpp"
    assert extract_file_name("plain.cpp") == "plain.cpp"
    assert extract_file_name("") == ""


def test_literal_written_verbatim(entry):
    text, result = render(entry, Token("abc", TokenType.LITERAL))
    assert text == "abc"
    assert result is TokenConsumeType.CONSUMED


def test_value_writes_message(entry):
    text, result = render(entry, Token("", TokenType.VALUE))
    assert text == "hello"
    assert result is TokenConsumeType.CONSUMED


def test_value_complex_first_level_requests_pattern(entry):
    text, result = render(entry, Token("", TokenType.VALUE), supports_complex_logging=True)
    assert text == ""
    assert result is TokenConsumeType.COMPLEX_PATTERN


def test_value_complex_deeper_level_is_consumed(entry):
    entry.next_pattern_recursion_level()
    text, result = render(entry, Token("", TokenType.VALUE), supports_complex_logging=True)
    assert text == ""
    assert result is TokenConsumeType.CONSUMED


def test_class_is_right_aligned(entry):
    text, _ = render(entry, Token("", TokenType.CLASS, 5))
    assert text == "  Abc"


def test_class_is_truncated(entry):
    text, _ = render(entry, Token("", TokenType.CLASS, 2))
    assert text == "Ab"


def test_file_strips_directories(entry):
    text, _ = render(entry, Token("", TokenType.FILE, len("file.cpp")))
    assert text == "file.cpp"


def test_function_padded_to_width(entry):
    text, _ = render(entry, Token("", TokenType.FUNCTION, 10))
    assert len(text) == 10
    assert text.strip() == "func"


def test_line_zero_filled(entry):
    text, _ = render(entry, Token("", TokenType.LINE, 4))
    assert text == "0042"


def test_date_fields(entry):
    date = entry.date.date
    year, _ = render(entry, Token("", TokenType.YEAR))
    month, _ = render(entry, Token("", TokenType.MONTH))
    second, _ = render(entry, Token("", TokenType.SECOND))
    millis, _ = render(entry, Token("", TokenType.MILLISECOND))
    assert int(year) == date.tm_year
    assert len(month) == 2 and int(month) == date.tm_mon
    assert len(second) == 2 and int(second) == date.tm_sec
    assert len(millis) == 3 and int(millis) == entry.date.milliseconds


def test_identifier_names_entry(entry):
    text, _ = render(entry, Token("", TokenType.IDENTIFIER))
    assert int(text, 16) == id(entry)


def test_color_only_when_supported(entry):
    token = Token("", TokenType.COLOR, int(Color.RED))
    plain, _ = render(entry, token)
    colored, _ = render(entry, token, supports_coloring=True)
    assert plain == ""
    assert colored == color_escape(Color.RED)


def test_empty_token_writes_nothing(entry):
    text, result = render(entry, Token())
    assert text == ""
    assert result is TokenConsumeType.CONSUMED


def test_filter_and_end_line(entry):
    out = io.StringIO()
    target = LogTarget(out, lambda e: "bye" in e.message)
    assert target.is_a_target(entry) is False
    assert LogTarget(out).is_a_target(entry) is True
    target.end_line()
    assert out.getvalue() == "\n"


def test_enable_complex_logging_changes_value_handling(entry):
    out = io.StringIO()
    target = LogTarget(out)
    target.enable_complex_logging()
    assert target.apply_token(entry, Token("", TokenType.VALUE)) is TokenConsumeType.COMPLEX_PATTERN
    assert out.getvalue() == ""