"""Output targets that render pattern tokens of a log entry into a stream."""

from __future__ import annotations

from typing import TextIO

from .colors import color_escape
from .entry import LogEntry, LogFilter, identity_filter
from .tokenizer import Token, TokenConsumeType, TokenType


def extract_file_name(path: str) -> str:
    """Return the part of ``path`` after its last ``/`` or ``\\`` separator."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


def _fit(text: str, width: int) -> str:
    """Truncate ``text`` to ``width`` characters and right-align it in that width."""
    return text[:width].rjust(width)


class LogTarget:
    """A stream that receives the entries accepted by its filter."""

    def __init__(
        self,
        output: TextIO,
        log_filter: LogFilter = identity_filter,
        supports_complex_logging: bool = False,
        supports_coloring: bool = False,
    ) -> None:
        self.output = output
        self._filter = log_filter
        self.supports_complex_logging = supports_complex_logging
        self.supports_coloring = supports_coloring

    def apply_token(self, entry: LogEntry, token: Token) -> TokenConsumeType:
        """Write the rendering of ``token`` for ``entry`` to the output."""
        if token.type is TokenType.VALUE and self.supports_complex_logging:
            if entry.is_pattern_recursion_first_level():
                return TokenConsumeType.COMPLEX_PATTERN
            return TokenConsumeType.CONSUMED
        text = self._render(entry, token)
        if text:
            self.output.write(text)
        return TokenConsumeType.CONSUMED

    def _render(self, entry: LogEntry, token: Token) -> str:
        date = entry.date.date
        context = entry.context
        match token.type:
            case TokenType.COLOR:
                return color_escape(token.length) if self.supports_coloring else ""
            case TokenType.VALUE:
                return entry.message
            case TokenType.YEAR:
                return str(date.tm_year)
            case TokenType.MONTH:
                return f"{date.tm_mon:02d}"
            case TokenType.DAY:
                return f"{date.tm_mday:02d}"
            case TokenType.HOUR:
                return f"{date.tm_hour:02d}"
            case TokenType.MINUTE:
                return f"{date.tm_min:02d}"
            case TokenType.SECOND:
                return f"{date.tm_sec:02d}"
            case TokenType.MILLISECOND:
                return f"{entry.date.milliseconds:03d}"
            case TokenType.IDENTIFIER:
                return f"{id(entry):#x}"
            case TokenType.CLASS:
                return _fit(context.class_name, token.length)
            case TokenType.FILE:
                return _fit(extract_file_name(context.file), token.length)
            case TokenType.FUNCTION:
                return _fit(context.function, token.length)
            case TokenType.LINE:
                return str(context.line).rjust(token.length, "0")
            case TokenType.LITERAL:
                return token.value
            case TokenType.EMPTY:
                return ""
        raise ValueError(f"unsupported token type: {token.type}")

    def enable_complex_logging(self) -> None:
        """Let messages carry their own patterns."""
        self.supports_complex_logging = True

    def is_a_target(self, entry: LogEntry) -> bool:
        """Tell whether this target's filter accepts ``entry``."""
        return bool(self._filter(entry))

    def end_line(self) -> None:
        self.output.write("\n")