"""The logger: level filtering, per-level patterns and output targets."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from .dispatch import LogSync
from .entry import LogContext, LogEntry, LogFilter, LogLevel, identity_filter
from .target import LogTarget
from .tokenizer import Tokenizer, TokenConsumeType

_DEFAULT_PATTERNS = {
    LogLevel.DEBUG: "%10c[%h:%m:%s:%T]%10c[Debug]%8c(%12F l.%4l) %15c%v",
    LogLevel.INFO: "%10c[%h:%m:%s:%T]%11c[Info ]%8c(%12F l.%4l) %15c%v",
    LogLevel.WARN: "%10c[%h:%m:%s:%T]%14c[Warn ]%8c(%12F l.%4l) %15c%v",
    LogLevel.ERROR: "%10c[%h:%m:%s:%T]%12c[Error]%8c(%12F l.%4l) %15c%v",
}

_class_levels: dict[Any, LogLevel] = {}


def configure_class_level(wrapped: Any, level: LogLevel) -> None:
    """Set the lowest level at which entries logged for ``wrapped`` are kept."""
    _class_levels[wrapped] = LogLevel(level)


def class_level(wrapped: Any) -> LogLevel:
    """Return the lowest level configured for ``wrapped``; Debug by default."""
    return _class_levels.get(wrapped, LogLevel.DEBUG)


def class_name(wrapped: Any) -> str:
    """Return the name shown by ``%C``: ``wrapped.log_class_name`` or an empty string."""
    return str(getattr(wrapped, "log_class_name", ""))


def _call_site(function, file, line, depth):
    """Fill in unknown call-site details from the frame ``depth`` levels above the caller."""
    if function is None or file is None or line is None:
        frame = sys._getframe(depth + 1)
        function = frame.f_code.co_name if function is None else function
        file = frame.f_code.co_filename if file is None else file
        line = frame.f_lineno if line is None else line
    return function, file, line


def _check_level(level: LogLevel) -> None:
    if level is LogLevel.DISABLED:
        raise ValueError('Unable to log at log level "Disabled"')


def _null_entry(level, wrapped, function, file, line) -> LogEntry:
    return LogEntry(None, LogContext(level, class_name(wrapped), function, file, line), True)


class Logger:
    """Formats entries between ``min_level`` and ``max_level`` into its targets."""

    def __init__(
        self,
        min_level: LogLevel = LogLevel.DEBUG,
        max_level: LogLevel = LogLevel.ERROR,
        method=None,
        output: Optional[TextIO] = None,
        log_filter: LogFilter = identity_filter,
    ) -> None:
        if min_level > max_level:
            raise ValueError("Max log level must be greater or equal than Min log level")
        self.min_level = LogLevel(min_level)
        self.max_level = LogLevel(max_level)
        self._method = method if method is not None else LogSync()
        self._log_level = LogLevel.DEBUG
        self._targets: list[LogTarget] = []
        self._patterns = {level: Tokenizer(p) for level, p in _DEFAULT_PATTERNS.items()}
        self._complex_logging = False
        if output is not None:
            self.add_output_target(output, log_filter)

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    def accepts(self, level: LogLevel) -> bool:
        """Tell whether ``level`` lies within this logger's fixed range."""
        return self.min_level <= level <= self.max_level

    def configure_log_level(self, level: LogLevel) -> None:
        """Set the runtime threshold below which entries are dropped."""
        self._log_level = LogLevel(level)

    def set_pattern(self, level: LogLevel, pattern: str) -> None:
        self._patterns[LogLevel(level)] = Tokenizer(pattern)

    def add_output_target(self, output: TextIO, log_filter: LogFilter = identity_filter) -> None:
        self._targets.append(
            LogTarget(output, log_filter, self._complex_logging, output is sys.stdout)
        )

    def enable_complex_logging(self) -> None:
        """Interpret patterns found inside messages, on every present and future target."""
        self._complex_logging = True
        for target in self._targets:
            target.enable_complex_logging()

    def consume_now(self, entry: LogEntry) -> None:
        """Write ``entry`` to every target that accepts it, using its level's pattern."""
        pattern = self._patterns[entry.context.log_level]
        for target in self._targets:
            if target.is_a_target(entry):
                self._write(pattern, target, entry)
                target.end_line()
        entry.disable()

    def _write(self, pattern: Tokenizer, target: LogTarget, entry: LogEntry) -> None:
        for token in pattern:
            if target.apply_token(entry, token) is TokenConsumeType.COMPLEX_PATTERN:
                entry.next_pattern_recursion_level()
                self._write(Tokenizer(entry.message), target, entry)

    def dispatch(self, entry: LogEntry) -> None:
        """Hand a finished entry to the logging method."""
        self._method.log(entry, self)

    def entry(self, level, wrapped=None, function=None, file=None, line=None) -> LogEntry:
        """Open an entry; it is written when closed or when its ``with`` block ends."""
        return self._make_entry(LogLevel(level), wrapped, *_call_site(function, file, line, 1))

    def _make_entry(self, level, wrapped, function, file, line) -> LogEntry:
        _check_level(level)
        if level >= class_level(wrapped) and self.accepts(level):
            context = LogContext(level, class_name(wrapped), function, file, line)
            return LogEntry(self.dispatch, context, level < self._log_level)
        return _null_entry(level, wrapped, function, file, line)

    def log(self, level, *args, wrapped=None, function=None, file=None, line=None) -> None:
        """Log the concatenation of ``args`` at ``level``."""
        site = _call_site(function, file, line, 1)
        entry = self._make_entry(LogLevel(level), wrapped, *site)
        entry.write(*args)
        entry.close()

    def terminate(self) -> None:
        """Wait until the logging method has written everything pending."""
        self._method.terminate()