"""A logger that fans every entry out to several loggers."""

from __future__ import annotations

from typing import Iterator

from .entry import LogContext, LogEntry, LogLevel
from .logger import Logger, _call_site, _check_level, _null_entry, class_level, class_name


class MultiLogger:
    """Sends each entry to every held logger whose fixed range accepts its level."""

    def __init__(self, *args: Logger) -> None:
        self._loggers = tuple(args)

    def __getitem__(self, index: int) -> Logger:
        return self._loggers[index]

    def __len__(self) -> int:
        return len(self._loggers)

    def __iter__(self) -> Iterator[Logger]:
        return iter(self._loggers)

    def _broadcast(self, entry: LogEntry) -> None:
        copied = entry.copy()
        copied.disable()
        level = entry.context.log_level
        for logger in self._loggers:
            if logger.accepts(level):
                logger.dispatch(copied)

    def _make_entry(self, level, wrapped, function, file, line) -> LogEntry:
        _check_level(level)
        if level >= class_level(wrapped):
            context = LogContext(level, class_name(wrapped), function, file, line)
            return LogEntry(self._broadcast, context)
        return _null_entry(level, wrapped, function, file, line)

    def entry(self, level, wrapped=None, function=None, file=None, line=None) -> LogEntry:
        """Open an entry that is broadcast when closed."""
        return self._make_entry(LogLevel(level), wrapped, *_call_site(function, file, line, 1))

    def log(self, level, *args, wrapped=None, function=None, file=None, line=None) -> None:
        """Log the concatenation of ``args`` at ``level`` on every accepting logger."""
        site = _call_site(function, file, line, 1)
        entry = self._make_entry(LogLevel(level), wrapped, *site)
        entry.write(*args)
        entry.close()

    def terminate(self) -> None:
        for logger in self._loggers:
            logger.terminate()