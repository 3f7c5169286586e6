"""Log levels, entry context and the log entry that collects a message."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional


class LogLevel(IntEnum):
    """Severity of a log entry, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    DISABLED = 100


@dataclass
class LogContext:
    """Where and at which level an entry was emitted."""

    log_level: LogLevel = LogLevel.DEBUG
    class_name: str = ""
    function: str = ""
    file: str = ""
    line: int = 0


@dataclass(frozen=True)
class LogTimePoint:
    """Local wall-clock time of an entry with millisecond precision."""

    date: time.struct_time
    milliseconds: int

    @staticmethod
    def now() -> "LogTimePoint":
        ns = time.time_ns()
        return LogTimePoint(time.localtime(ns // 1_000_000_000), (ns // 1_000_000) % 1000)


LogCallback = Callable[["LogEntry"], None]


class LogEntry:
    """A message being built; the callback receives it once it is closed."""

    def __init__(
        self,
        callback: Optional[LogCallback],
        context: LogContext,
        disabled: bool = False,
    ) -> None:
        self.context = context
        self.date = LogTimePoint.now()
        self._callback = callback
        self.disabled = disabled
        self._parts: list[str] = []
        self._recursion_level = 0

    @property
    def message(self) -> str:
        return "".join(self._parts)

    def __lshift__(self, part: Any) -> "LogEntry":
        if not self.disabled:
            self._parts.append(str(part))
        return self

    def write(self, *args: Any) -> "LogEntry":
        """Append every argument to the message."""
        for part in args:
            self << part
        return self

    def disable(self) -> None:
        """Drop the callback so closing the entry does nothing."""
        self._callback = None
        self.disabled = True

    def copy(self) -> "LogEntry":
        """Return an independent entry with the same context, date, callback and text."""
        duplicate = LogEntry.__new__(LogEntry)
        duplicate.context = self.context
        duplicate.date = self.date
        duplicate._callback = self._callback
        duplicate.disabled = self.disabled
        duplicate._parts = list(self._parts)
        duplicate._recursion_level = 0
        return duplicate

    def close(self) -> None:
        """Hand the entry to its callback once; later calls do nothing."""
        if not self.disabled:
            callback = self._callback
            self.disabled = True
            if callback is not None:
                callback(self)

    def next_pattern_recursion_level(self) -> None:
        self._recursion_level += 1

    def is_pattern_recursion_first_level(self) -> bool:
        return self._recursion_level == 0

    def __enter__(self) -> "LogEntry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


LogFilter = Callable[[LogEntry], bool]


def identity_filter(entry: LogEntry) -> bool:
    """Accept every log entry."""
    return isinstance(entry, LogEntry)