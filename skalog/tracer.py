"""Logs an object only once every few calls from the same place."""

from __future__ import annotations

from typing import Any

from .entry import LogLevel
from .logger import _call_site


class PeriodicTracer:
    """Traces a target at a fixed level, skipping ``frequency`` calls between logs."""

    def __init__(self, logger, level: LogLevel) -> None:
        self._logger = logger
        self.level = LogLevel(level)
        self._counters: dict[tuple[type, int], int] = {}

    def trace(self, target: Any, frequency: int, function=None, file=None, line=None) -> bool:
        """Count a call for this target type and line; log ``str(target)`` when due.

        Returns whether the call was due for logging.
        """
        function, file, line = _call_site(function, file, line, 1)
        key = (type(target), line)
        counter = self._counters.get(key, line) + 1
        due = counter % (frequency + 1) == 0
        if due:
            self._logger.log(
                self.level,
                str(target),
                wrapped=type(target),
                function=function,
                file=file,
                line=line,
            )
            counter = line
        self._counters[key] = counter
        return due