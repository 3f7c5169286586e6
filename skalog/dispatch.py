"""Ways of handing a finished entry to its logger: at once or on a worker thread."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from .entry import LogEntry
from .fifo import ActiveObject


class _Consumer(Protocol):
    def consume_now(self, entry: LogEntry) -> None: ...


class LogPayload:
    """A queued command: either format an entry or run an action."""

    def __init__(
        self,
        action: Optional[Callable[[], None]] = None,
        entry: Optional[LogEntry] = None,
        logger: Optional[_Consumer] = None,
    ) -> None:
        if entry is None and action is None:
            raise ValueError("a payload needs an action or an entry")
        if entry is not None and logger is None:
            raise ValueError("a payload carrying an entry needs a logger")
        self.action = action
        self.entry = entry
        self.logger = logger

    def __call__(self) -> None:
        if self.entry is not None:
            self.logger.consume_now(self.entry)
        else:
            self.action()


class LogSync:
    """Formats entries on the calling thread."""

    def __init__(self) -> None:
        self.terminated = False

    def log(self, entry: LogEntry, logger: _Consumer) -> None:
        logger.consume_now(entry)

    def terminate(self) -> None:
        """Mark the method terminated; nothing is pending, entries still go out at once."""
        self.terminated = True


class LogAsync:
    """Formats copies of entries on a dedicated worker thread."""

    def __init__(self) -> None:
        self._commander = ActiveObject()

    def log(self, entry: LogEntry, logger: _Consumer) -> None:
        self._commander.send(LogPayload(entry=entry.copy(), logger=logger))

    def terminate(self) -> None:
        """Write every queued entry, then stop the worker thread."""
        self._commander.terminate()