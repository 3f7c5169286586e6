"""Thread-safe queue and a worker thread that runs queued commands."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class SharedFifo(Generic[T]):
    """A first-in first-out queue whose ``pop`` blocks until an item is available."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._condition = threading.Condition()

    def push(self, item: T) -> None:
        with self._condition:
            self._items.append(item)
            self._condition.notify()

    def pop(self) -> T:
        with self._condition:
            self._condition.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def empty(self) -> bool:
        with self._condition:
            return not self._items

    def __len__(self) -> int:
        with self._condition:
            return len(self._items)


class ActiveObject:
    """Runs sent commands in order on a dedicated thread."""

    def __init__(self) -> None:
        self._messages: SharedFifo[Callable[[], None]] = SharedFifo()
        self._done = False
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while not self._done:
            command = self._messages.pop()
            command()

    def _finish(self) -> None:
        self._done = True

    def send(self, command: Callable[[], None]) -> None:
        """Queue ``command`` for execution on the worker thread."""
        self._messages.push(command)

    def terminate(self) -> None:
        """Run every command queued so far, then stop the worker thread."""
        if not self._done:
            self.send(self._finish)
            self._thread.join()