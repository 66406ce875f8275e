"""A bounded FIFO queue of processes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .process import Process


class ProcessQueue:
    """First-in first-out queue holding at most ``capacity`` processes."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[Process] = deque()

    def enqueue(self, process: Process) -> bool:
        """Append a process; a full queue leaves it out and returns False."""
        if len(self._items) >= self.capacity:
            return False
        self._items.append(process)
        return True

    def dequeue(self) -> Process:
        """Remove and return the process at the head."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def head(self) -> Process:
        """Return the process at the head without removing it."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def __contains__(self, process: object) -> bool:
        return any(item is process for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Process]:
        return iter(self._items)