"""A bounded FIFO queue, an unbounded FIFO queue and a stable priority queue."""

from __future__ import annotations

import bisect
from collections import deque
from collections.abc import Iterator
from typing import Any

MAX_SIZE = 100


class QueueUnderflowError(Exception):
    """Raised when an empty queue is read or dequeued."""


class QueueFullError(Exception):
    """Raised when a bounded queue has no room left."""


class CircularQueue:
    """A first-in first-out queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise QueueUnderflowError("Queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise QueueUnderflowError("Queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        return iter(list(self._items))


class LinkedQueue:
    """An unbounded first-in first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise QueueUnderflowError("underflow")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        return iter(list(self._items))


class PriorityQueue:
    """A queue served lowest priority number first; equal priorities keep arrival order."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, Any]] = []

    def enqueue(self, value: Any, priority: int) -> None:
        """Add ``value`` behind every entry whose priority is not greater."""
        bisect.insort_right(self._entries, (priority, value), key=lambda entry: entry[0])

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._entries:
            raise QueueUnderflowError("priority queue underflow")
        return self._entries.pop(0)[1]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in serving order."""
        return iter([value for _, value in self._entries])