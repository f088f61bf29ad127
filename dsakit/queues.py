"""A fixed-size circular queue and a linear array-backed queue."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Any


class QueueOverflowError(OverflowError):
    """Raised when enqueuing onto a full queue."""


class QueueUnderflowError(IndexError):
    """Raised when taking from an empty queue."""


class CircularQueue:
    """A ring buffer queue holding at most ``capacity`` elements."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def is_full(self) -> bool:
        return (self._rear + 1) % self.capacity == self._front

    def is_empty(self) -> bool:
        return self._front == -1

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise QueueOverflowError when full."""
        if self.is_full():
            raise QueueOverflowError(f"queue overflow, cannot insert {value}")
        if self.is_empty():
            self._front = 0
        self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if self.is_empty():
            raise QueueUnderflowError("queue underflow, nothing to dequeue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = (self._front + 1) % self.capacity
        return value

    def __iter__(self) -> Iterator[Any]:
        """Yield elements from front to rear."""
        for offset in range(len(self)):
            yield self._slots[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1


class ArrayQueue:
    """A linear queue: slots freed by dequeue are never reused."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []
        self._front = 0

    def is_empty(self) -> bool:
        return self._front >= len(self._items)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise QueueOverflowError once every slot was used."""
        if len(self._items) >= self.capacity:
            raise QueueOverflowError(f"queue overflow, cannot insert {value}")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if self.is_empty():
            raise QueueUnderflowError("queue underflow, nothing to dequeue")
        value = self._items[self._front]
        self._front += 1
        return value

    def front(self) -> Any:
        """Return the front element without removing it."""
        if self.is_empty():
            raise QueueUnderflowError("queue is empty")
        return self._items[self._front]

    def __iter__(self) -> Iterator[Any]:
        """Yield elements from front to rear."""
        return islice(self._items, self._front, None)

    def __len__(self) -> int:
        return len(self._items) - self._front