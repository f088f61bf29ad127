"""Bounded array stack and unbounded linked stack."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Place ``value`` on top; raise StackOverflowError when full."""
        if len(self._items) == self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Yield elements from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Place ``value`` on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.value

    def __iter__(self) -> Iterator[Any]:
        """Yield elements from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"