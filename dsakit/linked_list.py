"""Singly linked and circular singly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list with constant-time append."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete(self, key: Any) -> bool:
        """Remove the first node holding ``key``; return whether one was found."""
        prev: _Node | None = None
        node = self._head
        while node is not None and node.value != key:
            prev = node
            node = node.next
        if node is None:
            return False
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1
        return True

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"


class CircularLinkedList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_end(value)

    def insert_end(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete_begin(self) -> Any:
        """Remove the first node and return its value.

        Raises IndexError when the list is empty.
        """
        if self._tail is None:
            raise IndexError("list is empty, nothing to delete")
        head = self._tail.next
        assert head is not None
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        head = self._tail.next
        node = head
        while True:
            assert node is not None
            yield node.value
            node = node.next
            if node is head:
                break

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)