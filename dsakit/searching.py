"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def linear_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first element equal to ``key``, or None if absent."""
    return next((index for index, item in enumerate(items) if item == key), None)


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending sequence ``items``, or None.

    The sequence must already be sorted in ascending order.
    """
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = items[mid]
        if value == key:
            return mid
        if value < key:
            left = mid + 1
        else:
            right = mid - 1
    return None