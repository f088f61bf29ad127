"""Classic comparison sorts, each returning a new ascending list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        min_idx = min(range(i, n), key=result.__getitem__)
        result[i], result[min_idx] = result[min_idx], result[i]
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort using the last element of each range as the pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(result, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return result


def format_array(items: Iterable[Any], separator: str = " ") -> str:
    """Render items with ``separator`` after each one, as the array printers do."""
    return "".join(f"{item}{separator}" for item in items)