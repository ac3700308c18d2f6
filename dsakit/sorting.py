"""Comparison sorts: merge sort, quick sort and bubble sort, with traced variants."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from typing import Any


def _merge_passes(items: list[Any]) -> Iterator[None]:
    """Merge-sort ``items`` in place, pausing after every merge."""
    stack: list[tuple[int, int, bool]] = [(0, len(items) - 1, False)]
    while stack:
        low, high, halves_sorted = stack.pop()
        if low >= high:
            continue
        mid = (low + high) // 2
        if halves_sorted:
            # Ties favour the left half, which keeps the sort stable.
            items[low : high + 1] = list(
                heapq.merge(items[low : mid + 1], items[mid + 1 : high + 1])
            )
            yield
        else:
            stack.append((low, high, True))
            stack.append((mid + 1, high, False))
            stack.append((low, mid, False))


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by merge sort."""
    items = list(values)
    for _ in _merge_passes(items):
        pass
    return items


def merge_sort_steps(values: Iterable[Any]) -> Iterator[list[Any]]:
    """Yield a copy of the whole list after each merge of a merge sort."""
    items = list(values)
    for _ in _merge_passes(items):
        yield list(items)


def _partition_first_pivot(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i <= high - 1:
            i += 1
        while items[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def _partition_last_pivot(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by quick sort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition_first_pivot(items, low, high)
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return items


def quick_sort_steps(values: Iterable[Any]) -> Iterator[list[Any]]:
    """Yield a copy of the whole list after each partition of a last-pivot quick sort."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition_last_pivot(items, low, high)
            yield list(items)
            pending.append((split + 1, high))
            pending.append((low, split - 1))


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by bubble sort."""
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        for j in range(last):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items