"""Binary min- and max-heaps kept in plain lists, built by repeated insertion."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def _sift_up(heap: list[Any], out_of_order: Callable[[Any, Any], bool]) -> None:
    i = len(heap) - 1
    while i > 0:
        parent = (i - 1) // 2
        if not out_of_order(heap[parent], heap[i]):
            break
        heap[i], heap[parent] = heap[parent], heap[i]
        i = parent


def push_min(heap: list[Any], value: Any) -> None:
    """Insert ``value`` into the min-heap ``heap`` in place."""
    heap.append(value)
    _sift_up(heap, lambda parent, child: parent > child)


def push_max(heap: list[Any], value: Any) -> None:
    """Insert ``value`` into the max-heap ``heap`` in place."""
    heap.append(value)
    _sift_up(heap, lambda parent, child: parent < child)


def build_min_heap(values: Iterable[Any]) -> list[Any]:
    """Return a min-heap made by inserting ``values`` one after another."""
    heap: list[Any] = []
    for value in values:
        push_min(heap, value)
    return heap


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return a max-heap made by inserting ``values`` one after another."""
    heap: list[Any] = []
    for value in values:
        push_max(heap, value)
    return heap