import heapq

import pytest

from dsakit.heaps import build_max_heap, build_min_heap, push_max, push_min

SAMPLES = [
    [],
    [1],
    [5, 3, 8, 1, 9, 2],
    [10, 9, 8, 7, 6, 5, 4, 3, 2, 1],
    [4, 4, 1, 4, 1],
    [-3, 7, 0, -8, 12, 5, 5, 2],
]


def is_min_heap(heap):
    return all(heap[(i - 1) // 2] <= heap[i] for i in range(1, len(heap)))


def is_max_heap(heap):
    return all(heap[(i - 1) // 2] >= heap[i] for i in range(1, len(heap)))


@pytest.mark.parametrize("values", SAMPLES)
def test_min_heap_property_and_contents(values):
    heap = build_min_heap(values)
    assert is_min_heap(heap)
    assert sorted(heap) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_max_heap_property_and_contents(values):
    heap = build_max_heap(values)
    assert is_max_heap(heap)
    assert sorted(heap) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_min_heap_matches_successive_heappush(values):
    reference = []
    for value in values:
        heapq.heappush(reference, value)
    assert build_min_heap(values) == reference


@pytest.mark.parametrize("values", SAMPLES)
def test_max_heap_matches_negated_heappush(values):
    reference = []
    for value in values:
        heapq.heappush(reference, -value)
    assert build_max_heap(values) == [-value for value in reference]


def test_push_min_in_place():
    heap = [2, 5, 3]
    push_min(heap, 1)
    assert heap[0] == 1
    assert len(heap) == 4
    assert is_min_heap(heap)


def test_push_max_in_place():
    heap = [9, 4, 7]
    push_max(heap, 12)
    assert heap[0] == 12
    assert len(heap) == 4
    assert is_max_heap(heap)


def test_ascending_input_unchanged_for_min_heap():
    values = [1, 2, 3, 4, 5]
    assert build_min_heap(values) == values


def test_descending_input_unchanged_for_max_heap():
    values = [5, 4, 3, 2, 1]
    assert build_max_heap(values) == values


def test_build_does_not_change_input():
    values = [3, 1, 2]
    build_min_heap(values)
    build_max_heap(values)
    assert values == [3, 1, 2]