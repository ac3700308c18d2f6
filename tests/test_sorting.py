from collections import Counter

import pytest

from dsakit.sorting import (
    bubble_sort,
    merge_sort,
    merge_sort_steps,
    quick_sort,
    quick_sort_steps,
)

SAMPLES = [
    [],
    [7],
    [4, 6, 2, 5, 7, 9, 1, 3],
    [13, 46, 24, 52, 20, 9],
    [3, 3, 1, 1, 2, 2],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [-2, 0, -7, 10, 0],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_sort_agrees_with_sorted(values):
    assert merge_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_quick_sort_agrees_with_sorted(values):
    assert quick_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_bubble_sort_agrees_with_sorted(values):
    assert bubble_sort(values) == sorted(values)


def test_sorters_do_not_modify_input():
    values = [9, 1, 8, 2]
    assert merge_sort(values) == [1, 2, 8, 9]
    assert quick_sort(values) == [1, 2, 8, 9]
    assert bubble_sort(values) == [1, 2, 8, 9]
    assert values == [9, 1, 8, 2]


def test_quick_sort_source_example():
    assert quick_sort([4, 6, 2, 5, 7, 9, 1, 3]) == [1, 2, 3, 4, 5, 6, 7, 9]


def test_bubble_sort_source_example():
    assert bubble_sort([13, 46, 24, 52, 20, 9]) == [9, 13, 20, 24, 46, 52]


def test_sorters_accept_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert bubble_sort(words) == expected


@pytest.mark.parametrize("values", [v for v in SAMPLES if v])
def test_merge_sort_steps_count_and_final(values):
    steps = list(merge_sort_steps(values))
    assert len(steps) == len(values) - 1
    if steps:
        assert steps[-1] == sorted(values)


def test_merge_sort_steps_are_permutations():
    values = [8, 3, 5, 1, 9, 2]
    for step in merge_sort_steps(values):
        assert Counter(step) == Counter(values)


def test_merge_sort_first_step_merges_first_pair():
    steps = list(merge_sort_steps([2, 1, 4, 3]))
    assert steps[0][:2] == [1, 2]
    assert steps[0][2:] == [4, 3]


def test_merge_sort_steps_empty():
    assert list(merge_sort_steps([])) == []


@pytest.mark.parametrize("values", SAMPLES)
def test_quick_sort_steps_final_is_sorted(values):
    steps = list(quick_sort_steps(values))
    if len(values) > 1:
        assert steps[-1] == sorted(values)
    else:
        assert steps == []


def test_quick_sort_steps_on_strings():
    words = ["delta", "alpha", "charlie", "bravo"]
    steps = list(quick_sort_steps(words))
    assert steps[-1] == sorted(words)
    for step in steps:
        assert Counter(step) == Counter(words)


def test_quick_sort_steps_first_partition_places_last_pivot():
    values = [3, 1, 2]
    first = next(quick_sort_steps(values))
    pivot = values[-1]
    position = first.index(pivot)
    assert all(x <= pivot for x in first[:position])
    assert all(x > pivot for x in first[position + 1 :])