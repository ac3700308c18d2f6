import pytest

from dsakit.singly_linked import (
    Node,
    append,
    delete_middle,
    find_middle,
    find_middle_by_count,
    format_list,
    from_list,
    has_cycle,
    length,
    prepend,
    reverse,
    reverse_recursive,
    to_list,
)


SAMPLES = [[1], [1, 2], [1, 2, 3], [4, 8, 15, 16, 23, 42], [5, 4, 3, 2, 1, 0, -1]]


@pytest.mark.parametrize("values", SAMPLES)
def test_round_trip(values):
    assert to_list(from_list(values)) == values


def test_empty_list_is_none():
    assert from_list([]) is None
    assert to_list(None) == []
    assert length(None) == 0


@pytest.mark.parametrize("values", SAMPLES)
def test_length(values):
    assert length(from_list(values)) == len(values)


def test_format_list_has_trailing_spaces():
    assert format_list(from_list([1, 2, 3])) == "1 2 3 "
    assert format_list(None) == ""


def test_node_iteration():
    head = Node(1, Node(2, Node(3)))
    assert list(head) == [1, 2, 3]


def test_append_builds_in_order():
    head = None
    values = [7, 3, 9, 1]
    for value in values:
        head = append(head, value)
    assert to_list(head) == values


def test_prepend_puts_value_first():
    head = from_list([2, 3])
    head = prepend(head, 1)
    assert to_list(head) == [1, 2, 3]
    assert to_list(prepend(None, 5)) == [5]


@pytest.mark.parametrize("values", SAMPLES + [[]])
def test_reverse(values):
    assert to_list(reverse(from_list(values))) == values[::-1]


@pytest.mark.parametrize("values", SAMPLES + [[]])
def test_reverse_recursive(values):
    assert to_list(reverse_recursive(from_list(values))) == values[::-1]


def test_double_reverse_restores():
    values = [3, 1, 4, 1, 5]
    assert to_list(reverse(reverse_recursive(from_list(values)))) == values


@pytest.mark.parametrize("values", SAMPLES)
def test_find_middle_agrees_with_counting(values):
    head = from_list(values)
    assert find_middle(head) is find_middle_by_count(head)
    assert find_middle(head).data == values[len(values) // 2]


def test_find_middle_of_empty():
    assert find_middle(None) is None
    assert find_middle_by_count(None) is None


def test_find_middle_odd_and_even():
    assert find_middle(from_list([1, 2, 3, 4, 5])).data == 3
    assert find_middle(from_list([1, 2, 3, 4, 5, 6])).data == 4


@pytest.mark.parametrize("values", [[1, 2, 3], [1, 2, 3, 4], [10, 20, 30, 40, 50]])
def test_delete_middle_removes_one(values):
    head = delete_middle(from_list(values))
    expected = values[: len(values) // 2] + values[len(values) // 2 + 1 :]
    assert to_list(head) == expected


def test_delete_middle_single_and_empty():
    assert delete_middle(from_list([1])) is None
    assert delete_middle(None) is None


def test_has_cycle_detects_loop():
    nodes = [Node(v) for v in [1, 2, 3, 4, 5]]
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    nodes[-1].next = nodes[2]
    assert has_cycle(nodes[0]) is True


@pytest.mark.parametrize("values", SAMPLES + [[]])
def test_has_cycle_false_for_plain_list(values):
    assert has_cycle(from_list(values)) is False


def test_self_loop_is_cycle():
    node = Node(1)
    node.next = node
    assert has_cycle(node) is True