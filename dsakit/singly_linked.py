"""Singly linked lists built from plain nodes, with the usual list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    next: Optional[Node] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the data of this node and of every node after it."""
        node: Optional[Node] = self
        while node is not None:
            yield node.data
            node = node.next


def from_list(values: Iterable[Any]) -> Optional[Node]:
    """Build a linked list holding ``values`` in order; ``None`` if empty."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[Node]) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def length(head: Optional[Node]) -> int:
    """Count the nodes of the list starting at ``head``."""
    return sum(1 for _ in head) if head is not None else 0


def format_list(head: Optional[Node]) -> str:
    """Render the list as its values, each followed by a space."""
    return "".join(f"{value} " for value in to_list(head))


def append(head: Optional[Node], value: Any) -> Node:
    """Add ``value`` at the end of the list and return its head."""
    node = Node(value)
    if head is None:
        return node
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = node
    return head


def prepend(head: Optional[Node], value: Any) -> Node:
    """Add ``value`` in front of the list and return the new head."""
    return Node(value, head)


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list in place, iteratively, and return the new head."""
    previous: Optional[Node] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def reverse_recursive(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list in place, recursively, and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def find_middle_by_count(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node (the second of two) by counting the nodes first."""
    count = length(head)
    if count == 0:
        return None
    node = head
    for _ in range(count // 2):
        node = node.next
    return node


def find_middle(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node (the second of two) with slow and fast pointers."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def delete_middle(head: Optional[Node]) -> Optional[Node]:
    """Remove the first node whose value equals the middle node's value.

    Returns the head of the resulting list.
    """
    middle = find_middle(head)
    if middle is None:
        return None
    target = middle.data
    if head.data == target:
        return head.next
    previous = head
    while previous.next is not None:
        if previous.next.data == target:
            previous.next = previous.next.next
            return head
        previous = previous.next
    return head


def has_cycle(head: Optional[Node]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False