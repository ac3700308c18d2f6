"""Doubly linked lists: building, inserting, deleting and reversing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list."""

    data: Any
    next: Optional[DNode] = None
    back: Optional[DNode] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the data of this node and of every node after it."""
        node: Optional[DNode] = self
        while node is not None:
            yield node.data
            node = node.next


def from_list(values: Iterable[Any]) -> Optional[DNode]:
    """Build a doubly linked list holding ``values`` in order; ``None`` if empty."""
    head: Optional[DNode] = None
    tail: Optional[DNode] = None
    for value in values:
        node = DNode(value, None, tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[DNode]) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def _tail(head: DNode) -> DNode:
    node = head
    while node.next is not None:
        node = node.next
    return node


def _kth(head: Optional[DNode], k: int) -> DNode:
    """Return the ``k``-th node, counting from 1."""
    if k < 1:
        raise IndexError(f"position {k} is out of range")
    node = head
    for _ in range(k - 1):
        if node is None:
            break
        node = node.next
    if node is None:
        raise IndexError(f"position {k} is out of range")
    return node


def delete_head(head: Optional[DNode]) -> Optional[DNode]:
    """Remove the first node and return the new head."""
    if head is None or head.next is None:
        return None
    new_head = head.next
    new_head.back = None
    head.next = None
    return new_head


def delete_tail(head: Optional[DNode]) -> Optional[DNode]:
    """Remove the last node and return the head."""
    if head is None or head.next is None:
        return None
    tail = _tail(head)
    new_tail = tail.back
    new_tail.next = None
    tail.back = None
    return head


def delete_kth(head: Optional[DNode], k: int) -> Optional[DNode]:
    """Remove the ``k``-th node (counting from 1) and return the head."""
    if head is None:
        return None
    node = _kth(head, k)
    before, after = node.back, node.next
    if before is None and after is None:
        return None
    if before is None:
        return delete_head(head)
    if after is None:
        return delete_tail(head)
    before.next = after
    after.back = before
    node.next = node.back = None
    return head


def insert_before_head(head: Optional[DNode], value: Any) -> DNode:
    """Put ``value`` in front of the list and return the new head."""
    new_head = DNode(value, head, None)
    if head is not None:
        head.back = new_head
    return new_head


def insert_before_tail(head: Optional[DNode], value: Any) -> DNode:
    """Put ``value`` just before the last node and return the head."""
    if head is None or head.next is None:
        return insert_before_head(head, value)
    insert_before_node(_tail(head), value)
    return head


def insert_before_kth(head: Optional[DNode], k: int, value: Any) -> DNode:
    """Put ``value`` just before the ``k``-th node (counting from 1); return the head."""
    if k == 1:
        return insert_before_head(head, value)
    insert_before_node(_kth(head, k), value)
    return head


def insert_before_node(node: DNode, value: Any) -> DNode:
    """Put ``value`` just before ``node``, which must not be the head; return the new node."""
    before = node.back
    if before is None:
        raise ValueError("cannot insert before the head node; use insert_before_head")
    new_node = DNode(value, node, before)
    before.next = new_node
    node.back = new_node
    return new_node


def reverse(head: Optional[DNode]) -> Optional[DNode]:
    """Reverse the list in place and return the new head."""
    if head is None or head.next is None:
        return head
    current: Optional[DNode] = head
    new_head = head
    while current is not None:
        current.next, current.back = current.back, current.next
        new_head = current
        current = current.back
    return new_head