"""Linked lists, stacks, queues, heaps, binary trees, sorting and the Tower of Hanoi in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "doubly_linked",
    "hanoi",
    "heaps",
    "queues",
    "singly_linked",
    "sorting",
    "stack",
    "trees",
]