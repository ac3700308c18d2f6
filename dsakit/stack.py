"""A linked stack and a bounded stack search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

MAX_STACK = 30


class StackError(Exception):
    """Base error for stack operations."""


class StackEmptyError(StackError):
    """Raised when an empty stack is read or popped."""


class StackOverflowError(StackError):
    """Raised when a stack would exceed its limit."""


@dataclass(eq=False)
class _Link:
    data: Any
    below: Optional[_Link] = None


class LinkedStack:
    """A stack kept as a chain of nodes, top first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: Optional[_Link] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("Stack underflow")
        value = self._top.data
        self._top = self._top.below
        self._size -= 1
        return value

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("Stack is empty")
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        link = self._top
        while link is not None:
            yield link.data
            link = link.below


def search_stack(values: Iterable[Any], target: Any, limit: int = MAX_STACK) -> bool:
    """Tell whether ``target`` is among ``values`` stacked up to ``limit`` items."""
    items = list(values)
    if not items:
        raise StackEmptyError("The STACK is empty")
    if len(items) > limit:
        raise StackOverflowError("Stack overflow")
    return target in items