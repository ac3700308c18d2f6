"""Tower of Hanoi: the recursive sequence of disk moves."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """Moving one disk from one rod to another."""

    disk: int
    source: str
    destination: str

    def __str__(self) -> str:
        return f"move disk {self.disk} from rod {self.source} to rod {self.destination}"


def hanoi_moves(
    n: int, source: str = "1", auxiliary: str = "2", destination: str = "3"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``destination``."""
    if n < 1:
        raise ValueError("the number of disks must be at least 1")
    if n == 1:
        yield Move(1, source, destination)
        return
    yield from hanoi_moves(n - 1, source, destination, auxiliary)
    yield Move(n, source, destination)
    yield from hanoi_moves(n - 1, auxiliary, source, destination)


def solve_hanoi(
    n: int, source: str = "1", auxiliary: str = "2", destination: str = "3"
) -> list[Move]:
    """Return every move for ``n`` disks, in order; its length is the move count."""
    return list(hanoi_moves(n, source, auxiliary, destination))