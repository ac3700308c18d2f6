"""Command line entry point: linked-list length and Tower of Hanoi."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional, TextIO

from dsakit.hanoi import hanoi_moves
from dsakit.singly_linked import format_list, from_list, length


def _read_tokens(stream: TextIO) -> list[str]:
    return stream.read().split()


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def _values_from_stdin(stream: TextIO) -> list[int]:
    """Read a count followed by that many integers."""
    tokens = _read_tokens(stream)
    if not tokens:
        raise ValueError("expected the number of elements")
    count = _parse_int(tokens[0])
    if count < 0:
        raise ValueError("the number of elements must not be negative")
    values = tokens[1 : 1 + count]
    if len(values) < count:
        raise ValueError(f"expected {count} elements, got {len(values)}")
    return [_parse_int(token) for token in values]


def _disks_from_stdin(stream: TextIO) -> int:
    tokens = _read_tokens(stream)
    if not tokens:
        raise ValueError("expected the number of disks")
    return _parse_int(tokens[0])


def _run_length(args: argparse.Namespace) -> None:
    values = args.values if args.values else _values_from_stdin(sys.stdin)
    head = from_list(values)
    print(f"Created Linked list: {format_list(head)}")
    print(f"Length of Linked List: {length(head)}")


def _run_hanoi(args: argparse.Namespace) -> None:
    disks = args.disks if args.disks is not None else _disks_from_stdin(sys.stdin)
    total = 0
    for move in hanoi_moves(disks, "1", "2", "3"):
        print(move)
        total += 1
    print(total)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Small data-structure and algorithm demonstrations."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    length_cmd = commands.add_parser(
        "length",
        help="build a linked list and report its length",
        description="Values come from the arguments, or from standard input as a count followed by the values.",
    )
    length_cmd.add_argument("values", nargs="*", type=int)
    length_cmd.set_defaults(run=_run_length)

    hanoi_cmd = commands.add_parser(
        "hanoi",
        help="print the moves solving the Tower of Hanoi",
        description="The number of disks comes from the argument or from standard input.",
    )
    hanoi_cmd.add_argument("disks", nargs="?", type=int)
    hanoi_cmd.set_defaults(run=_run_hanoi)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.run(args)
    except ValueError as error:
        print(f"dsakit: error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())