"""Command that reads a chain of integers and prints it back."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from nodechain.node import format_values, from_values


def _read_stdin(parser: argparse.ArgumentParser) -> list[int]:
    tokens = sys.stdin.read().split()
    if not tokens:
        parser.error("expected the number of elements on standard input")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        parser.error(f"not an integer: {exc}")
    size, rest = numbers[0], numbers[1:]
    if size < 0:
        parser.error(f"size must not be negative, got {size}")
    if len(rest) < size:
        parser.error(f"expected {size} elements, got {len(rest)}")
    return rest[:size]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a chain from the given values (or standard input) and print it."""
    parser = argparse.ArgumentParser(
        prog="nodechain",
        description="Read integers into a linked chain and print them. "
        "Without arguments, standard input holds a count followed by that many integers.",
    )
    parser.add_argument("values", nargs="*", type=int, help="integers to store")
    args = parser.parse_args(argv)
    numbers = args.values if args.values else _read_stdin(parser)
    head = from_values(numbers)
    print("the result :")
    print(format_values(head))
    return 0


if __name__ == "__main__":
    sys.exit(main())