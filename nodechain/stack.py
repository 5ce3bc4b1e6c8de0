"""Stacks held as lists whose last item is the top."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def stack_from_values(values: Iterable[Any]) -> list[Any]:
    """Push ``values`` in order onto a new stack; the last one ends on top."""
    stack: list[Any] = []
    for value in values:
        stack.append(value)
    return stack


def bubble_sort_stack(stack: list[Any]) -> list[Any]:
    """Return a sorted copy of ``stack`` with its smallest value on top."""
    return sorted(stack, reverse=True)


def format_stack(stack: list[Any]) -> str:
    """Return the values from top to bottom separated by single spaces."""
    return " ".join(str(value) for value in reversed(stack))