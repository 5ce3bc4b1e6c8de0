"""Searching and inspecting the values held in a chain of nodes."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise
from typing import Any, Optional

from nodechain.node import Node, values


def first_occurrence(head: Optional[Node], value: Any) -> Optional[int]:
    """Return the 1-based position of the first ``value``, or None if absent."""
    for position, item in enumerate(values(head), start=1):
        if item == value:
            return position
    return None


def last_occurrence(head: Optional[Node], value: Any) -> Optional[int]:
    """Return the 1-based position of the last ``value``, or None if absent."""
    found: Optional[int] = None
    for position, item in enumerate(values(head), start=1):
        if item == value:
            found = position
    return found


def frequency(head: Optional[Node], value: Any) -> int:
    """Count how many nodes hold ``value``."""
    return sum(1 for item in values(head) if item == value)


def most_frequent(head: Optional[Node]) -> Any:
    """Return the value that occurs most often.

    On a tie the value that appears first in the chain wins.
    """
    items = values(head)
    if not items:
        raise ValueError("an empty chain has no most frequent value")
    counts = Counter(items)
    return max(items, key=counts.__getitem__)


def is_sorted(head: Optional[Node]) -> bool:
    """Tell whether the values never decrease along the chain."""
    return all(a <= b for a, b in pairwise(values(head)))


def is_sublist(head: Optional[Node], candidate: Optional[Node]) -> bool:
    """Tell whether ``candidate`` appears as a contiguous run inside ``head``."""
    haystack = values(head)
    needle = values(candidate)
    if not needle:
        return True
    width = len(needle)
    return any(
        haystack[start:start + width] == needle
        for start in range(len(haystack) - width + 1)
    )