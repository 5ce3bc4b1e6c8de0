"""Singly linked nodes and the basic operations on chains of them."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a singly linked chain."""

    value: Any
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the chain."""
        node: Optional[Node] = self
        while node is not None:
            yield node.value
            node = node.next


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _iter_values(head: Optional[Node]) -> Iterator[Any]:
    return iter(head) if head is not None else iter(())


def from_values(values: Iterable[Any]) -> Optional[Node]:
    """Build a chain holding ``values`` in order; None when there are none."""
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


def values(head: Optional[Node]) -> list[Any]:
    """Return the values of the chain as a list."""
    return list(_iter_values(head))


def format_values(head: Optional[Node]) -> str:
    """Return the values of the chain separated by single spaces."""
    return " ".join(str(value) for value in _iter_values(head))


def concatenate(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Attach ``second`` to the end of ``first`` and return the joined chain."""
    if first is None:
        return second
    last = first
    for last in _nodes(first):
        pass
    last.next = second
    return first


def explode(head: Optional[Node], size: int) -> tuple[Node, Optional[Node]]:
    """Cut the chain after its first ``size`` nodes.

    Returns the leading part and the remainder (None when nothing is left).
    """
    if head is None:
        raise ValueError("cannot split an empty chain")
    if size < 1:
        raise ValueError(f"split size must be at least 1, got {size}")
    for position, node in enumerate(_nodes(head), start=1):
        if position == size:
            rest = node.next
            node.next = None
            return head, rest
    raise ValueError(f"split size {size} exceeds the chain length")


def rotate_last_to_front(head: Optional[Node]) -> Optional[Node]:
    """Move the last node to the front of the chain and return the new head."""
    if head is None or head.next is None:
        return head
    before = head
    last = head.next
    while last.next is not None:
        before, last = last, last.next
    before.next = None
    last.next = head
    return last


def replace(head: Optional[Node], old: Any, new: Any) -> Optional[Node]:
    """Replace every ``old`` value in the chain with ``new``, in place."""
    for node in _nodes(head):
        if node.value == old:
            node.value = new
    return head


def merge(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Merge two ascending chains into a new ascending chain.

    On equal values the one from ``first`` comes first.
    """
    return from_values(heapq.merge(_iter_values(first), _iter_values(second)))