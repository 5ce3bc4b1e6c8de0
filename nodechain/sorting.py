"""Sorting a chain of nodes in place."""

from __future__ import annotations

from itertools import pairwise
from typing import Optional

from nodechain.node import Node


def bubble_sort(head: Optional[Node]) -> Optional[Node]:
    """Sort the chain ascending by swapping node values; return its head."""
    nodes = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next
    swapped = True
    while swapped:
        swapped = False
        for left, right in pairwise(nodes):
            if left.value > right.value:
                left.value, right.value = right.value, left.value
                swapped = True
    return head