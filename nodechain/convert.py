"""Conversions between integers and chains of binary digits."""

from __future__ import annotations

from typing import Optional

from nodechain.node import Node, from_values, values


def binary_to_decimal(head: Optional[Node]) -> int:
    """Read the chain as binary digits, most significant first."""
    number = 0
    for digit in values(head):
        number = number * 2 + digit
    return number


def decimal_to_binary(number: int) -> Optional[Node]:
    """Return the binary digits of ``number``, most significant first.

    Zero gives an empty chain; a negative number gives its magnitude's
    digits with the sign carried by every non-zero digit.
    """
    sign = -1 if number < 0 else 1
    remaining = abs(number)
    digits: list[int] = []
    while remaining:
        remaining, digit = divmod(remaining, 2)
        digits.append(sign * digit)
    return from_values(reversed(digits))