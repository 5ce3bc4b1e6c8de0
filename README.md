# nodechain

This package provides small algorithms over a singly linked chain of `Node` objects. It also has a few helpers for stacks kept as Python lists.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Linked chains: `nodechain.node`

A `Node` is a dataclass with a `value` and a `next` link. Iterating a node yields the values from that node to the end of the chain. An empty chain is represented by `None`.

```python
from nodechain.node import from_values, values, format_values, merge, explode

head = from_values([1, 4, 7])
other = from_values([2, 3, 9])
merged = merge(head, other)
print(values(merged))         # [1, 2, 3, 4, 7, 9]
print(format_values(merged))  # 1 2 3 4 7 9

first, rest = explode(merged, 2)
print(values(first), values(rest))  # [1, 2] [3, 4, 7, 9]
```

The module has these functions:

- `from_values(values)` builds a chain from an iterable. It returns `None` when the iterable is empty.
- `values(head)` returns the chain's values as a list.
- `format_values(head)` returns the chain's values joined by single spaces.
- `concatenate(first, second)` links `second` onto the end of `first` and returns the joined chain.
- `explode(head, size)` cuts the chain after its first `size` nodes. It returns `(leading, rest)`, and `rest` is `None` when nothing is left. It raises `ValueError` in three cases:
  - the chain is empty;
  - `size < 1`;
  - `size` is longer than the chain.
- `rotate_last_to_front(head)` moves the last node to the front and returns the new head.
- `replace(head, old, new)` replaces every `old` value with `new`, in place.
- `merge(first, second)` merges two ascending chains into a new ascending chain. When two values are equal, the one from `first` comes first.

## Searching: `nodechain.search`

- `first_occurrence(head, value)` returns the 1-based position of the first match, or `None` if there is no match.
- `last_occurrence(head, value)` returns the 1-based position of the last match, or `None` if there is no match.
- `frequency(head, value)` returns the number of nodes holding `value`.
- `most_frequent(head)` returns the value that occurs most often. On a tie, the value that appears first in the chain wins. It raises `ValueError` for an empty chain.
- `is_sorted(head)` returns `True` when the values never decrease along the chain.
- `is_sublist(head, candidate)` returns `True` when `candidate` appears as a contiguous run inside `head`. An empty candidate always matches.

## Binary conversion: `nodechain.convert`

- `binary_to_decimal(head)` reads a chain of bits, most significant first, as an integer.
- `decimal_to_binary(number)` builds the chain of bits, most significant first.
  - Zero gives an empty chain (`None`).
  - A negative number gives the bits of its magnitude, with every non-zero digit negated.

## Sorting: `nodechain.sorting`

- `bubble_sort(head)` sorts the chain ascending by swapping node values in place. It returns the head.

## Stacks: `nodechain.stack`

Stacks are plain lists, and the last item is the top.

- `stack_from_values(values)` pushes the values in order.
- `bubble_sort_stack(stack)` returns a sorted copy with the smallest value on top.
- `format_stack(stack)` returns the values from top to bottom, joined by single spaces.

## Command line

```
nodechain 5 3 8
```

The command builds a chain from the integers given as arguments. It prints the line `the result :`, followed by the values separated by spaces.

With no arguments, the command reads standard input instead. The input must hold a count, followed by at least that many integers. Only the first `count` integers are used.

```
echo "3 5 3 8" | nodechain
```

The command does nothing except store values and print them back. Sorting, merging, searching and conversion are only available from Python, through the functions above.