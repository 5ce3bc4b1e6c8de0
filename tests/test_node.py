import pytest

from nodechain.node import (
    Node,
    concatenate,
    explode,
    format_values,
    from_values,
    merge,
    replace,
    rotate_last_to_front,
    values,
)


@pytest.mark.parametrize("items", [[1], [1, 2, 3], [5, -2, 5, 0]])
def test_round_trip(items):
    assert values(from_values(items)) == items


def test_empty_chain_is_none():
    assert from_values([]) is None
    assert values(None) == []
    assert format_values(None) == ""


def test_node_iteration_starts_at_node():
    head = from_values([4, 5, 6])
    assert list(head.next) == [5, 6]


def test_node_links():
    head = from_values(["a", "b"])
    assert head == Node("a", Node("b"))


def test_format_values():
    assert format_values(from_values([1, 2, 3])) == "1 2 3"


def test_concatenate():
    joined = concatenate(from_values([1, 2]), from_values([3, 4]))
    assert values(joined) == [1, 2, 3, 4]


def test_concatenate_with_empty():
    assert values(concatenate(None, from_values([7]))) == [7]
    assert values(concatenate(from_values([7]), None)) == [7]


@pytest.mark.parametrize("size", [1, 2, 4])
def test_explode_split(size):
    items = [10, 20, 30, 40]
    left, right = explode(from_values(items), size)
    assert values(left) == items[:size]
    assert values(right) == items[size:]


def test_explode_whole_chain_leaves_nothing():
    left, right = explode(from_values([1, 2]), 2)
    assert right is None
    assert values(left) == [1, 2]


@pytest.mark.parametrize("size", [0, 5])
def test_explode_bad_size(size):
    with pytest.raises(ValueError):
        explode(from_values([1, 2, 3]), size)


def test_explode_empty():
    with pytest.raises(ValueError):
        explode(None, 1)


def test_rotate_last_to_front():
    assert values(rotate_last_to_front(from_values([1, 2, 3]))) == [3, 1, 2]


@pytest.mark.parametrize("items", [[], [9]])
def test_rotate_short_chain_unchanged(items):
    assert values(rotate_last_to_front(from_values(items))) == items


def test_rotate_full_cycle_restores():
    items = [1, 2, 3, 4]
    head = from_values(items)
    for _ in items:
        head = rotate_last_to_front(head)
    assert values(head) == items


def test_replace_in_place():
    head = from_values([1, 2, 1, 3])
    result = replace(head, 1, 8)
    assert result is head
    assert values(head) == [8, 2, 8, 3]


def test_replace_missing_value():
    assert values(replace(from_values([1, 2]), 5, 0)) == [1, 2]


@pytest.mark.parametrize(
    "first, second",
    [([1, 3, 5], [2, 4, 6]), ([1, 1, 2], [1, 3]), ([], [2, 3]), ([4], [])],
)
def test_merge_sorted(first, second):
    merged = merge(from_values(first), from_values(second))
    assert values(merged) == sorted(first + second)


def test_merge_leaves_inputs_intact():
    a = from_values([1, 4])
    b = from_values([2, 3])
    merge(a, b)
    assert values(a) == [1, 4]
    assert values(b) == [2, 3]


def test_merge_empty():
    assert merge(None, None) is None