import pytest

from algokit.linked_list import (
    ListNode,
    from_iterable,
    merge_sorted,
    swap_second_and_last,
    to_list,
)


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5], ["a", "b"]])
def test_round_trip(values):
    assert to_list(from_iterable(values)) == values


def test_from_empty_is_none():
    assert from_iterable([]) is None


def test_iterating_a_node():
    head = ListNode(1, ListNode(2, ListNode(3)))
    assert list(head) == [1, 2, 3]


def test_swap_source_example():
    head = from_iterable([1, 2, 3, 4, 5])
    assert to_list(swap_second_and_last(head)) == [1, 5, 3, 4, 2]


def test_swap_three_nodes_has_no_cycle():
    head = from_iterable([1, 2, 3])
    assert to_list(swap_second_and_last(head)) == [1, 3, 2]


@pytest.mark.parametrize("values", [[], [7], [7, 8]])
def test_swap_short_lists_unchanged(values):
    assert to_list(swap_second_and_last(from_iterable(values))) == values


@pytest.mark.parametrize("length", [3, 4, 6, 9])
def test_swap_twice_restores(length):
    values = list(range(length))
    head = from_iterable(values)
    once = swap_second_and_last(head)
    assert once is head
    assert sorted(to_list(once)) == values
    assert to_list(swap_second_and_last(once)) == values


def test_merge_source_example():
    first = [1, 3, 7, 17]
    second = [15, 21, 92, 177]
    merged = merge_sorted(from_iterable(first), from_iterable(second))
    assert to_list(merged) == sorted(first + second)


def test_merge_with_empty_side():
    head = from_iterable([2, 4])
    assert merge_sorted(None, head) is head
    assert merge_sorted(head, None) is head
    assert merge_sorted(None, None) is None


def test_merge_ties_take_first_list():
    first = from_iterable([1, 2])
    tie_node = first.next
    second = from_iterable([2, 3])
    merged = merge_sorted(first, second)
    assert merged.next is tie_node
    assert merged.next.next is second


def test_merge_relinks_existing_nodes():
    first = from_iterable([1, 5, 9])
    second = from_iterable([2, 6])
    originals = {id(n) for n in (first, first.next, first.next.next, second, second.next)}
    merged = merge_sorted(first, second)
    nodes = []
    node = merged
    while node is not None:
        nodes.append(node)
        node = node.next
    assert {id(n) for n in nodes} == originals
    assert [n.val for n in nodes] == sorted([1, 5, 9, 2, 6])