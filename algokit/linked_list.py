"""Singly linked list nodes and a few list manipulations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node."""

    val: Any
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[Any]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_iterable(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list from ``values`` and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[ListNode]) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def swap_second_and_last(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap the second and last nodes in place; lists shorter than three are unchanged."""
    if head is None or head.next is None or head.next.next is None:
        return head
    second = head.next
    before_last = head
    while before_last.next.next is not None:
        before_last = before_last.next
    last = before_last.next
    head.next = last
    if before_last is second:
        last.next = second
    else:
        last.next = second.next
        before_last.next = second
    second.next = None
    return head


def merge_sorted(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes; ties take from ``first``."""
    anchor = ListNode(None)
    tail = anchor
    while first is not None and second is not None:
        if first.val <= second.val:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next