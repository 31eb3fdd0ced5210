"""Building, rebalancing and reshaping binary search trees."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterator, Sequence
from typing import Any, Optional

from algokit.tree import Node, inorder


def _inorder_nodes(root: Optional[Node]) -> Iterator[Node]:
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def bst_from_preorder(preorder: Sequence[Any]) -> Optional[Node]:
    """Build the BST whose pre-order traversal is ``preorder``."""
    position = 0

    def build(low: Any, high: Any) -> Optional[Node]:
        nonlocal position
        if position >= len(preorder):
            return None
        value = preorder[position]
        if value < low or value > high:
            return None
        position += 1
        node = Node(value)
        node.left = build(low, value)
        node.right = build(value, high)
        return node

    return build(-math.inf, math.inf)


def _balanced_from_sorted(values: Sequence[Any]) -> Optional[Node]:
    if not values:
        return None
    mid = (len(values) - 1) // 2
    return Node(
        values[mid],
        left=_balanced_from_sorted(values[:mid]),
        right=_balanced_from_sorted(values[mid + 1 :]),
    )


def balance_bst(root: Optional[Node]) -> Optional[Node]:
    """Return a new height-balanced BST holding the same values as ``root``."""
    return _balanced_from_sorted(inorder(root))


def _min_value(node: Node) -> Any:
    while node.left is not None:
        node = node.left
    return node.data


def delete_node(root: Optional[Node], key: Any) -> Optional[Node]:
    """Remove ``key`` from the BST and return the new root."""
    if root is None:
        return None
    if root.data < key:
        root.right = delete_node(root.right, key)
        return root
    if root.data > key:
        root.left = delete_node(root.left, key)
        return root
    if root.left is not None and root.right is not None:
        smallest = _min_value(root.right)
        root.data = smallest
        root.right = delete_node(root.right, smallest)
        return root
    return root.left if root.left is not None else root.right


def flatten_bst(root: Optional[Node]) -> Optional[Node]:
    """Relink the BST in place into a sorted list along ``right``; return its head."""
    nodes = list(_inorder_nodes(root))
    if not nodes:
        return None
    for node, following in zip(nodes, nodes[1:] + [None]):
        node.left = None
        node.right = following
    return nodes[0]


def sorted_list_to_bst(head: Optional[Node], count: int) -> Optional[Node]:
    """Build a balanced BST from the first ``count`` nodes of a ``right``-linked sorted list."""
    current = head

    def build(size: int) -> Optional[Node]:
        nonlocal current
        if size <= 0 or current is None:
            return None
        left = build(size // 2)
        if current is None:
            raise ValueError("the list holds fewer nodes than requested")
        node = Node(current.data, left=left)
        current = current.right
        node.right = build(size - size // 2 - 1)
        return node

    return build(count)


def merge_bsts(root1: Optional[Node], root2: Optional[Node]) -> list[Any]:
    """Return the values of both BSTs in one sorted list."""
    return list(heapq.merge(inorder(root1), inorder(root2)))