"""Queries on binary search trees and BST checks on binary trees."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from itertools import islice
from typing import Any, Optional

from algokit.tree import Node, inorder


def predecessor_successor(
    root: Optional[Node], key: Any
) -> tuple[Optional[Node], Optional[Node]]:
    """Return the nodes holding the largest value below and the smallest above ``key``."""
    pred: Optional[Node] = None
    succ: Optional[Node] = None
    node = root
    while node is not None and node.data != key:
        if node.data > key:
            succ = node
            node = node.left
        else:
            pred = node
            node = node.right
    if node is None:
        return pred, succ
    walker = node.left
    while walker is not None:
        pred = walker
        walker = walker.right
    walker = node.right
    while walker is not None:
        succ = walker
        walker = walker.left
    return pred, succ


def lca_bst(root: Optional[Node], n1: Any, n2: Any) -> Optional[Node]:
    """Return the lowest common ancestor of two values in a BST."""
    node = root
    while node is not None:
        if node.data < n1 and node.data < n2:
            node = node.right
        elif node.data > n1 and node.data > n2:
            node = node.left
        else:
            return node
    return None


def has_pair_with_sum(root: Optional[Node], target: Any) -> bool:
    """Tell whether two distinct nodes of the BST add up to ``target``."""
    values = inorder(root)
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total < target:
            low += 1
        elif total > target:
            high -= 1
        else:
            return True
    return False


def is_bst(root: Optional[Node]) -> bool:
    """Tell whether the tree is a BST with strictly increasing in-order values."""
    stack = [(root, -math.inf, math.inf)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if not low < node.data < high:
            return False
        stack.append((node.left, low, node.data))
        stack.append((node.right, node.data, high))
    return True


def _walk(root: Optional[Node], reverse: bool) -> Iterator[Any]:
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.right if reverse else current.left
        current = stack.pop()
        yield current.data
        current = current.left if reverse else current.right


def _kth(root: Optional[Node], k: int, reverse: bool) -> Any:
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    for value in islice(_walk(root, reverse), k - 1, None):
        return value
    raise ValueError(f"the tree holds fewer than {k} values")


def kth_smallest(root: Optional[Node], k: int) -> Any:
    """Return the k-th smallest value of the BST (1-based)."""
    return _kth(root, k, reverse=False)


def kth_largest(root: Optional[Node], k: int) -> Any:
    """Return the k-th largest value of the BST (1-based)."""
    return _kth(root, k, reverse=True)


def _bst_info(node: Optional[Node]) -> tuple[Any, Any, int]:
    if node is None:
        return math.inf, -math.inf, 0
    left_min, left_max, left_size = _bst_info(node.left)
    right_min, right_max, right_size = _bst_info(node.right)
    if left_max < node.data < right_min:
        return (
            min(left_min, node.data),
            max(right_max, node.data),
            1 + left_size + right_size,
        )
    return -math.inf, math.inf, max(left_size, right_size)


def largest_bst_size(root: Optional[Node]) -> int:
    """Return the number of nodes in the largest subtree that is a BST."""
    return _bst_info(root)[2]


def _complete_inorder(values: Sequence[Any], index: int = 0) -> Iterator[Any]:
    if index >= len(values):
        return
    yield from _complete_inorder(values, 2 * index + 1)
    yield values[index]
    yield from _complete_inorder(values, 2 * index + 2)


def min_swaps_to_bst(values: Sequence[Any]) -> int:
    """Return the fewest swaps turning a complete tree, given in level order, into a BST."""
    order = list(_complete_inorder(values))
    origin = sorted(range(len(order)), key=order.__getitem__)
    visited = [False] * len(order)
    swaps = 0
    for start in range(len(order)):
        length = 0
        position = start
        while not visited[position]:
            visited[position] = True
            position = origin[position]
            length += 1
        if length:
            swaps += length - 1
    return swaps