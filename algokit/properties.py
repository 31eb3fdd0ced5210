"""Measurements and structural checks on binary trees."""

from __future__ import annotations

from collections import Counter, deque
from itertools import accumulate
from typing import Any, Optional

from algokit.traversals import level_order
from algokit.tree import Node


def _diameter_and_height(node: Optional[Node]) -> tuple[int, int]:
    if node is None:
        return 0, -1
    left_diameter, left_height = _diameter_and_height(node.left)
    right_diameter, right_height = _diameter_and_height(node.right)
    through_here = left_height + right_height + 2
    return (
        max(left_diameter, right_diameter, through_here),
        max(left_height, right_height) + 1,
    )


def diameter(root: Optional[Node]) -> int:
    """Return the number of edges on the longest path between two nodes."""
    return _diameter_and_height(root)[0]


def _balance(node: Optional[Node]) -> tuple[bool, int]:
    if node is None:
        return True, 0
    left_ok, left_height = _balance(node.left)
    right_ok, right_height = _balance(node.right)
    height = max(left_height, right_height) + 1
    ok = left_ok and right_ok and abs(left_height - right_height) <= 1
    return ok, height


def is_balanced(root: Optional[Node]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balance(root)[0]


def leaves_at_same_level(root: Optional[Node]) -> bool:
    """Tell whether all leaves lie on the same level."""
    if root is None:
        return True
    leaf_level = None
    queue = deque([(root, 0)])
    while queue:
        node, level = queue.popleft()
        if node.left is None and node.right is None:
            if leaf_level is None:
                leaf_level = level
            elif leaf_level != level:
                return False
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, level + 1))
    return True


def largest_subtree_sum(root: Optional[Node]) -> Any:
    """Return the largest sum of values over all subtrees."""
    if root is None:
        raise ValueError("an empty tree has no subtrees")
    best = None

    def subtree_sum(node: Optional[Node]) -> Any:
        nonlocal best
        if node is None:
            return 0
        total = node.data + subtree_sum(node.left) + subtree_sum(node.right)
        if best is None or total > best:
            best = total
        return total

    subtree_sum(root)
    return best


def _longest_path(node: Optional[Node]) -> tuple[int, Any]:
    if node is None:
        return 0, 0
    length, total = max(_longest_path(node.left), _longest_path(node.right))
    return length + 1, total + node.data


def sum_of_longest_root_to_leaf_path(root: Optional[Node]) -> Any:
    """Return the sum along the longest root-to-leaf path; ties take the larger sum."""
    return _longest_path(root)[1]


def path_sum_count(root: Optional[Node], target: Any) -> int:
    """Count downward paths whose values add up to ``target``."""
    path: list[Any] = []

    def walk(node: Optional[Node]) -> int:
        if node is None:
            return 0
        path.append(node.data)
        found = walk(node.left) + walk(node.right)
        found += sum(1 for total in accumulate(reversed(path)) if total == target)
        path.pop()
        return found

    return walk(root)


def has_duplicate_subtree(root: Optional[Node]) -> bool:
    """Tell whether two identical subtrees of two or more nodes exist."""
    seen: set[str] = set()
    found = False

    def signature(node: Optional[Node]) -> Optional[str]:
        nonlocal found
        if node is None:
            return "N"
        if node.left is None and node.right is None:
            return str(node.data)
        left = signature(node.left)
        right = signature(node.right)
        if left is None or right is None:
            return None
        key = f"{node.data}*{left}*{right}"
        if key in seen:
            found = True
        else:
            seen.add(key)
        return None

    signature(root)
    return found


def are_anagrams(root1: Optional[Node], root2: Optional[Node]) -> bool:
    """Tell whether the trees hold the same values on each shared level."""
    if root1 is None and root2 is None:
        return True
    if root1 is None or root2 is None:
        return False
    return all(
        Counter(first) == Counter(second)
        for first, second in zip(level_order(root1), level_order(root2))
    )