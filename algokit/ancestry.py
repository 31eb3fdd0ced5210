"""Ancestor queries on binary trees."""

from __future__ import annotations

from typing import Any, Optional

from algokit.tree import Node


def lowest_common_ancestor(root: Optional[Node], n1: Any, n2: Any) -> Optional[Node]:
    """Return the lowest node that has both values below it (or is one of them)."""
    if root is None:
        return None
    if root.data == n1 or root.data == n2:
        return root
    left = lowest_common_ancestor(root.left, n1, n2)
    right = lowest_common_ancestor(root.right, n1, n2)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _depth(root: Node, value: Any) -> Optional[int]:
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.data == value:
            return depth
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, depth + 1))
    return None


def distance_between(root: Optional[Node], a: Any, b: Any) -> int:
    """Return the number of edges on the path between the nodes holding ``a`` and ``b``."""
    ancestor = lowest_common_ancestor(root, a, b)
    if ancestor is None:
        raise ValueError(f"neither {a!r} nor {b!r} is in the tree")
    first = _depth(ancestor, a)
    second = _depth(ancestor, b)
    if first is None or second is None:
        missing = a if first is None else b
        raise ValueError(f"{missing!r} is not in the tree")
    return first + second