"""Traversal orders and views of a binary tree."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from typing import Any, Optional

from algokit.tree import Node, inorder


def _levels(root: Optional[Node]) -> Iterator[list[Node]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def inorder_traversal(root: Optional[Node]) -> list[Any]:
    """Return the values in in-order."""
    return inorder(root)


def postorder_traversal(root: Optional[Node]) -> list[Any]:
    """Return the values in post-order."""
    if root is None:
        return []
    stack = [root]
    reversed_order = []
    while stack:
        node = stack.pop()
        reversed_order.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    reversed_order.reverse()
    return reversed_order


def max_depth(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def level_order(root: Optional[Node]) -> list[list[Any]]:
    """Return the values level by level, each level left to right."""
    return [[node.data for node in level] for level in _levels(root)]


def reverse_level_order(root: Optional[Node]) -> list[Any]:
    """Return the values from the bottom level up, each level left to right."""
    return [value for level in reversed(level_order(root)) for value in level]


def zigzag_level_order(root: Optional[Node]) -> list[list[Any]]:
    """Return the levels, alternating left-to-right and right-to-left."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(level_order(root))
    ]


def left_view(root: Optional[Node]) -> list[Any]:
    """Return the first value seen on each level from the left."""
    return [level[0].data for level in _levels(root)]


def right_view(root: Optional[Node]) -> list[Any]:
    """Return the first value seen on each level from the right."""
    return [level[-1].data for level in _levels(root)]


def top_view(root: Optional[Node]) -> list[Any]:
    """Return the values visible from above, ordered by horizontal distance."""
    if root is None:
        return []
    seen: dict[int, Any] = {}
    queue = deque([(root, 0)])
    while queue:
        node, distance = queue.popleft()
        seen.setdefault(distance, node.data)
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))
    return [seen[distance] for distance in sorted(seen)]


def vertical_traversal(root: Optional[Node]) -> list[list[Any]]:
    """Return the columns left to right; within a column, by level, then by value."""
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[Any]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue = deque([(root, 0, 0)])
    while queue:
        node, column, depth = queue.popleft()
        columns[column][depth].append(node.data)
        if node.left is not None:
            queue.append((node.left, column - 1, depth + 1))
        if node.right is not None:
            queue.append((node.right, column + 1, depth + 1))
    return [
        [
            value
            for depth in sorted(columns[column])
            for value in sorted(columns[column][depth])
        ]
        for column in sorted(columns)
    ]


def diagonal(root: Optional[Node]) -> list[Any]:
    """Return the values diagonal by diagonal, following right links first."""
    result = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        while node is not None:
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            node = node.right
    return result


def _is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None


def _left_edge(node: Optional[Node]) -> Iterator[Any]:
    while node is not None and not _is_leaf(node):
        yield node.data
        node = node.left if node.left is not None else node.right


def _leaves(node: Optional[Node]) -> Iterator[Any]:
    if node is None:
        return
    if _is_leaf(node):
        yield node.data
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def _right_edge(node: Optional[Node]) -> Iterator[Any]:
    while node is not None and not _is_leaf(node):
        yield node.data
        node = node.right if node.right is not None else node.left


def boundary_traversal(root: Optional[Node]) -> list[Any]:
    """Return the boundary anticlockwise: root, left edge, leaves, right edge upward."""
    if root is None:
        return []
    result = [root.data]
    result.extend(_left_edge(root.left))
    result.extend(_leaves(root.left))
    result.extend(_leaves(root.right))
    result.extend(reversed(list(_right_edge(root.right))))
    return result