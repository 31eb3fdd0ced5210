"""Binary tree node and helpers for building and walking trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node; ``next`` can link a node to its in-order successor."""

    data: Any
    left: Optional[Node] = None
    right: Optional[Node] = None
    next: Optional[Node] = field(default=None, repr=False)


def build_tree(values: Iterable[Any]) -> Optional[Node]:
    """Build a tree from level-order values, where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = Node(first)
    pending = deque([root])
    while pending:
        parent = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = Node(value)
                setattr(parent, side, child)
                pending.append(child)
    return root


def _walk_inorder(root: Optional[Node]) -> Iterator[Node]:
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def _walk_preorder(root: Optional[Node]) -> Iterator[Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(root: Optional[Node]) -> list[Any]:
    """Return the node values in in-order."""
    return [node.data for node in _walk_inorder(root)]


def preorder(root: Optional[Node]) -> list[Any]:
    """Return the node values in pre-order."""
    return [node.data for node in _walk_preorder(root)]