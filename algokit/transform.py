"""In-place and copying transformations of binary trees."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import pairwise
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


def mirror(root: Optional[Node]) -> Optional[Node]:
    """Return a new tree that mirrors ``root``; the original is left untouched."""
    if root is None:
        return None
    return Node(root.data, left=mirror(root.right), right=mirror(root.left))


def invert(root: Optional[Node]) -> Optional[Node]:
    """Swap every node's children in place and return the root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return root


def to_sum_tree(root: Optional[Node]) -> None:
    """Replace each value with the sum of the original values below it."""

    def convert(node: Optional[Node]) -> Any:
        if node is None:
            return 0
        old = node.data
        node.data = convert(node.left) + convert(node.right)
        return node.data + old

    convert(root)


def to_doubly_linked_list(root: Optional[Node]) -> Optional[Node]:
    """Relink the nodes in in-order as a doubly linked list and return its head."""
    nodes = list(_inorder_nodes(root))
    if not nodes:
        return None
    for prev, curr in pairwise(nodes):
        prev.right = curr
        curr.left = prev
    nodes[0].left = None
    nodes[-1].right = None
    return nodes[0]


def flatten_to_linked_list(root: Optional[Node]) -> None:
    """Flatten the tree in place into a right-linked list in pre-order."""
    current = root
    while current is not None:
        if current.left is not None:
            pred = current.left
            while pred.right is not None:
                pred = pred.right
            pred.right = current.right
            current.right = current.left
            current.left = None
        current = current.right


def to_bst(root: Optional[Node]) -> Optional[Node]:
    """Rearrange the values so the tree, keeping its shape, becomes a BST."""
    for node, value in zip(_inorder_nodes(root), sorted(inorder(root))):
        node.data = value
    return root


def populate_next(root: Optional[Node]) -> None:
    """Point each node's ``next`` at its in-order successor."""
    for node, successor in pairwise(_inorder_nodes(root)):
        node.next = successor