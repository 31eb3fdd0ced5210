"""Building binary trees from traversals, bracket strings and serialized lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

from algokit.tree import Node

NULL_MARKER = -1
_DIGITS = "0123456789"


def _positions(inorder: Sequence[Any]) -> dict[Any, int]:
    return {value: index for index, value in enumerate(inorder)}


def _position_of(positions: dict[Any, int], value: Any) -> int:
    try:
        return positions[value]
    except KeyError:
        raise ValueError(f"value {value!r} does not appear in the in-order sequence") from None


def tree_from_inorder_preorder(
    inorder: Sequence[Any], preorder: Iterable[Any]
) -> Optional[Node]:
    """Rebuild a tree from its in-order and pre-order value sequences."""
    positions = _positions(inorder)
    values: Iterator[Any] = iter(preorder)
    exhausted = object()

    def build(low: int, high: int) -> Optional[Node]:
        if low > high:
            return None
        value = next(values, exhausted)
        if value is exhausted:
            return None
        node = Node(value)
        pos = _position_of(positions, value)
        node.left = build(low, pos - 1)
        node.right = build(pos + 1, high)
        return node

    return build(0, len(inorder) - 1)


def tree_from_inorder_postorder(
    inorder: Sequence[Any], postorder: Sequence[Any]
) -> Optional[Node]:
    """Rebuild a tree from its in-order and post-order value sequences."""
    positions = _positions(inorder)
    values: Iterator[Any] = reversed(postorder)
    exhausted = object()

    def build(low: int, high: int) -> Optional[Node]:
        if low > high:
            return None
        value = next(values, exhausted)
        if value is exhausted:
            return None
        node = Node(value)
        pos = _position_of(positions, value)
        node.right = build(pos + 1, high)
        node.left = build(low, pos - 1)
        return node

    return build(0, len(inorder) - 1)


def tree_from_string(text: str) -> Optional[Node]:
    """Parse a bracket representation such as ``4(2(3)(1))(6(5))``."""
    if not text:
        return None
    pos = 0

    def parse() -> Optional[Node]:
        nonlocal pos
        if pos < len(text) and text[pos] == ")":
            return None
        start = pos
        while pos < len(text) and text[pos] in _DIGITS:
            pos += 1
        node = Node(int(text[start:pos]) if pos > start else 0)
        for side in ("left", "right"):
            if pos < len(text) and text[pos] == "(":
                pos += 1
                setattr(node, side, parse())
                pos += 1
        return node

    return parse()


def serialize(root: Optional[Node]) -> list[Any]:
    """Write the tree in pre-order, with ``-1`` standing for each missing child."""
    result: list[Any] = []
    stack: list[Optional[Node]] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            result.append(NULL_MARKER)
            continue
        result.append(node.data)
        stack.append(node.right)
        stack.append(node.left)
    return result


def deserialize(values: Iterable[Any]) -> Optional[Node]:
    """Rebuild a tree from the list that :func:`serialize` produces."""
    items = iter(values)

    def build() -> Optional[Node]:
        try:
            value = next(items)
        except StopIteration:
            raise ValueError("serialized tree ends too early") from None
        if value == NULL_MARKER:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()