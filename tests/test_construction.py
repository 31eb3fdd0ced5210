import pytest

from algokit.construction import (
    deserialize,
    serialize,
    tree_from_inorder_postorder,
    tree_from_inorder_preorder,
    tree_from_string,
)
from algokit.traversals import postorder_traversal
from algokit.tree import Node, build_tree, inorder, preorder

SHAPES = [
    [1],
    [1, 2, 3, 4, 5, 6, 7],
    [10, 20, None, 30, None, 40],
    [5, None, 8, None, 9, 11, 12],
    [7, 3, 9, None, 4, 8, None, 2],
]


@pytest.mark.parametrize("values", SHAPES)
def test_inorder_preorder_round_trip(values):
    tree = build_tree(values)
    rebuilt = tree_from_inorder_preorder(inorder(tree), preorder(tree))
    assert serialize(rebuilt) == serialize(tree)


@pytest.mark.parametrize("values", SHAPES)
def test_inorder_postorder_round_trip(values):
    tree = build_tree(values)
    rebuilt = tree_from_inorder_postorder(inorder(tree), postorder_traversal(tree))
    assert serialize(rebuilt) == serialize(tree)


def test_empty_traversals_give_no_tree():
    assert tree_from_inorder_preorder([], []) is None
    assert tree_from_inorder_postorder([], []) is None


def test_unknown_value_is_rejected():
    with pytest.raises(ValueError):
        tree_from_inorder_preorder([1, 2], [3, 1])


def test_tree_from_string_worked_example():
    tree = tree_from_string("4(2(3)(1))(6(5))")
    assert serialize(tree) == serialize(build_tree([4, 2, 6, 3, 1, 5]))


def test_tree_from_string_empty_left_child():
    tree = tree_from_string("1()(3)")
    assert serialize(tree) == serialize(build_tree([1, None, 3]))


def test_tree_from_string_multi_digit_values():
    tree = tree_from_string("12(345)")
    assert tree.data == 12
    assert tree.left.data == 345
    assert tree.right is None


def test_tree_from_string_empty_text():
    assert tree_from_string("") is None


def test_serialize_marks_missing_children():
    assert serialize(None) == [-1]
    assert serialize(Node(5)) == [5, -1, -1]


@pytest.mark.parametrize("values", SHAPES)
def test_serialize_round_trip(values):
    tree = build_tree(values)
    data = serialize(tree)
    rebuilt = deserialize(data)
    assert serialize(rebuilt) == data
    assert inorder(rebuilt) == inorder(tree)


def test_serialize_length_is_twice_nodes_plus_one():
    tree = build_tree([1, 2, 3, 4, 5, 6, 7])
    assert len(serialize(tree)) == 2 * len(inorder(tree)) + 1


def test_deserialize_truncated_input():
    with pytest.raises(ValueError):
        deserialize([1, -1])