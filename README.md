# algokit

Well-known algorithms written as plain Python functions, grouped by topic:

- binary trees: building, traversing, inspecting and transforming them
- binary search trees
- backtracking searches
- singly linked lists
- array utilities
- dynamic programming

The package uses only the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Binary trees

`algokit.tree.Node` is the tree node used throughout the package. It has
`data`, `left` and `right`, plus a `next` link that `populate_next` fills in.
`build_tree` builds a tree from a level-order list, where `None` marks a
missing child; `inorder` and `preorder` return the values in those orders.

```python
from algokit.tree import build_tree, inorder
from algokit.traversals import level_order, zigzag_level_order, top_view
from algokit.properties import diameter, is_balanced

root = build_tree([1, 2, 3, 4, 5, None, 6])
inorder(root)             # [4, 2, 5, 1, 3, 6]
level_order(root)         # [[1], [2, 3], [4, 5, 6]]
zigzag_level_order(root)  # [[1], [3, 2], [4, 5, 6]]
top_view(root)            # [4, 2, 1, 3, 6]
diameter(root)            # 4  (edges on the longest path)
is_balanced(root)         # True
```

`algokit.traversals`
: `inorder_traversal`, `postorder_traversal`, `max_depth` (counted in nodes),
`level_order`, `reverse_level_order`, `zigzag_level_order`, `left_view`,
`right_view`, `top_view`, `vertical_traversal`, `diagonal`,
`boundary_traversal`.

`algokit.properties`
: `diameter`, `is_balanced`, `leaves_at_same_level`, `largest_subtree_sum`
(raises `ValueError` for an empty tree), `sum_of_longest_root_to_leaf_path`,
`path_sum_count`, `has_duplicate_subtree`, `are_anagrams`.

`algokit.construction`
: `tree_from_inorder_preorder`, `tree_from_inorder_postorder`,
`tree_from_string` (the bracket form, such as `"4(2(3)(1))(6(5))"`),
`serialize` and `deserialize`. `serialize` writes the tree in pre-order with
`-1` for each missing child, so trees holding the value `-1` do not survive a
round trip.

`algokit.transform`
: `mirror` returns a mirrored copy; `invert` mirrors in place.
`to_sum_tree`, `to_doubly_linked_list`, `flatten_to_linked_list`, `to_bst`
and `populate_next` all change the given tree in place.

`algokit.ancestry`
: `lowest_common_ancestor` and `distance_between` (raises `ValueError` when a
value is not in the tree).

## Binary search trees

```python
from algokit.bst_build import bst_from_preorder, delete_node
from algokit.bst_query import kth_smallest, is_bst

root = bst_from_preorder([40, 30, 35, 80, 100])
kth_smallest(root, 2)      # 35
is_bst(root)               # True
root = delete_node(root, 30)
```

`algokit.bst_build`: `bst_from_preorder`, `balance_bst` (returns a new tree),
`delete_node`, `flatten_bst` (relinks along `right`), `sorted_list_to_bst`
(reads a `right`-linked sorted list) and `merge_bsts` (returns the sorted
values of both trees).

`algokit.bst_query`: `predecessor_successor` (a pair of nodes, either may be
`None`), `lca_bst`, `has_pair_with_sum`, `is_bst`, `kth_smallest`,
`kth_largest` (both 1-based, raising `ValueError` when out of range),
`largest_bst_size` and `min_swaps_to_bst` (takes a complete tree as a
level-order list).

## Backtracking

```python
from algokit.backtracking import solve_n_queens, rat_in_maze, count_islands

len(solve_n_queens(4))          # 2
rat_in_maze([[1, 0], [1, 1]])   # ['DR']
count_islands([["L", "W"], ["W", "L"]])  # 1  (diagonal cells connect)
```

The module also provides `permutations` and `unique_permutations` (the
latter in lexicographic order).

## Arrays and linked lists

```python
from algokit.arrays import merge_intervals, merge_sort
from algokit.linked_list import from_iterable, to_list, merge_sorted

merge_intervals([[1, 3], [2, 4], [6, 8]])   # [[1, 4], [6, 8]]
merge_sort([38, 27, 43, 3])                 # [3, 27, 38, 43]
to_list(merge_sorted(from_iterable([1, 3]), from_iterable([2])))  # [1, 2, 3]
```

`algokit.arrays` also provides `rotate_left`, `rotate_right`,
`reverse_between` and `factorial`; they return new lists and leave their
input alone.

`algokit.linked_list` has the `ListNode` class (iterable over its values) and
`swap_second_and_last`, which relinks the list in place.

## Dynamic programming

```python
from algokit.combinatorics import catalan
from algokit.subsets import count_coin_change
from algokit.sequences import lcs
from algokit.grid_dp import keypad_count

catalan(5)                         # 42
count_coin_change([1, 2, 3], 4)    # 4
lcs("ABC", "AC")                   # 2
keypad_count(1)                    # 10
```

- `algokit.combinatorics`: `binomial`, `catalan`, `permutation_coefficient`
  (modulo `MOD = 1_000_000_007`).
- `algokit.subsets`: `count_coin_change`, `knapsack`, `can_partition`.
- `algokit.sequences`: `lcs`, `matrix_chain_order`, `min_cut_cost`,
  `word_wrap`.
- `algokit.grid_dp`: `max_gold`, `keypad_count`.

Invalid inputs such as negative sizes raise `ValueError`.

## What it does not do

algokit is a library only: it installs no command-line program, and the
functions work on in-memory values with no input or output of their own.