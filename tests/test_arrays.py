import math
import random

import pytest

from algokit.arrays import (
    factorial,
    merge_intervals,
    merge_sort,
    reverse_between,
    rotate_left,
    rotate_right,
)


def test_merge_intervals_example():
    assert merge_intervals([[6, 8], [1, 3], [2, 4], [9, 10]]) == [[1, 4], [6, 8], [9, 10]]


def test_merge_intervals_touching_and_contained():
    result = merge_intervals([[1, 5], [5, 7], [2, 3]])
    assert result == [[1, 7]]


def test_merge_intervals_result_is_disjoint_and_covers_input():
    rng = random.Random(7)
    intervals = []
    for _ in range(40):
        start = rng.randint(0, 100)
        intervals.append([start, start + rng.randint(0, 10)])
    merged = merge_intervals(intervals)
    assert len(merged) >= 1
    assert all(end < start for (_, end), (start, _) in zip(merged, merged[1:]))
    assert all(
        any(lo <= start and end <= hi for lo, hi in merged)
        for start, end in intervals
    )


def test_merge_intervals_empty():
    assert merge_intervals([]) == []


def test_rotate_left_example():
    assert rotate_left([1, 2, 3, 4, 5], 2) == [3, 4, 5, 1, 2]


@pytest.mark.parametrize("k", [0, 1, 2, 5, 7])
def test_rotations_undo_each_other(k):
    values = [1, 2, 3, 4, 5]
    assert rotate_right(rotate_left(values, k), k) == values
    assert rotate_left(values, k) == rotate_right(values, len(values) - k % len(values))


def test_rotate_full_turn_and_empty():
    values = [1, 2, 3, 4, 5]
    assert rotate_left(values, len(values)) == values
    assert rotate_right([], 3) == []


def test_reverse_between_example():
    assert reverse_between([0, 1, 2, 3, 4, 5, 6, 7], 2, 7) == [0, 1, 2, 6, 5, 4, 3, 7]


def test_reverse_between_twice_is_identity():
    values = list(range(10))
    once = reverse_between(values, 1, 8)
    assert once[:2] == values[:2]
    assert once[8:] == values[8:]
    assert reverse_between(once, 1, 8) == values


def test_reverse_between_too_narrow_is_unchanged():
    values = [4, 5, 6]
    assert reverse_between(values, 0, 2) == values


def test_reverse_between_out_of_range():
    with pytest.raises(IndexError):
        reverse_between([1, 2, 3], 0, 9)


@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_merge_sort_source_example():
    values = [38, 27, 43, 3, 9, 82, 10]
    assert merge_sort(values) == sorted(values)
    assert values == [38, 27, 43, 3, 9, 82, 10]


def test_merge_sort_random():
    rng = random.Random(3)
    values = [rng.randint(-50, 50) for _ in range(200)]
    assert merge_sort(values) == sorted(values)