"""Array utilities: interval merging, rotation, reversal, factorial and merge sort."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any


def merge_intervals(intervals: Iterable[Sequence[Any]]) -> list[list[Any]]:
    """Merge overlapping or touching ``[start, end]`` intervals, sorted by start."""
    merged: list[list[Any]] = []
    for start, end in sorted((interval[0], interval[1]) for interval in intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def rotate_left(values: Sequence[Any], k: int) -> list[Any]:
    """Return ``values`` shifted ``k`` places to the left, wrapping around."""
    if not values:
        return []
    shift = k % len(values)
    return list(values[shift:]) + list(values[:shift])


def rotate_right(values: Sequence[Any], k: int) -> list[Any]:
    """Return ``values`` shifted ``k`` places to the right, wrapping around."""
    if not values:
        return []
    return rotate_left(values, -k)


def reverse_between(values: Sequence[Any], a: int, b: int) -> list[Any]:
    """Return a copy with the elements strictly between indices ``a`` and ``b`` reversed."""
    result = list(values)
    if a + 1 < b - 1:
        if a + 1 < 0 or b > len(result):
            raise IndexError(f"range ({a}, {b}) lies outside a list of {len(result)}")
        result[a + 1 : b] = reversed(result[a + 1 : b])
    return result


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError(f"factorial is undefined for {n}")
    return math.prod(range(1, n + 1))


def merge_sort(values: Sequence[Any]) -> list[Any]:
    """Return a sorted copy of ``values`` using merge sort."""
    if len(values) <= 1:
        return list(values)
    mid = len(values) // 2
    left = merge_sort(values[:mid])
    right = merge_sort(values[mid:])
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged