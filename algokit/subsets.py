"""Subset-selection problems: coin change, 0/1 knapsack and equal partition."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def count_coin_change(coins: Iterable[int], total: int) -> int:
    """Count the unordered ways to make ``total`` from unlimited coins of each kind.

    Coins listed twice count as two different kinds.
    """
    if total < 0:
        raise ValueError(f"total must not be negative, got {total}")
    kinds = list(coins)
    if any(coin <= 0 for coin in kinds):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * total
    for coin in kinds:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def knapsack(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Return the largest total value of items whose weights fit in ``capacity``."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def can_partition(nums: Iterable[int]) -> bool:
    """Tell whether ``nums`` splits into two parts of equal, positive sum."""
    items = list(nums)
    if any(num < 0 for num in items):
        raise ValueError("numbers must not be negative")
    total = sum(items)
    if total == 0 or total % 2:
        return False
    half = total // 2
    reachable = 1
    for num in items:
        reachable |= reachable << num
    return bool(reachable >> half & 1)