"""Dynamic programming over sequences: LCS, matrix chains, stick cuts and word wrap."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def lcs(s1: Sequence, s2: Sequence) -> int:
    """Return the length of the longest common subsequence of ``s1`` and ``s2``."""
    previous = [0] * (len(s2) + 1)
    for a in s1:
        current = [0]
        for j, b in enumerate(s2, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications needed to multiply the chain.

    Matrix ``i`` has shape ``dims[i - 1] x dims[i]``.
    """
    n = len(dims)
    if n < 2:
        raise ValueError("at least two dimensions are needed to describe a matrix")
    cost = [[0] * n for _ in range(n)]
    for i in range(n - 1, 0, -1):
        for j in range(i + 1, n):
            cost[i][j] = min(
                dims[i - 1] * dims[k] * dims[j] + cost[i][k] + cost[k + 1][j]
                for k in range(i, j)
            )
    return cost[1][n - 1]


def min_cut_cost(n: int, cuts: Iterable[int]) -> int:
    """Return the least total cost of cutting a stick of length ``n`` at ``cuts``.

    Each cut costs the length of the piece being cut.
    """
    positions = sorted(cuts)
    count = len(positions)
    if count == 0:
        return 0
    points = [0, *positions, n]
    cost = [[0] * (count + 2) for _ in range(count + 2)]
    for i in range(count, 0, -1):
        for j in range(i, count + 1):
            cost[i][j] = points[j + 1] - points[i - 1] + min(
                cost[i][m - 1] + cost[m + 1][j] for m in range(i, j + 1)
            )
    return cost[1][count]


def word_wrap(lengths: Sequence[int], k: int) -> int:
    """Return the least sum of squared trailing spaces when wrapping words to width ``k``.

    Words on a line are separated by one space; the last line costs nothing.
    """
    too_long = [length for length in lengths if length > k]
    if too_long:
        raise ValueError(f"a word of length {too_long[0]} does not fit in width {k}")
    n = len(lengths)
    best = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        line = -1
        options = []
        for j in range(i, n):
            line += lengths[j] + 1
            if line > k:
                break
            spare = 0 if j == n - 1 else (k - line) ** 2
            options.append(spare + best[j + 1])
        best[i] = min(options)
    return best[0]