"""Grid dynamic programming: the gold mine walk and phone keypad sequences."""

from __future__ import annotations

from collections.abc import Sequence

_KEYPAD_ROWS = 4
_KEYPAD_COLS = 3
_KEYS = frozenset(
    (row, col)
    for row in range(_KEYPAD_ROWS)
    for col in range(_KEYPAD_COLS)
    if (row, col) not in {(3, 0), (3, 2)}
)
_PRESS_MOVES = ((0, 0), (0, -1), (0, 1), (-1, 0), (1, 0))


def max_gold(mat: Sequence[Sequence[int]]) -> int:
    """Return the most gold collected crossing the mine from its left to its right column.

    The walk may start in any row of the first column and from each cell moves
    right, up-right or down-right.
    """
    if not mat or not mat[0]:
        raise ValueError("the mine must have at least one row and one column")
    width = len(mat[0])
    if any(len(row) != width for row in mat):
        raise ValueError("every row of the mine must have the same length")
    height = len(mat)
    best = [row[-1] for row in mat]
    for col in range(width - 2, -1, -1):
        best = [
            mat[row][col]
            + max(best[r] for r in (row - 1, row, row + 1) if 0 <= r < height)
            for row in range(height)
        ]
    return max(best)


def keypad_count(n: int) -> int:
    """Count the digit sequences of length ``n`` typed on a phone keypad.

    After each digit the next is the same key or one directly above, below,
    left or right of it; ``*`` and ``#`` may not be pressed.
    """
    if n < 1:
        raise ValueError(f"sequence length must be at least 1, got {n}")
    counts = dict.fromkeys(_KEYS, 1)
    for _ in range(n - 1):
        counts = {
            (row, col): sum(
                counts[(row + dr, col + dc)]
                for dr, dc in _PRESS_MOVES
                if (row + dr, col + dc) in counts
            )
            for row, col in _KEYS
        }
    return sum(counts.values())