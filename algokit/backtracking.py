"""Backtracking searches: islands, N-queens, permutations and maze paths."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from typing import Any

LAND = "L"
_NEIGHBOURS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)
_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of ``'L'`` cells connected in any of the eight directions."""
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == LAND
    }
    islands = 0
    while land:
        start = land.pop()
        islands += 1
        queue = deque([start])
        while queue:
            r, c = queue.popleft()
            for dr, dc in _NEIGHBOURS:
                cell = (r + dr, c + dc)
                if cell in land:
                    land.remove(cell)
                    queue.append(cell)
    return islands


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens as rows of ``'Q'`` and ``'.'``."""
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    board = [["."] * n for _ in range(n)]
    used_rows: set[int] = set()
    used_sums: set[int] = set()
    used_diffs: set[int] = set()
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in used_rows or row + col in used_sums or col - row in used_diffs:
                continue
            board[row][col] = "Q"
            used_rows.add(row)
            used_sums.add(row + col)
            used_diffs.add(col - row)
            place(col + 1)
            board[row][col] = "."
            used_rows.remove(row)
            used_sums.remove(row + col)
            used_diffs.remove(col - row)

    place(0)
    return solutions


def permutations(nums: Iterable[Any]) -> list[list[Any]]:
    """Return all orderings of ``nums``, generated by swapping each element into place."""
    items = list(nums)
    result: list[list[Any]] = []

    def solve(i: int) -> None:
        if i >= len(items):
            result.append(items.copy())
            return
        for j in range(i, len(items)):
            items[i], items[j] = items[j], items[i]
            solve(i + 1)
            items[i], items[j] = items[j], items[i]

    solve(0)
    return result


def unique_permutations(nums: Iterable[Any]) -> list[list[Any]]:
    """Return the distinct orderings of ``nums`` in lexicographic order."""
    counts = Counter(nums)
    keys = sorted(counts)
    total = sum(counts.values())
    current: list[Any] = []
    result: list[list[Any]] = []

    def build() -> None:
        if len(current) == total:
            result.append(current.copy())
            return
        for key in keys:
            if counts[key]:
                counts[key] -= 1
                current.append(key)
                build()
                current.pop()
                counts[key] += 1

    build()
    return result


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of moves D, L, R, U from the top-left to the bottom-right cell.

    Open cells hold 1; no path visits a cell twice.
    """
    n = len(maze)
    if n == 0 or maze[0][0] == 0:
        return []
    paths: list[str] = []
    visited: set[tuple[int, int]] = set()
    steps: list[str] = []

    def open_cell(x: int, y: int) -> bool:
        return 0 <= x < n and 0 <= y < n and (x, y) not in visited and maze[x][y] == 1

    def solve(x: int, y: int) -> None:
        if x == n - 1 and y == n - 1:
            paths.append("".join(steps))
            return
        visited.add((x, y))
        for letter, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if open_cell(nx, ny):
                steps.append(letter)
                solve(nx, ny)
                steps.pop()
        visited.remove((x, y))

    solve(0, 0)
    return paths