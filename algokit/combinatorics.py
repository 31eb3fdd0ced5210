"""Binomial coefficients, Catalan numbers and permutation coefficients."""

from __future__ import annotations

import math

MOD = 1_000_000_007


def _check_non_negative(**arguments: int) -> None:
    for name, value in arguments.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def binomial(n: int, r: int) -> int:
    """Return the number of ways to choose ``r`` items from ``n``; 0 when ``r > n``."""
    _check_non_negative(n=n, r=r)
    if r > n:
        return 0
    return math.comb(n, r)


def catalan(n: int) -> int:
    """Return the ``n``-th Catalan number, ``C(2n, n) / (n + 1)``."""
    _check_non_negative(n=n)
    return binomial(2 * n, n) // (n + 1)


def permutation_coefficient(n: int, r: int) -> int:
    """Return ``n! / (n - r)!`` modulo :data:`MOD`; 0 when ``r > n``."""
    _check_non_negative(n=n, r=r)
    if r > n:
        return 0
    result = 1
    for factor in range(n - r + 1, n + 1):
        result = result * (factor % MOD) % MOD
    return result