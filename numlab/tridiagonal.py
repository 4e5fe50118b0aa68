"""Thomas algorithm for tridiagonal systems."""

from __future__ import annotations

from collections.abc import Sequence


def solve_tridiagonal(
    lower: Sequence[float],
    diag: Sequence[float],
    upper: Sequence[float],
    rhs: Sequence[float],
) -> list[float]:
    """Solve a tridiagonal system.

    ``lower`` holds the n-1 entries below the diagonal, ``upper`` the n-1 above it.
    Every row must be diagonally dominant.
    """
    n = len(diag)
    if n == 0:
        raise ValueError("System size cannot be zero")
    if len(rhs) != n or len(lower) != n - 1 or len(upper) != n - 1:
        raise ValueError("inconsistent sizes of diagonals and right-hand side")

    below = [0.0, *map(float, lower)]
    above = [*map(float, upper), 0.0]

    p_coeffs: list[float] = []
    q_coeffs: list[float] = []
    p_prev = q_prev = 0.0
    for a, b, c, d in zip(below, diag, above, rhs):
        if abs(b) < abs(a) + abs(c):
            raise ValueError("No diagonal dominance")
        denominator = b + a * p_prev
        p_prev, q_prev = -c / denominator, (d - a * q_prev) / denominator
        p_coeffs.append(p_prev)
        q_coeffs.append(q_prev)

    x = q_coeffs[-1]
    solution = [x]
    for p, q in zip(reversed(p_coeffs[:-1]), reversed(q_coeffs[:-1])):
        x = p * x + q
        solution.append(x)
    solution.reverse()
    return solution