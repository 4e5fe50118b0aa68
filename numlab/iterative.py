"""Simple iteration (Jacobi) and Seidel methods for linear systems."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_MAX_ITERATIONS = 10000
ZERO_TOLERANCE = 1e-10


@dataclass(frozen=True)
class IterationResult:
    """Outcome of an iterative solve."""

    solution: list[float]
    iterations: int
    precision: float
    converged: bool


def matrix_norm(matrix: Sequence[Sequence[float]]) -> float:
    """Row-sum (infinity) norm of a matrix."""
    return max((sum(abs(v) for v in row) for row in matrix), default=0.0)


def difference_norm(x_new: Sequence[float], x_old: Sequence[float]) -> float:
    """Sum of absolute differences between two vectors."""
    return sum(abs(a - b) for a, b in zip(x_new, x_old))


def has_diagonal_dominance(matrix: Sequence[Sequence[float]]) -> bool:
    """True when every diagonal element strictly exceeds the rest of its row."""
    return all(
        abs(row[i]) > sum(abs(v) for j, v in enumerate(row) if j != i)
        for i, row in enumerate(matrix)
    )


def _reduce(matrix, rhs):
    n = len(matrix)
    if n == 0:
        raise ValueError("System size cannot be zero")
    if len(rhs) != n or any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square and match the right-hand side")
    if any(abs(row[i]) < ZERO_TOLERANCE for i, row in enumerate(matrix)):
        raise ValueError("Diagonal element is zero")
    if not has_diagonal_dominance(matrix):
        raise ValueError("No diagonal dominance")

    alpha = [
        [0.0 if i == j else -v / row[i] for j, v in enumerate(row)]
        for i, row in enumerate(matrix)
    ]
    beta = [b / row[i] for i, (row, b) in enumerate(zip(matrix, rhs))]
    return alpha, beta


def _iterate(matrix, rhs, eps, max_iterations, use_fresh_values):
    if max_iterations < 1:
        raise ValueError("max_iterations must be positive")
    alpha, beta = _reduce(matrix, rhs)
    norm_alpha = matrix_norm(alpha)
    coefficient = norm_alpha / (1.0 - norm_alpha)

    x_old = list(beta)
    x_new = x_old
    precision = float("inf")
    for iteration in range(1, max_iterations + 1):
        x_new = []
        for i, (row, b) in enumerate(zip(alpha, beta)):
            neighbours = x_new + x_old[i:] if use_fresh_values else x_old
            x_new.append(b + sum(a * x for a, x in zip(row, neighbours)))
        precision = difference_norm(x_new, x_old) * coefficient
        if precision < eps:
            return IterationResult(x_new, iteration, precision, True)
        x_old = x_new
    return IterationResult(x_new, max_iterations, precision, False)


def jacobi(
    matrix: Sequence[Sequence[float]],
    rhs: Sequence[float],
    eps: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> IterationResult:
    """Solve ``A x = rhs`` by simple iteration."""
    return _iterate(matrix, rhs, eps, max_iterations, use_fresh_values=False)


def seidel(
    matrix: Sequence[Sequence[float]],
    rhs: Sequence[float],
    eps: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> IterationResult:
    """Solve ``A x = rhs`` by the Seidel method, using updated components at once."""
    return _iterate(matrix, rhs, eps, max_iterations, use_fresh_values=True)