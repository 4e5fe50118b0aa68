"""Householder QR decomposition and the QR algorithm for eigenvalues."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_MAX_ITERATIONS = 1000

Matrix = list[list[float]]


class ConvergenceError(RuntimeError):
    """Raised when the QR algorithm does not converge within the iteration limit."""


@dataclass(frozen=True)
class EigenResult:
    """Eigenvalues found by the QR algorithm, with the final iterate."""

    values: list[complex]
    iterations: int
    matrix: Matrix


def matmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Matrix product ``a @ b``."""
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def _identity(n: int) -> Matrix:
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def _check_square(matrix) -> int:
    n = len(matrix)
    if n == 0:
        raise ValueError("matrix cannot be empty")
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return n


def qr_householder(matrix: Sequence[Sequence[float]]) -> tuple[Matrix, Matrix]:
    """Return ``(Q, R)`` with Q orthogonal and R upper triangular, ``Q @ R == matrix``."""
    n = _check_square(matrix)
    r = [[float(v) for v in row] for row in matrix]
    q = _identity(n)
    for i in range(n - 1):
        column = [row[i] for row in r]
        diag = column[i]
        norm = math.sqrt(sum(v * v for v in column[i:]))
        v = [0.0] * i + [diag + math.copysign(norm, diag)] + column[i + 1:]
        vv = sum(x * x for x in v)
        if vv == 0.0:
            continue
        h = [
            [(1.0 if j == k else 0.0) - 2.0 * vj * vk / vv for k, vk in enumerate(v)]
            for j, vj in enumerate(v)
        ]
        r = matmul(h, r)
        q = matmul(q, h)
    return q, r


def block_2x2(a: float, b: float, c: float, d: float) -> tuple[float, float]:
    """Real part and positive imaginary part of the eigenvalues of ``[[a, b], [c, d]]``.

    The imaginary part is NaN when the block has real eigenvalues.
    """
    trace = a + d
    det = a * d - b * c
    discriminant = trace * trace - 4 * det
    imag = math.sqrt(-discriminant) / 2 if discriminant <= 0 else math.nan
    return trace / 2, imag


def _converged_values(a: Matrix, prev: Matrix, eps: float) -> list[complex] | None:
    n = len(a)
    values: list[complex] = [0j] * n
    i = 0
    while i < n - 1:
        below = math.sqrt(sum(a[j][i] ** 2 for j in range(i + 1, n)))
        if below > eps:
            re, im = block_2x2(a[i][i], a[i][i + 1], a[i + 1][i], a[i + 1][i + 1])
            re_prev, im_prev = block_2x2(
                prev[i][i], prev[i][i + 1], prev[i + 1][i], prev[i + 1][i + 1]
            )
            if math.isnan(im) or math.isnan(im_prev):
                return None
            if abs(re - re_prev) > eps or abs(im - im_prev) > eps:
                return None
            values[i] = complex(re, im)
            values[i + 1] = complex(re, -im)
            i += 2
        else:
            values[i] = complex(a[i][i], 0.0)
            i += 1
    if i == n - 1:
        if abs(a[i][i] - prev[i][i]) > eps:
            return None
        values[i] = complex(a[i][i], 0.0)
    return values


def qr_eigenvalues(
    matrix: Sequence[Sequence[float]],
    eps: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> EigenResult:
    """Find all eigenvalues, complex pairs included, by repeated QR steps."""
    _check_square(matrix)
    a = [[float(v) for v in row] for row in matrix]
    for iteration in range(1, max_iterations + 1):
        prev = a
        q, r = qr_householder(a)
        a = matmul(r, q)
        values = _converged_values(a, prev, eps)
        if values is not None:
            return EigenResult(values=values, iterations=iteration, matrix=a)
    raise ConvergenceError("Iterations limit exceed. Convergence not reached")