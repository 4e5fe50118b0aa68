"""LU decomposition with partial pivoting, and what it gives: determinant, solutions, inverse."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

PIVOT_TOLERANCE = 1e-10

Matrix = list[list[float]]


class SingularMatrixError(ValueError):
    """Raised when a matrix is singular and cannot be decomposed or inverted."""


@dataclass(frozen=True)
class LUDecomposition:
    """Factors of ``P A = L U``; ``permutation[k]`` is the original row now at position ``k``."""

    lower: Matrix
    upper: Matrix
    permutation: tuple[int, ...]
    swaps: int

    @property
    def size(self) -> int:
        return len(self.upper)

    def determinant(self) -> float:
        """Determinant of the original matrix."""
        det = math.prod(row[k] for k, row in enumerate(self.upper))
        return -det if self.swaps % 2 else det

    def solve(self, rhs: Sequence[float]) -> list[float]:
        """Solve ``A x = rhs`` by forward and back substitution."""
        n = self.size
        if len(rhs) != n:
            raise ValueError(f"right-hand side must have {n} elements, got {len(rhs)}")
        permuted = [float(rhs[p]) for p in self.permutation]

        z: list[float] = []
        for row, value in zip(self.lower, permuted):
            z.append(value - sum(l_ik * z_k for l_ik, z_k in zip(row, z)))

        x = [0.0] * n
        for i in reversed(range(n)):
            row = self.upper[i]
            tail = sum(row[k] * x[k] for k in range(i + 1, n))
            x[i] = (z[i] - tail) / row[i]
        return x

    def inverse(self) -> Matrix:
        """Inverse of the original matrix, row-major."""
        n = self.size
        columns = [
            self.solve([1.0 if row == col else 0.0 for row in range(n)])
            for col in range(n)
        ]
        return [list(row) for row in zip(*columns)]


def lu_decompose(matrix: Sequence[Sequence[float]]) -> LUDecomposition:
    """Decompose a square matrix with row pivoting on the largest column element."""
    n = len(matrix)
    if n == 0:
        raise ValueError("System size cannot be zero")
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")

    upper = [[float(v) for v in row] for row in matrix]
    lower = [[0.0] * n for _ in range(n)]
    permutation = list(range(n))
    swaps = 0
    det = 1.0

    for k in range(n):
        lower[k][k] = 1.0
        lead = max(range(k, n), key=lambda i: abs(upper[i][k]))
        if abs(upper[lead][k]) < PIVOT_TOLERANCE:
            raise SingularMatrixError("Zero pivot: matrix is singular")
        if lead != k:
            swaps += 1
            upper[k], upper[lead] = upper[lead], upper[k]
            permutation[k], permutation[lead] = permutation[lead], permutation[k]
            lower[k][:k], lower[lead][:k] = lower[lead][:k], lower[k][:k]

        pivot = upper[k][k]
        pivot_tail = upper[k][k + 1:]
        for i in range(k + 1, n):
            factor = upper[i][k] / pivot
            lower[i][k] = factor
            upper[i][k + 1:] = [a - factor * b for a, b in zip(upper[i][k + 1:], pivot_tail)]
            upper[i][k] = 0.0
        det *= pivot

    if abs(det) < PIVOT_TOLERANCE:
        raise SingularMatrixError("Singular matrix")

    return LUDecomposition(lower=lower, upper=upper, permutation=tuple(permutation), swaps=swaps)