"""Least-squares approximation by polynomials of degree one and two."""

from __future__ import annotations

from collections.abc import Sequence

from numlab.interpolation import horner
from numlab.lu import SingularMatrixError

SINGULAR_TOLERANCE = 1e-12


def _check_data(xs: Sequence[float], ys: Sequence[float]) -> None:
    if len(xs) != len(ys):
        raise ValueError("Different size of vectors")
    if not xs:
        raise ValueError("at least one data point is required")


def _det3(m: Sequence[Sequence[float]]) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def linear_least_squares(xs: Sequence[float], ys: Sequence[float]) -> tuple[float, float]:
    """Coefficients ``(a0, a1)`` of the line ``a0 + a1 x`` fitted by least squares."""
    _check_data(xs, ys)
    n = len(xs)
    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_x2 = sum(x * x for x in xs)
    sum_xy = sum(x * y for x, y in zip(xs, ys))

    numerator = sum_xy - sum_x * sum_y / n
    denominator = sum_x2 - sum_x * sum_x / n
    if abs(denominator) < SINGULAR_TOLERANCE:
        raise SingularMatrixError("Singular matrix")
    a1 = numerator / denominator
    a0 = (sum_y - sum_x * a1) / n
    return a0, a1


def quadratic_least_squares(
    xs: Sequence[float], ys: Sequence[float]
) -> tuple[float, float, float]:
    """Coefficients ``(a0, a1, a2)`` of ``a0 + a1 x + a2 x^2`` fitted by least squares."""
    _check_data(xs, ys)
    n = float(len(xs))
    sum_x = sum(xs)
    sum_x2 = sum(x ** 2 for x in xs)
    sum_x3 = sum(x ** 3 for x in xs)
    sum_x4 = sum(x ** 4 for x in xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_x2y = sum(x * x * y for x, y in zip(xs, ys))

    system = [
        [n, sum_x, sum_x2],
        [sum_x, sum_x2, sum_x3],
        [sum_x2, sum_x3, sum_x4],
    ]
    rhs = [sum_y, sum_xy, sum_x2y]

    det = _det3(system)
    if abs(det) < SINGULAR_TOLERANCE:
        raise SingularMatrixError("Singular matrix")

    def replaced(column: int) -> list[list[float]]:
        return [
            [rhs[i] if j == column else v for j, v in enumerate(row)]
            for i, row in enumerate(system)
        ]

    a0, a1, a2 = (_det3(replaced(k)) / det for k in range(3))
    return a0, a1, a2


def squared_error(
    coeffs: Sequence[float], xs: Sequence[float], ys: Sequence[float]
) -> float:
    """Sum of squared deviations of the data from the polynomial with ascending ``coeffs``."""
    _check_data(xs, ys)
    return sum((y - horner(coeffs, x)) ** 2 for x, y in zip(xs, ys))