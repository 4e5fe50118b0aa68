"""Lagrange and Newton interpolation polynomials in the power basis."""

from __future__ import annotations

from collections.abc import Sequence


def _check_nodes(xs: Sequence[float], ys: Sequence[float]) -> None:
    if len(xs) != len(ys):
        raise ValueError("Different size of vectors")
    if not xs:
        raise ValueError("at least one interpolation node is required")


def horner(coeffs: Sequence[float], x: float) -> float:
    """Evaluate a polynomial given by ascending coefficients at ``x``."""
    result = 0.0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def format_polynomial(coeffs: Sequence[float]) -> str:
    """Render ascending coefficients as ``c0 + (c1)*x + (c2)*x^2``, skipping zeros."""
    if not coeffs:
        raise ValueError("Empty polynom")
    terms = []
    for power, c in enumerate(coeffs):
        if not c:
            continue
        if power == 0:
            terms.append(f"{c:g}")
        elif power == 1:
            terms.append(f"({c:g})*x")
        else:
            terms.append(f"({c:g})*x^{power}")
    return " + ".join(terms) if terms else "0"


def lagrange_basis(i: int, xs: Sequence[float]) -> list[float]:
    """Ascending coefficients of the i-th Lagrange basis polynomial on nodes ``xs``."""
    coeffs = [1.0]
    xi = xs[i]
    for j, xj in enumerate(xs):
        if j == i:
            continue
        denom = xi - xj
        if denom == 0:
            raise ValueError("interpolation nodes must be distinct")
        shifted = [0.0, *coeffs]
        padded = [*coeffs, 0.0]
        coeffs = [(s - xj * c) / denom for s, c in zip(shifted, padded)]
    return coeffs


def lagrange_coefficients(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """Ascending coefficients of the Lagrange interpolation polynomial."""
    _check_nodes(xs, ys)
    result = [0.0] * len(xs)
    for i, y in enumerate(ys):
        for k, b in enumerate(lagrange_basis(i, xs)):
            result[k] += y * b
    return result


def divided_differences(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """Leading divided differences ``f[x0], f[x0,x1], ...``."""
    _check_nodes(xs, ys)
    table = [float(y) for y in ys]
    result = [table[0]]
    for order in range(1, len(xs)):
        pairs = zip(table, table[1:])
        table = [(a - b) / (xs[j] - xs[j + order]) for j, (a, b) in enumerate(pairs)]
        result.append(table[0])
    return result


def newton_coefficients(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """Ascending coefficients of the Newton interpolation polynomial."""
    dd = divided_differences(xs, ys)
    coeffs = [0.0] * len(dd)
    coeffs[0] = dd[0]
    basis = [1.0]
    for diff, node in zip(dd[1:], xs):
        basis = [s - node * c for s, c in zip([0.0, *basis], [*basis, 0.0])]
        for k, b in enumerate(basis):
            coeffs[k] += diff * b
    return coeffs


def aposteriori_error(xs: Sequence[float], next_difference: float, point: float) -> float:
    """Error estimate ``|f[...] * prod(point - x_i)|`` over all nodes but the last."""
    omega = 1.0
    for x in xs[:-1]:
        omega *= point - x
    return abs(next_difference * omega)