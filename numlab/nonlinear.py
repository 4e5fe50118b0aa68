"""Newton and simple iteration methods for one equation and for systems of two equations."""

from __future__ import annotations

import math
import warnings
from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_MAX_ITERATIONS = 10000
DERIVATIVE_TOLERANCE = 1e-10
JACOBIAN_TOLERANCE = 1e-12

Function = Callable[[float], float]
Function2 = Callable[[float, float], float]
Jacobian = Callable[[float, float], tuple[tuple[float, float], tuple[float, float]]]


@dataclass(frozen=True)
class RootResult:
    """Approximate root of a scalar equation."""

    root: float
    iterations: int
    converged: bool


@dataclass(frozen=True)
class SystemResult:
    """Approximate solution of a system of two equations."""

    x: float
    y: float
    iterations: int
    converged: bool


def _check_settings(eps: float, max_iterations: int) -> None:
    if not eps > 0:
        raise ValueError("Precision must be positive")
    if max_iterations < 2:
        raise ValueError("max_iterations must be at least 2")


def _check_ratio(q: float) -> float:
    if not 0 < q < 1:
        raise ValueError("contraction ratio q must lie strictly between 0 and 1")
    return q / (1.0 - q)


def newton(
    f: Function,
    df: Function,
    x0: float,
    eps: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> RootResult:
    """Solve ``f(x) = 0`` by Newton's method starting at ``x0``."""
    _check_settings(eps, max_iterations)
    x = float(x0)
    for iteration in range(1, max_iterations):
        derivative = df(x)
        if abs(derivative) < DERIVATIVE_TOLERANCE:
            raise ZeroDivisionError("Zero division error: derivative vanishes")
        x_new = x - f(x) / derivative
        if abs(x_new - x) <= eps:
            return RootResult(x_new, iteration, True)
        x = x_new
    return RootResult(x, max_iterations, False)


def simple_iteration(
    phi: Function,
    dphi: Function | None,
    x0: float,
    eps: float,
    q: float = 0.5,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> RootResult:
    """Solve ``x = phi(x)`` by fixed-point iteration.

    ``q`` bounds ``|phi'|`` and scales the stopping criterion. When ``dphi`` is
    given and ``|dphi(x0)| >= 1`` a RuntimeWarning is issued.
    """
    _check_settings(eps, max_iterations)
    coefficient = _check_ratio(q)
    x = float(x0)
    if dphi is not None and not abs(dphi(x)) < 1:
        warnings.warn("Iteration method may not converge!", RuntimeWarning, stacklevel=2)
    for iteration in range(1, max_iterations):
        x_new = phi(x)
        if abs(x_new - x) * coefficient <= eps:
            return RootResult(x_new, iteration, True)
        x = x_new
    return RootResult(x, max_iterations, False)


def newton_system(
    f1: Function2,
    f2: Function2,
    jacobian: Jacobian,
    x0: float,
    y0: float,
    eps: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> SystemResult:
    """Solve ``f1 = f2 = 0`` by Newton's method with Cramer's rule.

    ``jacobian(x, y)`` returns ``((df1/dx, df1/dy), (df2/dx, df2/dy))``.
    """
    _check_settings(eps, max_iterations)
    x, y = float(x0), float(y0)
    for iteration in range(1, max_iterations):
        (a, b), (c, d) = jacobian(x, y)
        det_j = a * d - b * c
        if abs(det_j) < JACOBIAN_TOLERANCE:
            raise ZeroDivisionError("Singular Jacobian, zero division error")
        u, v = f1(x, y), f2(x, y)
        x_new = x - (u * d - b * v) / det_j
        y_new = y - (a * v - u * c) / det_j
        if abs(x_new - x) + abs(y_new - y) <= eps:
            return SystemResult(x_new, y_new, iteration, True)
        x, y = x_new, y_new
    return SystemResult(x, y, max_iterations, False)


def simple_iteration_system(
    phi1: Function2,
    phi2: Function2,
    x0: float,
    y0: float,
    eps: float,
    q: float = 0.29,
    in_domain: Callable[[float, float], bool] | None = None,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> SystemResult:
    """Solve ``x = phi1(x, y), y = phi2(x, y)`` by fixed-point iteration.

    Iteration stops without convergence when an approximation is not finite or,
    if ``in_domain`` is given, leaves the domain it describes.
    """
    _check_settings(eps, max_iterations)
    coefficient = _check_ratio(q)
    x, y = float(x0), float(y0)
    for iteration in range(1, max_iterations):
        x_new, y_new = phi1(x, y), phi2(x, y)
        if not (math.isfinite(x_new) and math.isfinite(y_new)):
            return SystemResult(x_new, y_new, iteration, False)
        if in_domain is not None and not in_domain(x_new, y_new):
            return SystemResult(x_new, y_new, iteration, False)
        if coefficient * (abs(x_new - x) + abs(y_new - y)) <= eps:
            return SystemResult(x_new, y_new, iteration, True)
        x, y = x_new, y_new
    return SystemResult(x, y, max_iterations, False)