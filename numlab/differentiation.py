"""Numerical derivatives of a tabulated function."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

NODE_TOLERANCE = 1e-10


@dataclass(frozen=True)
class DerivativeReport:
    """Derivative estimates at a point of a table.

    ``node`` is set when the point coincides with a table node, ``segment`` when
    it lies strictly inside an interval between nodes. Estimates that cannot be
    formed at the point are ``None``.
    """

    node: int | None = None
    segment: tuple[float, float] | None = None
    left: float | None = None
    right: float | None = None
    central: float | None = None
    first: float | None = None
    second: float | None = None


def _slope(xs: Sequence[float], ys: Sequence[float], i: int, j: int) -> float:
    return (ys[j] - ys[i]) / (xs[j] - xs[i])


def _second(xs: Sequence[float], ys: Sequence[float], i: int) -> float:
    h1 = xs[i] - xs[i - 1]
    h2 = xs[i + 1] - xs[i]
    return 2 * (
        ys[i - 1] / (h1 * (h1 + h2))
        - ys[i] / (h1 * h2)
        + ys[i + 1] / (h2 * (h1 + h2))
    )


def derivatives_at(xs: Sequence[float], ys: Sequence[float], x: float) -> DerivativeReport:
    """Estimate first and second derivatives of the table ``(xs, ys)`` at ``x``."""
    if len(xs) != len(ys):
        raise ValueError("Different size of vectors")
    if len(xs) < 2:
        raise ValueError("at least two nodes are required")
    last = len(xs) - 1

    for i, node in enumerate(xs):
        if abs(x - node) < NODE_TOLERANCE:
            interior = 0 < i < last
            return DerivativeReport(
                node=i,
                left=_slope(xs, ys, i - 1, i) if i > 0 else None,
                right=_slope(xs, ys, i, i + 1) if i < last else None,
                central=_slope(xs, ys, i - 1, i + 1) if interior else None,
                second=_second(xs, ys, i) if interior else None,
            )

    for i, (lo, hi) in enumerate(zip(xs, xs[1:])):
        if lo < x < hi:
            return DerivativeReport(
                segment=(float(lo), float(hi)),
                first=_slope(xs, ys, i, i + 1),
                second=_second(xs, ys, i) if i > 0 else None,
            )

    raise ValueError("Target point out of range")