"""Natural cubic spline interpolation."""

from __future__ import annotations

import bisect
from collections.abc import Sequence
from dataclasses import dataclass

from numlab.tridiagonal import solve_tridiagonal


@dataclass(frozen=True)
class SplineSegment:
    """``S(x) = a + b t + c t^2 + d t^3`` with ``t = x - start`` on ``[start, stop]``."""

    start: float
    stop: float
    a: float
    b: float
    c: float
    d: float


@dataclass(frozen=True)
class CubicSpline:
    """Piecewise cubic made of consecutive segments."""

    segments: tuple[SplineSegment, ...]

    def segment_index(self, x: float) -> int:
        """Index of the segment containing ``x``."""
        if not self.segments or x < self.segments[0].start or x > self.segments[-1].stop:
            raise ValueError("Target point out of range")
        starts = [s.start for s in self.segments]
        return min(bisect.bisect_right(starts, x) - 1, len(self.segments) - 1)

    def __call__(self, x: float) -> float:
        seg = self.segments[self.segment_index(x)]
        t = x - seg.start
        return seg.a + t * (seg.b + t * (seg.c + t * seg.d))


def natural_cubic_spline(xs: Sequence[float], ys: Sequence[float]) -> CubicSpline:
    """Build the cubic spline with zero second derivative at both ends."""
    n = len(xs)
    if len(ys) != n:
        raise ValueError("Different size of vectors")
    if n < 2:
        raise ValueError("at least two nodes are required")
    h = [b - a for a, b in zip(xs, xs[1:])]
    if any(step <= 0 for step in h):
        raise ValueError("nodes must be strictly increasing")
    f = [float(y) for y in ys]

    interior = n - 2
    if interior:
        diag = [2 * (h[k] + h[k + 1]) for k in range(interior)]
        off = h[1:interior]
        rhs = [
            3 * ((f[k + 2] - f[k + 1]) / h[k + 1] - (f[k + 1] - f[k]) / h[k])
            for k in range(interior)
        ]
        c = [0.0, *solve_tridiagonal(off, diag, off, rhs), 0.0]
    else:
        c = [0.0, 0.0]

    segments = tuple(
        SplineSegment(
            start=float(xs[i]),
            stop=float(xs[i + 1]),
            a=f[i],
            b=(f[i + 1] - f[i]) / h[i] - h[i] * (c[i + 1] + 2 * c[i]) / 3,
            c=c[i],
            d=(c[i + 1] - c[i]) / (3 * h[i]),
        )
        for i in range(n - 1)
    )
    return CubicSpline(segments)