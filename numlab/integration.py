"""Rectangle, trapezoid and Simpson quadrature with Runge-Romberg refinement."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

STEP_TOLERANCE = 1e-10


@dataclass(frozen=True)
class Integrals:
    """Values produced by the midpoint rectangle, trapezoid and Simpson rules."""

    rect: float
    trapeze: float
    simpson: float


def integrate(
    func: Callable[[float], float], start: float, stop: float, step: float
) -> Integrals:
    """Integrate ``func`` over ``[start, stop]`` with a uniform step by three rules."""
    if stop < start or abs(stop - start) < STEP_TOLERANCE or step < STEP_TOLERANCE:
        raise ValueError("Incorrect range or step <= 0")
    segments = int((stop - start) / step)
    if segments == 0:
        raise ValueError("Step is larger than the range")
    if segments % 2:
        raise ValueError("Odd number of segments for Simpson's method")

    nodes = [start + i * step for i in range(segments + 1)]
    values = [func(x) for x in nodes]

    rect = sum(func(x + step / 2) for x in nodes[:-1]) * step
    trapeze = sum(a + b for a, b in zip(values, values[1:])) * step * 0.5
    inner = sum((4 if i % 2 else 2) * y for i, y in enumerate(values[1:-1], start=1))
    simpson = (func(start) + func(stop) + inner) * step / 3.0
    return Integrals(rect=rect, trapeze=trapeze, simpson=simpson)


def runge_romberg(coarse: float, fine: float, order: int) -> float:
    """Correction to add to ``fine`` (step h/2) given ``coarse`` (step h) for a rule of ``order``."""
    return (fine - coarse) / (2 ** order - 1)


def runge_romberg_errors(coarse: Integrals, fine: Integrals) -> Integrals:
    """Runge-Romberg corrections for each rule; their absolute values estimate the error."""
    return Integrals(
        rect=runge_romberg(coarse.rect, fine.rect, 2),
        trapeze=runge_romberg(coarse.trapeze, fine.trapeze, 2),
        simpson=runge_romberg(coarse.simpson, fine.simpson, 4),
    )