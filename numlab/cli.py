"""Command-line front end for the numerical methods in this package."""

from __future__ import annotations

import argparse
import math
import sys
import warnings
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from numlab.eigen import ConvergenceError, matmul, qr_eigenvalues, qr_householder
from numlab.integration import integrate, runge_romberg_errors
from numlab.interpolation import (
    aposteriori_error,
    divided_differences,
    format_polynomial,
    horner,
    lagrange_coefficients,
    newton_coefficients,
)
from numlab.lu import lu_decompose
from numlab.nonlinear import newton, simple_iteration

MIN_ROOT_PRECISION = 1e-12
IMAGINARY_TOLERANCE = 1e-10
ROOT_RATIO = 0.5


class _Input:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: Iterable[str] | None = None

    def _next(self) -> str:
        if self._tokens is None:
            self._tokens = iter(self._stream.read().split())
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> float:
        token = self._next()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"not a number: {token!r}") from None

    def numbers(self, count: int) -> list[float]:
        return [self.number() for _ in range(count)]

    def size(self) -> int:
        token = self._next()
        try:
            n = int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None
        if n <= 0:
            raise ValueError("System size cannot be zero")
        return n

    def matrix(self, n: int) -> list[list[float]]:
        return [self.numbers(n) for _ in range(n)]


def _fmt(value: float) -> str:
    return f"{value:g}"


def _print_matrix(matrix: Sequence[Sequence[float]]) -> None:
    for row in matrix:
        print(" ".join(_fmt(v) for v in row))


def _run_lu(data: _Input) -> None:
    n = data.size()
    rhs = data.numbers(n)
    matrix = data.matrix(n)
    lu = lu_decompose(matrix)

    print("Upper triangle matrix:")
    _print_matrix(lu.upper)
    print()
    print("Lower triangle matrix:")
    _print_matrix(lu.lower)
    print()
    print(f"Determinant = {_fmt(lu.determinant())}")
    print()
    print("System solution:")
    for i, x in enumerate(lu.solve(rhs), start=1):
        print(f"x{i} = {_fmt(x)}")
    inverse = lu.inverse()
    print()
    print("Inverse matrix:")
    _print_matrix(inverse)
    print()
    print("System matrix")
    _print_matrix(matrix)
    print()
    print("Inverse multiply check")
    _print_matrix(matmul(matrix, inverse))


def _run_eigen(data: _Input) -> None:
    n = data.size()
    eps = data.number()
    if not eps > 0:
        raise ValueError("Precision must be positive")
    matrix = data.matrix(n)

    q, r = qr_householder(matrix)
    print("Q:")
    _print_matrix(q)
    print()
    print("R:")
    _print_matrix(r)
    print()
    print("Multiplication check of qr_householder:")
    _print_matrix(matmul(q, r))
    print()
    print("Launch of qr_algo:")
    result = qr_eigenvalues(matrix, eps)
    print(f"Algo was stopped on iteration {result.iterations}")
    print("Final matrix: ")
    _print_matrix(result.matrix)
    print()
    print("Founded eigen values")
    for i, value in enumerate(result.values):
        line = f"lambda{i} = {_fmt(value.real)}"
        if abs(value.imag) > IMAGINARY_TOLERANCE:
            line += f" + ({_fmt(value.imag)}) * i"
        print(line)


def _equation(x: float) -> float:
    return math.log(x + 1.0) - 2 * x + 0.5


def _equation_derivative(x: float) -> float:
    return (-2 * x - 1) / (x + 1)


def _fixed_point(x: float) -> float:
    return (math.log(x + 1.0) + 0.5) / 2


def _fixed_point_derivative(x: float) -> float:
    return 1.0 / (2 * x + 2)


def _run_roots(data: _Input) -> None:
    x0 = data.number()
    eps = data.number()
    if eps < MIN_ROOT_PRECISION:
        raise ValueError("Precision must be positive")

    by_newton = newton(_equation, _equation_derivative, x0, eps)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        by_iteration = simple_iteration(
            _fixed_point, _fixed_point_derivative, x0, eps, q=ROOT_RATIO
        )
    for warning in caught:
        print(warning.message)

    for title, result in (
        ("For Newton method:", by_newton),
        ("For iteration method:", by_iteration),
    ):
        if not result.converged:
            print("Too many iterations")
        print(title)
        print(f"x = {_fmt(result.root)}, was received on iteration {result.iterations}")


def _interpolated(x: float) -> float:
    return math.tan(x) + x


INTERPOLATION_POINT = 3 * math.pi / 16


def _run_interpolate(_data: _Input) -> None:
    exact = _interpolated(INTERPOLATION_POINT)
    xs = [0.0, math.pi / 8, math.pi / 4, 3 * math.pi / 8]
    ys = [_interpolated(x) for x in xs]

    print("Variant A:")
    coeffs = lagrange_coefficients(xs, ys)
    print(" Lagrange polynom:")
    print(format_polynomial(coeffs))
    print(f" Eps as delta funcs: {_fmt(abs(exact - horner(coeffs, INTERPOLATION_POINT)))}")

    xs[2] = math.pi / 3
    ys[2] = _interpolated(xs[2])
    print("Variant B:")
    last_difference = divided_differences(xs, ys)[-1]
    estimate = aposteriori_error(xs, last_difference, INTERPOLATION_POINT)
    print(f" Eps as aposteriory approximation for Newton polynom: {_fmt(estimate)}")
    coeffs = newton_coefficients(xs, ys)
    print(" Newton polynom:")
    print(format_polynomial(coeffs))
    print(f" Eps as delta funcs: {_fmt(abs(exact - horner(coeffs, INTERPOLATION_POINT)))}")


def _integrand(x: float) -> float:
    return 1 / (x ** 4 + 16)


def _print_integrals(values) -> None:
    print(f"Rectangle method: {values.rect:.6f}")
    print(f"Trapeze method: {values.trapeze:.6f}")
    print(f"Simpson's method: {values.simpson:.6f}")


def _run_integrate(_data: _Input) -> None:
    print("Calculating integral:")
    print()
    print("Step 0.5:")
    coarse = integrate(_integrand, 0.0, 2.0, 0.5)
    _print_integrals(coarse)
    print()
    print("Step 0.25:")
    fine = integrate(_integrand, 0.0, 2.0, 0.25)
    _print_integrals(fine)

    errors = runge_romberg_errors(coarse, fine)
    print()
    print("Runge_Romberg method:")
    for title, err, value in (
        ("Rectangle method", errors.rect, fine.rect),
        ("Trapeze method", errors.trapeze, fine.trapeze),
        ("Simpson's method", errors.simpson, fine.simpson),
    ):
        print(f"{title}: error = {abs(err):.6f}, refined value = {value + err:.6f}")


_COMMANDS: dict[str, tuple[Callable[[_Input], None], str]] = {
    "lu": (_run_lu, "LU decomposition: reads n, right parts, then the matrix"),
    "eigen": (_run_eigen, "QR eigenvalues: reads n, precision, then the matrix"),
    "roots": (_run_roots, "root of ln(x+1) - 2x + 0.5 = 0: reads x0 and precision"),
    "interpolate": (_run_interpolate, "Lagrange and Newton interpolation of tan(x) + x"),
    "integrate": (_run_integrate, "quadrature of 1/(x^4 + 16) over [0, 2]"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numlab", description="Numerical methods.")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one numerical task; input, where needed, is read from standard input."""
    args = _build_parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    try:
        handler(_Input(sys.stdin))
    except (ValueError, ArithmeticError, ConvergenceError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())