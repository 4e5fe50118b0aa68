# numlab

Classic numerical methods in plain Python, with no third-party
dependencies. Matrices are lists of rows, vectors are lists of floats.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `numlab.lu` | `lu_decompose`, `LUDecomposition`, `SingularMatrixError` |
| `numlab.tridiagonal` | `solve_tridiagonal` (Thomas algorithm) |
| `numlab.iterative` | `jacobi`, `seidel`, `IterationResult`, `matrix_norm`, `difference_norm`, `has_diagonal_dominance` |
| `numlab.eigen` | `qr_householder`, `qr_eigenvalues`, `EigenResult`, `ConvergenceError`, `block_2x2`, `matmul` |
| `numlab.nonlinear` | `newton`, `simple_iteration`, `newton_system`, `simple_iteration_system`, `RootResult`, `SystemResult` |
| `numlab.interpolation` | `horner`, `format_polynomial`, `lagrange_basis`, `lagrange_coefficients`, `divided_differences`, `newton_coefficients`, `aposteriori_error` |
| `numlab.spline` | `natural_cubic_spline`, `CubicSpline`, `SplineSegment` |
| `numlab.approximation` | `linear_least_squares`, `quadratic_least_squares`, `squared_error` |
| `numlab.differentiation` | `derivatives_at`, `DerivativeReport` |
| `numlab.integration` | `integrate`, `Integrals`, `runge_romberg`, `runge_romberg_errors` |
| `numlab.cli` | the `numlab` command |

## Linear systems

`lu_decompose` factors a square matrix with row pivoting on the largest
element of each column. The result holds `lower`, `upper`, the row
`permutation` and the number of `swaps`, and offers `determinant()`,
`solve(rhs)` and `inverse()`:

```python
from numlab.lu import lu_decompose

lu = lu_decompose([
    [-6, -5, -3, -8],
    [5, -1, -5, -4],
    [-6, 0, 5, 5],
    [-7, -2, 8, 5],
])
print(lu.determinant())
print(lu.solve([101, 51, -53, -63]))
print(lu.inverse())
```

A singular matrix raises `SingularMatrixError` (a `ValueError`); an empty
or non-square one raises `ValueError`.

`solve_tridiagonal(lower, diag, upper, rhs)` takes the n-1 entries below
the diagonal, the diagonal, the n-1 entries above it and the right-hand
side. Every row must be diagonally dominant, otherwise `ValueError` is
raised.

`jacobi(matrix, rhs, eps, max_iterations=10000)` and `seidel(...)` solve
systems with a strictly diagonally dominant matrix and a non-zero
diagonal. They return an `IterationResult` with `solution`, `iterations`,
`precision` and `converged`; reaching the iteration limit gives
`converged=False` rather than an error.

## Eigenvalues

`qr_householder(matrix)` returns `(Q, R)` with `Q @ R` equal to the
matrix. `qr_eigenvalues(matrix, eps, max_iterations=1000)` repeats QR
steps until the eigenvalues settle, real ones and complex-conjugate pairs
alike:

```python
from numlab.eigen import qr_eigenvalues

result = qr_eigenvalues([[-1.0, 2.0, 9.0], [9.0, 3.0, 4.0], [8.0, -4.0, -6.0]], 0.01)
print(result.values, result.iterations)
```

If the limit is reached, `ConvergenceError` is raised.

## Nonlinear equations

- `newton(f, df, x0, eps, max_iterations=10000)` raises `ZeroDivisionError`
  when the derivative vanishes.
- `simple_iteration(phi, dphi, x0, eps, q=0.5, max_iterations=10000)`
  iterates `x = phi(x)`; `q` scales the stopping criterion and must lie in
  (0, 1). If `dphi` is given and `|dphi(x0)| >= 1`, a `RuntimeWarning` is
  issued.
- `newton_system(f1, f2, jacobian, x0, y0, eps, max_iterations=10000)`
  solves two equations; `jacobian(x, y)` returns
  `((df1/dx, df1/dy), (df2/dx, df2/dy))`.
- `simple_iteration_system(phi1, phi2, x0, y0, eps, q=0.29, in_domain=None, max_iterations=10000)`
  stops without convergence when an approximation is not finite or
  `in_domain(x, y)` is false.

Each returns a `RootResult` or `SystemResult` carrying a `converged` flag.
A non-positive `eps` raises `ValueError`.

## Interpolation, splines, approximation, calculus

```python
import math

from numlab.interpolation import format_polynomial, horner, lagrange_coefficients
from numlab.spline import natural_cubic_spline
from numlab.integration import integrate, runge_romberg_errors

xs = [0.0, math.pi / 8, math.pi / 4, 3 * math.pi / 8]
ys = [math.tan(x) + x for x in xs]
coeffs = lagrange_coefficients(xs, ys)      # ascending powers
print(format_polynomial(coeffs))
print(horner(coeffs, 3 * math.pi / 16))

spline = natural_cubic_spline(xs, ys)
print(spline(0.5), spline.segment_index(0.5))

coarse = integrate(lambda x: 1 / (x**4 + 16), 0.0, 2.0, 0.5)
fine = integrate(lambda x: 1 / (x**4 + 16), 0.0, 2.0, 0.25)
print(coarse.rect, coarse.trapeze, coarse.simpson)
print(runge_romberg_errors(coarse, fine))
```

- `natural_cubic_spline` needs strictly increasing nodes; evaluating
  outside them raises `ValueError`.
- `linear_least_squares(xs, ys)` returns `(a0, a1)`,
  `quadratic_least_squares(xs, ys)` returns `(a0, a1, a2)`, and
  `squared_error(coeffs, xs, ys)` gives the sum of squared deviations.
  A degenerate data set raises `SingularMatrixError`.
- `derivatives_at(xs, ys, x)` returns a `DerivativeReport`: at a node, the
  left, right and central first derivatives and the second derivative
  where they can be formed; inside an interval, the first derivative and,
  past the first interval, the second. A point outside the table raises
  `ValueError`.
- `integrate(func, start, stop, step)` applies the midpoint rectangle,
  trapezoid and Simpson rules; the number of steps must be even.
  `runge_romberg_errors` gives the correction to add to the finer result
  for each rule.

## Command line

The `numlab` command runs one of five worked tasks and prints each step:

```
numlab lu < system.txt
numlab eigen < matrix.txt
numlab roots < start.txt
numlab interpolate
numlab integrate
```

- `lu` reads n, the n right-hand sides, then the n×n matrix, and prints
  the factors, determinant, solution, inverse and a product check.
- `eigen` reads n, the precision, then the matrix, and prints Q, R and
  the eigenvalues.
- `roots` reads a starting point and a precision and solves
  ln(x + 1) - 2x + 0.5 = 0 by Newton's method and by simple iteration.
- `interpolate` interpolates tan(x) + x by Lagrange and Newton polynomials.
- `integrate` integrates 1/(x⁴ + 16) over [0, 2] with steps 0.5 and 0.25
  and applies Runge–Romberg refinement.

Input is whitespace-separated numbers on standard input; there are no
prompts. On bad input or a failed method the command prints
`error: ...` to standard error and exits with status 1.

## What is not included

The command line covers only the five tasks above. Tridiagonal systems,
Jacobi and Seidel iteration, systems of nonlinear equations, splines,
least squares and numerical differentiation are available from Python
only.