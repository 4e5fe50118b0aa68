import pytest

from numlab.approximation import (
    linear_least_squares,
    quadratic_least_squares,
    squared_error,
)
from numlab.lu import SingularMatrixError

XS = [0.1, 0.5, 0.9, 1.3, 1.7, 2.1]
YS = [-2.2026, -0.19315, 0.79464, 1.5624, 2.2306, 2.8419]


def test_linear_recovers_exact_line():
    a0, a1 = 1.5, -0.75
    ys = [a0 + a1 * x for x in XS]
    fitted = linear_least_squares(XS, ys)
    assert fitted == pytest.approx((a0, a1))


def test_quadratic_recovers_exact_parabola():
    coeffs = (0.5, -1.25, 2.0)
    ys = [coeffs[0] + coeffs[1] * x + coeffs[2] * x * x for x in XS]
    fitted = quadratic_least_squares(XS, ys)
    assert fitted == pytest.approx(coeffs)


def test_exact_fit_has_zero_error():
    ys = [3.0 - 2.0 * x for x in XS]
    coeffs = linear_least_squares(XS, ys)
    assert squared_error(coeffs, XS, ys) == pytest.approx(0.0, abs=1e-20)


def test_linear_residuals_sum_to_zero():
    a0, a1 = linear_least_squares(XS, YS)
    residuals = [y - (a0 + a1 * x) for x, y in zip(XS, YS)]
    assert sum(residuals) == pytest.approx(0.0, abs=1e-9)
    assert sum(r * x for r, x in zip(residuals, XS)) == pytest.approx(0.0, abs=1e-9)


def test_quadratic_fit_is_not_worse_than_linear():
    linear = squared_error(linear_least_squares(XS, YS), XS, YS)
    quadratic = squared_error(quadratic_least_squares(XS, YS), XS, YS)
    assert quadratic <= linear + 1e-12


def test_linear_fit_minimises_error():
    a0, a1 = linear_least_squares(XS, YS)
    best = squared_error((a0, a1), XS, YS)
    for da0, da1 in [(0.01, 0.0), (-0.01, 0.0), (0.0, 0.01), (0.0, -0.01)]:
        assert squared_error((a0 + da0, a1 + da1), XS, YS) > best


def test_squared_error_value():
    assert squared_error([0.0], [1.0, 2.0], [3.0, 4.0]) == pytest.approx(25.0)


def test_linear_singular_when_all_x_equal():
    with pytest.raises(SingularMatrixError):
        linear_least_squares([1.0, 1.0, 1.0], [1.0, 2.0, 3.0])


def test_quadratic_singular_with_two_distinct_points():
    with pytest.raises(SingularMatrixError):
        quadratic_least_squares([0.0, 1.0, 0.0, 1.0], [1.0, 2.0, 1.0, 2.0])


@pytest.mark.parametrize(
    "func", [linear_least_squares, quadratic_least_squares]
)
def test_mismatched_lengths(func):
    with pytest.raises(ValueError, match="Different size"):
        func([1.0, 2.0, 3.0], [1.0, 2.0])


def test_empty_data_rejected():
    with pytest.raises(ValueError):
        linear_least_squares([], [])