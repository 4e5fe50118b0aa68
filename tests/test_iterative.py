import pytest

from numlab.iterative import (
    difference_norm,
    has_diagonal_dominance,
    jacobi,
    matrix_norm,
    seidel,
)

MATRIX = [[10, 1, -1], [1, 10, -1], [-1, 1, 10]]
RHS = [11, 10, 10]


def _assert_solves(x, tol=1e-6):
    for row, b in zip(MATRIX, RHS):
        assert sum(a * xi for a, xi in zip(row, x)) == pytest.approx(b, abs=tol)


def test_matrix_norm_is_max_row_sum():
    assert matrix_norm([[1, -2], [3, 4]]) == pytest.approx(7.0)


def test_difference_norm():
    assert difference_norm([1, 2], [0, 4]) == pytest.approx(3.0)


def test_diagonal_dominance():
    assert has_diagonal_dominance(MATRIX) is True
    assert has_diagonal_dominance([[2, 2], [1, 3]]) is False


@pytest.mark.parametrize("method", [jacobi, seidel])
def test_method_solves_system(method):
    result = method(MATRIX, RHS, 1e-10)
    assert result.converged is True
    assert result.precision < 1e-10
    _assert_solves(result.solution)


def test_methods_agree():
    a = jacobi(MATRIX, RHS, 1e-12).solution
    b = seidel(MATRIX, RHS, 1e-12).solution
    assert a == pytest.approx(b, abs=1e-9)


@pytest.mark.parametrize("method", [jacobi, seidel])
def test_iteration_limit(method):
    result = method(MATRIX, RHS, 1e-15, max_iterations=1)
    assert result.iterations == 1
    assert result.converged is False


@pytest.mark.parametrize("method", [jacobi, seidel])
def test_zero_diagonal_raises(method):
    with pytest.raises(ValueError, match="Diagonal element is zero"):
        method([[0, 1], [1, 5]], [1, 1], 1e-6)


@pytest.mark.parametrize("method", [jacobi, seidel])
def test_no_dominance_raises(method):
    with pytest.raises(ValueError, match="No diagonal dominance"):
        method([[2, 2], [1, 3]], [1, 1], 1e-6)


def test_empty_system_raises():
    with pytest.raises(ValueError, match="cannot be zero"):
        jacobi([], [], 1e-6)


def test_non_positive_iteration_limit_raises():
    with pytest.raises(ValueError):
        seidel(MATRIX, RHS, 1e-6, max_iterations=0)