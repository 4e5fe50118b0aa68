import math

import pytest

from numlab.eigen import (
    ConvergenceError,
    block_2x2,
    matmul,
    qr_eigenvalues,
    qr_householder,
)

SOURCE_MATRIX = [[-1.0, 2.0, 9.0], [9.0, 3.0, 4.0], [8.0, -4.0, -6.0]]


def _det3(m):
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def _shifted(m, shift):
    return [[v - (shift if i == j else 0) for j, v in enumerate(row)] for i, row in enumerate(m)]


def test_matmul_with_identity():
    identity = [[1, 0], [0, 1]]
    m = [[1, 2], [3, 4]]
    assert matmul(m, identity) == m
    assert matmul(identity, m) == m


def test_qr_reproduces_matrix():
    q, r = qr_householder(SOURCE_MATRIX)
    product = matmul(q, r)
    for row, expected in zip(product, SOURCE_MATRIX):
        assert row == pytest.approx(expected, abs=1e-12)


def test_qr_factor_shapes():
    q, r = qr_householder(SOURCE_MATRIX)
    qtq = matmul([list(c) for c in zip(*q)], q)
    for i, row in enumerate(qtq):
        for j, value in enumerate(row):
            assert value == pytest.approx(1.0 if i == j else 0.0, abs=1e-12)
    for i, row in enumerate(r):
        for j in range(i):
            assert row[j] == pytest.approx(0.0, abs=1e-12)


def test_block_with_complex_eigenvalues():
    assert block_2x2(0.0, -1.0, 1.0, 0.0) == pytest.approx((0.0, 1.0))


def test_block_with_real_eigenvalues_has_nan_imaginary_part():
    re, im = block_2x2(2.0, 1.0, 1.0, 2.0)
    assert re == pytest.approx(2.0)
    assert math.isnan(im)


def test_source_matrix_eigenvalues():
    result = qr_eigenvalues(SOURCE_MATRIX, 1e-8)
    values = result.values
    assert len(values) == 3
    trace = sum(SOURCE_MATRIX[i][i] for i in range(3))
    assert sum(values).real == pytest.approx(trace, abs=1e-6)
    assert (values[0] * values[1] * values[2]).real == pytest.approx(_det3(SOURCE_MATRIX), abs=1e-4)
    for value in values:
        assert abs(_det3(_shifted(SOURCE_MATRIX, value))) < 1e-4
    assert values[1] == pytest.approx(values[2].conjugate())


def test_symmetric_matrix_eigenvalues():
    result = qr_eigenvalues([[2.0, 1.0], [1.0, 2.0]], 1e-10)
    assert sorted(v.real for v in result.values) == pytest.approx([1.0, 3.0], abs=1e-8)
    assert all(v.imag == 0.0 for v in result.values)
    assert result.iterations >= 1


def test_iteration_limit_raises():
    with pytest.raises(ConvergenceError):
        qr_eigenvalues([[2.0, 1.0], [1.0, 2.0]], 1e-12, max_iterations=1)


def test_empty_matrix_raises():
    with pytest.raises(ValueError):
        qr_householder([])