"""
Tests for the sequential kernels.
"""

import numpy as np
import pytest
import scipy.linalg

from pymatrix.algorithms.sequential import (
    back_substitute,
    cholesky,
    cholesky_seq_inplace,
    cholesky_solve,
    dot,
    forward_substitute,
    inverse,
    mat_mul,
    mat_mul_accumulate,
    transpose,
)
from pymatrix.core.exceptions import (
    DimensionError,
    NotPositiveDefiniteError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.ring import INT64
from pymatrix.matrix import (
    DenseVector,
    Matrix,
    col,
    create,
    from_numpy,
    identity,
    row,
    subblock,
    to_numpy,
    transpose_view,
    zeros,
)


# ═══════════════════════════════════════════════════════════════════════
# dot
# ═══════════════════════════════════════════════════════════════════════


class TestDot:

    def test_concrete(self):
        u = DenseVector.from_values([1, 2, 3])
        v = DenseVector.from_values([4, 5, 6])
        assert dot(u, v) == 32

    def test_integer_ring_stays_integer(self):
        u = DenseVector.from_values([1, 2, 3], INT64)
        v = DenseVector.from_values([4, 5, 6], INT64)
        result = dot(u, v)
        assert result == 32
        assert isinstance(result, np.int64)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            dot(DenseVector(3), DenseVector(2))

    def test_ring_mismatch(self):
        with pytest.raises(ValidationError, match="no implicit widening"):
            dot(DenseVector(2), DenseVector(2, INT64))

    def test_empty_is_zero(self):
        assert dot(DenseVector(0), DenseVector(0)) == 0.0

    def test_row_and_column_views(self):
        m = create(3, 3, lambda i, j: float(i * 3 + j))
        # row 1 = [3, 4, 5], col 2 = [2, 5, 8]
        assert dot(row(m, 1), col(m, 2)) == 3 * 2 + 4 * 5 + 5 * 8


# ═══════════════════════════════════════════════════════════════════════
# mat_mul / transpose
# ═══════════════════════════════════════════════════════════════════════


class TestMatMul:

    def test_matches_numpy(self, rect_pair):
        A, B, a, b = rect_pair
        C = mat_mul(A, B)
        assert C.shape == (7, 9)
        np.testing.assert_allclose(to_numpy(C), a @ b, rtol=1e-12)

    def test_dimension_mismatch(self, rect_pair):
        A, B, _, _ = rect_pair
        with pytest.raises(DimensionError, match="inner dimensions differ") as exc_info:
            mat_mul(B, B)
        assert exc_info.value.expected == 9
        assert exc_info.value.actual == 5

    def test_transpose_view_operand(self, rect_pair):
        A, _, a, _ = rect_pair
        G = mat_mul(transpose_view(A), A)
        np.testing.assert_allclose(to_numpy(G), a.T @ a, rtol=1e-12)

    def test_identity(self, rect_pair):
        A, _, a, _ = rect_pair
        np.testing.assert_array_equal(to_numpy(mat_mul(identity(7), A)), a)

    def test_ring_mismatch(self):
        with pytest.raises(ValidationError):
            mat_mul(zeros(2, 2), zeros(2, 2, INT64))

    def test_inner_dimension_zero(self):
        C = mat_mul(zeros(2, 0), zeros(0, 3))
        np.testing.assert_array_equal(to_numpy(C), np.zeros((2, 3)))

    def test_accumulate_into_subblock(self, rng):
        a = rng.standard_normal((2, 3))
        b = rng.standard_normal((3, 2))
        C = create(4, 4, lambda i, j: 1.0)
        mat_mul_accumulate(from_numpy(a), from_numpy(b), subblock(C, 1, 1, 2, 2))
        expected = np.ones((4, 4))
        expected[1:3, 1:3] += a @ b
        np.testing.assert_allclose(to_numpy(C), expected, rtol=1e-12)

    def test_accumulate_wrong_output_shape(self):
        with pytest.raises(DimensionError):
            mat_mul_accumulate(zeros(2, 3), zeros(3, 2), zeros(3, 3))


class TestTranspose:

    def test_materialized(self, rect_pair):
        A, _, a, _ = rect_pair
        T = transpose(A)
        assert isinstance(T, Matrix)
        assert T.shape == (5, 7)
        np.testing.assert_array_equal(to_numpy(T), a.T)

    def test_is_a_copy(self, rect_pair):
        A, _, _, _ = rect_pair
        T = transpose(A)
        T.set(0, 0, 123.0)
        assert A.get(0, 0) != 123.0


# ═══════════════════════════════════════════════════════════════════════
# Cholesky
# ═══════════════════════════════════════════════════════════════════════


class TestCholeskySeqInplace:

    def test_concrete_example(self, wiki_spd):
        A, L_expected = wiki_spd
        cholesky_seq_inplace(A)
        np.testing.assert_array_equal(np.tril(to_numpy(A)), to_numpy(L_expected))

    def test_reconstruction_exact(self, wiki_spd):
        A, L = wiki_spd
        product = mat_mul(L, transpose_view(L))
        np.testing.assert_array_equal(to_numpy(product), to_numpy(A))

    def test_upper_triangle_untouched(self, wiki_spd):
        A, _ = wiki_spd
        cholesky_seq_inplace(A)
        assert A.get(0, 1) == 12.0
        assert A.get(0, 2) == -16.0
        assert A.get(1, 2) == -43.0

    def test_recovers_known_factor(self, spd_problem):
        A, L = spd_problem
        cholesky_seq_inplace(A)
        np.testing.assert_allclose(np.tril(to_numpy(A)), to_numpy(L), rtol=1e-8, atol=1e-10)

    def test_matches_scipy(self, spd_problem):
        A, _ = spd_problem
        expected = scipy.linalg.cholesky(to_numpy(A), lower=True)
        cholesky_seq_inplace(A)
        np.testing.assert_allclose(np.tril(to_numpy(A)), expected, rtol=1e-8, atol=1e-10)

    def test_not_positive_definite(self):
        A = Matrix.from_rows([[1, 2], [2, 1]])
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky_seq_inplace(A)
        assert exc_info.value.column == 1
        assert exc_info.value.radicand == pytest.approx(-3.0)

    def test_zero_radicand(self):
        with pytest.raises(NotPositiveDefiniteError):
            cholesky_seq_inplace(Matrix.from_rows([[0.0]]))

    def test_not_square(self):
        with pytest.raises(DimensionError, match="square"):
            cholesky_seq_inplace(zeros(2, 3))

    def test_integer_ring_rejected(self):
        A = Matrix.from_rows([[4, 2], [2, 3]], INT64)
        with pytest.raises(ValidationError, match="sqrt"):
            cholesky_seq_inplace(A)

    def test_on_subblock_view(self, wiki_spd):
        A, L_expected = wiki_spd
        big = zeros(5, 5)
        window = subblock(big, 1, 2, 3, 3)
        for i in range(3):
            for j in range(3):
                window.set(i, j, A.get(i, j))
        cholesky_seq_inplace(window)
        np.testing.assert_array_equal(np.tril(to_numpy(big)[1:4, 2:5]), to_numpy(L_expected))

    def test_cholesky_copy_has_zero_upper(self, wiki_spd):
        A, L_expected = wiki_spd
        L = cholesky(A)
        np.testing.assert_array_equal(to_numpy(L), to_numpy(L_expected))
        assert A.get(0, 0) == 4.0


# ═══════════════════════════════════════════════════════════════════════
# Triangular solves and inverse
# ═══════════════════════════════════════════════════════════════════════


class TestTriangularSolves:

    def test_forward(self, wiki_spd):
        _, L = wiki_spd
        b = DenseVector.from_values([2, 7, 0])
        y = forward_substitute(L, b)
        np.testing.assert_allclose(to_numpy(L) @ np.array(y.to_list()), [2, 7, 0])

    def test_back_through_transpose_view(self, wiki_spd):
        _, L = wiki_spd
        b = DenseVector.from_values([1, 1, 1])
        x = back_substitute(transpose_view(L), b)
        np.testing.assert_allclose(to_numpy(L).T @ np.array(x.to_list()), [1, 1, 1])

    def test_in_place(self, wiki_spd):
        _, L = wiki_spd
        b = DenseVector.from_values([2, 7, 0])
        y = forward_substitute(L, b, out=b)
        assert y is b
        np.testing.assert_allclose(to_numpy(L) @ np.array(b.to_list()), [2, 7, 0])

    def test_cholesky_solve(self, spd_problem, rng):
        A, L = spd_problem
        rhs = rng.standard_normal(10)
        x = cholesky_solve(L, DenseVector.from_values(rhs))
        np.testing.assert_allclose(to_numpy(A) @ np.array(x.to_list()), rhs, rtol=1e-8, atol=1e-10)

    def test_zero_pivot(self):
        L = Matrix.from_rows([[1, 0], [1, 0]])
        with pytest.raises(SingularMatrixError) as exc_info:
            forward_substitute(L, DenseVector(2))
        assert exc_info.value.pivot_index == 1

    def test_zero_pivot_back(self):
        U = Matrix.from_rows([[0, 1], [0, 1]])
        with pytest.raises(SingularMatrixError) as exc_info:
            back_substitute(U, DenseVector(2))
        assert exc_info.value.pivot_index == 0

    def test_length_mismatch(self, wiki_spd):
        _, L = wiki_spd
        with pytest.raises(DimensionError):
            forward_substitute(L, DenseVector(2))


class TestInverse:

    def test_inverse_times_a_is_identity(self, spd_problem):
        A, _ = spd_problem
        Ai = inverse(A)
        np.testing.assert_allclose(
            to_numpy(mat_mul(Ai, A)), np.eye(10), rtol=1e-8, atol=1e-8
        )

    def test_matches_numpy(self, wiki_spd):
        A, _ = wiki_spd
        np.testing.assert_allclose(
            to_numpy(inverse(A)), np.linalg.inv(to_numpy(A)), rtol=1e-9, atol=1e-12
        )

    def test_does_not_mutate_input(self, wiki_spd):
        A, _ = wiki_spd
        before = to_numpy(A)
        inverse(A)
        np.testing.assert_array_equal(to_numpy(A), before)

    def test_not_positive_definite(self):
        with pytest.raises(NotPositiveDefiniteError):
            inverse(Matrix.from_rows([[1, 2], [2, 1]]))

    def test_not_square(self):
        with pytest.raises(DimensionError):
            inverse(zeros(2, 3))
