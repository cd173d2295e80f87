"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_index / check_vector_index: bounds, no negative wrap-around
    - check_subblock: eager window validation
    - check_same_length / check_multipliable / check_same_shape / check_square
    - check_same_ring / check_sqrt_ring: element-type bounds
    - check_positive_int
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)
from pymatrix.core.ring import FLOAT64, INT64
from pymatrix.core.validation import (
    check_index,
    check_multipliable,
    check_positive_int,
    check_same_length,
    check_same_ring,
    check_same_shape,
    check_square,
    check_sqrt_ring,
    check_subblock,
    check_vector_index,
)
from pymatrix.matrix.storage import DenseVector, zeros


class TestIndexChecks:

    def test_valid(self):
        check_index(1, 2, 2, 3, "M")
        check_vector_index(0, 1, "v")

    @pytest.mark.parametrize("i,j", [(2, 0), (0, 3), (-1, 0)])
    def test_invalid(self, i, j):
        with pytest.raises(IndexOutOfBoundsError, match="M: index"):
            check_index(i, j, 2, 3, "M")

    def test_vector_invalid(self):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            check_vector_index(5, 5, "v")
        assert exc_info.value.index == 5
        assert exc_info.value.shape == 5


class TestCheckSubblock:

    def test_fits_exactly(self):
        check_subblock(zeros(4, 4), 2, 2, 2, 2, "S")

    def test_overrun(self):
        with pytest.raises(IndexOutOfBoundsError, match="exceeds base dimension"):
            check_subblock(zeros(4, 4), 3, 0, 2, 1, "S")

    def test_negative(self):
        with pytest.raises(IndexOutOfBoundsError, match="negative"):
            check_subblock(zeros(4, 4), 0, -1, 1, 1, "S")


class TestShapeChecks:

    def test_same_length(self):
        check_same_length(DenseVector(2), DenseVector(2), ("u", "v"))
        with pytest.raises(DimensionError, match="u=2, v=3"):
            check_same_length(DenseVector(2), DenseVector(3), ("u", "v"))

    def test_multipliable(self):
        check_multipliable(zeros(2, 3), zeros(3, 4), ("A", "B"))
        with pytest.raises(DimensionError, match="A \\(2x3\\) by B \\(4x3\\)"):
            check_multipliable(zeros(2, 3), zeros(4, 3), ("A", "B"))

    def test_same_shape(self):
        with pytest.raises(DimensionError):
            check_same_shape(zeros(2, 3), zeros(3, 2), ("A", "B"))

    def test_square(self):
        check_square(zeros(3, 3), "A")
        with pytest.raises(DimensionError, match="expected square matrix, got 2x3"):
            check_square(zeros(2, 3), "A")


class TestRingChecks:

    def test_same_ring(self):
        check_same_ring(FLOAT64, FLOAT64, ("A", "B"))
        with pytest.raises(ValidationError, match="A=float64, B=int64"):
            check_same_ring(FLOAT64, INT64, ("A", "B"))

    def test_sqrt_ring(self):
        check_sqrt_ring(FLOAT64, "A")
        with pytest.raises(ValidationError, match="does not support sqrt"):
            check_sqrt_ring(INT64, "A")


class TestCheckPositiveInt:

    @pytest.mark.parametrize("value", [1, 64, np.int64(3)])
    def test_valid(self, value):
        check_positive_int(value, "n")

    @pytest.mark.parametrize("value", [0, -2, 1.0, "4", None, False])
    def test_invalid(self, value):
        with pytest.raises(ValidationError, match="n: expected positive integer"):
            check_positive_int(value, "n")
