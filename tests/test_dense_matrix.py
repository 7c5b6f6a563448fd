"""Tests for dense matrix creation, arithmetic, comparison and layout."""

import numpy as np
import pytest

from rigidkit.errors import DimensionMismatchError
from rigidkit.matrix import (
    add,
    as_matrix,
    copy,
    create,
    identity,
    is_equal,
    multiply,
    multiply_vector,
    subtract,
    swap_rows,
    to_string,
    transpose,
)


class TestCreation:
    """Test matrix factories and conversion."""

    def test_create_zero_filled(self):
        """Test create returns a zero matrix of the requested shape."""
        m = create(2, 3)
        assert m.shape == (2, 3)
        assert m.dtype == np.float64
        assert np.all(m == 0.0)

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
    def test_create_rejects_non_positive(self, rows, cols):
        """Test create rejects non-positive dimensions."""
        with pytest.raises(ValueError, match="positive"):
            create(rows, cols)

    def test_identity(self):
        """Test identity has ones on the diagonal only."""
        np.testing.assert_array_equal(identity(3), np.eye(3))

    def test_copy_is_independent(self):
        """Test copy does not share memory with the source."""
        a = np.array([[1.0, 2.0], [3.0, 4.0]])
        b = copy(a)
        b[0, 0] = 99.0
        assert a[0, 0] == 1.0

    def test_as_matrix_accepts_nested_lists(self):
        """Test nested lists are converted to float64."""
        m = as_matrix([[1, 2], [3, 4]])
        assert m.dtype == np.float64
        assert m.shape == (2, 2)

    def test_as_matrix_rejects_1d(self):
        """Test 1-D input is rejected."""
        with pytest.raises(ValueError, match="2-D"):
            as_matrix([1.0, 2.0, 3.0])


class TestArithmetic:
    """Test add, subtract and the two products."""

    def test_add_and_subtract(self):
        """Test element-wise sum and difference."""
        a = [[1.0, 2.0], [3.0, 4.0]]
        b = [[0.5, 0.5], [1.0, -1.0]]
        np.testing.assert_array_equal(add(a, b), [[1.5, 2.5], [4.0, 3.0]])
        np.testing.assert_array_equal(subtract(a, b), [[0.5, 1.5], [2.0, 5.0]])

    def test_inputs_not_modified(self):
        """Test arithmetic returns new arrays."""
        a = np.array([[1.0, 2.0], [3.0, 4.0]])
        before = a.copy()
        add(a, a)
        subtract(a, a)
        multiply(a, a)
        np.testing.assert_array_equal(a, before)

    @pytest.mark.parametrize("op", [add, subtract])
    def test_elementwise_shape_mismatch(self, op):
        """Test add/subtract reject differing shapes."""
        with pytest.raises(DimensionMismatchError) as exc_info:
            op(np.zeros((2, 2)), np.zeros((2, 3)))
        assert exc_info.value.shape_a == (2, 2)
        assert exc_info.value.shape_b == (2, 3)

    def test_dimension_mismatch_is_value_error(self):
        """Test callers guarding with ValueError still catch shape errors."""
        with pytest.raises(ValueError):
            add(np.zeros((1, 2)), np.zeros((2, 1)))

    def test_multiply_known_result(self):
        """Test a 2x3 by 3x2 product."""
        a = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
        b = [[7.0, 8.0], [9.0, 10.0], [11.0, 12.0]]
        np.testing.assert_array_equal(multiply(a, b), [[58.0, 64.0], [139.0, 154.0]])

    def test_multiply_matches_numpy(self):
        """Test products agree with NumPy matmul."""
        rng = np.random.default_rng(7)
        a = rng.normal(size=(5, 4))
        b = rng.normal(size=(4, 6))
        np.testing.assert_allclose(multiply(a, b), a @ b, rtol=1e-12, atol=1e-12)

    def test_multiply_shape_mismatch(self):
        """Test a.cols != b.rows is rejected."""
        with pytest.raises(DimensionMismatchError, match="multiply"):
            multiply(np.zeros((2, 3)), np.zeros((2, 3)))

    def test_identity_times_vector(self):
        """Test I3 * [1, 2, 3] == [1, 2, 3]."""
        result = multiply_vector(identity(3), [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_multiply_vector_result_length_follows_rows(self):
        """Test the result has one entry per matrix row."""
        a = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
        result = multiply_vector(a, [4.0, 5.0, 6.0])
        np.testing.assert_array_equal(result, [4.0, 5.0])

    def test_multiply_vector_mismatch(self):
        """Test vector length must equal the column count."""
        with pytest.raises(DimensionMismatchError, match="multiply_vector"):
            multiply_vector(identity(3), [1.0, 2.0])


class TestEquality:
    """Test epsilon comparison."""

    def test_reflexive_and_symmetric(self):
        """Test is_equal(A, A) and is_equal(A, B) == is_equal(B, A)."""
        rng = np.random.default_rng(0)
        a = rng.normal(size=(4, 4))
        b = a + 1e-6
        assert is_equal(a, a, 0.0)
        for eps in (0.0, 1e-7, 1e-5):
            assert is_equal(a, b, eps) == is_equal(b, a, eps)

    def test_epsilon_is_inclusive(self):
        """Test differences equal to epsilon count as equal."""
        assert is_equal([[1.0]], [[1.5]], 0.5)
        assert not is_equal([[1.0]], [[1.5]], 0.25)

    def test_default_epsilon(self):
        """Test the configured default tolerance is used."""
        assert is_equal([[1.0]], [[1.0 + 1e-12]])
        assert not is_equal([[1.0]], [[1.0 + 1e-6]])

    def test_negative_epsilon_rejected(self):
        """Test negative tolerance raises."""
        with pytest.raises(ValueError, match="epsilon"):
            is_equal([[1.0]], [[1.0]], -1.0)

    def test_shape_mismatch_raises(self):
        """Test differing shapes raise instead of returning False."""
        with pytest.raises(DimensionMismatchError):
            is_equal(np.zeros((2, 2)), np.zeros((3, 3)))


class TestLayout:
    """Test transpose, swap_rows and to_string."""

    def test_transpose_twice_is_identity(self):
        """Test transpose(transpose(A)) == A exactly."""
        rng = np.random.default_rng(3)
        a = rng.normal(size=(3, 5))
        np.testing.assert_array_equal(transpose(transpose(a)), a)

    def test_transpose_shape(self):
        """Test rows and columns swap."""
        assert transpose(np.zeros((2, 5))).shape == (5, 2)

    def test_transpose_1d_gives_column(self):
        """Test a 1-D array becomes an [n, 1] column."""
        col = transpose([1.0, 2.0, 3.0])
        assert col.shape == (3, 1)
        np.testing.assert_array_equal(col[:, 0], [1.0, 2.0, 3.0])

    def test_swap_rows_in_place(self):
        """Test rows are exchanged in the same buffer."""
        m = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        result = swap_rows(m, 0, 2)
        assert result is m
        np.testing.assert_array_equal(m, [[5.0, 6.0], [3.0, 4.0], [1.0, 2.0]])

    def test_swap_rows_out_of_range(self):
        """Test invalid row index raises IndexError."""
        with pytest.raises(IndexError):
            swap_rows(np.zeros((2, 2)), 0, 2)

    def test_to_string(self):
        """Test fixed-width rendering, one row per line."""
        text = to_string([[1.0, -2.5], [0.0, 10.25]])
        assert text == "   1.000   -2.500 \n   0.000   10.250 \n"
