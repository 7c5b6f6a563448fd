"""Tests for LU decomposition, determinant, inverse and solve."""

import logging

import numpy as np
import pytest

from rigidkit.errors import DimensionMismatchError, SingularMatrixError
from rigidkit.matrix import (
    LUDecomposition,
    decompose,
    determinant,
    identity,
    inverse,
    is_equal,
    multiply,
    solve,
)


def _well_conditioned(rng: np.random.Generator, n: int) -> np.ndarray:
    """Random matrix made diagonally dominant so it is safely invertible."""
    return rng.normal(size=(n, n)) + n * np.eye(n)


class TestDecompose:
    """Test Doolittle decomposition with partial pivoting."""

    def test_zero_pivot_swaps_rows(self):
        """Test [[0, 1], [1, 0]] succeeds with one swap (toggle -1)."""
        result = decompose([[0.0, 1.0], [1.0, 0.0]])
        assert isinstance(result, LUDecomposition)
        assert result.toggle == -1
        np.testing.assert_array_equal(result.perm, [1, 0])

    def test_identity_has_no_swaps(self):
        """Test identity decomposes with toggle +1 and identity factors."""
        result = decompose(identity(3))
        assert result.toggle == 1
        np.testing.assert_array_equal(result.lower(), np.eye(3))
        np.testing.assert_array_equal(result.upper(), np.eye(3))

    def test_factors_reconstruct_permuted_input(self):
        """Test P @ A == L @ U."""
        rng = np.random.default_rng(11)
        a = rng.normal(size=(5, 5))
        result = decompose(a)
        np.testing.assert_allclose(
            result.permutation_matrix() @ a, result.lower() @ result.upper(), atol=1e-12
        )

    def test_pivot_uses_absolute_value(self):
        """Test the largest-magnitude entry is chosen even when negative."""
        result = decompose([[1.0, 2.0], [-5.0, 1.0]])
        assert result.toggle == -1
        assert result.lu[0, 0] == -5.0

    def test_lower_multipliers_bounded(self):
        """Test partial pivoting keeps every multiplier within [-1, 1]."""
        rng = np.random.default_rng(5)
        result = decompose(rng.normal(size=(6, 6)))
        assert np.all(np.abs(np.tril(result.lu, k=-1)) <= 1.0)

    def test_input_not_modified(self):
        """Test decomposition works on a copy."""
        a = np.array([[0.0, 1.0], [1.0, 0.0]])
        decompose(a)
        np.testing.assert_array_equal(a, [[0.0, 1.0], [1.0, 0.0]])

    def test_singular_returns_none(self, caplog):
        """Test a zero column yields None and a debug message."""
        with caplog.at_level(logging.DEBUG, logger="rigidkit.matrix.dense"):
            result = decompose([[0.0, 1.0], [0.0, 2.0]])
        assert result is None
        assert "[LU] No usable pivot" in caplog.text

    def test_non_square_rejected(self):
        """Test non-square input raises."""
        with pytest.raises(DimensionMismatchError, match="decompose"):
            decompose(np.zeros((2, 3)))

    @pytest.mark.parametrize(
        "operation",
        [decompose, determinant, inverse, lambda m: solve(m, np.zeros(0))],
        ids=["decompose", "determinant", "inverse", "solve"],
    )
    def test_empty_matrix_rejected(self, operation):
        """Test a 0x0 matrix is refused by every LU entry point."""
        with pytest.raises(ValueError, match="must be positive"):
            operation(np.zeros((0, 0)))


class TestDeterminant:
    """Test determinant from the LU diagonal."""

    def test_identity(self):
        """Test det(I3) == 1."""
        assert determinant(identity(3)) == 1.0

    def test_known_values(self):
        """Test small matrices with hand-computed determinants."""
        assert determinant([[4.0, 7.0], [2.0, 6.0]]) == pytest.approx(10.0)
        assert determinant([[0.0, 1.0], [1.0, 0.0]]) == pytest.approx(-1.0)
        assert determinant([[2.0, 0.0, 1.0], [1.0, 3.0, 2.0], [1.0, 1.0, 2.0]]) == pytest.approx(
            6.0
        )

    def test_matches_numpy(self):
        """Test agreement with numpy.linalg.det."""
        rng = np.random.default_rng(21)
        a = rng.normal(size=(6, 6))
        assert determinant(a) == pytest.approx(np.linalg.det(a), rel=1e-10)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_product_rule(self, seed):
        """Test det(AB) == det(A) * det(B)."""
        rng = np.random.default_rng(seed)
        a = rng.normal(size=(4, 4))
        b = rng.normal(size=(4, 4))
        assert determinant(multiply(a, b)) == pytest.approx(
            determinant(a) * determinant(b), rel=1e-9, abs=1e-12
        )

    def test_rank_deficient_is_zero(self):
        """Test a singular matrix caught only at the last pivot gives ~0."""
        assert determinant([[1.0, 2.0], [2.0, 4.0]]) == pytest.approx(0.0, abs=1e-15)

    def test_singular_raises(self):
        """Test a singular decomposition propagates as an error."""
        with pytest.raises(SingularMatrixError, match="determinant"):
            determinant(np.zeros((3, 3)))


class TestInverse:
    """Test inversion via LU factors."""

    def test_identity(self):
        """Test inverse(I3) == I3."""
        np.testing.assert_array_equal(inverse(identity(3)), np.eye(3))

    @pytest.mark.parametrize("n", [2, 3, 5, 8])
    def test_product_with_inverse_is_identity(self, n):
        """Test A @ inverse(A) == I within 1e-9."""
        rng = np.random.default_rng(n)
        a = _well_conditioned(rng, n)
        assert is_equal(multiply(a, inverse(a)), identity(n), 1e-9)
        assert is_equal(multiply(inverse(a), a), identity(n), 1e-9)

    def test_permuted_matrix(self):
        """Test inversion when rows must be swapped."""
        a = [[0.0, 2.0], [3.0, 0.0]]
        np.testing.assert_allclose(inverse(a), [[0.0, 1.0 / 3.0], [0.5, 0.0]])

    def test_singular_raises(self):
        """Test zero matrix cannot be inverted."""
        with pytest.raises(SingularMatrixError):
            inverse(np.zeros((2, 2)))

    def test_zero_trailing_pivot_raises(self):
        """Test singularity discovered at the last pivot is reported."""
        with pytest.raises(SingularMatrixError, match="inverse"):
            inverse([[1.0, 2.0], [2.0, 4.0]])


class TestSolve:
    """Test single right-hand side solve."""

    def test_matches_numpy(self):
        """Test agreement with numpy.linalg.solve."""
        rng = np.random.default_rng(9)
        a = _well_conditioned(rng, 5)
        b = rng.normal(size=5)
        np.testing.assert_allclose(solve(a, b), np.linalg.solve(a, b), atol=1e-12)

    def test_requires_pivoting(self):
        """Test a system whose first pivot is zero."""
        np.testing.assert_allclose(solve([[0.0, 1.0], [1.0, 0.0]], [3.0, 4.0]), [4.0, 3.0])

    def test_shape_mismatch(self):
        """Test rhs length must equal the matrix size."""
        with pytest.raises(DimensionMismatchError, match="solve"):
            solve(identity(3), [1.0, 2.0])

    def test_singular_raises(self):
        """Test singular systems raise."""
        with pytest.raises(SingularMatrixError, match="solve"):
            solve([[1.0, 1.0], [1.0, 1.0]], [1.0, 2.0])
