"""
Dense matrix operations on 2-D float64 NumPy buffers.

Functions:

- Creation: ``create()``, ``identity()``, ``copy()``, ``as_matrix()``
- Arithmetic: ``add()``, ``subtract()``, ``multiply()``, ``multiply_vector()``
- Comparison: ``is_equal()``
- Layout: ``transpose()``, ``swap_rows()``
- LU: ``decompose()``, ``determinant()``, ``inverse()``, ``solve()``

Every function returns a new array; inputs are never modified except by
``swap_rows()``, which is explicitly in-place.
"""

from __future__ import annotations

from typing import TypeAlias

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from rigidkit.config import LINALG_CONFIG
from rigidkit.errors import DimensionMismatchError, SingularMatrixError
from rigidkit.matrix.kernels import (
    lu_decompose_numba,
    lu_inverse_numba,
    lu_solve_numba,
    matmul_numba,
    matmul_parallel_numba,
    matvec_numba,
    swap_rows_numba,
)

logger = logging.getLogger(__name__)

# Type aliases (Python 3.12+ syntax)
MatrixLike: TypeAlias = NDArray[np.float64] | list | tuple
VectorLike: TypeAlias = NDArray[np.float64] | list | tuple


@dataclass(frozen=True)
class LUDecomposition:
    """Result of ``decompose()``.

    Attributes:
        lu: Combined factors; unit-lower multipliers below the diagonal,
            upper factor on and above it
        perm: Original row index of each row after pivoting
        toggle: +1 for an even number of row swaps, -1 for odd
    """

    lu: NDArray[np.float64]
    perm: NDArray[np.int64]
    toggle: int

    @property
    def size(self) -> int:
        return self.lu.shape[0]

    def lower(self) -> NDArray[np.float64]:
        """Unit lower-triangular factor L."""
        return np.tril(self.lu, k=-1) + np.eye(self.size)

    def upper(self) -> NDArray[np.float64]:
        """Upper-triangular factor U."""
        return np.triu(self.lu)

    def permutation_matrix(self) -> NDArray[np.float64]:
        """Permutation matrix P such that ``P @ A == L @ U``."""
        return np.eye(self.size)[self.perm]


# ============================================================================
# Creation
# ============================================================================


def as_matrix(m: MatrixLike, name: str = "matrix") -> NDArray[np.float64]:
    """Convert input to a 2-D float64 array.

    Arrays that are already float64 are returned as-is (no copy).

    :param m: Nested sequence or array
    :param name: Argument name used in error messages
    :returns: 2-D float64 array
    :raises ValueError: If the input is not two-dimensional
    """
    arr = np.asarray(m, dtype=np.float64)
    if arr.ndim != 2:
        raise ValueError(f"{name} must be 2-D, got {arr.ndim}-D with shape {arr.shape}")
    return arr


def _as_vector(v: VectorLike, name: str = "vector") -> NDArray[np.float64]:
    arr = np.asarray(v, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1-D, got {arr.ndim}-D with shape {arr.shape}")
    return arr


def create(rows: int, cols: int) -> NDArray[np.float64]:
    """Create a zero-filled matrix.

    :param rows: Number of rows
    :param cols: Number of columns
    :returns: New [rows, cols] matrix of zeros
    :raises ValueError: If either dimension is not positive
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Matrix dimensions must be positive, got {rows}x{cols}")
    return np.zeros((rows, cols), dtype=np.float64)


def identity(n: int) -> NDArray[np.float64]:
    """Create an n x n identity matrix."""
    result = create(n, n)
    np.fill_diagonal(result, 1.0)
    return result


def copy(m: MatrixLike) -> NDArray[np.float64]:
    """Independent deep copy of a matrix."""
    return np.array(as_matrix(m), dtype=np.float64, copy=True)


def to_string(m: MatrixLike) -> str:
    """Render a matrix one row per line, each element as ``%8.3f``.

    :param m: Matrix to render
    :returns: Text block ending with a newline
    """
    arr = as_matrix(m)
    lines = []
    for row in arr:
        lines.append("".join(f"{value:8.3f} " for value in row))
    return "\n".join(lines) + "\n"


# ============================================================================
# Arithmetic
# ============================================================================


def add(a: MatrixLike, b: MatrixLike) -> NDArray[np.float64]:
    """Element-wise sum.

    :raises DimensionMismatchError: If shapes differ
    """
    a = as_matrix(a, "a")
    b = as_matrix(b, "b")
    if a.shape != b.shape:
        raise DimensionMismatchError("add", a.shape, b.shape)
    return a + b


def subtract(a: MatrixLike, b: MatrixLike) -> NDArray[np.float64]:
    """Element-wise difference ``a - b``.

    :raises DimensionMismatchError: If shapes differ
    """
    a = as_matrix(a, "a")
    b = as_matrix(b, "b")
    if a.shape != b.shape:
        raise DimensionMismatchError("subtract", a.shape, b.shape)
    return a - b


def multiply(
    a: MatrixLike,
    b: MatrixLike,
    parallel: bool | None = None,
) -> NDArray[np.float64]:
    """Matrix product ``a @ b``.

    Rows of the result are independent, so large products run on the
    row-parallel kernel. Both kernels accumulate in the same order and
    return identical results.

    :param a: Left operand [M, K]
    :param b: Right operand [K, N]
    :param parallel: Force (True) or forbid (False) the parallel kernel;
        None selects it when M >= ``LINALG_CONFIG.parallel_min_rows``
    :returns: New [M, N] matrix
    :raises DimensionMismatchError: If ``a.cols != b.rows``
    """
    a = np.ascontiguousarray(as_matrix(a, "a"))
    b = np.ascontiguousarray(as_matrix(b, "b"))
    if a.shape[1] != b.shape[0]:
        raise DimensionMismatchError("multiply", a.shape, b.shape)

    if parallel is None:
        parallel = a.shape[0] >= LINALG_CONFIG.parallel_min_rows

    out = np.zeros((a.shape[0], b.shape[1]), dtype=np.float64)
    if parallel:
        logger.debug("[Matrix] Row-parallel multiply %s x %s", a.shape, b.shape)
        matmul_parallel_numba(a, b, out)
    else:
        matmul_numba(a, b, out)
    return out


def multiply_vector(a: MatrixLike, v: VectorLike) -> NDArray[np.float64]:
    """Matrix times column vector.

    :param a: Matrix [M, K]
    :param v: Vector [K]
    :returns: New vector [M]
    :raises DimensionMismatchError: If ``a.cols != len(v)``
    """
    a = np.ascontiguousarray(as_matrix(a, "a"))
    v = np.ascontiguousarray(_as_vector(v, "v"))
    if a.shape[1] != v.shape[0]:
        raise DimensionMismatchError("multiply_vector", a.shape, v.shape)

    out = np.zeros(a.shape[0], dtype=np.float64)
    matvec_numba(a, v, out)
    return out


# ============================================================================
# Comparison and layout
# ============================================================================


def is_equal(a: MatrixLike, b: MatrixLike, epsilon: float | None = None) -> bool:
    """Check that every element pair differs by at most ``epsilon``.

    Shapes must match; a mismatch is an error rather than ``False``.

    :param a: First matrix
    :param b: Second matrix
    :param epsilon: Absolute tolerance (default ``LINALG_CONFIG.equality_epsilon``)
    :returns: True if all elements are within tolerance
    :raises DimensionMismatchError: If shapes differ
    :raises ValueError: If epsilon is negative
    """
    if epsilon is None:
        epsilon = LINALG_CONFIG.equality_epsilon
    if epsilon < 0:
        raise ValueError(f"epsilon must be non-negative, got {epsilon}")

    a = as_matrix(a, "a")
    b = as_matrix(b, "b")
    if a.shape != b.shape:
        raise DimensionMismatchError("is_equal", a.shape, b.shape)
    return bool(np.all(np.abs(a - b) <= epsilon))


def transpose(m: MatrixLike) -> NDArray[np.float64]:
    """Swap rows and columns.

    A 1-D input of length n becomes an [n, 1] column.

    :param m: 1-D or 2-D array
    :returns: New transposed matrix
    """
    arr = np.asarray(m, dtype=np.float64)
    if arr.ndim == 1:
        return arr.reshape(-1, 1).copy()
    if arr.ndim != 2:
        raise ValueError(f"transpose expects 1-D or 2-D input, got shape {arr.shape}")
    return np.ascontiguousarray(arr.T)


def swap_rows(m: NDArray[np.float64], i: int, j: int) -> NDArray[np.float64]:
    """Exchange rows ``i`` and ``j`` of ``m`` (IN-PLACE).

    :param m: Contiguous float64 matrix to modify
    :returns: The same array, for chaining
    :raises IndexError: If a row index is out of range
    """
    rows = m.shape[0]
    for idx in (i, j):
        if not -rows <= idx < rows:
            raise IndexError(f"row index {idx} out of range for {rows} rows")
    swap_rows_numba(m, i % rows, j % rows)
    return m


# ============================================================================
# LU decomposition
# ============================================================================


def decompose(m: MatrixLike) -> LUDecomposition | None:
    """Doolittle LU decomposition with partial pivoting.

    For each pivot column the row with the largest absolute value at or
    below the diagonal is swapped into place.

    :param m: Square matrix [N, N] (not modified)
    :returns: LUDecomposition, or None when a pivot falls below
        ``LINALG_CONFIG.pivot_tolerance`` (singular matrix)
    :raises DimensionMismatchError: If the matrix is not square
    :raises ValueError: If the matrix is empty
    """
    arr = as_matrix(m)
    if arr.shape[0] != arr.shape[1]:
        raise DimensionMismatchError("decompose", arr.shape)

    n = arr.shape[0]
    if n == 0:
        raise ValueError("Matrix dimensions must be positive, got 0x0")
    lu = np.array(arr, dtype=np.float64, order="C", copy=True)
    perm = np.arange(n, dtype=np.int64)

    toggle = lu_decompose_numba(lu, perm, LINALG_CONFIG.pivot_tolerance)
    if toggle == 0:
        logger.debug("[LU] No usable pivot for %dx%d matrix", n, n)
        return None

    return LUDecomposition(lu=lu, perm=perm, toggle=int(toggle))


def _decompose_nonsingular(m: MatrixLike, operation: str) -> LUDecomposition:
    result = decompose(m)
    if result is None:
        raise SingularMatrixError(operation, as_matrix(m).shape[0])
    # The elimination loop never checks the last pivot; substitution divides by it.
    n = result.size
    if abs(result.lu[n - 1, n - 1]) < LINALG_CONFIG.pivot_tolerance:
        logger.debug("[LU] Zero trailing pivot for %dx%d matrix", n, n)
        raise SingularMatrixError(operation, n)
    return result


def determinant(m: MatrixLike) -> float:
    """Determinant as ``toggle * prod(diag(U))``.

    :param m: Square matrix
    :returns: Determinant
    :raises SingularMatrixError: If decomposition reports singularity
    :raises DimensionMismatchError: If the matrix is not square
    """
    result = decompose(m)
    if result is None:
        raise SingularMatrixError("determinant", as_matrix(m).shape[0])

    det = float(result.toggle)
    for i in range(result.size):
        det *= result.lu[i, i]
    return det


def inverse(m: MatrixLike) -> NDArray[np.float64]:
    """Inverse via LU factors, one unit column at a time.

    :param m: Square non-singular matrix
    :returns: New inverse matrix
    :raises SingularMatrixError: If the matrix is singular
    :raises DimensionMismatchError: If the matrix is not square
    """
    result = _decompose_nonsingular(m, "inverse")
    out = np.zeros_like(result.lu)
    lu_inverse_numba(result.lu, result.perm, out)
    return out


def solve(m: MatrixLike, b: VectorLike) -> NDArray[np.float64]:
    """Solve ``m x = b`` for a single right-hand side.

    :param m: Square non-singular matrix [N, N]
    :param b: Right-hand side [N]
    :returns: Solution vector [N]
    :raises SingularMatrixError: If the matrix is singular
    :raises DimensionMismatchError: If shapes are not conformable
    """
    arr = as_matrix(m)
    rhs = _as_vector(b, "b")
    if arr.shape[0] != rhs.shape[0]:
        raise DimensionMismatchError("solve", arr.shape, rhs.shape)

    result = _decompose_nonsingular(arr, "solve")
    out = np.zeros(result.size, dtype=np.float64)
    lu_solve_numba(result.lu, np.ascontiguousarray(rhs[result.perm]), out)
    return out
