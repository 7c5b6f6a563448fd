"""
Numba-optimized kernels for dense matrix operations.

Provides JIT-compiled kernels for the loops behind multiply, LU
decomposition and triangular solves. All kernels write into
caller-allocated output buffers.
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


# fastmath stays off in the multiply kernels: both variants must sum each
# element in the same k order so their results are bit-identical.
@njit(cache=True, nogil=True)
def matmul_numba(
    a: NDArray[np.float64],
    b: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Sequential matrix product.

    Args:
        a: Left operand [M, K]
        b: Right operand [K, N]
        out: Output [M, N] (modified in-place)
    """
    n_rows = a.shape[0]
    inner = a.shape[1]
    n_cols = b.shape[1]

    for i in range(n_rows):
        for j in range(n_cols):
            acc = 0.0
            for k in range(inner):
                acc += a[i, k] * b[k, j]
            out[i, j] = acc


@njit(parallel=True, cache=True, nogil=True)
def matmul_parallel_numba(
    a: NDArray[np.float64],
    b: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Row-parallel matrix product.

    Each output row depends only on one row of ``a`` and all of ``b``,
    so rows are distributed across threads with no synchronization.

    Args:
        a: Left operand [M, K]
        b: Right operand [K, N]
        out: Output [M, N] (modified in-place)
    """
    n_rows = a.shape[0]
    inner = a.shape[1]
    n_cols = b.shape[1]

    for i in prange(n_rows):
        for j in range(n_cols):
            acc = 0.0
            for k in range(inner):
                acc += a[i, k] * b[k, j]
            out[i, j] = acc


@njit(cache=True, nogil=True)
def matvec_numba(
    a: NDArray[np.float64],
    v: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Matrix times column vector.

    Args:
        a: Matrix [M, K]
        v: Vector [K]
        out: Output vector [M] (modified in-place)
    """
    n_rows = a.shape[0]
    inner = a.shape[1]

    for i in range(n_rows):
        acc = 0.0
        for k in range(inner):
            acc += a[i, k] * v[k]
        out[i] = acc


@njit(cache=True, nogil=True)
def swap_rows_numba(m: NDArray[np.float64], i: int, j: int) -> None:
    """Exchange rows ``i`` and ``j`` of ``m`` in place."""
    if i == j:
        return
    for k in range(m.shape[1]):
        tmp = m[i, k]
        m[i, k] = m[j, k]
        m[j, k] = tmp


@njit(cache=True, nogil=True)
def lu_decompose_numba(
    lu: NDArray[np.float64],
    perm: NDArray[np.int64],
    pivot_tolerance: float,
) -> int:
    """
    Doolittle LU decomposition with partial (absolute-value) pivoting.

    On return ``lu`` holds the unit-lower multipliers below the diagonal
    and the upper factor on and above it; ``perm`` holds the original
    row index of every row.

    Args:
        lu: Square working copy [N, N] (modified in-place)
        perm: Row permutation [N], initialised to 0..N-1 (modified in-place)
        pivot_tolerance: Pivots below this magnitude mean singular

    Returns:
        Row-swap parity (+1 or -1), or 0 when the matrix is singular
    """
    n = lu.shape[0]
    toggle = 1

    for j in range(n - 1):
        col_max = abs(lu[j, j])
        p_row = j
        for i in range(j + 1, n):
            candidate = abs(lu[i, j])
            if candidate > col_max:
                col_max = candidate
                p_row = i

        if p_row != j:
            swap_rows_numba(lu, p_row, j)
            tmp = perm[p_row]
            perm[p_row] = perm[j]
            perm[j] = tmp
            toggle = -toggle

        if abs(lu[j, j]) < pivot_tolerance:
            return 0

        for i in range(j + 1, n):
            lu[i, j] /= lu[j, j]
            for k in range(j + 1, n):
                lu[i, k] -= lu[i, j] * lu[j, k]

    return toggle


@njit(cache=True, nogil=True)
def lu_solve_numba(
    lu: NDArray[np.float64],
    b: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Solve ``L U x = b`` for an already permuted right-hand side.

    Forward substitution uses the implicit unit diagonal of L; back
    substitution divides by the diagonal of U.

    Args:
        lu: Combined factors from lu_decompose_numba [N, N]
        b: Permuted right-hand side [N]
        out: Solution [N] (modified in-place)
    """
    n = lu.shape[0]

    for i in range(n):
        out[i] = b[i]

    for i in range(1, n):
        acc = out[i]
        for j in range(i):
            acc -= lu[i, j] * out[j]
        out[i] = acc

    out[n - 1] /= lu[n - 1, n - 1]
    for i in range(n - 2, -1, -1):
        acc = out[i]
        for j in range(i + 1, n):
            acc -= lu[i, j] * out[j]
        out[i] = acc / lu[i, i]


@njit(cache=True, nogil=True)
def lu_inverse_numba(
    lu: NDArray[np.float64],
    perm: NDArray[np.int64],
    out: NDArray[np.float64],
) -> None:
    """
    Assemble the inverse column by column from LU factors.

    Args:
        lu: Combined factors [N, N]
        perm: Row permutation from lu_decompose_numba [N]
        out: Inverse [N, N] (modified in-place)
    """
    n = lu.shape[0]
    b = np.zeros(n, dtype=np.float64)
    x = np.zeros(n, dtype=np.float64)

    for i in range(n):
        for j in range(n):
            b[j] = 1.0 if perm[j] == i else 0.0
        lu_solve_numba(lu, b, x)
        for j in range(n):
            out[j, i] = x[j]


def warmup_matrix_kernels() -> None:
    """Warm up Numba JIT compilation for matrix kernels.

    Called on module import to avoid first-call overhead.
    """
    a = np.eye(3, dtype=np.float64)
    v = np.ones(3, dtype=np.float64)
    out = np.zeros((3, 3), dtype=np.float64)
    out_v = np.zeros(3, dtype=np.float64)
    perm = np.arange(3, dtype=np.int64)

    matmul_numba(a, a, out)
    matmul_parallel_numba(a, a, out)
    matvec_numba(a, v, out_v)

    lu = a.copy()
    lu_decompose_numba(lu, perm, 1.0e-20)
    lu_solve_numba(lu, v, out_v)
    lu_inverse_numba(lu, perm, out)

    logger.debug("Matrix Numba kernels warmed up")


# Warmup on import
warmup_matrix_kernels()
