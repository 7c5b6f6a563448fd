"""
Dense matrix module - creation, arithmetic and LU-based inversion.

Matrices are plain 2-D float64 NumPy arrays; hot loops run in
Numba-compiled kernels.

Example:
    >>> from rigidkit.matrix import identity, inverse, multiply
    >>> a = [[4.0, 3.0], [6.0, 3.0]]
    >>> multiply(a, inverse(a))  # identity(2) within rounding
"""

from rigidkit.matrix.dense import (
    LUDecomposition,
    add,
    as_matrix,
    copy,
    create,
    decompose,
    determinant,
    identity,
    inverse,
    is_equal,
    multiply,
    multiply_vector,
    solve,
    subtract,
    swap_rows,
    to_string,
    transpose,
)

__all__ = [
    "LUDecomposition",
    "add",
    "as_matrix",
    "copy",
    "create",
    "decompose",
    "determinant",
    "identity",
    "inverse",
    "is_equal",
    "multiply",
    "multiply_vector",
    "solve",
    "subtract",
    "swap_rows",
    "to_string",
    "transpose",
]
