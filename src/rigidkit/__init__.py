"""
rigidkit - Dense Linear Algebra and Rigid Transforms

Small-to-medium dense matrices, 2D/3D affine transform builders, a 3D
vector type and quaternions, on NumPy with Numba-compiled hot loops.

Features:
- Dense matrices: create, add/subtract, multiply (row-parallel for large
  operands), transpose, epsilon equality
- LU decomposition with partial pivoting: determinant, inverse, solve
- 2D (3x3) and 3D (4x4) builders: rotation, scale, translation, perspective
- Vector3D: dot/cross, normalization, interpolation, angle between
- Quaternion: Hamilton product, conjugation rotation, matrix/Euler/axis-angle
  conversions

Example - Matrices:
    >>> from rigidkit import determinant, identity, inverse, multiply
    >>>
    >>> a = [[4.0, 7.0], [2.0, 6.0]]
    >>> determinant(a)  # 10.0
    >>> multiply(a, inverse(a))  # identity(2) within rounding

Example - Transforms:
    >>> from rigidkit import Matrix3D, rotate_points
    >>>
    >>> points = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    >>> rotate_points(points, 0.0, 0.0, 90.0, degrees=True)
    >>> m = Matrix3D.scale(2.0, 2.0, 2.0) @ Matrix3D.translation(0.0, 0.0, 1.0)

Example - Quaternions:
    >>> from rigidkit import Quaternion, Vector3D
    >>>
    >>> q = Quaternion.from_euler(0.1, 0.2, 0.3)
    >>> q.rotate(Vector3D(1.0, 0.0, 0.0))
    >>> Quaternion.from_matrix(q.to_matrix())  # q, up to sign
"""

__version__ = "0.1.0"

from rigidkit.config import CONFIG, OperationSpec
from rigidkit.errors import DimensionMismatchError, SingularMatrixError
from rigidkit.matrix import (
    LUDecomposition,
    add,
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
from rigidkit.protocols import RandomSource
from rigidkit.quaternion import Quaternion
from rigidkit.transform import (
    Matrix2D,
    Matrix3D,
    full_transform_2d,
    perspective_3d,
    rotate_2d,
    rotate_3d,
    rotate_point,
    rotate_points,
    scale_2d,
    scale_3d,
    transform_point,
    translate_2d,
    translate_3d,
)
from rigidkit.vector import Vector3D
from rigidkit.verification import RotationVerifier

__all__ = [
    # Config
    "CONFIG",
    "OperationSpec",
    # Errors
    "DimensionMismatchError",
    "SingularMatrixError",
    # Dense matrices
    "LUDecomposition",
    "add",
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
    # Transforms
    "Matrix2D",
    "Matrix3D",
    "rotate_2d",
    "scale_2d",
    "translate_2d",
    "full_transform_2d",
    "rotate_3d",
    "scale_3d",
    "translate_3d",
    "perspective_3d",
    "rotate_points",
    "rotate_point",
    "transform_point",
    # Value types
    "Vector3D",
    "Quaternion",
    "RandomSource",
    # Verification
    "RotationVerifier",
]
