"""
2D and 3D affine transform builders.

Builders return plain NumPy arrays so they compose directly with
``rigidkit.matrix`` operations.

Functions:

- 2D (3x3, angles in degrees): ``rotate_2d()``, ``scale_2d()``,
  ``translate_2d()``, ``full_transform_2d()``
- 3D (4x4, angles in radians unless ``degrees=True``): ``rotate_3d()``,
  ``scale_3d()``, ``translate_3d()``, ``perspective_3d()``
- Application: ``rotate_points()`` (in-place), ``rotate_point()``,
  ``transform_point()``

Conventions:
    Translation offsets live in the last row, so a point is moved with
    ``[x, y, 1] @ M`` / ``[x, y, z, 1] @ M``. The 3D rotation blocks rotate
    column vectors (``M @ [x, y, z, 1]``), which is how ``rotate_points()``
    applies them and matches ``Quaternion.to_matrix()``.
"""

from __future__ import annotations

from typing import TypeAlias

import logging
import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from rigidkit.errors import DimensionMismatchError
from rigidkit.matrix import as_matrix, identity, multiply, multiply_vector
from rigidkit.vector import Vector3D

logger = logging.getLogger(__name__)

# Type aliases (Python 3.12+ syntax)
PointLike: TypeAlias = Vector3D | Sequence[float] | NDArray[np.float64]


def _angle(angle: float, degrees: bool) -> float:
    return math.radians(angle) if degrees else float(angle)


# ============================================================================
# 2D builders (3x3)
# ============================================================================


def rotate_2d(angle: float) -> NDArray[np.float64]:
    """Rotation by ``angle`` degrees.

    :param angle: Rotation angle in degrees
    :returns: [3, 3] matrix ``[[c, s, 0], [-s, c, 0], [0, 0, 1]]``
    """
    rad = math.radians(angle)
    c = math.cos(rad)
    s = math.sin(rad)
    m = identity(3)
    m[0, 0] = c
    m[0, 1] = s
    m[1, 0] = -s
    m[1, 1] = c
    return m


def scale_2d(sx: float, sy: float) -> NDArray[np.float64]:
    """Per-axis scale ``diag(sx, sy, 1)``."""
    m = identity(3)
    m[0, 0] = sx
    m[1, 1] = sy
    return m


def translate_2d(tx: float, ty: float) -> NDArray[np.float64]:
    """Translation with offsets in the last row."""
    m = identity(3)
    m[2, 0] = tx
    m[2, 1] = ty
    return m


def full_transform_2d(
    angle: float, sx: float, sy: float, ox: float, oy: float
) -> NDArray[np.float64]:
    """Rotation, scale and offset in a single matrix.

    Not a true composition: the scale factors are *added* to the cosine
    terms. Use ``scale_2d(...) @ rotate_2d(...) @ translate_2d(...)`` for
    a composed transform.

    :param angle: Rotation angle in degrees
    :param sx: Added to ``m11``
    :param sy: Added to ``m22``
    :param ox: X offset (last row)
    :param oy: Y offset (last row)
    :returns: [3, 3] matrix ``[[c + sx, s, 0], [-s, c + sy, 0], [ox, oy, 1]]``
    """
    m = rotate_2d(angle)
    m[0, 0] += sx
    m[1, 1] += sy
    m[2, 0] = ox
    m[2, 1] = oy
    return m


# ============================================================================
# 3D builders (4x4)
# ============================================================================


def _rotation_x(angle: float) -> NDArray[np.float64]:
    c = math.cos(angle)
    s = math.sin(angle)
    m = identity(4)
    m[1, 1] = c
    m[1, 2] = -s
    m[2, 1] = s
    m[2, 2] = c
    return m


def _rotation_y(angle: float) -> NDArray[np.float64]:
    c = math.cos(angle)
    s = math.sin(angle)
    m = identity(4)
    m[0, 0] = c
    m[0, 2] = s
    m[2, 0] = -s
    m[2, 2] = c
    return m


def _rotation_z(angle: float) -> NDArray[np.float64]:
    c = math.cos(angle)
    s = math.sin(angle)
    m = identity(4)
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


def rotate_3d(xa: float, ya: float, za: float, degrees: bool = False) -> NDArray[np.float64]:
    """Rotation about X, then Y, then Z, combined as ``Rx @ Ry @ Rz``.

    The multiplication order is fixed; rotations do not commute.

    :param xa: Angle about the X axis
    :param ya: Angle about the Y axis
    :param za: Angle about the Z axis
    :param degrees: Interpret angles as degrees instead of radians
    :returns: [4, 4] rotation matrix
    """
    rx = _rotation_x(_angle(xa, degrees))
    ry = _rotation_y(_angle(ya, degrees))
    rz = _rotation_z(_angle(za, degrees))
    return multiply(multiply(rx, ry), rz)


def scale_3d(sx: float, sy: float, sz: float) -> NDArray[np.float64]:
    """Per-axis scale ``diag(sx, sy, sz, 1)``."""
    m = identity(4)
    m[0, 0] = sx
    m[1, 1] = sy
    m[2, 2] = sz
    return m


def translate_3d(tx: float, ty: float, tz: float) -> NDArray[np.float64]:
    """Translation with offsets in the last row."""
    m = identity(4)
    m[3, 0] = tx
    m[3, 1] = ty
    m[3, 2] = tz
    return m


def perspective_3d(v: PointLike, f: float) -> NDArray[np.float64]:
    """Simplified depth foreshortening of a single point.

    With ``r = 1 / f`` each component maps to ``c / r * z + 1``. This is a
    convenience for a fixed viewing setup, not a projective divide.

    :param v: Point (x, y, z)
    :param f: Focal parameter
    :returns: Homogeneous point [x', y', z', 1]
    :raises ZeroDivisionError: If ``f`` is zero
    """
    x, y, z = (float(c) for c in v)
    r = 1.0 / float(f)
    return np.array(
        [x / r * z + 1.0, y / r * z + 1.0, z / r * z + 1.0, 1.0], dtype=np.float64
    )


# ============================================================================
# Application
# ============================================================================


def rotate_points(points, xa: float, ya: float, za: float, degrees: bool = False):
    """Rotate every point IN-PLACE by ``rotate_3d(xa, ya, za)``.

    Each point is lifted to ``[x, y, z, 1]``, multiplied by the rotation
    and its first three components written back.

    :param points: Iterable of Vector3D, mutable 3-sequences, or an [N, 3] array
    :param xa: Angle about the X axis
    :param ya: Angle about the Y axis
    :param za: Angle about the Z axis
    :param degrees: Interpret angles as degrees instead of radians
    :returns: ``points``, for chaining
    :raises TypeError: If ``points`` is an array without a floating dtype
    """
    if isinstance(points, np.ndarray) and not np.issubdtype(points.dtype, np.floating):
        raise TypeError(
            f"rotate_points writes results in place and needs a floating array, got {points.dtype}"
        )
    rotation = rotate_3d(xa, ya, za, degrees=degrees)
    count = 0
    for point in points:
        if isinstance(point, Vector3D):
            rotated = multiply_vector(rotation, [point.x, point.y, point.z, 1.0])
            point.set(rotated[0], rotated[1], rotated[2])
        else:
            rotated = multiply_vector(rotation, [point[0], point[1], point[2], 1.0])
            point[0] = rotated[0]
            point[1] = rotated[1]
            point[2] = rotated[2]
        count += 1
    logger.debug("[Transform] Rotated %d points", count)
    return points


def rotate_point(
    v: PointLike, xa: float, ya: float, za: float, degrees: bool = False
) -> NDArray[np.float64]:
    """Rotated copy of a single point.

    :returns: New [3] array
    """
    x, y, z = (float(c) for c in v)
    rotated = multiply_vector(rotate_3d(xa, ya, za, degrees=degrees), [x, y, z, 1.0])
    return rotated[:3].copy()


def transform_point(point: PointLike, matrix) -> NDArray[np.float64]:
    """Apply a 3x3 or 4x4 transform with the row-vector convention.

    :param point: Point with one fewer component than the matrix size
    :param matrix: Square transform matrix (ndarray, Matrix2D or Matrix3D)
    :returns: Non-homogeneous part of ``[p..., 1] @ matrix``
    :raises DimensionMismatchError: If the point and matrix sizes disagree
    """
    if hasattr(matrix, "to_array"):
        matrix = matrix.to_array()
    m = as_matrix(matrix, "matrix")
    p = np.asarray(list(point), dtype=np.float64)
    if m.shape[0] != m.shape[1] or p.shape[0] != m.shape[0] - 1:
        raise DimensionMismatchError("transform_point", p.shape, m.shape)

    row = np.append(p, 1.0)[np.newaxis, :]
    return multiply(row, m)[0, :-1]
