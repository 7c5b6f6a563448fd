"""
Transform module - 2D (3x3) and 3D (4x4) affine transform builders.

Example:
    >>> from rigidkit.transform import Matrix3D, rotate_3d, rotate_points
    >>> points = np.array([[1.0, 0.0, 0.0]])
    >>> rotate_points(points, 0.0, 0.0, np.pi / 2)  # -> [[0, 1, 0]]
    >>> m = Matrix3D.scale(2.0, 2.0, 2.0) @ Matrix3D.translation(1.0, 0.0, 0.0)
"""

from rigidkit.transform.api import (
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
from rigidkit.transform.matrices import Matrix2D, Matrix3D

__all__ = [
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
]
