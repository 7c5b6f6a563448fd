"""Typed fixed-size transform matrices.

``Matrix2D`` (3x3) and ``Matrix3D`` (4x4) keep their elements as named
fields ``m<row><col>`` (1-based, row-major). They default to the identity
and convert to and from NumPy arrays for the heavy lifting.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, replace
from typing import ClassVar, Self

import numpy as np
from numpy.typing import NDArray

from rigidkit.errors import DimensionMismatchError
from rigidkit.matrix import as_matrix, multiply, to_string
from rigidkit.transform.api import (
    PointLike,
    full_transform_2d,
    rotate_2d,
    rotate_3d,
    scale_2d,
    scale_3d,
    transform_point,
    translate_2d,
    translate_3d,
)


class _FixedMatrix:
    """Array conversion and composition shared by Matrix2D and Matrix3D."""

    size: ClassVar[int]

    @classmethod
    def from_array(cls, m) -> Self:
        """Build from a square array of the matching size.

        :raises DimensionMismatchError: If the array has the wrong shape
        """
        arr = as_matrix(m)
        if arr.shape != (cls.size, cls.size):
            raise DimensionMismatchError(
                f"{cls.__name__}.from_array", arr.shape, (cls.size, cls.size)
            )
        return cls(*(float(v) for v in arr.ravel()))

    def to_array(self) -> NDArray[np.float64]:
        return np.array(astuple(self), dtype=np.float64).reshape(self.size, self.size)

    def copy(self) -> Self:
        return replace(self)

    def multiply(self, other: Self) -> Self:
        """Compose two transforms, ``self @ other``.

        Under the row-vector convention ``self`` is applied first.
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot multiply {type(self).__name__} by {type(other).__name__}"
            )
        return self.from_array(multiply(self.to_array(), other.to_array()))

    def __matmul__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.multiply(other)

    def apply(self, point: PointLike) -> NDArray[np.float64]:
        """Transform a point as ``[p..., 1] @ M``."""
        return transform_point(point, self.to_array())

    def __str__(self) -> str:
        return to_string(self.to_array())


@dataclass
class Matrix2D(_FixedMatrix):
    """3x3 transform for 2D points ``[x, y, 1]``."""

    size: ClassVar[int] = 3

    m11: float = 1.0
    m12: float = 0.0
    m13: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m23: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 1.0

    @classmethod
    def rotation(cls, angle: float) -> Matrix2D:
        """Rotation by ``angle`` degrees."""
        return cls.from_array(rotate_2d(angle))

    @classmethod
    def scale(cls, sx: float, sy: float) -> Matrix2D:
        return cls.from_array(scale_2d(sx, sy))

    @classmethod
    def translation(cls, tx: float, ty: float) -> Matrix2D:
        return cls.from_array(translate_2d(tx, ty))

    @classmethod
    def full_transform(
        cls, angle: float, sx: float, sy: float, ox: float, oy: float
    ) -> Matrix2D:
        """See ``full_transform_2d``; scale is added, not composed."""
        return cls.from_array(full_transform_2d(angle, sx, sy, ox, oy))


@dataclass
class Matrix3D(_FixedMatrix):
    """4x4 homogeneous transform for 3D points ``[x, y, z, 1]``."""

    size: ClassVar[int] = 4

    m11: float = 1.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m23: float = 0.0
    m24: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 1.0
    m34: float = 0.0
    m41: float = 0.0
    m42: float = 0.0
    m43: float = 0.0
    m44: float = 1.0

    @classmethod
    def rotation(cls, xa: float, ya: float, za: float, degrees: bool = False) -> Matrix3D:
        """Rotation ``Rx @ Ry @ Rz``; see ``rotate_3d``."""
        return cls.from_array(rotate_3d(xa, ya, za, degrees=degrees))

    @classmethod
    def scale(cls, sx: float, sy: float, sz: float) -> Matrix3D:
        return cls.from_array(scale_3d(sx, sy, sz))

    @classmethod
    def translation(cls, tx: float, ty: float, tz: float) -> Matrix3D:
        return cls.from_array(translate_3d(tx, ty, tz))
