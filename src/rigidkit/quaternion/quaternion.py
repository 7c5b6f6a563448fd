"""Quaternion rotation representation.

Quaternions are immutable values; every operation returns a new
instance. Conversions go through the array helpers in
``rigidkit.shared.rotation`` so the matrix and quaternion conventions
always agree.

Quaternion Convention: (w, x, y, z) - scalar first
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from rigidkit.config import ROTATION_CONFIG
from rigidkit.shared.rotation import (
    axis_angle_to_quaternion,
    embed_rotation_4x4,
    quaternion_multiply,
    quaternion_to_euler,
    quaternion_to_rotation_matrix,
    rotation_matrix_to_quaternion,
)
from rigidkit.vector import Vector3D

_X_AXIS = Vector3D(1.0, 0.0, 0.0)
_Y_AXIS = Vector3D(0.0, 1.0, 0.0)
_Z_AXIS = Vector3D(0.0, 0.0, 1.0)


def to_radians(angle: float) -> float:
    """Degrees to radians."""
    return angle * math.pi / 180.0


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion ``w + xi + yj + zk``.

    A quaternion represents a rotation when its magnitude is 1.
    ``to_matrix()``, ``to_euler()`` and ``rotate()`` normalize a non-unit
    quaternion before using it.

    Example:
        >>> q = Quaternion.from_axis_angle((0.0, 0.0, 1.0), math.pi / 2)
        >>> q.rotate(Vector3D(1.0, 0.0, 0.0))  # ~ (0, 1, 0)
    """

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "w", float(self.w))
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    # ------------------------------------------------------------------
    # Construction and conversion
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: Sequence[float] | NDArray[np.float64]) -> Quaternion:
        """Build from a (w, x, y, z) sequence."""
        if len(values) != 4:
            raise ValueError(f"expected 4 components (w, x, y, z), got {len(values)}")
        return cls(values[0], values[1], values[2], values[3])

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.w, self.x, self.y, self.z], dtype=np.float64)

    @property
    def vector(self) -> Vector3D:
        """Vector part (x, y, z)."""
        return Vector3D(self.x, self.y, self.z)

    @classmethod
    def from_axis_angle(
        cls, axis: Vector3D | Sequence[float], angle: float
    ) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis``.

        :param axis: Rotation axis; normalized here, so any non-zero length works
        :param angle: Angle in radians
        :returns: Unit quaternion ``(cos(a/2), axis * sin(a/2))``
        """
        axis_vec = axis if isinstance(axis, Vector3D) else Vector3D.from_array(axis)
        unit = axis_vec.normalize()
        return cls.from_array(axis_angle_to_quaternion(unit.mult(angle).to_array()))

    @classmethod
    def from_euler(cls, roll: float, pitch: float, yaw: float) -> Quaternion:
        """Compose per-axis rotations as ``qx * qy * qz``.

        The product order matches ``rotate_3d`` (``Rx @ Ry @ Rz``), so
        ``from_euler(a, b, c).to_matrix()`` equals ``rotate_3d(a, b, c)``.

        :param roll: Angle about X in radians
        :param pitch: Angle about Y in radians
        :param yaw: Angle about Z in radians
        """
        qx = cls.from_axis_angle(_X_AXIS, roll)
        qy = cls.from_axis_angle(_Y_AXIS, pitch)
        qz = cls.from_axis_angle(_Z_AXIS, yaw)
        return qx.multiply(qy).multiply(qz)

    @classmethod
    def from_matrix(cls, m: Sequence[Sequence[float]] | NDArray[np.float64]) -> Quaternion:
        """Quaternion from a scale-free 3x3 or 4x4 rotation matrix."""
        return cls.from_array(rotation_matrix_to_quaternion(m))

    def to_matrix(self) -> NDArray[np.float64]:
        """4x4 homogeneous rotation matrix.

        :raises ValueError: If this is the zero quaternion
        """
        q = self if self.is_normalized() else self.normalized()
        return embed_rotation_4x4(quaternion_to_rotation_matrix(q.to_array()))

    def to_euler(self) -> Vector3D:
        """Euler angles (roll, pitch, yaw) in radians.

        Decodes the Z-Y-X convention, so it inverts ``from_euler`` only
        for rotations about a single axis.
        """
        q = self.normalized()
        angles = quaternion_to_euler(q.to_array(), ROTATION_CONFIG.gimbal_limit)
        return Vector3D.from_array(angles)

    # ------------------------------------------------------------------
    # Magnitude
    # ------------------------------------------------------------------

    def mag(self) -> float:
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def is_normalized(self, tolerance: float | None = None) -> bool:
        if tolerance is None:
            tolerance = ROTATION_CONFIG.unit_tolerance
        return abs(self.mag() - 1.0) <= tolerance

    def normalized(self) -> Quaternion:
        """Unit-length copy.

        :raises ValueError: If this is the zero quaternion
        """
        magnitude = self.mag()
        if magnitude == 0.0:
            raise ValueError("Cannot normalize a zero quaternion")
        return Quaternion(
            self.w / magnitude, self.x / magnitude, self.y / magnitude, self.z / magnitude
        )

    def inverted(self) -> Quaternion:
        """Inverse rotation: the conjugate of the normalized quaternion."""
        q = self.normalized()
        return Quaternion(q.w, -q.x, -q.y, -q.z)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def multiply(self, other: Quaternion) -> Quaternion:
        """Hamilton product ``self * other`` (component formula)."""
        return Quaternion.from_array(quaternion_multiply(self.to_array(), other.to_array()))

    def multiply_vector_form(self, other: Quaternion) -> Quaternion:
        """Hamilton product via ``[w w' - v.v', v x v' + w v' + w' v]``."""
        v1 = self.vector
        v2 = other.vector
        scalar = self.w * other.w - v1.dot(v2)
        vec = v1.cross(v2).add(v2.mult(self.w)).add(v1.mult(other.w))
        return Quaternion(scalar, vec.x, vec.y, vec.z)

    def multiply_fast(self, other: Quaternion) -> Quaternion:
        """Hamilton product using 8 multiplications instead of 16."""
        q1, q2 = self, other
        a = (q1.w + q1.x) * (q2.w + q2.x)
        b = (q1.z - q1.y) * (q2.y - q2.z)
        c = (q1.x - q1.w) * (q2.y + q2.z)
        d = (q1.y + q1.z) * (q2.x - q2.w)
        e = (q1.x + q1.z) * (q2.x + q2.y)
        f = (q1.x - q1.z) * (q2.x - q2.y)
        g = (q1.w + q1.y) * (q2.w - q2.z)
        h = (q1.w - q1.y) * (q2.w + q2.z)

        return Quaternion(
            b + (-e - f + g + h) * 0.5,
            a - (e + f + g + h) * 0.5,
            -c + (e - f + g - h) * 0.5,
            -d + (e - f - g + h) * 0.5,
        )

    def scale(self, n: float) -> Quaternion:
        """Multiply every component by a scalar."""
        return Quaternion(self.w * n, self.x * n, self.y * n, self.z * n)

    def rotate(self, v: Vector3D | Sequence[float]) -> Vector3D:
        """Rotate a vector by conjugation, ``q * (0, v) * q^-1``.

        :raises ValueError: If this is the zero quaternion
        """
        vec = v if isinstance(v, Vector3D) else Vector3D.from_array(v)
        q = self.normalized()
        pure = Quaternion(0.0, vec.x, vec.y, vec.z)
        result = q.multiply_vector_form(pure.multiply_vector_form(q.inverted()))
        return result.vector

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return self.multiply(other)
        if isinstance(other, Vector3D):
            return self.rotate(other)
        if isinstance(other, int | float):
            return self.scale(other)
        return NotImplemented

    def __str__(self) -> str:
        return f"Quaternion [w, x, y, z]: [{self.w}, {self.x}, {self.y}, {self.z}]"
