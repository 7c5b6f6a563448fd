"""3-component vector value type.

All algebra methods are pure and return new vectors; ``set()`` is the
only method that modifies the receiver.
"""

from __future__ import annotations

from typing import TypeAlias

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from rigidkit.config import VECTOR_CONFIG
from rigidkit.protocols import RandomSource

VectorOperand: TypeAlias = "Vector3D | Sequence[float] | NDArray[np.float64]"


def _components(other: VectorOperand) -> tuple[float, float, float]:
    if isinstance(other, Vector3D):
        return other.x, other.y, other.z
    if len(other) != 3:
        raise ValueError(f"expected 3 components, got {len(other)}")
    return float(other[0]), float(other[1]), float(other[2])


@dataclass
class Vector3D:
    """Vector with x, y, z components.

    Example:
        >>> v = Vector3D(1.0, 0.0, 0.0).cross(Vector3D(0.0, 1.0, 0.0))
        >>> v
        Vector3D(x=0.0, y=0.0, z=1.0)
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        # Python floats keep division by zero an exception instead of inf.
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    # ------------------------------------------------------------------
    # Construction and conversion
    # ------------------------------------------------------------------

    @classmethod
    def from_array(cls, values: Sequence[float] | NDArray[np.float64]) -> Vector3D:
        """Build from any 3-element sequence."""
        return cls(*_components(values))

    @classmethod
    def from_angles(cls, theta: float, phi: float, length: float = 1.0) -> Vector3D:
        """Build from spherical angles.

        :param theta: Polar angle in radians
        :param phi: Azimuthal angle in radians
        :param length: Vector length
        :returns: ``(len*sin(theta)*sin(phi), -len*cos(theta), len*sin(theta)*cos(phi))``
        """
        sin_theta = math.sin(theta)
        return cls(
            length * sin_theta * math.sin(phi),
            -length * math.cos(theta),
            length * sin_theta * math.cos(phi),
        )

    @classmethod
    def random_3d(cls, rng: RandomSource | None = None) -> Vector3D:
        """Unit vector uniformly distributed on the sphere.

        :param rng: Uniform random source; a fresh ``numpy.random.default_rng()``
            when omitted
        :returns: Random unit vector
        """
        if rng is None:
            rng = np.random.default_rng()
        angle = float(rng.random()) * math.pi * 2.0
        vz = float(rng.random()) * 2.0 - 1.0
        base = math.sqrt(1.0 - vz * vz)
        return cls(base * math.cos(angle), base * math.sin(angle), vz)

    def copy(self) -> Vector3D:
        return Vector3D(self.x, self.y, self.z)

    def set(self, x: float, y: float, z: float) -> None:
        """Assign all components (IN-PLACE)."""
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: VectorOperand) -> Vector3D:
        ox, oy, oz = _components(other)
        return Vector3D(self.x + ox, self.y + oy, self.z + oz)

    def sub(self, other: VectorOperand) -> Vector3D:
        ox, oy, oz = _components(other)
        return Vector3D(self.x - ox, self.y - oy, self.z - oz)

    def mult(self, n: float) -> Vector3D:
        n = float(n)
        return Vector3D(self.x * n, self.y * n, self.z * n)

    def mult_elementwise(self, other: VectorOperand) -> Vector3D:
        ox, oy, oz = _components(other)
        return Vector3D(self.x * ox, self.y * oy, self.z * oz)

    def div(self, divisor: float | VectorOperand) -> Vector3D:
        """Divide by a scalar or component-wise by a vector.

        :raises ZeroDivisionError: If any divisor component is zero
        """
        if isinstance(divisor, int | float | np.floating | np.integer):
            n = float(divisor)
            return Vector3D(self.x / n, self.y / n, self.z / n)
        ox, oy, oz = _components(divisor)
        return Vector3D(self.x / ox, self.y / oy, self.z / oz)

    def dot(self, other: VectorOperand) -> float:
        ox, oy, oz = _components(other)
        return self.x * ox + self.y * oy + self.z * oz

    def cross(self, other: VectorOperand) -> Vector3D:
        ox, oy, oz = _components(other)
        return Vector3D(
            self.y * oz - self.z * oy,
            self.z * ox - self.x * oz,
            self.x * oy - self.y * ox,
        )

    # ------------------------------------------------------------------
    # Magnitude
    # ------------------------------------------------------------------

    def mag_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def mag(self) -> float:
        return math.sqrt(self.mag_sq())

    def normalize(self) -> Vector3D:
        """Unit-length copy; a zero vector is returned unchanged."""
        length = self.mag()
        if length == 0:
            return self.copy()
        return self.mult(1.0 / length)

    def limit(self, max_length: float) -> Vector3D:
        """Copy whose magnitude is at most ``max_length``."""
        if self.mag_sq() > max_length * max_length:
            return self.normalize().mult(max_length)
        return self.copy()

    def set_mag(self, length: float) -> Vector3D:
        """Copy rescaled to ``length`` (zero vectors stay zero)."""
        return self.normalize().mult(length)

    def dist(self, other: VectorOperand) -> float:
        return self.sub(other).mag()

    # ------------------------------------------------------------------
    # Interpolation and angles
    # ------------------------------------------------------------------

    def lerp(self, target: VectorOperand, amount: float, clamp: bool = False) -> Vector3D:
        """Linear interpolation toward ``target``.

        :param target: Vector reached at amount=1
        :param amount: 0.0 returns self, 1.0 returns target
        :param clamp: Clamp amount to [0, 1] first; otherwise values outside
            the range extrapolate
        :returns: Interpolated vector
        """
        if clamp:
            amount = VECTOR_CONFIG.lerp_amount.validate(amount)
        tx, ty, tz = _components(target)
        return Vector3D(
            self.x + (tx - self.x) * amount,
            self.y + (ty - self.y) * amount,
            self.z + (tz - self.z) * amount,
        )

    def angle_between(self, other: VectorOperand) -> float:
        """Angle to ``other`` in radians, in [0, pi].

        The cosine ratio is clamped to [-1, 1] so rounding cannot push
        acos out of its domain.

        :raises ZeroDivisionError: If either vector has zero length
        """
        other_vec = other if isinstance(other, Vector3D) else Vector3D.from_array(other)
        ratio = self.dot(other_vec) / (self.mag() * other_vec.mag())
        return math.acos(min(1.0, max(-1.0, ratio)))

    # ------------------------------------------------------------------
    # Operator aliases
    # ------------------------------------------------------------------

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Vector3D:
        return self.mult(-1.0)

    def __mul__(self, n: float) -> Vector3D:
        if not isinstance(n, int | float):
            return NotImplemented
        return self.mult(n)

    def __rmul__(self, n: float) -> Vector3D:
        return self.__mul__(n)

    def __truediv__(self, n: float) -> Vector3D:
        if not isinstance(n, int | float):
            return NotImplemented
        return self.div(n)
