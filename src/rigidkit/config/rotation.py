"""Rotation configuration.

Tolerances used by the quaternion type when deciding whether a
quaternion must be re-normalized before conversion.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RotationConfig:
    """Configuration for quaternion conversions.

    Attributes:
        unit_tolerance: |1 - |q|| below which a quaternion counts as normalized
        gimbal_limit: |sin(pitch)| at or above which to_euler saturates pitch
            to +-pi/2 instead of calling asin
    """

    unit_tolerance: float = 1.0e-12
    gimbal_limit: float = 1.0

    def get_all_specs(self) -> dict[str, float]:
        """Get all settings as a dictionary.

        :return: Dictionary mapping setting names to values
        """
        return {
            "unit_tolerance": self.unit_tolerance,
            "gimbal_limit": self.gimbal_limit,
        }


ROTATION_CONFIG = RotationConfig()
