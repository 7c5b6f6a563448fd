"""Unified rigidkit configuration.

This module provides a top-level configuration dataclass that contains
the linear-algebra, rotation and vector configurations as
sub-attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rigidkit.config.linalg import LinalgConfig
from rigidkit.config.rotation import RotationConfig
from rigidkit.config.vector import VectorConfig


@dataclass(frozen=True)
class RigidkitConfig:
    """Top-level configuration containing all sub-configurations.

    Provides hierarchical access:
        CONFIG.linalg.pivot_tolerance
        CONFIG.rotation.unit_tolerance
        CONFIG.vector.lerp_amount

    Attributes:
        linalg: Dense matrix tolerances and kernel thresholds
        rotation: Quaternion conversion tolerances
        vector: Vector3D operation specifications
    """

    linalg: LinalgConfig = LinalgConfig()
    rotation: RotationConfig = RotationConfig()
    vector: VectorConfig = VectorConfig()

    def get_all_specs(self) -> dict[str, dict[str, Any]]:
        """Get all settings organized by component.

        :return: Nested dictionary of all specifications
        """
        return {
            "linalg": self.linalg.get_all_specs(),
            "rotation": self.rotation.get_all_specs(),
            "vector": self.vector.get_all_specs(),
        }


# Main singleton instance
CONFIG = RigidkitConfig()

LINALG_CONFIG = CONFIG.linalg
ROTATION_CONFIG = CONFIG.rotation
VECTOR_CONFIG = CONFIG.vector
