"""Configuration module for rigidkit operations.

Usage:
    from rigidkit.config import CONFIG
    CONFIG.linalg.pivot_tolerance  # 1e-20
    CONFIG.vector.lerp_amount.validate(1.5)  # 1.0
"""

from rigidkit.config.config import (
    CONFIG,
    LINALG_CONFIG,
    ROTATION_CONFIG,
    VECTOR_CONFIG,
    RigidkitConfig,
)
from rigidkit.config.linalg import LinalgConfig
from rigidkit.config.operations import OperationSpec
from rigidkit.config.rotation import RotationConfig
from rigidkit.config.vector import VectorConfig

__all__ = [
    "CONFIG",
    "LINALG_CONFIG",
    "ROTATION_CONFIG",
    "VECTOR_CONFIG",
    "RigidkitConfig",
    "LinalgConfig",
    "RotationConfig",
    "VectorConfig",
    "OperationSpec",
]
