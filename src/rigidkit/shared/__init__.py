"""Shared array-level utilities for rigidkit.

Rotation conversions between quaternions, rotation matrices, axis-angle
vectors and Euler angles. The Quaternion type delegates to these.
"""

from rigidkit.shared.rotation import (
    axis_angle_to_quaternion,
    embed_rotation_4x4,
    quaternion_multiply,
    quaternion_to_euler,
    quaternion_to_rotation_matrix,
    rotation_matrix_to_quaternion,
)

__all__ = [
    "quaternion_multiply",
    "quaternion_to_rotation_matrix",
    "rotation_matrix_to_quaternion",
    "axis_angle_to_quaternion",
    "quaternion_to_euler",
    "embed_rotation_4x4",
]
