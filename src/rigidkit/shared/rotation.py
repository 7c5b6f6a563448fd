"""Array-level rotation utilities.

Conversions between quaternions, rotation matrices, axis-angle vectors
and Euler angles on single NumPy arrays. The Quaternion class builds on
these for all of its conversions.

Quaternion Convention: (w, x, y, z) - scalar first
Matrix Convention: R rotates column vectors, ``v' = R @ v``
"""

from __future__ import annotations

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

# Type aliases
ArrayLike: TypeAlias = np.ndarray | list | tuple


def quaternion_multiply(q1: ArrayLike, q2: ArrayLike) -> NDArray[np.float64]:
    """Hamilton product ``q1 * q2``.

    :param q1: First quaternion [4] (w, x, y, z)
    :param q2: Second quaternion [4] (w, x, y, z)
    :returns: Product quaternion [4]
    :raises ValueError: If either input is not a 4-vector
    """
    q1 = np.asarray(q1, dtype=np.float64)
    q2 = np.asarray(q2, dtype=np.float64)
    if q1.shape != (4,) or q2.shape != (4,):
        raise ValueError(f"Expected two [4] quaternions, got {q1.shape} and {q2.shape}")

    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2

    w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
    x = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
    y = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
    z = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2

    return np.array([w, x, y, z], dtype=np.float64)


def quaternion_to_rotation_matrix(q: ArrayLike) -> NDArray[np.float64]:
    """Quaternion to 3x3 rotation matrix.

    The quaternion is normalized first.

    :param q: Quaternion [4] (w, x, y, z)
    :returns: 3x3 rotation matrix
    :raises ValueError: If q has zero norm
    """
    q = np.asarray(q, dtype=np.float64)
    norm = np.linalg.norm(q)
    if norm == 0.0:
        raise ValueError("Cannot convert a zero quaternion to a rotation matrix")
    q = q / norm
    w, x, y, z = q[0], q[1], q[2], q[3]

    R = np.zeros((3, 3), dtype=np.float64)

    R[0, 0] = 1 - 2 * (y * y + z * z)
    R[0, 1] = 2 * (x * y - w * z)
    R[0, 2] = 2 * (x * z + w * y)

    R[1, 0] = 2 * (x * y + w * z)
    R[1, 1] = 1 - 2 * (x * x + z * z)
    R[1, 2] = 2 * (y * z - w * x)

    R[2, 0] = 2 * (x * z - w * y)
    R[2, 1] = 2 * (y * z + w * x)
    R[2, 2] = 1 - 2 * (x * x + y * y)

    return R


def rotation_matrix_to_quaternion(R: ArrayLike) -> NDArray[np.float64]:
    """Rotation matrix to quaternion.

    Uses the trace when it is positive; otherwise branches on the largest
    diagonal entry so the square root argument stays well away from zero.
    The matrix must not contain scaling.

    :param R: 3x3 rotation matrix, or 4x4 homogeneous matrix (upper-left block used)
    :returns: Unit quaternion [4] (w, x, y, z)
    """
    R = np.asarray(R, dtype=np.float64)
    if R.shape not in ((3, 3), (4, 4)):
        raise ValueError(f"Expected a 3x3 or 4x4 matrix, got shape {R.shape}")

    trace = R[0, 0] + R[1, 1] + R[2, 2]

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (R[2, 1] - R[1, 2]) * s
        y = (R[0, 2] - R[2, 0]) * s
        z = (R[1, 0] - R[0, 1]) * s
    elif R[0, 0] > R[1, 1] and R[0, 0] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2])
        w = (R[2, 1] - R[1, 2]) / s
        x = 0.25 * s
        y = (R[0, 1] + R[1, 0]) / s
        z = (R[0, 2] + R[2, 0]) / s
    elif R[1, 1] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2])
        w = (R[0, 2] - R[2, 0]) / s
        x = (R[0, 1] + R[1, 0]) / s
        y = 0.25 * s
        z = (R[1, 2] + R[2, 1]) / s
    else:
        s = 2.0 * np.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1])
        w = (R[1, 0] - R[0, 1]) / s
        x = (R[0, 2] + R[2, 0]) / s
        y = (R[1, 2] + R[2, 1]) / s
        z = 0.25 * s

    q = np.array([w, x, y, z], dtype=np.float64)
    return q / np.linalg.norm(q)


def axis_angle_to_quaternion(axis_angle: ArrayLike) -> NDArray[np.float64]:
    """Axis-angle vector to quaternion.

    :param axis_angle: Axis-angle vector [3] (unit axis * angle in radians)
    :returns: Quaternion [4] (w, x, y, z)
    """
    axis_angle = np.asarray(axis_angle, dtype=np.float64)
    angle = np.linalg.norm(axis_angle)
    if angle < 1e-12:
        return np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float64)

    axis = axis_angle / angle
    half_angle = angle / 2
    sin_half = np.sin(half_angle)

    w = np.cos(half_angle)
    x = axis[0] * sin_half
    y = axis[1] * sin_half
    z = axis[2] * sin_half

    return np.array([w, x, y, z], dtype=np.float64)


def quaternion_to_euler(q: ArrayLike, gimbal_limit: float = 1.0) -> NDArray[np.float64]:
    """Quaternion to Euler angles (Z-Y-X / yaw-pitch-roll decoding).

    :param q: Unit quaternion [4] (w, x, y, z)
    :param gimbal_limit: |sin(pitch)| from which pitch saturates to +-pi/2
    :returns: Euler angles [3] (roll, pitch, yaw) in radians
    """
    q = np.asarray(q, dtype=np.float64)
    w, x, y, z = q[0], q[1], q[2], q[3]

    # Roll (x-axis rotation)
    sinr_cosp = 2 * (w * x + y * z)
    cosr_cosp = 1 - 2 * (x * x + y * y)
    roll = np.arctan2(sinr_cosp, cosr_cosp)

    # Pitch (y-axis rotation)
    sinp = 2 * (w * y - z * x)
    if np.abs(sinp) >= gimbal_limit:
        pitch = np.copysign(np.pi / 2, sinp)
    else:
        pitch = np.arcsin(sinp)

    # Yaw (z-axis rotation)
    siny_cosp = 2 * (w * z + x * y)
    cosy_cosp = 1 - 2 * (y * y + z * z)
    yaw = np.arctan2(siny_cosp, cosy_cosp)

    return np.array([roll, pitch, yaw], dtype=np.float64)


def embed_rotation_4x4(rotation_3x3: ArrayLike) -> NDArray[np.float64]:
    """Place a 3x3 rotation in the upper-left block of a 4x4 identity."""
    R = np.eye(4, dtype=np.float64)
    R[:3, :3] = rotation_3x3
    return R
