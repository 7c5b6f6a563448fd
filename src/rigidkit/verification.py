"""Rotation verification utilities.

Checks that matrices and quaternions produced by different code paths
describe the same rotation.

Example:
    >>> from rigidkit.verification import RotationVerifier
    >>>
    >>> m = rotate_3d(0.1, 0.2, 0.3)
    >>> RotationVerifier.assert_rotation_matrix(m)
    >>>
    >>> # q and -q are the same rotation
    >>> RotationVerifier.assert_quaternions_equivalent(q, q.scale(-1.0))
"""

from __future__ import annotations

import logging

import numpy as np

from rigidkit.quaternion import Quaternion

logger = logging.getLogger(__name__)


def _rotation_block(m) -> np.ndarray:
    arr = np.asarray(m, dtype=np.float64)
    if arr.shape == (4, 4):
        return arr[:3, :3]
    if arr.shape == (3, 3):
        return arr
    raise ValueError(f"Expected a 3x3 or 4x4 matrix, got shape {arr.shape}")


class RotationVerifier:
    """Utilities for verifying rotation matrices and quaternions."""

    @staticmethod
    def is_rotation_matrix(m, atol: float = 1e-9) -> bool:
        """Check that the rotation block is orthonormal with determinant +1.

        :param m: 3x3 rotation or 4x4 homogeneous matrix
        :param atol: Absolute tolerance
        :return: True if ``R^T R == I`` and ``det(R) == 1`` within tolerance
        """
        R = _rotation_block(m)
        orthonormal = np.allclose(R.T @ R, np.eye(3), atol=atol)
        return bool(orthonormal and abs(np.linalg.det(R) - 1.0) <= atol)

    @staticmethod
    def assert_rotation_matrix(m, atol: float = 1e-9) -> None:
        """Assert that ``m`` is a proper rotation.

        :raises AssertionError: If the block is not orthonormal or is a reflection
        """
        R = _rotation_block(m)
        np.testing.assert_allclose(
            R.T @ R,
            np.eye(3),
            atol=atol,
            err_msg="Rotation block is not orthonormal",
        )
        det = np.linalg.det(R)
        if abs(det - 1.0) > atol:
            raise AssertionError(f"Rotation determinant is {det:.6g}, expected 1")

    @staticmethod
    def assert_quaternions_equivalent(
        q1: Quaternion,
        q2: Quaternion,
        atol: float = 1e-9,
    ) -> None:
        """Assert two quaternions encode the same rotation.

        Both are normalized, then compared directly and with one negated.

        :raises AssertionError: If neither ``q2`` nor ``-q2`` matches ``q1``

        Example:
            >>> RotationVerifier.assert_quaternions_equivalent(
            ...     q, Quaternion.from_matrix(q.to_matrix())
            ... )
        """
        a = q1.normalized().to_array()
        b = q2.normalized().to_array()
        if np.allclose(a, b, atol=atol) or np.allclose(a, -b, atol=atol):
            logger.debug("[RotationVerifier] Quaternions equivalent: %s", a)
            return
        raise AssertionError(
            f"Quaternions differ beyond sign: {a.tolist()} vs {b.tolist()} (atol={atol})"
        )

    @staticmethod
    def assert_matrices_close(a, b, atol: float = 1e-9) -> None:
        """Assert two matrices have the same shape and close elements.

        :raises AssertionError: On shape mismatch or element difference
        """
        a = np.asarray(a, dtype=np.float64)
        b = np.asarray(b, dtype=np.float64)
        if a.shape != b.shape:
            raise AssertionError(f"Shape mismatch: {a.shape} vs {b.shape}")
        np.testing.assert_allclose(a, b, rtol=0.0, atol=atol, err_msg="Matrices differ")

    @staticmethod
    def summary(m) -> str:
        """One-line description of a rotation matrix.

        Example:
            >>> print(RotationVerifier.summary(rotate_3d(0.0, 0.0, 0.0)))
            'size=4x4, det=1, rotation=True'
        """
        arr = np.asarray(m, dtype=np.float64)
        det = float(np.linalg.det(_rotation_block(arr)))
        rotation = RotationVerifier.is_rotation_matrix(arr)
        return f"size={arr.shape[0]}x{arr.shape[1]}, det={det:.6g}, rotation={rotation}"
