"""
Example: matrices, transforms and quaternions.

Demonstrates how to use rigidkit for:
- LU-based determinant, inverse and solve
- Building and composing 2D / 3D transforms
- Rotating point clouds in place
- Converting between quaternions, matrices and Euler angles
"""

import logging
import math

import numpy as np

from rigidkit import (
    Matrix2D,
    Matrix3D,
    Quaternion,
    RotationVerifier,
    Vector3D,
    decompose,
    determinant,
    inverse,
    is_equal,
    multiply,
    rotate_3d,
    rotate_points,
    solve,
    to_string,
)

# Configure logging to see kernel selection and singular-matrix messages
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def example_1_linear_algebra():
    """Example 1: Determinant, inverse and solve."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: LU Decomposition")
    print("=" * 70)

    a = [[4.0, 3.0, 2.0], [2.0, 1.0, 3.0], [3.0, 2.0, 1.0]]
    print(to_string(a))

    lu = decompose(a)
    print(f"Row permutation: {lu.perm}, toggle: {lu.toggle}")
    print(f"Determinant: {determinant(a):.3f}")

    a_inv = inverse(a)
    print(f"A @ inverse(A) == I: {is_equal(multiply(a, a_inv), np.eye(3))}")
    print(f"Solve A x = [1, 2, 3]: {solve(a, [1.0, 2.0, 3.0])}")

    # A matrix with no usable pivot decomposes to None
    print(f"decompose(zero column): {decompose([[0.0, 2.0], [0.0, 1.0]])}")


def example_2_transforms_2d():
    """Example 2: 2D transforms with row vectors."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: 2D Transforms")
    print("=" * 70)

    # Scale, then rotate a quarter turn, then move
    m = Matrix2D.scale(2.0, 2.0) @ Matrix2D.rotation(90.0) @ Matrix2D.translation(10.0, 0.0)
    print(m)
    print(f"(1, 0) -> {m.apply([1.0, 0.0])}")


def example_3_point_rotation():
    """Example 3: Rotating a point cloud in place."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Point Rotation")
    print("=" * 70)

    rng = np.random.default_rng(42)
    points = rng.standard_normal((5, 3))
    norms_before = np.linalg.norm(points, axis=1)

    rotate_points(points, 30.0, 45.0, 60.0, degrees=True)

    print(f"Norms preserved: {np.allclose(norms_before, np.linalg.norm(points, axis=1))}")
    print(RotationVerifier.summary(rotate_3d(30.0, 45.0, 60.0, degrees=True)))

    # Homogeneous transforms compose the same way
    m = Matrix3D.rotation(0.0, 0.0, math.pi / 2) @ Matrix3D.translation(0.0, 0.0, 5.0)
    print(f"Transformed point: {m.apply(Vector3D(1.0, 2.0, 3.0))}")


def example_4_quaternions():
    """Example 4: Quaternion conversions."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Quaternions")
    print("=" * 70)

    q = Quaternion.from_euler(0.2, 0.4, 0.6)
    print(q)

    # Matrix built from the quaternion equals the Euler rotation builder
    print(f"Matches rotate_3d: {is_equal(q.to_matrix(), rotate_3d(0.2, 0.4, 0.6))}")

    # Round trip through the matrix recovers q up to sign
    RotationVerifier.assert_quaternions_equivalent(q, Quaternion.from_matrix(q.to_matrix()))

    v = Vector3D(1.0, 0.0, 0.0)
    print(f"Rotated vector: {q.rotate(v)} (length {q.rotate(v).mag():.6f})")
    print(f"Yaw-only Euler angles: {Quaternion.from_euler(0.0, 0.0, 0.6).to_euler()}")


if __name__ == "__main__":
    example_1_linear_algebra()
    example_2_transforms_2d()
    example_3_point_rotation()
    example_4_quaternions()
