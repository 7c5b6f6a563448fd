"""3D vector algebra."""

from rigidkit.vector.vector3d import Vector3D

__all__ = ["Vector3D"]
