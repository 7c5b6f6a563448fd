"""Quaternion rotation representation."""

from rigidkit.quaternion.quaternion import Quaternion, to_radians

__all__ = ["Quaternion", "to_radians"]
