"""Parameter ranges for rigidkit operations.

An OperationSpec names a bounded scalar parameter, such as the Vector3D
interpolation amount, and clamps caller values into its range.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

import numpy as np


@dataclass(frozen=True)
class OperationSpec:
    """Bounded scalar parameter.

    Attributes:
        name: Parameter name (e.g., "lerp_amount")
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        default: Value used when the caller gives none
        description: Human-readable description
    """

    name: str
    min_value: float
    max_value: float
    default: float
    description: str = ""

    def __post_init__(self):
        if self.min_value > self.max_value:
            raise ValueError(
                f"{self.name}: min_value {self.min_value} exceeds max_value {self.max_value}"
            )

    def validate(self, value: float) -> float:
        """Validate and clamp value to allowed range.

        Python and NumPy real scalars are accepted; bools are not.

        :param value: Value to validate
        :returns: Clamped value within [min_value, max_value]
        :raises ValueError: If value is not a real number
        """
        if isinstance(value, bool | np.bool_) or not isinstance(value, Real):
            raise ValueError(f"{self.name}: expected number, got {type(value).__name__}")

        return float(np.clip(value, self.min_value, self.max_value))

    def __repr__(self) -> str:
        return (
            f"OperationSpec({self.name}, "
            f"range=[{self.min_value}, {self.max_value}], "
            f"default={self.default})"
        )
