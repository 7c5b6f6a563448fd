"""Vector operation configuration."""

from __future__ import annotations

from dataclasses import dataclass

from rigidkit.config.operations import OperationSpec


@dataclass(frozen=True)
class VectorConfig:
    """Configuration for Vector3D operations.

    Note: interpolation amounts are only clamped when the caller asks
    for it (``Vector3D.lerp(..., clamp=True)``).
    """

    lerp_amount: OperationSpec = OperationSpec(
        name="lerp_amount",
        min_value=0.0,
        max_value=1.0,
        default=0.5,
        description="Interpolation amount: 0=start vector, 1=target vector",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get operation spec by name.

        :param name: Operation name
        :return: OperationSpec for the operation
        :raises KeyError: If operation not found
        """
        specs = self.get_all_specs()
        if name not in specs:
            raise KeyError(f"Unknown vector spec '{name}'. Available: {list(specs)}")
        return specs[name]

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all operation specs as a dictionary.

        :return: Dictionary mapping operation names to specs
        """
        return {
            "lerp_amount": self.lerp_amount,
        }


VECTOR_CONFIG = VectorConfig()
