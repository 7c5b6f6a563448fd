"""Dense linear-algebra configuration.

Numerical tolerances and kernel-selection thresholds shared by the
matrix module.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LinalgConfig:
    """Tolerances for decomposition and comparison.

    Attributes:
        pivot_tolerance: Pivots with magnitude below this mark a singular matrix
        equality_epsilon: Default epsilon for element-wise matrix comparison
        parallel_min_rows: Left-operand row count from which multiply
            switches to the row-parallel kernel
    """

    pivot_tolerance: float = 1.0e-20
    equality_epsilon: float = 1.0e-9
    parallel_min_rows: int = 64

    def get_all_specs(self) -> dict[str, float]:
        """Get all tolerances as a dictionary.

        :return: Dictionary mapping setting names to values
        """
        return {
            "pivot_tolerance": self.pivot_tolerance,
            "equality_epsilon": self.equality_epsilon,
            "parallel_min_rows": self.parallel_min_rows,
        }


LINALG_CONFIG = LinalgConfig()
