"""Exception types raised by rigidkit.

Both errors subclass ValueError so callers that already guard numeric
input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class DimensionMismatchError(ValueError):
    """Operand shapes are not conformable for the requested operation."""

    def __init__(self, operation: str, shape_a: tuple, shape_b: tuple | None = None):
        self.operation = operation
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b) if shape_b is not None else None
        if self.shape_b is None:
            message = f"{operation}: non-conformable shape {self.shape_a}"
        else:
            message = f"{operation}: non-conformable shapes {self.shape_a} and {self.shape_b}"
        super().__init__(message)


class SingularMatrixError(ValueError):
    """No usable pivot exists, so the matrix cannot be factored or inverted."""

    def __init__(self, operation: str, size: int):
        self.operation = operation
        self.size = size
        super().__init__(f"{operation}: matrix of size {size}x{size} is singular")
