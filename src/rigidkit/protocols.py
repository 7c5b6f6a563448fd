"""
Protocol definitions for rigidkit collaborator interfaces.

rigidkit owns no random-number state; constructors that need randomness
take a source implementing RandomSource. ``numpy.random.Generator`` and
``random.Random`` both satisfy it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Uniform random source."""

    def random(self) -> float:
        """Return a float drawn uniformly from [0, 1)."""
        ...
