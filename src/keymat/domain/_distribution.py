"""
Random sampling contract used by the random-matrix factory.

Sampling itself is an external capability; any object with a `sample()`
method returning a float qualifies (for example a thin wrapper around a
`numpy.random.Generator`).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IContinuousDistribution(Protocol):
    """Source of independent floating-point samples."""

    def sample(self) -> float:
        """Draw one sample."""
        ...
