"""
Vector element-accessor contract.

The vector counterpart of :class:`~keymat.domain._matrix.IMatrix`: a flat,
indexable sequence of doubles with a length, a factory, and a p-norm.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IVector(Protocol):
    """
    Element-accessor contract for a one-dimensional sequence of doubles.
    """

    @property
    def count(self) -> int:
        """Number of elements."""
        ...

    def at(self, index: int) -> float:
        """Return the element at `index`."""
        ...

    def set_at(self, index: int, value: float) -> None:
        """Write `value` at `index`."""
        ...

    def create_vector(self, size: int) -> "IVector":
        """Create a new zero-filled vector of the same concrete representation."""
        ...

    def p_norm(self, p: float) -> float:
        """
        Return the p-norm ``(sum |x_i|^p)^(1/p)``.

        Parameters
        ----------
        p : float
            Norm degree, ``p >= 1``. ``math.inf`` selects the maximum norm.
        """
        ...
