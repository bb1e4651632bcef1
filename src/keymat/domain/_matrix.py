"""
Matrix element-accessor contract.

This module defines the structural interface every matrix-like container
must satisfy for the arithmetic kernel to operate on it. The kernel never
touches storage directly: it reads and writes single elements, queries the
shape, and asks an existing container to create new containers of the same
concrete representation.

Notes
-----
Using `typing.Protocol` keeps the kernel decoupled from any storage layout;
a dense NumPy-backed matrix and a dictionary-backed matrix satisfy the same
contract without sharing a base class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ._vector import IVector


@runtime_checkable
class IMatrix(Protocol):
    """
    Element-accessor contract for a two-dimensional grid of doubles.

    Implementations must provide O(1)-ish single element access and must be
    safe for concurrent writes to *distinct* elements, since units of work
    dispatched by a scheduler write disjoint rows/columns at the same time.
    """

    @property
    def row_count(self) -> int:
        """Number of rows (>= 1)."""
        ...

    @property
    def column_count(self) -> int:
        """Number of columns (>= 1)."""
        ...

    def at(self, row: int, column: int) -> float:
        """
        Return the element at `(row, column)`.

        Implementations may skip range checking for speed; the kernel only
        uses indices it has already validated against the shape.
        """
        ...

    def set_at(self, row: int, column: int, value: float) -> None:
        """Write `value` at `(row, column)`."""
        ...

    def create_matrix(self, rows: int, columns: int) -> "IMatrix":
        """
        Create a new zero-filled matrix of the same concrete representation.
        """
        ...

    def create_vector(self, size: int) -> "IVector":
        """
        Create a new zero-filled vector compatible with this representation.
        """
        ...
