"""
Abstract matrix base.

:class:`Matrix` composes the operation mixins and leaves only the storage
primitives abstract. A concrete representation implements `at`, `set_at`,
`create_matrix` and `create_vector`; everything else (arithmetic, products,
structural composition, reductions) is inherited and runs on the container's
injected scheduler.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ...domain._errors import InvalidArgumentError
from ...domain._matrix import IMatrix
from ...domain._scheduler import IParallelScheduler
from ...domain._vector import IVector
from ..parallel._schedulers import get_default_scheduler
from .mixins import (
    MatrixMixinArithmetic,
    MatrixMixinMemory,
    MatrixMixinPointwise,
    MatrixMixinProduct,
    MatrixMixinReduction,
    MatrixMixinStructural,
)


class Matrix(
    MatrixMixinArithmetic,
    MatrixMixinProduct,
    MatrixMixinPointwise,
    MatrixMixinStructural,
    MatrixMixinReduction,
    MatrixMixinMemory,
    ABC,
):
    """
    Storage-agnostic matrix of doubles.

    Parameters
    ----------
    rows : int
        Number of rows (>= 1).
    columns : int
        Number of columns (>= 1).
    scheduler : Optional[IParallelScheduler]
        Scheduler used for this matrix's operations and inherited by every
        container its factory creates. Defaults to the process default.

    Raises
    ------
    InvalidArgumentError
        If `rows` or `columns` is < 1.

    Notes
    -----
    Equality is structural: two matrices are equal iff they have the same
    shape and identical elements, regardless of representation. Matrices are
    mutable and therefore unhashable.
    """

    def __init__(
        self, rows: int, columns: int, *, scheduler: Optional[IParallelScheduler] = None
    ) -> None:
        if rows < 1:
            raise InvalidArgumentError("rows", rows, "Must be >= 1.")
        if columns < 1:
            raise InvalidArgumentError("columns", columns, "Must be >= 1.")
        self._rows = int(rows)
        self._columns = int(columns)
        self._scheduler = scheduler if scheduler is not None else get_default_scheduler()

    @property
    def row_count(self) -> int:
        """
        Number of rows.

        Returns
        -------
        int
            Row count (>= 1).
        """
        return self._rows

    @property
    def column_count(self) -> int:
        """
        Number of columns.

        Returns
        -------
        int
            Column count (>= 1).
        """
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        """
        Matrix shape as `(row_count, column_count)`.

        Returns
        -------
        tuple[int, int]
            The shape tuple.
        """
        return (self._rows, self._columns)

    @property
    def scheduler(self) -> IParallelScheduler:
        """
        Scheduler that runs this matrix's row/column work.

        Returns
        -------
        IParallelScheduler
            The scheduler captured at construction.
        """
        return self._scheduler

    # ---------------------------------------------------------------------
    # Storage primitives
    # ---------------------------------------------------------------------
    @abstractmethod
    def at(self, row: int, column: int) -> float:
        """Return the element at `(row, column)` without range checking."""

    @abstractmethod
    def set_at(self, row: int, column: int, value: float) -> None:
        """Write the element at `(row, column)` without range checking."""

    @abstractmethod
    def create_matrix(self, rows: int, columns: int) -> "Matrix":
        """Create a zero-filled matrix of the same representation."""

    @abstractmethod
    def create_vector(self, size: int) -> IVector:
        """Create a zero-filled vector matching this representation."""

    # ---------------------------------------------------------------------
    # Indexing
    # ---------------------------------------------------------------------
    def _unpack_key(self, key) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair.")
        row, column = key
        self._check_row(row)
        self._check_column(column)
        return row, column

    def __getitem__(self, key) -> float:
        return self.at(*self._unpack_key(key))

    def __setitem__(self, key, value: float) -> None:
        row, column = self._unpack_key(key)
        self.set_at(row, column, float(value))

    # ---------------------------------------------------------------------
    # Equality / representation
    # ---------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, IMatrix):
            return NotImplemented
        if other.row_count != self._rows or other.column_count != self._columns:
            return False
        return all(
            self.at(i, j) == other.at(i, j)
            for i in range(self._rows)
            for j in range(self._columns)
        )

    __hash__ = None

    # NumPy operands defer to the reflected operators instead of converting
    # this container into an ndarray.
    __array_ufunc__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self._rows}, columns={self._columns})"

    def __str__(self) -> str:
        lines = [
            "  ".join(f"{self.at(i, j):g}" for j in range(self._columns))
            for i in range(self._rows)
        ]
        return f"{self!r}\n" + "\n".join(lines)
