"""
Copy, slicing, and row/column access for matrices.

These helpers are written purely against the element-accessor contract, so
they work for every concrete representation. Representations with a faster
native path (e.g., a NumPy buffer copy) may override individual methods.
"""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING, Iterable, Optional, Union

import numpy as np

from ....domain._errors import DimensionMismatchError, InvalidArgumentError
from ....domain._matrix import IMatrix
from ....domain._vector import IVector
from ...utils._checks import (
    require_matrix,
    require_operand,
    require_same_shape,
    require_vector_length,
)
from ...utils._copy import copy_block

if TYPE_CHECKING:
    from .._matrix import Matrix

Values = Union[IVector, Iterable[float]]


def _as_float_list(values: Values) -> list[float]:
    if isinstance(values, IVector):
        return [values.at(k) for k in range(values.count)]
    return [float(x) for x in values]


class MatrixMixinMemory(ABC):
    """
    Mixin providing copy/clone, row/column extraction, and sub-matrix access.
    """

    def _check_row(self: "Matrix", row: int) -> None:
        if not 0 <= row < self.row_count:
            raise IndexError(f"row index {row} out of range [0, {self.row_count}).")

    def _check_column(self: "Matrix", column: int) -> None:
        if not 0 <= column < self.column_count:
            raise IndexError(
                f"column index {column} out of range [0, {self.column_count})."
            )

    def clone(self: "Matrix") -> "Matrix":
        """
        Return a deep copy with the same concrete representation and scheduler.
        """
        out = self.create_matrix(self.row_count, self.column_count)
        copy_block(self.scheduler, self, out)
        return out

    def copy_to(self: "Matrix", target: IMatrix) -> None:
        """
        Copy every element into `target`.

        Raises
        ------
        NullOperandError
            If `target` is None.
        DimensionMismatchError
            If `target` is not shaped like this matrix.
        """
        require_same_shape("copy_to", self, target, "target")
        if target is self:
            return
        copy_block(self.scheduler, self, target)

    def clear(self: "Matrix") -> None:
        """Set every element to zero."""
        columns = self.column_count

        def _row(i: int) -> None:
            for j in range(columns):
                self.set_at(i, j, 0.0)

        self.scheduler.parallel_for(0, self.row_count, _row)

    def get_row(self: "Matrix", row: int, result: Optional[IVector] = None) -> IVector:
        """
        Return row `row` as a vector of length `column_count`.

        Parameters
        ----------
        row : int
            Row index.
        result : Optional[IVector]
            Vector to write into. Allocated when omitted.
        """
        self._check_row(row)
        if result is None:
            result = self.create_vector(self.column_count)
        else:
            require_vector_length("get_row", result, self.column_count, "result")
        for j in range(self.column_count):
            result.set_at(j, self.at(row, j))
        return result

    def get_column(
        self: "Matrix", column: int, result: Optional[IVector] = None
    ) -> IVector:
        """
        Return column `column` as a vector of length `row_count`.
        """
        self._check_column(column)
        if result is None:
            result = self.create_vector(self.row_count)
        else:
            require_vector_length("get_column", result, self.row_count, "result")
        for i in range(self.row_count):
            result.set_at(i, self.at(i, column))
        return result

    def set_row(self: "Matrix", row: int, values: Values) -> None:
        """
        Overwrite row `row` with `values` (a vector or any float iterable).
        """
        require_operand(values, "values")
        self._check_row(row)
        data = _as_float_list(values)
        if len(data) != self.column_count:
            raise DimensionMismatchError("set_row", "values", self.column_count, len(data))
        for j, v in enumerate(data):
            self.set_at(row, j, v)

    def set_column(self: "Matrix", column: int, values: Values) -> None:
        """
        Overwrite column `column` with `values` (a vector or any float iterable).
        """
        require_operand(values, "values")
        self._check_column(column)
        data = _as_float_list(values)
        if len(data) != self.row_count:
            raise DimensionMismatchError("set_column", "values", self.row_count, len(data))
        for i, v in enumerate(data):
            self.set_at(i, column, v)

    def sub_matrix(
        self: "Matrix",
        row_start: int,
        row_count: int,
        column_start: int,
        column_count: int,
    ) -> "Matrix":
        """
        Return a copy of the `row_count x column_count` block whose top-left
        corner is `(row_start, column_start)`.

        Raises
        ------
        InvalidArgumentError
            If a count is < 1.
        IndexError
            If the block does not fit into this matrix.
        """
        if row_count < 1:
            raise InvalidArgumentError("row_count", row_count, "Must be >= 1.")
        if column_count < 1:
            raise InvalidArgumentError("column_count", column_count, "Must be >= 1.")
        self._check_row(row_start)
        self._check_row(row_start + row_count - 1)
        self._check_column(column_start)
        self._check_column(column_start + column_count - 1)

        out = self.create_matrix(row_count, column_count)

        def _row(i: int) -> None:
            for j in range(column_count):
                out.set_at(i, j, self.at(row_start + i, column_start + j))

        self.scheduler.parallel_for(0, row_count, _row)
        return out

    def set_sub_matrix(
        self: "Matrix", row_start: int, column_start: int, sub: IMatrix
    ) -> None:
        """
        Write `sub` into this matrix with its top-left corner at
        `(row_start, column_start)`.
        """
        require_matrix("set_sub_matrix", sub, "sub")
        self._check_row(row_start)
        self._check_row(row_start + sub.row_count - 1)
        self._check_column(column_start)
        self._check_column(column_start + sub.column_count - 1)
        copy_block(self.scheduler, sub, self, row_start, column_start)

    def transpose(self: "Matrix") -> "Matrix":
        """Return a new `column_count x row_count` matrix with rows and columns swapped."""
        out = self.create_matrix(self.column_count, self.row_count)
        rows = self.row_count

        def _column(j: int) -> None:
            for i in range(rows):
                out.set_at(j, i, self.at(i, j))

        self.scheduler.parallel_for(0, self.column_count, _column)
        return out

    def to_numpy(self: "Matrix") -> np.ndarray:
        """
        Return a new `float64` ndarray with this matrix's contents.
        """
        arr = np.empty((self.row_count, self.column_count), dtype=np.float64)
        for i in range(self.row_count):
            for j in range(self.column_count):
                arr[i, j] = self.at(i, j)
        return arr
