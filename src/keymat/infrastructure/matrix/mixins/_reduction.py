"""
Reductions and normalization: trace, column/row p-norm normalization, and
the decomposition-based quantities that are declared but not implemented.
"""

from __future__ import annotations

import math
import warnings
from abc import ABC
from typing import TYPE_CHECKING

from ....domain._errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    OperationNotImplementedError,
)
from ...utils._scalar import ieee_divide

if TYPE_CHECKING:
    from .._matrix import Matrix


def _check_norm_degree(p: float) -> None:
    if p is None or math.isnan(p) or p < 1:
        raise InvalidArgumentError("p", p, "The norm degree must be >= 1.")


class MatrixMixinReduction(ABC):
    """
    Mixin implementing trace and p-norm normalization.
    """

    def trace(self: "Matrix") -> float:
        """
        Return the sum of the diagonal elements.

        Raises
        ------
        DimensionMismatchError
            If the matrix is not square.
        """
        if self.row_count != self.column_count:
            raise DimensionMismatchError(
                "trace", "self", (self.row_count, self.row_count), self.shape
            )
        # linear in the diagonal length; not worth dispatching
        t = 0.0
        for i in range(self.row_count):
            t += self.at(i, i)
        return t

    def normalize_columns(self: "Matrix", p: float) -> "Matrix":
        """
        Return a copy whose columns are divided by their p-norms.

        Parameters
        ----------
        p : float
            Norm degree, ``p >= 1`` (``math.inf`` for the maximum norm).

        Returns
        -------
        Matrix
            A new matrix; this one is untouched.

        Raises
        ------
        InvalidArgumentError
            If ``p < 1``.

        Warns
        -----
        RuntimeWarning
            If a column has zero norm; its entries become ``nan``.
        """
        _check_norm_degree(p)
        out = self.clone()
        zero_norms: list[int] = []

        def _column(j: int) -> None:
            column = self.get_column(j)
            norm = column.p_norm(p)
            if norm == 0.0:
                zero_norms.append(j)
            for i in range(column.count):
                out.set_at(i, j, ieee_divide(column.at(i), norm))

        self.scheduler.parallel_for(0, self.column_count, _column)
        if zero_norms:
            warnings.warn(
                f"normalize_columns: columns {sorted(zero_norms)} have zero norm.",
                RuntimeWarning,
                stacklevel=2,
            )
        return out

    def normalize_rows(self: "Matrix", p: float) -> "Matrix":
        """
        Return a copy whose rows are divided by their p-norms.

        See Also
        --------
        normalize_columns
        """
        _check_norm_degree(p)
        out = self.clone()
        zero_norms: list[int] = []

        def _row(i: int) -> None:
            row = self.get_row(i)
            norm = row.p_norm(p)
            if norm == 0.0:
                zero_norms.append(i)
            for j in range(row.count):
                out.set_at(i, j, ieee_divide(row.at(j), norm))

        self.scheduler.parallel_for(0, self.row_count, _row)
        if zero_norms:
            warnings.warn(
                f"normalize_rows: rows {sorted(zero_norms)} have zero norm.",
                RuntimeWarning,
                stacklevel=2,
            )
        return out

    def determinant(self: "Matrix") -> float:
        raise OperationNotImplementedError("determinant")

    def condition_number(self: "Matrix") -> float:
        raise OperationNotImplementedError("condition_number")

    def rank(self: "Matrix") -> int:
        raise OperationNotImplementedError("rank")
