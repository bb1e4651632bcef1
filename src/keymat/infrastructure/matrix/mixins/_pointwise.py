"""
Pointwise (Hadamard-style) binary operations on equally shaped matrices.

All four operations share one template: validate `other`, validate (or
allocate) `result`, then combine ``self[i, j]`` and ``other[i, j]`` into
``result[i, j]`` with work partitioned by column. Each output element depends
only on the inputs at the same position, so `result` may be `self` or `other`.

Division follows IEEE-754: a zero divisor yields ``+-inf`` or ``nan`` rather
than an exception.
"""

from __future__ import annotations

import operator
from abc import ABC
from typing import TYPE_CHECKING, Callable, Optional

from ....domain._matrix import IMatrix
from ...utils._checks import require_same_shape
from ...utils._scalar import ieee_divide

if TYPE_CHECKING:
    from .._matrix import Matrix


class MatrixMixinPointwise(ABC):
    """
    Mixin implementing pointwise multiply/add/subtract/divide.
    """

    def _pointwise(
        self: "Matrix",
        op: str,
        other: IMatrix,
        result: Optional[IMatrix],
        fn: Callable[[float, float], float],
    ) -> IMatrix:
        require_same_shape(op, self, other, "other")
        if result is None:
            result = self.create_matrix(self.row_count, self.column_count)
        else:
            require_same_shape(op, self, result, "result")

        rows = self.row_count

        def _column(j: int) -> None:
            for i in range(rows):
                result.set_at(i, j, fn(self.at(i, j), other.at(i, j)))

        self.scheduler.parallel_for(0, self.column_count, _column)
        return result

    def pointwise_multiply(
        self: "Matrix", other: IMatrix, result: Optional[IMatrix] = None
    ) -> IMatrix:
        """
        ``result[i, j] = self[i, j] * other[i, j]``.

        Parameters
        ----------
        other : IMatrix
            Same-shaped operand.
        result : Optional[IMatrix]
            Same-shaped container to write into; allocated when omitted.

        Returns
        -------
        IMatrix
            The container holding the result.

        Raises
        ------
        NullOperandError
            If `other` is None.
        TypeError
            If `other` or `result` is not a matrix.
        DimensionMismatchError
            If `other` or `result` is not shaped like this matrix.
        """
        return self._pointwise("pointwise_multiply", other, result, operator.mul)

    def pointwise_add(
        self: "Matrix", other: IMatrix, result: Optional[IMatrix] = None
    ) -> IMatrix:
        """``result[i, j] = self[i, j] + other[i, j]``."""
        return self._pointwise("pointwise_add", other, result, operator.add)

    def pointwise_subtract(
        self: "Matrix", other: IMatrix, result: Optional[IMatrix] = None
    ) -> IMatrix:
        """``result[i, j] = self[i, j] - other[i, j]``."""
        return self._pointwise("pointwise_subtract", other, result, operator.sub)

    def pointwise_divide(
        self: "Matrix", other: IMatrix, result: Optional[IMatrix] = None
    ) -> IMatrix:
        """
        ``result[i, j] = self[i, j] / other[i, j]`` with IEEE-754 semantics.
        """
        return self._pointwise("pointwise_divide", other, result, ieee_divide)
