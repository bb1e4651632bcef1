"""
Structural composition: append, stack, diagonal stack, Kronecker product.

Append/Stack/DiagonalStack copy each source into a disjoint region of the
destination. The per-source copy passes run concurrently via
`parallel_invoke`, and each pass is itself row-parallel. Because the
destination shape always differs from both source shapes, the destination
can never be one of the sources and no temporary is needed.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import TYPE_CHECKING, Optional

from ....domain._errors import DimensionMismatchError
from ....domain._matrix import IMatrix
from ...utils._checks import require_matrix, require_matrix_shape
from ...utils._copy import copy_block, fill_block

if TYPE_CHECKING:
    from .._matrix import Matrix

logger = logging.getLogger(__name__)


class MatrixMixinStructural(ABC):
    """
    Mixin building larger matrices out of two smaller ones.
    """

    def append(self: "Matrix", right: IMatrix, result: Optional[IMatrix] = None) -> IMatrix:
        """
        Concatenate `right` to the right of this matrix.

        Parameters
        ----------
        right : IMatrix
            Matrix with the same row count.
        result : Optional[IMatrix]
            Container shaped ``row_count x (column_count + right.column_count)``.

        Returns
        -------
        IMatrix
            The concatenated matrix.

        Raises
        ------
        NullOperandError
            If `right` is None.
        TypeError
            If `right` or `result` is not a matrix.
        DimensionMismatchError
            If the row counts differ or `result` is mis-shaped.
        """
        require_matrix("append", right, "right")
        if right.row_count != self.row_count:
            raise DimensionMismatchError(
                "append", "right", self.row_count, right.row_count
            )
        rows = self.row_count
        columns = self.column_count + right.column_count
        if result is None:
            result = self.create_matrix(rows, columns)
        else:
            require_matrix_shape("append", result, rows, columns, "result")

        s = self.scheduler
        s.parallel_invoke(
            lambda: copy_block(s, self, result),
            lambda: copy_block(s, right, result, 0, self.column_count),
        )
        return result

    def stack(self: "Matrix", lower: IMatrix, result: Optional[IMatrix] = None) -> IMatrix:
        """
        Place `lower` below this matrix.

        Parameters
        ----------
        lower : IMatrix
            Matrix with the same column count.
        result : Optional[IMatrix]
            Container shaped ``(row_count + lower.row_count) x column_count``.

        Raises
        ------
        NullOperandError
            If `lower` is None.
        DimensionMismatchError
            If the column counts differ or `result` is mis-shaped.
        """
        require_matrix("stack", lower, "lower")
        if lower.column_count != self.column_count:
            raise DimensionMismatchError(
                "stack", "lower", self.column_count, lower.column_count
            )
        rows = self.row_count + lower.row_count
        columns = self.column_count
        if result is None:
            result = self.create_matrix(rows, columns)
        else:
            require_matrix_shape("stack", result, rows, columns, "result")

        s = self.scheduler
        s.parallel_invoke(
            lambda: copy_block(s, self, result),
            lambda: copy_block(s, lower, result, self.row_count, 0),
        )
        return result

    def diagonal_stack(
        self: "Matrix", lower: IMatrix, result: Optional[IMatrix] = None
    ) -> IMatrix:
        """
        Build the block-diagonal matrix ``[[self, 0], [0, lower]]``.

        The result is ``(row_count + lower.row_count) x (column_count +
        lower.column_count)``. A caller-supplied `result` has its off-diagonal
        blocks zeroed; a freshly allocated one already is.
        """
        require_matrix("diagonal_stack", lower, "lower")
        rows = self.row_count + lower.row_count
        columns = self.column_count + lower.column_count
        zero_off_diagonal = result is not None
        if result is None:
            result = self.create_matrix(rows, columns)
        else:
            require_matrix_shape("diagonal_stack", result, rows, columns, "result")

        s = self.scheduler
        r1, c1 = self.row_count, self.column_count
        actions = [
            lambda: copy_block(s, self, result),
            lambda: copy_block(s, lower, result, r1, c1),
        ]
        if zero_off_diagonal:
            actions.append(lambda: fill_block(s, result, 0, r1, c1, lower.column_count))
            actions.append(lambda: fill_block(s, result, r1, lower.row_count, 0, c1))
        s.parallel_invoke(*actions)
        return result

    def kronecker_product(
        self: "Matrix", other: IMatrix, result: Optional[IMatrix] = None
    ) -> IMatrix:
        """
        Compute the Kronecker product ``self (x) other``.

        The result is ``(row_count * other.row_count) x (column_count *
        other.column_count)``; block ``(i, j)`` equals ``self[i, j] * other``
        and sits at row offset ``i * other.row_count`` and column offset
        ``j * other.column_count``. Work is partitioned by this matrix's
        columns.

        Raises
        ------
        NullOperandError
            If `other` is None.
        DimensionMismatchError
            If `result` is mis-shaped.
        """
        require_matrix("kronecker_product", other, "other")
        orows, ocols = other.row_count, other.column_count
        rows, columns = self.row_count * orows, self.column_count * ocols
        if result is None:
            result = self.create_matrix(rows, columns)
        else:
            require_matrix_shape("kronecker_product", result, rows, columns, "result")

        if result is self or result is other:
            logger.debug("kronecker_product: result aliases an operand; using a temporary")
            tmp = result.create_matrix(rows, columns)
            self.kronecker_product(other, tmp)
            copy_block(self.scheduler, tmp, result)
            return result

        def _column(j: int) -> None:
            for i in range(self.row_count):
                a = self.at(i, j)
                for bi in range(orows):
                    for bj in range(ocols):
                        result.set_at(i * orows + bi, j * ocols + bj, a * other.at(bi, bj))

        self.scheduler.parallel_for(0, self.column_count, _column)
        return result
