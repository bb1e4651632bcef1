"""
Matrix-vector, vector-matrix, and matrix-matrix products.

Each output element is a single left-to-right sum over the inner index, so
results are reproducible regardless of how the outer loop is scheduled.

Aliasing
--------
If the caller's result container is the very object used as an input, the
product is computed into a temporary created by the result's own factory and
copied back afterwards.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import TYPE_CHECKING, Optional, Union

from ....domain._errors import DimensionMismatchError
from ....domain._matrix import IMatrix
from ....domain._vector import IVector
from ...utils._checks import (
    require_matrix_shape,
    require_operand,
    require_vector_length,
)
from ...utils._copy import copy_block, copy_vector

if TYPE_CHECKING:
    from .._matrix import Matrix

logger = logging.getLogger(__name__)


class MatrixMixinProduct(ABC):
    """
    Mixin implementing products with vectors and other matrices.
    """

    def multiply(
        self: "Matrix",
        other: Union[IMatrix, IVector],
        result: Optional[Union[IMatrix, IVector]] = None,
    ) -> Union[IMatrix, IVector]:
        """
        Multiply this matrix by a vector or by another matrix.

        Parameters
        ----------
        other : Union[IMatrix, IVector]
            Right-hand operand. A vector must have `column_count` elements; a
            matrix must have `column_count` rows.
        result : Optional[Union[IMatrix, IVector]]
            Container to write into (vector of length `row_count`, or matrix of
            shape `row_count x other.column_count`). Allocated when omitted.
            May be the same object as an operand.

        Returns
        -------
        Union[IMatrix, IVector]
            The product.

        Raises
        ------
        NullOperandError
            If `other` is None.
        DimensionMismatchError
            If the inner dimensions or the result shape do not match.
        TypeError
            If `other` is neither a matrix nor a vector, or `result` is not
            the same kind as the product.
        """
        require_operand(other, "other")
        if isinstance(other, IMatrix):
            return self._multiply_matrix(other, result)
        if isinstance(other, IVector):
            return self._multiply_vector(other, result)
        raise TypeError(
            f"multiply expects a matrix or a vector, got {type(other).__name__}."
        )

    def _multiply_vector(
        self: "Matrix", vector: IVector, result: Optional[IVector]
    ) -> IVector:
        require_vector_length("multiply", vector, self.column_count, "other")
        if result is None:
            result = self.create_vector(self.row_count)
        else:
            require_vector_length("multiply", result, self.row_count, "result")

        if result is vector:
            logger.debug("multiply: result aliases the vector operand; using a temporary")
            tmp = result.create_vector(result.count)
            self._multiply_vector(vector, tmp)
            copy_vector(self.scheduler, tmp, result)
            return result

        columns = self.column_count

        def _row(i: int) -> None:
            s = 0.0
            for j in range(columns):
                s += self.at(i, j) * vector.at(j)
            result.set_at(i, s)

        self.scheduler.parallel_for(0, self.row_count, _row)
        return result

    def left_multiply(
        self: "Matrix", vector: IVector, result: Optional[IVector] = None
    ) -> IVector:
        """
        Compute the row-vector product ``vector * self``.

        Parameters
        ----------
        vector : IVector
            Left operand with `row_count` elements.
        result : Optional[IVector]
            Vector of length `column_count` to write into. May be `vector`.

        Returns
        -------
        IVector
            The product, of length `column_count`.
        """
        require_vector_length("left_multiply", vector, self.row_count, "vector")
        if result is None:
            result = self.create_vector(self.column_count)
        else:
            require_vector_length("left_multiply", result, self.column_count, "result")

        if result is vector:
            logger.debug(
                "left_multiply: result aliases the vector operand; using a temporary"
            )
            tmp = result.create_vector(result.count)
            self.left_multiply(vector, tmp)
            copy_vector(self.scheduler, tmp, result)
            return result

        rows = self.row_count

        def _column(j: int) -> None:
            s = 0.0
            for i in range(rows):
                s += vector.at(i) * self.at(i, j)
            result.set_at(j, s)

        self.scheduler.parallel_for(0, self.column_count, _column)
        return result

    def _multiply_matrix(
        self: "Matrix", other: IMatrix, result: Optional[IMatrix]
    ) -> IMatrix:
        if other.row_count != self.column_count:
            raise DimensionMismatchError(
                "multiply", "other", self.column_count, other.row_count
            )
        rows, columns = self.row_count, other.column_count
        if result is None:
            result = self.create_matrix(rows, columns)
        else:
            require_matrix_shape("multiply", result, rows, columns, "result")

        if result is self or result is other:
            logger.debug("multiply: result aliases an operand; using a temporary")
            tmp = result.create_matrix(rows, columns)
            self._multiply_matrix(other, tmp)
            copy_block(self.scheduler, tmp, result)
            return result

        inner = self.column_count

        def _row(i: int) -> None:
            for j in range(columns):
                s = 0.0
                for k in range(inner):
                    s += self.at(i, k) * other.at(k, j)
                result.set_at(i, j, s)

        self.scheduler.parallel_for(0, rows, _row)
        return result

    def __matmul__(self: "Matrix", other: Union[IMatrix, IVector]):
        """
        ``A @ B`` (matrix product) or ``A @ v`` (matrix-vector product).
        """
        require_operand(other, "other")
        if not isinstance(other, (IMatrix, IVector)):
            return NotImplemented
        return self.multiply(other)
