"""
Elementwise arithmetic on matrices: add, subtract, scale, negate, and the
corresponding operators.

Design notes
------------
- In-place mutators (`add`, `subtract`, `scale`) partition their work by row;
  each unit of work owns one full row, so concurrent units never touch the
  same element.
- Every "write into a separate result" variant is built from its in-place
  counterpart: validate the result, copy the source into it, then mutate the
  result in place.
- Operators are pure: they clone the left (or only) operand, mutate the
  clone, and return it.
"""

from __future__ import annotations

from abc import ABC
from numbers import Real
from typing import TYPE_CHECKING, Callable, Optional

from ....domain._matrix import IMatrix
from ....domain._scheduler import IParallelScheduler
from ...utils._checks import require_operand, require_same_shape
from ...utils._copy import copy_block
from ...utils._scalar import almost_equal_in_decimal_places

if TYPE_CHECKING:
    from .._matrix import Matrix

# Scalars this close to 1.0 (rounded to 15 decimals) leave a matrix unchanged.
IDENTITY_SCALE_DECIMAL_PLACES = 15


def _combine_rows(
    scheduler: IParallelScheduler,
    target: IMatrix,
    other: IMatrix,
    fn: Callable[[float, float], float],
) -> None:
    columns = target.column_count

    def _row(i: int) -> None:
        for j in range(columns):
            target.set_at(i, j, fn(target.at(i, j), other.at(i, j)))

    scheduler.parallel_for(0, target.row_count, _row)


def scale_in_place(scheduler: IParallelScheduler, target: IMatrix, scalar: float) -> None:
    """
    Multiply every element of `target` by `scalar`, row-parallel.

    Scalars equal to 1.0 within 15 decimal places are a no-op.
    """
    if almost_equal_in_decimal_places(1.0, scalar, IDENTITY_SCALE_DECIMAL_PLACES):
        return
    columns = target.column_count

    def _row(i: int) -> None:
        for j in range(columns):
            target.set_at(i, j, target.at(i, j) * scalar)

    scheduler.parallel_for(0, target.row_count, _row)


class MatrixMixinArithmetic(ABC):
    """
    Mixin implementing in-place elementwise arithmetic and pure operators.
    """

    def add(self: "Matrix", other: IMatrix) -> None:
        """
        Add `other` to this matrix in place.

        Raises
        ------
        NullOperandError
            If `other` is None.
        TypeError
            If `other` is not a matrix.
        DimensionMismatchError
            If the shapes differ.
        """
        require_same_shape("add", self, other, "other")
        _combine_rows(self.scheduler, self, other, lambda a, b: a + b)

    def subtract(self: "Matrix", other: IMatrix) -> None:
        """
        Subtract `other` from this matrix in place.

        Raises
        ------
        NullOperandError
            If `other` is None.
        TypeError
            If `other` is not a matrix.
        DimensionMismatchError
            If the shapes differ.
        """
        require_same_shape("subtract", self, other, "other")
        _combine_rows(self.scheduler, self, other, lambda a, b: a - b)

    def scale(self: "Matrix", scalar: float, result: Optional[IMatrix] = None) -> IMatrix:
        """
        Multiply every element by `scalar`.

        Parameters
        ----------
        scalar : float
            Multiplier. A value indistinguishable from 1.0 at 15 decimal places
            skips the work entirely.
        result : Optional[IMatrix]
            If given, this matrix is copied into `result` and `result` is
            scaled; this matrix is left untouched. Otherwise this matrix is
            scaled in place.

        Returns
        -------
        IMatrix
            The matrix that was scaled (`result` or `self`).
        """
        if result is None:
            scale_in_place(self.scheduler, self, float(scalar))
            return self
        require_same_shape("scale", self, result, "result")
        if result is not self:
            copy_block(self.scheduler, self, result)
        scale_in_place(self.scheduler, result, float(scalar))
        return result

    def negate(self: "Matrix", result: Optional[IMatrix] = None) -> IMatrix:
        """
        Negate every element, in place or into `result`.

        Returns
        -------
        IMatrix
            The negated matrix (`result` or `self`).
        """
        if result is not None:
            require_same_shape("negate", self, result, "result")
        return self.scale(-1.0, result)

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self: "Matrix", other: IMatrix) -> "Matrix":
        """
        Return ``self + other`` as a new matrix; operands are untouched.
        """
        require_operand(other, "other")
        if not isinstance(other, IMatrix):
            return NotImplemented
        require_same_shape("add", self, other, "other")
        out = self.clone()
        out.add(other)
        return out

    def __sub__(self: "Matrix", other: IMatrix) -> "Matrix":
        """
        Return ``self - other`` as a new matrix; operands are untouched.
        """
        require_operand(other, "other")
        if not isinstance(other, IMatrix):
            return NotImplemented
        require_same_shape("subtract", self, other, "other")
        out = self.clone()
        out.subtract(other)
        return out

    def __pos__(self: "Matrix") -> "Matrix":
        return self.clone()

    def __neg__(self: "Matrix") -> "Matrix":
        out = self.clone()
        out.negate()
        return out

    def __mul__(self: "Matrix", scalar: float) -> "Matrix":
        """
        Return ``self * scalar`` as a new matrix.

        Notes
        -----
        Only scalar multiplication uses ``*``; matrix and matrix-vector
        products use ``@``.
        """
        require_operand(scalar, "scalar")
        if not isinstance(scalar, Real):
            return NotImplemented
        out = self.clone()
        out.scale(float(scalar))
        return out

    def __rmul__(self: "Matrix", scalar: float) -> "Matrix":
        return self.__mul__(scalar)
