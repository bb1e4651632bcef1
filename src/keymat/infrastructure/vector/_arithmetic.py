"""
Elementwise vector arithmetic.

Every operation is out-of-place by default and accepts an optional `result`
container. Each output element depends only on the inputs at the same index,
so `result` may be `self` (or the other operand) for in-place updates.
"""

from __future__ import annotations

import operator
from abc import ABC
from numbers import Real
from typing import TYPE_CHECKING, Callable, Optional, Union

from ...domain._matrix import IMatrix
from ...domain._vector import IVector
from ..utils._checks import require_operand, require_vector, require_vector_length
from ..utils._scalar import ieee_divide

if TYPE_CHECKING:
    from ._vector import Vector

Operand = Union[IVector, float]


class VectorMixinArithmetic(ABC):
    """
    Mixin implementing vector arithmetic and operators.
    """

    def _prepare_result(
        self: "Vector", op: str, result: Optional[IVector]
    ) -> IVector:
        if result is None:
            return self.create_vector(self.count)
        require_vector_length(op, result, self.count, "result")
        return result

    def _map(
        self: "Vector",
        op: str,
        result: Optional[IVector],
        fn: Callable[[float], float],
    ) -> IVector:
        out = self._prepare_result(op, result)
        self.scheduler.parallel_for(0, self.count, lambda i: out.set_at(i, fn(self.at(i))))
        return out

    def _zip(
        self: "Vector",
        op: str,
        other: IVector,
        result: Optional[IVector],
        fn: Callable[[float, float], float],
    ) -> IVector:
        require_vector_length(op, other, self.count, "other")
        out = self._prepare_result(op, result)
        self.scheduler.parallel_for(
            0, self.count, lambda i: out.set_at(i, fn(self.at(i), other.at(i)))
        )
        return out

    def _binary(
        self: "Vector",
        op: str,
        other: Operand,
        result: Optional[IVector],
        fn: Callable[[float, float], float],
    ) -> IVector:
        require_operand(other, "other")
        if isinstance(other, Real):
            s = float(other)
            return self._map(op, result, lambda x: fn(x, s))
        return self._zip(op, other, result, fn)

    def add(self: "Vector", other: Operand, result: Optional[IVector] = None) -> IVector:
        """
        Add a vector (elementwise) or a scalar (to every element).

        Raises
        ------
        NullOperandError
            If `other` is None.
        DimensionMismatchError
            If `other` or `result` has a different length.
        """
        return self._binary("add", other, result, operator.add)

    def subtract(
        self: "Vector", other: Operand, result: Optional[IVector] = None
    ) -> IVector:
        """Subtract a vector (elementwise) or a scalar (from every element)."""
        return self._binary("subtract", other, result, operator.sub)

    def multiply(
        self: "Vector", scalar: float, result: Optional[IVector] = None
    ) -> IVector:
        """Multiply every element by `scalar`."""
        require_operand(scalar, "scalar")
        s = float(scalar)
        return self._map("multiply", result, lambda x: x * s)

    def divide(self: "Vector", scalar: float, result: Optional[IVector] = None) -> IVector:
        """Divide every element by `scalar` (IEEE-754 for a zero divisor)."""
        require_operand(scalar, "scalar")
        s = float(scalar)
        return self._map("divide", result, lambda x: ieee_divide(x, s))

    def negate(self: "Vector", result: Optional[IVector] = None) -> IVector:
        return self._map("negate", result, operator.neg)

    def pointwise_multiply(
        self: "Vector", other: IVector, result: Optional[IVector] = None
    ) -> IVector:
        """``result[i] = self[i] * other[i]``."""
        return self._zip("pointwise_multiply", other, result, operator.mul)

    def pointwise_divide(
        self: "Vector", other: IVector, result: Optional[IVector] = None
    ) -> IVector:
        """``result[i] = self[i] / other[i]`` (IEEE-754 for zero divisors)."""
        return self._zip("pointwise_divide", other, result, ieee_divide)

    def dot(self: "Vector", other: IVector) -> float:
        """
        Return the dot product, summed left to right.

        Raises
        ------
        NullOperandError
            If `other` is None.
        DimensionMismatchError
            If the lengths differ.
        """
        require_vector_length("dot", other, self.count, "other")
        s = 0.0
        for i in range(self.count):
            s += self.at(i) * other.at(i)
        return s

    def outer_product(self: "Vector", other: IVector) -> IMatrix:
        """
        Return the dyadic product ``self * other^T``, a
        ``count x other.count`` matrix.
        """
        require_vector("outer_product", other, "other")
        out = self.create_matrix(self.count, other.count)
        columns = other.count

        def _row(i: int) -> None:
            a = self.at(i)
            for j in range(columns):
                out.set_at(i, j, a * other.at(j))

        self.scheduler.parallel_for(0, self.count, _row)
        return out

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self: "Vector", other: Operand) -> IVector:
        require_operand(other, "other")
        if not isinstance(other, (Real, IVector)):
            return NotImplemented
        return self.add(other)

    def __radd__(self: "Vector", other: float) -> IVector:
        if not isinstance(other, Real):
            return NotImplemented
        return self.add(other)

    def __sub__(self: "Vector", other: Operand) -> IVector:
        require_operand(other, "other")
        if not isinstance(other, (Real, IVector)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self: "Vector", other: float) -> IVector:
        if not isinstance(other, Real):
            return NotImplemented
        s = float(other)
        return self._map("subtract", None, lambda x: s - x)

    def __mul__(self: "Vector", scalar: float) -> IVector:
        require_operand(scalar, "scalar")
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self: "Vector", scalar: float) -> IVector:
        return self.__mul__(scalar)

    def __truediv__(self: "Vector", scalar: float) -> IVector:
        require_operand(scalar, "scalar")
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.divide(scalar)

    def __neg__(self: "Vector") -> IVector:
        return self.negate()

    def __pos__(self: "Vector") -> IVector:
        return self.clone()

    def __matmul__(self: "Vector", other: Union[IVector, IMatrix]):
        """
        ``v @ w`` is the dot product; ``v @ M`` is ``M.left_multiply(v)``.
        """
        require_operand(other, "other")
        if isinstance(other, IVector):
            return self.dot(other)
        if isinstance(other, IMatrix) and hasattr(other, "left_multiply"):
            return other.left_multiply(self)
        return NotImplemented
