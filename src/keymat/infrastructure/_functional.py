"""
Named free functions mirroring the container operators.

They carry the same null/shape contracts as the operators and leave every
operand untouched.
"""

from __future__ import annotations

from typing import Union

from ..domain._matrix import IMatrix
from ..domain._vector import IVector
from .matrix._matrix import Matrix
from .utils._checks import require_operand


def add(left: Matrix, right: IMatrix) -> Matrix:
    """Return ``left + right``."""
    require_operand(left, "left")
    require_operand(right, "right")
    return left + right


def subtract(left: Matrix, right: IMatrix) -> Matrix:
    """Return ``left - right``."""
    require_operand(left, "left")
    require_operand(right, "right")
    return left - right


def negate(operand: Matrix) -> Matrix:
    """Return ``-operand``."""
    require_operand(operand, "operand")
    return -operand


def scale(operand: Matrix, scalar: float) -> Matrix:
    """Return ``scalar * operand``."""
    require_operand(operand, "operand")
    return operand * scalar


def multiply(
    left: Matrix, right: Union[IMatrix, IVector]
) -> Union[IMatrix, IVector]:
    """Return the matrix-matrix or matrix-vector product ``left @ right``."""
    require_operand(left, "left")
    return left.multiply(right)


def left_multiply(left: IVector, right: Matrix) -> IVector:
    """Return the row-vector product ``left @ right``."""
    require_operand(right, "right")
    return right.left_multiply(left)
