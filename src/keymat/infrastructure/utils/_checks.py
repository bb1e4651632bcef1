"""
Shared eager validation helpers.

Every kernel entry point validates all operands with these helpers *before*
dispatching any work, so a failing call never leaves a partially written
container behind.

An operand of the wrong kind (e.g., a vector where a matrix is required, or a
plain number) raises `TypeError`, matching what the operators report through
`NotImplemented`.
"""

from __future__ import annotations

from typing import Any, Optional

from ...domain._errors import DimensionMismatchError, NullOperandError
from ...domain._matrix import IMatrix
from ...domain._vector import IVector


def require_operand(value: Any, name: str) -> None:
    """
    Raise :class:`NullOperandError` if `value` is None.
    """
    if value is None:
        raise NullOperandError(name)


def require_matrix(op: str, m: Any, name: str) -> None:
    """
    Validate that `m` is present and satisfies the matrix contract.

    Raises
    ------
    NullOperandError
        If `m` is None.
    TypeError
        If `m` is not an :class:`IMatrix`.
    """
    require_operand(m, name)
    if not isinstance(m, IMatrix):
        raise TypeError(f"{op}: '{name}' must be a matrix, got {type(m).__name__}.")


def require_vector(op: str, v: Any, name: str) -> None:
    """Validate that `v` is present and satisfies the vector contract."""
    require_operand(v, name)
    if not isinstance(v, IVector):
        raise TypeError(f"{op}: '{name}' must be a vector, got {type(v).__name__}.")


def matrix_shape(m: IMatrix) -> tuple[int, int]:
    return (m.row_count, m.column_count)


def require_matrix_shape(
    op: str, m: Optional[IMatrix], rows: int, columns: int, name: str
) -> None:
    """
    Validate that `m` is a matrix shaped `rows x columns`.

    Raises
    ------
    NullOperandError
        If `m` is None.
    TypeError
        If `m` is not a matrix.
    DimensionMismatchError
        If the shape differs.
    """
    require_matrix(op, m, name)
    if m.row_count != rows or m.column_count != columns:
        raise DimensionMismatchError(op, name, (rows, columns), matrix_shape(m))


def require_same_shape(op: str, a: IMatrix, b: Optional[IMatrix], name: str) -> None:
    """Validate that `b` is a matrix shaped exactly like `a`."""
    require_matrix_shape(op, b, a.row_count, a.column_count, name)


def require_vector_length(
    op: str, v: Optional[IVector], length: int, name: str
) -> None:
    """Validate that `v` is a vector with `length` elements."""
    require_vector(op, v, name)
    if v.count != length:
        raise DimensionMismatchError(op, name, length, v.count)
