"""
Validation- and contract-related exceptions for KeyMat.

This module defines the error kinds raised by the arithmetic kernel. Every
one of them is raised synchronously, before any element of any container is
mutated, so a caller that catches one of these errors can rely on all of its
operands being untouched.

The classes subclass built-in exception types so that generic handlers
(`except ValueError`) keep working, while the concrete class names make the
failing contract explicit when debugging.
"""

from __future__ import annotations

from typing import Any, Optional


class NullOperandError(ValueError):
    """
    Raised when a required operand or result container is missing (`None`).

    Attributes
    ----------
    name : str
        Parameter name of the missing operand (e.g., "other", "result").
    """

    def __init__(self, name: str) -> None:
        """
        Initialize the NullOperandError.

        Parameters
        ----------
        name : str
            Parameter name of the missing operand.
        """
        super().__init__(f"Operand '{name}' must not be None.")
        self.name = name


class DimensionMismatchError(ValueError):
    """
    Raised when operand or result shapes violate an operation's shape relation.

    Examples are unequal shapes for elementwise/pointwise operations, an
    incompatible inner dimension for products, or a result container whose
    shape differs from the declared output shape.

    Attributes
    ----------
    op : str
        Name of the operation that rejected the operands (e.g., "add").
    name : str
        Parameter name of the offending operand.
    expected : Any
        Shape (tuple) or length (int) the operation required.
    actual : Any
        Shape (tuple) or length (int) that was supplied.
    """

    def __init__(self, op: str, name: str, expected: Any, actual: Any) -> None:
        """
        Initialize the DimensionMismatchError.

        Parameters
        ----------
        op : str
            Operation name.
        name : str
            Parameter name of the offending operand.
        expected : Any
            Required shape or length.
        actual : Any
            Supplied shape or length.
        """
        super().__init__(
            f"{op}: dimension mismatch for '{name}': expected {expected}, got {actual}."
        )
        self.op = op
        self.name = name
        self.expected = expected
        self.actual = actual


class InvalidArgumentError(ValueError):
    """
    Raised when a scalar parameter violates a documented constraint.

    Examples: a norm degree `p < 1`, a non-positive row/column count, or a
    malformed configuration value.

    Attributes
    ----------
    name : str
        Parameter name.
    value : Any
        The rejected value.
    """

    def __init__(self, name: str, value: Any, reason: Optional[str] = None) -> None:
        """
        Initialize the InvalidArgumentError.

        Parameters
        ----------
        name : str
            Parameter name.
        value : Any
            The rejected value.
        reason : Optional[str]
            Human-readable constraint that was violated.
        """
        msg = f"Invalid value for '{name}': {value!r}."
        if reason:
            msg = f"{msg} {reason}"
        super().__init__(msg)
        self.name = name
        self.value = value


class OperationNotImplementedError(NotImplementedError):
    """
    Raised by operations that are part of the public surface but require
    decomposition algorithms (determinant, condition number, rank).

    Attributes
    ----------
    op : str
        Name of the unimplemented operation.
    """

    def __init__(self, op: str) -> None:
        super().__init__(
            f"{op} requires a matrix decomposition and is not implemented."
        )
        self.op = op
