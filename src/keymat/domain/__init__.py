"""
Backend-agnostic contracts and error types.

This layer has no third-party dependencies: it describes *what* a matrix,
vector, or scheduler must offer, and which errors the kernel raises.
"""

from ._errors import (
    NullOperandError,
    DimensionMismatchError,
    InvalidArgumentError,
    OperationNotImplementedError,
)
from ._matrix import IMatrix
from ._vector import IVector
from ._scheduler import IParallelScheduler
from ._distribution import IContinuousDistribution

__all__ = [
    NullOperandError.__name__,
    DimensionMismatchError.__name__,
    InvalidArgumentError.__name__,
    OperationNotImplementedError.__name__,
    IMatrix.__name__,
    IVector.__name__,
    IParallelScheduler.__name__,
    IContinuousDistribution.__name__,
]
