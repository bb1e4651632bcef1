"""
KeyMat
~~~~~~

Dense matrix/vector arithmetic over an abstract element-accessor contract,
with row/column work dispatched to an injectable fork-join scheduler.
"""

__version__ = "0.1.0"

from .domain import (
    NullOperandError,
    DimensionMismatchError,
    InvalidArgumentError,
    OperationNotImplementedError,
    IMatrix,
    IVector,
    IParallelScheduler,
    IContinuousDistribution,
)
from .infrastructure import (
    ParallelConfig,
    SequentialScheduler,
    ThreadPoolScheduler,
    get_default_scheduler,
    set_default_scheduler,
    Matrix,
    DenseMatrix,
    Vector,
    DenseVector,
    add,
    subtract,
    negate,
    scale,
    multiply,
    left_multiply,
)

__all__ = [
    "NullOperandError",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "OperationNotImplementedError",
    "IMatrix",
    "IVector",
    "IParallelScheduler",
    "IContinuousDistribution",
    "ParallelConfig",
    "SequentialScheduler",
    "ThreadPoolScheduler",
    "get_default_scheduler",
    "set_default_scheduler",
    "Matrix",
    "DenseMatrix",
    "Vector",
    "DenseVector",
    "add",
    "subtract",
    "negate",
    "scale",
    "multiply",
    "left_multiply",
]
