"""
Concrete runtime: schedulers, dense containers, and the arithmetic kernel.
"""

from .parallel import (
    ParallelConfig,
    SequentialScheduler,
    ThreadPoolScheduler,
    get_default_scheduler,
    set_default_scheduler,
)
from .matrix import Matrix, DenseMatrix
from .vector import Vector, DenseVector
from ._functional import add, subtract, negate, scale, multiply, left_multiply

__all__ = [
    ParallelConfig.__name__,
    SequentialScheduler.__name__,
    ThreadPoolScheduler.__name__,
    get_default_scheduler.__name__,
    set_default_scheduler.__name__,
    Matrix.__name__,
    DenseMatrix.__name__,
    Vector.__name__,
    DenseVector.__name__,
    add.__name__,
    subtract.__name__,
    negate.__name__,
    scale.__name__,
    multiply.__name__,
    left_multiply.__name__,
]
