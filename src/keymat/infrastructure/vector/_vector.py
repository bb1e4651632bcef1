"""
Abstract vector base.

Concrete representations implement `at`, `set_at`, `create_vector` and
`create_matrix`; arithmetic, norms, copies and equality are inherited.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from ...domain._errors import InvalidArgumentError
from ...domain._matrix import IMatrix
from ...domain._scheduler import IParallelScheduler
from ...domain._vector import IVector
from ..parallel._schedulers import get_default_scheduler
from ..utils._checks import require_vector_length
from ..utils._copy import copy_vector
from ._arithmetic import VectorMixinArithmetic


class Vector(VectorMixinArithmetic, ABC):
    """
    Storage-agnostic vector of doubles.

    Parameters
    ----------
    size : int
        Number of elements (>= 1).
    scheduler : Optional[IParallelScheduler]
        Scheduler for this vector and the containers its factory creates.
    """

    def __init__(
        self, size: int, *, scheduler: Optional[IParallelScheduler] = None
    ) -> None:
        if size < 1:
            raise InvalidArgumentError("size", size, "Must be >= 1.")
        self._size = int(size)
        self._scheduler = scheduler if scheduler is not None else get_default_scheduler()

    @property
    def count(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    @property
    def scheduler(self) -> IParallelScheduler:
        return self._scheduler

    @abstractmethod
    def at(self, index: int) -> float:
        """Return the element at `index` without range checking."""

    @abstractmethod
    def set_at(self, index: int, value: float) -> None:
        """Write the element at `index` without range checking."""

    @abstractmethod
    def create_vector(self, size: int) -> "Vector":
        """Create a zero-filled vector of the same representation."""

    @abstractmethod
    def create_matrix(self, rows: int, columns: int) -> IMatrix:
        """Create a zero-filled matrix matching this representation."""

    def _check_index(self, index: int) -> None:
        if not isinstance(index, (int, np.integer)):
            raise TypeError("Vector indices must be integers.")
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range [0, {self._size}).")

    def __getitem__(self, index: int) -> float:
        self._check_index(index)
        return self.at(index)

    def __setitem__(self, index: int, value: float) -> None:
        self._check_index(index)
        self.set_at(index, float(value))

    def __iter__(self):
        for i in range(self._size):
            yield self.at(i)

    def p_norm(self, p: float) -> float:
        """
        Return the p-norm of the vector.

        Parameters
        ----------
        p : float
            ``p >= 1``; ``math.inf`` gives the maximum absolute value.

        Raises
        ------
        InvalidArgumentError
            If ``p < 1``.
        """
        if p is None or math.isnan(p) or p < 1:
            raise InvalidArgumentError("p", p, "The norm degree must be >= 1.")
        if math.isinf(p):
            return max(abs(x) for x in self)
        if p == 1:
            return sum(abs(x) for x in self)
        if p == 2:
            return math.sqrt(sum(x * x for x in self))
        return sum(abs(x) ** p for x in self) ** (1.0 / p)

    def clone(self) -> "Vector":
        out = self.create_vector(self._size)
        copy_vector(self._scheduler, self, out)
        return out

    def copy_to(self, target: IVector) -> None:
        """
        Copy every element into `target`.

        Raises
        ------
        NullOperandError
            If `target` is None.
        DimensionMismatchError
            If the lengths differ.
        """
        require_vector_length("copy_to", target, self._size, "target")
        if target is self:
            return
        copy_vector(self._scheduler, self, target)

    def to_numpy(self) -> np.ndarray:
        return np.fromiter(self, dtype=np.float64, count=self._size)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, IVector):
            return NotImplemented
        if other.count != self._size:
            return False
        return all(self.at(i) == other.at(i) for i in range(self._size))

    __hash__ = None

    # NumPy operands defer to the reflected operators instead of converting
    # this container into an ndarray.
    __array_ufunc__ = None

    def __repr__(self) -> str:
        values = ", ".join(f"{x:g}" for x in self)
        return f"{type(self).__name__}([{values}])"
