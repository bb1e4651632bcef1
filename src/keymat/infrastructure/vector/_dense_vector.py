"""
Dense vector backed by a NumPy `float64` buffer.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._errors import InvalidArgumentError
from ...domain._scheduler import IParallelScheduler
from ...domain._vector import IVector
from ..utils._checks import require_operand, require_vector_length
from ._vector import Vector


class DenseVector(Vector):
    """
    Dense vector (NumPy storage), zero-initialized.
    """

    def __init__(
        self, size: int, *, scheduler: Optional[IParallelScheduler] = None
    ) -> None:
        super().__init__(size, scheduler=scheduler)
        self._data = np.zeros(self._size, dtype=np.float64)

    @classmethod
    def from_array(
        cls, arr: Any, *, scheduler: Optional[IParallelScheduler] = None
    ) -> "DenseVector":
        """
        Build a vector from a 1-D array-like (copied).

        Raises
        ------
        InvalidArgumentError
            If `arr` is not one-dimensional or is empty.
        """
        require_operand(arr, "arr")
        a = np.asarray(arr, dtype=np.float64)
        if a.ndim != 1:
            raise InvalidArgumentError("arr", a.shape, "Expected a 1-D array.")
        v = cls(a.shape[0], scheduler=scheduler)
        v._data[...] = a
        return v

    @property
    def data(self) -> np.ndarray:
        """The backing ndarray (shared, not a copy)."""
        return self._data

    def at(self, index: int) -> float:
        return float(self._data[index])

    def set_at(self, index: int, value: float) -> None:
        self._data[index] = value

    def create_vector(self, size: int) -> "DenseVector":
        return DenseVector(size, scheduler=self._scheduler)

    def create_matrix(self, rows: int, columns: int):
        from ..matrix._dense_matrix import DenseMatrix

        return DenseMatrix(rows, columns, scheduler=self._scheduler)

    def p_norm(self, p: float) -> float:
        if p is None or np.isnan(p) or p < 1:
            raise InvalidArgumentError("p", p, "The norm degree must be >= 1.")
        return float(np.linalg.norm(self._data, ord=p))

    def clone(self) -> "DenseVector":
        out = DenseVector(self._size, scheduler=self._scheduler)
        out._data[...] = self._data
        return out

    def copy_to(self, target: IVector) -> None:
        if isinstance(target, DenseVector):
            require_vector_length("copy_to", target, self._size, "target")
            target._data[...] = self._data
            return
        super().copy_to(target)

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()
