"""
Dense matrix backed by a NumPy `float64` buffer.

Element access goes straight to the ndarray; bulk helpers (`clone`,
`to_numpy`, `copy_to` between dense matrices) use NumPy copies instead of
element loops. Everything else comes from the generic kernel in
:class:`~keymat.infrastructure.matrix.Matrix`.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._distribution import IContinuousDistribution
from ...domain._errors import InvalidArgumentError
from ...domain._matrix import IMatrix
from ...domain._scheduler import IParallelScheduler
from ..utils._checks import require_operand, require_same_shape
from ._matrix import Matrix


class DenseMatrix(Matrix):
    """
    Row-major dense matrix (NumPy storage).

    Parameters
    ----------
    rows : int
        Number of rows (>= 1).
    columns : int
        Number of columns (>= 1).
    scheduler : Optional[IParallelScheduler]
        Scheduler for this matrix and everything its factory creates.

    Notes
    -----
    The matrix is zero-initialized.
    """

    def __init__(
        self, rows: int, columns: int, *, scheduler: Optional[IParallelScheduler] = None
    ) -> None:
        super().__init__(rows, columns, scheduler=scheduler)
        self._data = np.zeros((self._rows, self._columns), dtype=np.float64)

    @classmethod
    def from_array(
        cls, arr: Any, *, scheduler: Optional[IParallelScheduler] = None
    ) -> "DenseMatrix":
        """
        Build a matrix from a 2-D array-like (copied).

        Raises
        ------
        InvalidArgumentError
            If `arr` is not two-dimensional or has an empty axis.
        """
        require_operand(arr, "arr")
        a = np.asarray(arr, dtype=np.float64)
        if a.ndim != 2:
            raise InvalidArgumentError("arr", a.shape, "Expected a 2-D array.")
        m = cls(a.shape[0], a.shape[1], scheduler=scheduler)
        m._data[...] = a
        return m

    @classmethod
    def identity(
        cls, order: int, *, scheduler: Optional[IParallelScheduler] = None
    ) -> "DenseMatrix":
        """Return the `order x order` identity matrix."""
        m = cls(order, order, scheduler=scheduler)
        np.fill_diagonal(m._data, 1.0)
        return m

    @classmethod
    def random(
        cls,
        rows: int,
        columns: int,
        distribution: IContinuousDistribution,
        *,
        scheduler: Optional[IParallelScheduler] = None,
    ) -> "DenseMatrix":
        """
        Return a matrix whose elements are drawn from `distribution`.

        Samples are drawn on the calling thread, column by column, because
        sampling sources are generally not thread-safe.

        Raises
        ------
        InvalidArgumentError
            If `rows` or `columns` is < 1.
        NullOperandError
            If `distribution` is None.
        """
        require_operand(distribution, "distribution")
        m = cls(rows, columns, scheduler=scheduler)
        for j in range(m._columns):
            for i in range(m._rows):
                m._data[i, j] = distribution.sample()
        return m

    @property
    def data(self) -> np.ndarray:
        """
        The backing ndarray (shared, not a copy).
        """
        return self._data

    def at(self, row: int, column: int) -> float:
        return float(self._data[row, column])

    def set_at(self, row: int, column: int, value: float) -> None:
        self._data[row, column] = value

    def create_matrix(self, rows: int, columns: int) -> "DenseMatrix":
        return DenseMatrix(rows, columns, scheduler=self._scheduler)

    def create_vector(self, size: int):
        from ..vector._dense_vector import DenseVector

        return DenseVector(size, scheduler=self._scheduler)

    def clone(self) -> "DenseMatrix":
        out = DenseMatrix(self._rows, self._columns, scheduler=self._scheduler)
        out._data[...] = self._data
        return out

    def copy_to(self, target: IMatrix) -> None:
        if isinstance(target, DenseMatrix):
            require_same_shape("copy_to", self, target, "target")
            target._data[...] = self._data
            return
        super().copy_to(target)

    def clear(self) -> None:
        self._data.fill(0.0)

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()
