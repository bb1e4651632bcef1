"""
Row-parallel block copy/fill primitives shared by the matrix operations.
"""

from __future__ import annotations

from ...domain._matrix import IMatrix
from ...domain._scheduler import IParallelScheduler
from ...domain._vector import IVector


def copy_block(
    scheduler: IParallelScheduler,
    src: IMatrix,
    dst: IMatrix,
    row_offset: int = 0,
    column_offset: int = 0,
) -> None:
    """
    Copy all of `src` into `dst` with its top-left corner at
    `(row_offset, column_offset)`.

    The caller is responsible for the destination region fitting into `dst`.
    Work is partitioned by source row.
    """
    columns = src.column_count

    def _row(i: int) -> None:
        for j in range(columns):
            dst.set_at(i + row_offset, j + column_offset, src.at(i, j))

    scheduler.parallel_for(0, src.row_count, _row)


def fill_block(
    scheduler: IParallelScheduler,
    dst: IMatrix,
    row_start: int,
    row_count: int,
    column_start: int,
    column_count: int,
    value: float = 0.0,
) -> None:
    """Write `value` into every cell of a rectangular region of `dst`."""

    def _row(i: int) -> None:
        for j in range(column_start, column_start + column_count):
            dst.set_at(i, j, value)

    scheduler.parallel_for(row_start, row_start + row_count, _row)


def copy_vector(scheduler: IParallelScheduler, src: IVector, dst: IVector) -> None:
    """Copy `src` element by element into `dst` (same length)."""
    scheduler.parallel_for(0, src.count, lambda i: dst.set_at(i, src.at(i)))
