"""
Data-parallel execution contract.

The arithmetic kernel never creates threads itself. It describes its work as
independent units (one per row or one per column) and hands them to an
injected scheduler satisfying :class:`IParallelScheduler`. Any execution
strategy (thread pool, task graph, plain loop) can be substituted without
touching kernel code.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class IParallelScheduler(Protocol):
    """
    Fork-join scheduler contract.

    Both primitives are synchronous: they return only after every unit of
    work has completed (barrier join). No ordering is guaranteed between the
    units of a single dispatch.
    """

    def parallel_for(self, start: int, end: int, body: Callable[[int], None]) -> None:
        """
        Run `body(i)` once for every `i` in the half-open range `[start, end)`.

        Raises
        ------
        Exception
            The first exception raised by any unit of work, re-raised after all
            units have finished.
        """
        ...

    def parallel_invoke(self, *actions: Callable[[], None]) -> None:
        """
        Run every zero-argument callable in `actions` once, possibly
        concurrently, and wait for all of them.
        """
        ...
