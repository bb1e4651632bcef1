"""
Concrete fork-join schedulers.

Two implementations of :class:`~keymat.domain._scheduler.IParallelScheduler`
are provided:

- :class:`SequentialScheduler` runs every unit of work inline. It is the
  reference behavior and the fallback for tiny workloads.
- :class:`ThreadPoolScheduler` partitions a range into contiguous chunks and
  runs them on a lazily created `concurrent.futures.ThreadPoolExecutor`.

Design notes
------------
- Both primitives are barrier joins: they wait for *every* submitted unit
  before returning or re-raising the first failure.
- Dispatch issued from inside one of the pool's own workers runs inline on
  that worker. Structural operations nest `parallel_for` inside
  `parallel_invoke`; running the inner level inline keeps a bounded pool from
  deadlocking on itself.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, List, Optional, Tuple

from ...domain._errors import InvalidArgumentError
from ...domain._scheduler import IParallelScheduler
from ._config import ParallelConfig

logger = logging.getLogger(__name__)


class SequentialScheduler:
    """
    Scheduler that executes every unit of work on the calling thread.
    """

    def parallel_for(self, start: int, end: int, body: Callable[[int], None]) -> None:
        """
        Call `body(i)` for each `i` in `[start, end)`, in increasing order.

        Parameters
        ----------
        start, end : int
            Half-open index range. An empty range is a no-op.
        body : Callable[[int], None]
            Unit of work.
        """
        for i in range(start, end):
            body(i)

    def parallel_invoke(self, *actions: Callable[[], None]) -> None:
        """
        Run each action once, in argument order.

        Parameters
        ----------
        *actions : Callable[[], None]
            Zero-argument callables.
        """
        for action in actions:
            action()

    def __repr__(self) -> str:
        return "SequentialScheduler()"


def _partition(start: int, end: int, parts: int) -> List[Tuple[int, int]]:
    """
    Split `[start, end)` into at most `parts` contiguous, near-equal chunks.

    Returns
    -------
    list[tuple[int, int]]
        Half-open `(lo, hi)` pairs covering the range exactly once.
    """
    n = end - start
    parts = max(1, min(parts, n))
    size, extra = divmod(n, parts)
    chunks = []
    lo = start
    for k in range(parts):
        hi = lo + size + (1 if k < extra else 0)
        chunks.append((lo, hi))
        lo = hi
    return chunks


def _join(futures: List[Future]) -> None:
    # wait for all units first so no work is still running when we raise
    wait(futures)
    for f in futures:
        f.result()


class ThreadPoolScheduler:
    """
    Thread-pool backed fork-join scheduler.

    Parameters
    ----------
    max_workers : Optional[int]
        Pool size. Defaults to the value from :class:`ParallelConfig`.
    min_parallel_work : int, optional
        Ranges shorter than this run inline. Defaults to 2.

    Notes
    -----
    - The executor is created on first use and can be released with
      :meth:`shutdown` (or by using the scheduler as a context manager).
      A shut-down scheduler recreates its pool if used again.
    - NumPy-free Python loops hold the GIL, so the pool mostly pays off for
      element accessors that release it; correctness does not depend on it.
    """

    def __init__(
        self, max_workers: Optional[int] = None, *, min_parallel_work: int = 2
    ) -> None:
        if max_workers is None:
            max_workers = ParallelConfig().max_workers
        if max_workers < 1:
            raise InvalidArgumentError("max_workers", max_workers, "Must be >= 1.")
        if min_parallel_work < 1:
            raise InvalidArgumentError(
                "min_parallel_work", min_parallel_work, "Must be >= 1."
            )
        self._max_workers = int(max_workers)
        self._min_parallel_work = int(min_parallel_work)
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()
        self._local = threading.local()

    @property
    def max_workers(self) -> int:
        """
        Size of the worker pool.

        Returns
        -------
        int
            Maximum number of concurrently running units.
        """
        return self._max_workers

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                logger.debug("Starting thread pool with %d workers", self._max_workers)
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers, thread_name_prefix="keymat"
                )
            return self._executor

    def _in_worker(self) -> bool:
        return getattr(self._local, "in_worker", False)

    def _run_in_worker(self, fn: Callable[[], None]) -> None:
        self._local.in_worker = True
        try:
            fn()
        finally:
            self._local.in_worker = False

    def _run_chunk(self, body: Callable[[int], None], lo: int, hi: int) -> None:
        self._local.in_worker = True
        try:
            for i in range(lo, hi):
                body(i)
        finally:
            self._local.in_worker = False

    def parallel_for(self, start: int, end: int, body: Callable[[int], None]) -> None:
        """
        Run `body(i)` for each `i` in `[start, end)` across the pool.

        Parameters
        ----------
        start, end : int
            Half-open index range. An empty range is a no-op.
        body : Callable[[int], None]
            Unit of work. Units must not write the same element.
        """
        n = end - start
        if n <= 0:
            return
        if n < self._min_parallel_work or self._max_workers == 1 or self._in_worker():
            for i in range(start, end):
                body(i)
            return

        executor = self._get_executor()
        futures = [
            executor.submit(self._run_chunk, body, lo, hi)
            for lo, hi in _partition(start, end, self._max_workers)
        ]
        _join(futures)

    def parallel_invoke(self, *actions: Callable[[], None]) -> None:
        """
        Run each action once, concurrently, and wait for all of them.
        """
        if len(actions) < 2 or self._max_workers == 1 or self._in_worker():
            for action in actions:
                action()
            return

        executor = self._get_executor()
        futures = [executor.submit(self._run_in_worker, action) for action in actions]
        _join(futures)

    def shutdown(self, wait: bool = True) -> None:
        """Release the worker threads."""
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            logger.debug("Shutting down thread pool")
            executor.shutdown(wait=wait)

    def __enter__(self) -> "ThreadPoolScheduler":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def __repr__(self) -> str:
        return (
            f"ThreadPoolScheduler(max_workers={self._max_workers}, "
            f"min_parallel_work={self._min_parallel_work})"
        )


_default_scheduler: Optional[IParallelScheduler] = None
_default_lock = threading.Lock()


def build_scheduler(config: ParallelConfig) -> IParallelScheduler:
    """
    Build a scheduler from a configuration.

    Returns
    -------
    IParallelScheduler
        A :class:`SequentialScheduler` when the configuration is sequential,
        otherwise a :class:`ThreadPoolScheduler`.
    """
    if config.is_sequential:
        return SequentialScheduler()
    return ThreadPoolScheduler(
        config.max_workers, min_parallel_work=config.min_parallel_work
    )


def get_default_scheduler() -> IParallelScheduler:
    """
    Return the process default scheduler, building it from the environment
    on first use.
    """
    global _default_scheduler
    with _default_lock:
        if _default_scheduler is None:
            config = ParallelConfig.from_env()
            _default_scheduler = build_scheduler(config)
            logger.debug("Default scheduler: %r", _default_scheduler)
        return _default_scheduler


def set_default_scheduler(scheduler: Optional[IParallelScheduler]) -> None:
    """
    Replace the process default scheduler.

    Parameters
    ----------
    scheduler : Optional[IParallelScheduler]
        New default. ``None`` resets it so the next call to
        :func:`get_default_scheduler` rebuilds it from the environment.

    Notes
    -----
    Containers capture their scheduler at construction; replacing the default
    does not affect existing containers.
    """
    global _default_scheduler
    if scheduler is not None and not isinstance(scheduler, IParallelScheduler):
        raise InvalidArgumentError(
            "scheduler", scheduler, "Expected parallel_for/parallel_invoke."
        )
    with _default_lock:
        _default_scheduler = scheduler
