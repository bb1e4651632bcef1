"""
Environment-driven configuration for the default parallel scheduler.

Recognized variables
--------------------
KEYMAT_NUM_THREADS
    Worker count of the default thread pool. ``1`` selects sequential
    execution. Defaults to ``min(32, os.cpu_count())``.
KEYMAT_MIN_PARALLEL_WORK
    Ranges shorter than this run inline on the calling thread. Defaults to 2.
KEYMAT_PARALLEL
    ``0``/``false``/``no``/``off`` disables threading altogether.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ...domain._errors import InvalidArgumentError

_FALSY = ("0", "false", "no", "off")


def _default_workers() -> int:
    return min(32, os.cpu_count() or 1)


def _read_positive_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidArgumentError(key, raw, "Expected a positive integer.") from None
    if value < 1:
        raise InvalidArgumentError(key, raw, "Expected a positive integer.")
    return value


@dataclass(frozen=True)
class ParallelConfig:
    """
    Settings used to build the process-wide default scheduler.

    Attributes
    ----------
    enabled : bool
        If False, the default scheduler runs every unit of work inline.
    max_workers : int
        Thread-pool size.
    min_parallel_work : int
        Minimum range length dispatched to the pool.
    """

    enabled: bool = True
    max_workers: int = _default_workers()
    min_parallel_work: int = 2

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise InvalidArgumentError("max_workers", self.max_workers, "Must be >= 1.")
        if self.min_parallel_work < 1:
            raise InvalidArgumentError(
                "min_parallel_work", self.min_parallel_work, "Must be >= 1."
            )

    @property
    def is_sequential(self) -> bool:
        """True when the configuration leaves nothing to run concurrently."""
        return not self.enabled or self.max_workers == 1

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ParallelConfig":
        """
        Build a configuration from environment variables.

        Parameters
        ----------
        env : Optional[Mapping[str, str]]
            Mapping to read from. Defaults to ``os.environ``.

        Returns
        -------
        ParallelConfig
            Parsed configuration.

        Raises
        ------
        InvalidArgumentError
            If a variable holds a non-integer or non-positive value.
        """
        env = os.environ if env is None else env
        enabled = env.get("KEYMAT_PARALLEL", "1").strip().lower() not in _FALSY
        return cls(
            enabled=enabled,
            max_workers=_read_positive_int(
                env, "KEYMAT_NUM_THREADS", _default_workers()
            ),
            min_parallel_work=_read_positive_int(env, "KEYMAT_MIN_PARALLEL_WORK", 2),
        )
