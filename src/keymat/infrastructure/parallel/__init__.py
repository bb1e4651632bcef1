"""
Fork-join schedulers and their configuration.
"""

from ._config import ParallelConfig
from ._schedulers import (
    SequentialScheduler,
    ThreadPoolScheduler,
    build_scheduler,
    get_default_scheduler,
    set_default_scheduler,
)

__all__ = [
    ParallelConfig.__name__,
    SequentialScheduler.__name__,
    ThreadPoolScheduler.__name__,
    build_scheduler.__name__,
    get_default_scheduler.__name__,
    set_default_scheduler.__name__,
]
