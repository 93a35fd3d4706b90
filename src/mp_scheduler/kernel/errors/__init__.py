"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── SchedulerError          (scheduling.py)
        ├── ConfigurationError  job built with no duration / no function
        └── ExecutionError      job executed with no function, or it raised
"""

from mp_scheduler.kernel.errors.base import BaseError
from mp_scheduler.kernel.errors.scheduling import (
    ConfigurationError,
    ExecutionError,
    SchedulerError,
)

__all__ = [
    "BaseError",
    "ConfigurationError",
    "ExecutionError",
    "SchedulerError",
]
