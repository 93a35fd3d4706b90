"""Kernel – framework-agnostic building blocks (errors, time)."""

from mp_scheduler.kernel.errors import (
    BaseError,
    ConfigurationError,
    ExecutionError,
    SchedulerError,
)
from mp_scheduler.kernel.time import Clock, FrozenClock, SystemClock, local_now

__all__ = [
    "BaseError",
    "Clock",
    "ConfigurationError",
    "ExecutionError",
    "FrozenClock",
    "SchedulerError",
    "SystemClock",
    "local_now",
]
