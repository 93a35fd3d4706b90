"""Scheduling errors — raised while building or executing jobs."""

from __future__ import annotations

from mp_scheduler.kernel.errors.base import BaseError


class SchedulerError(BaseError):
    """Base class for job and scheduler failures."""

    default_code = "scheduler_error"


class ConfigurationError(SchedulerError):
    """A job was configured incorrectly.

    Raised synchronously by the builder step that detected the problem,
    e.g. attaching a callback to a job whose interval is still zero.
    """

    default_code = "job_configuration_error"


class ExecutionError(SchedulerError):
    """A job could not be executed, or its callback raised."""

    default_code = "job_execution_error"


__all__ = ["ConfigurationError", "ExecutionError", "SchedulerError"]
