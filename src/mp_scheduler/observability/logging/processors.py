"""Observability – get_logger helper and per-job log context."""
from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def job_context(name: str | None) -> AbstractContextManager[Any]:
    """Bind ``job=<name>`` on every event logged inside the block.

    Relies on ``structlog.contextvars.merge_contextvars`` being in the
    processor chain, which :class:`JsonLoggerFactory` installs.
    """
    return structlog.contextvars.bound_contextvars(job=name or "UNKNOWN")


__all__ = ["get_logger", "job_context"]
