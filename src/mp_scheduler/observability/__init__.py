"""Observability – structured logging."""

from mp_scheduler.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
