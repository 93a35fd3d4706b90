"""Observability – structlog configuration and logger helpers."""
from mp_scheduler.observability.logging.factory import JsonLoggerFactory
from mp_scheduler.observability.logging.processors import get_logger, job_context

__all__ = [
    "JsonLoggerFactory",
    "get_logger",
    "job_context",
]
