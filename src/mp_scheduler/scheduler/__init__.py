"""Scheduler – single-threaded poll loop over a set of jobs."""
from mp_scheduler.scheduler.scheduler import Scheduler

__all__ = ["Scheduler"]
