"""Jobs – time units and the fluent ``Job`` builder."""
from mp_scheduler.jobs.job import Job
from mp_scheduler.jobs.timespan import TimeSpan

__all__ = ["Job", "TimeSpan"]
