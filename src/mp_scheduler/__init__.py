"""
mp_scheduler – in-process periodic job scheduler.

Import path convention::

    from mp_scheduler import Job, Scheduler, TimeSpan
    from mp_scheduler.kernel.errors import ConfigurationError
    from mp_scheduler.kernel.time import FrozenClock

Quick start::

    job = Job.every(5, TimeSpan.SECONDS).named("heartbeat").do(ping)
    scheduler = Scheduler()
    scheduler.add_job(job)
    scheduler.run_forever()
"""

from mp_scheduler.jobs import Job, TimeSpan
from mp_scheduler.kernel.errors import ConfigurationError, ExecutionError, SchedulerError
from mp_scheduler.scheduler import Scheduler

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ExecutionError",
    "Job",
    "Scheduler",
    "SchedulerError",
    "TimeSpan",
    "__version__",
]
