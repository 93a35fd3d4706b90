"""Scheduler – polls jobs for readiness and drives the run-loop."""
from __future__ import annotations

import threading
from datetime import timedelta

from mp_scheduler.config.settings import SchedulerSettings
from mp_scheduler.jobs import Job
from mp_scheduler.kernel.errors import ExecutionError
from mp_scheduler.kernel.time import Clock, SystemClock
from mp_scheduler.observability.logging import get_logger, job_context

logger = get_logger(__name__)


class Scheduler:
    """Owns a collection of jobs and runs the ones that are due.

    Use :meth:`run_pending` from an external loop, or hand the calling
    thread over to :meth:`run_forever`. Jobs run one at a time, in the
    order they were added.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        settings: SchedulerSettings | None = None,
    ) -> None:
        self._clock: Clock = clock or SystemClock()
        self._settings = settings or SchedulerSettings()
        self._jobs: list[Job] = []
        self._stop = threading.Event()

    def add_job(self, job: Job) -> None:
        """Take ownership of *job*; raises ``ConfigurationError`` if it is invalid.

        The job is moved onto the scheduler's clock, keeping its time left
        until ``next_run``, so readiness and sleeping read the same time.
        """
        job.validate().bind_clock(self._clock)
        self._jobs.append(job)
        logger.debug("scheduler.job_added", job=repr(job), next_run=job.next_run)

    @property
    def jobs(self) -> tuple[Job, ...]:
        return tuple(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def __repr__(self) -> str:
        return f"Scheduler(jobs={self._jobs!r})"

    def pending(self) -> bool:
        """True if any job is ready to run."""
        return any(job.ready() for job in self._jobs)

    def time_to_next(self) -> timedelta | None:
        """Time until the earliest scheduled job is due.

        Considers every job with a ``next_run``, ready or not. Overdue jobs
        count as ``timedelta(0)``. ``None`` when nothing is scheduled.
        """
        scheduled = [job.next_run for job in self._jobs if job.next_run is not None]
        if not scheduled:
            return None
        return max(min(scheduled) - self._clock.now(), timedelta(0))

    def run_pending(self) -> int:
        """Execute every ready job once and return how many succeeded.

        A failing job is logged and skipped; it never prevents the rest of
        the pass from running.
        """
        count = 0
        for job in self._jobs:
            if not job.ready():
                continue
            with job_context(job.name):
                try:
                    job.execute()
                except ExecutionError as exc:
                    logger.error("job.failed", job=exc.job, exc_info=exc, **exc.to_dict())
                    continue
                logger.debug("job.executed", run_count=job.run_count, next_run=job.next_run)
            count += 1
        return count

    def run_forever(self) -> None:
        """Sleep until the next job is due, run what is pending, repeat.

        Returns once no job has a scheduled run left, or after :meth:`stop`.
        A stop requested before the call makes it return without running
        anything. The request is cleared on return so the loop can restart.
        """
        try:
            while not self._stop.is_set():
                delay = self.time_to_next()
                if delay is None:
                    logger.info("scheduler.exhausted", jobs=len(self._jobs))
                    return
                cap = self._settings.max_sleep_seconds
                if cap > 0:
                    delay = min(delay, timedelta(seconds=cap))
                logger.debug("scheduler.sleeping", seconds=delay.total_seconds())
                self._clock.sleep(delay)
                self.run_pending()
            logger.info("scheduler.stopped", jobs=len(self._jobs))
        finally:
            self._stop.clear()

    def stop(self) -> None:
        """Ask :meth:`run_forever` to return before its next sleep."""
        self._stop.set()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()


__all__ = ["Scheduler"]
