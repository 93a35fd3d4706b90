"""Jobs – Job builder and time-model.

A :class:`Job` pairs a callback with either a recurring interval or a
one-shot delay, and keeps its own due-time bookkeeping::

    job = Job.every(5, TimeSpan.MINUTES).and_(18, TimeSpan.SECONDS).do(report)
    once = Job.in_(1, TimeSpan.HOUR).named("warmup").do(warm_cache)

Every builder step mutates the job and returns it. :meth:`Job.do` is the
last step: it attaches the callback and validates, so an invalid job is
never handed back to the caller.
"""
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from mp_scheduler.jobs.timespan import TimeSpan
from mp_scheduler.kernel.errors import ConfigurationError, ExecutionError
from mp_scheduler.kernel.time import Clock, SystemClock
from mp_scheduler.observability.logging import get_logger

logger = get_logger(__name__)

Callback = Callable[[], object]


class Job:
    """A unit of work due every ``interval``, or once after it."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock: Clock = clock or SystemClock()
        self.interval: timedelta = timedelta(0)
        self.last_run: datetime = self.clock.now()
        self.next_run: datetime | None = None
        self.once: bool = False
        self.name: str | None = None
        self.callback: Callback | None = None
        self.run_count: int = 0

    # ------------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------------

    @classmethod
    def every(cls, n: int, unit: TimeSpan | str, *, clock: Clock | None = None) -> Job:
        """Recurring job running every *n* units."""
        job = cls(clock)
        job._increment(n, unit)
        return job

    @classmethod
    def in_(cls, n: int, unit: TimeSpan | str, *, clock: Clock | None = None) -> Job:
        """One-shot job running once, *n* units from now."""
        job = cls(clock)
        job._increment(n, unit)
        job.once = True
        return job

    def and_(self, n: int, unit: TimeSpan | str) -> Job:
        """Add *n* more units to the interval, e.g. 5 minutes *and* 18 seconds."""
        self._increment(n, unit)
        return self

    def named(self, name: str) -> Job:
        self.name = name
        return self

    def do(self, callback: Callback | None) -> Job:
        """Attach the callback and validate the job.

        Raises
        ------
        ConfigurationError
            When the interval is zero or the callback is missing or not callable.
        """
        if callback is not None and not callable(callback):
            raise ConfigurationError(
                "Callback must be callable",
                detail={"job": self._label, "callback": repr(callback)},
            )
        self.callback = callback
        return self.validate()

    def validate(self) -> Job:
        """Return the job unchanged if it can be scheduled, else raise."""
        if not self.interval:
            raise ConfigurationError("No duration entered", detail={"job": self._label})
        if self.callback is None:
            raise ConfigurationError("No function supplied", detail={"job": self._label})
        return self

    def bind_clock(self, clock: Clock) -> Job:
        """Switch to *clock*, keeping the time left until ``next_run``."""
        if clock == self.clock:
            self.clock = clock
            return self
        try:
            offset = clock.now() - self.clock.now()
            last_run = self.last_run + offset
            next_run = None if self.next_run is None else self.next_run + offset
        except OverflowError as exc:
            raise ConfigurationError(
                "Job schedule out of range for clock",
                detail={"job": self._label},
                cause=exc,
            ) from exc
        self.clock, self.last_run, self.next_run = clock, last_run, next_run
        return self

    def _increment(self, n: int, unit: TimeSpan | str) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ConfigurationError(
                "Interval amount must be a non-negative integer",
                detail={"job": self._label, "amount": repr(n)},
            )
        if self.once and self.next_run is None:
            raise ConfigurationError("One-shot job has already run", detail={"job": self._label})
        span = TimeSpan.coerce(unit)
        try:
            interval = self.interval + span.of(n)
            # next_run always reflects the interval including this increment
            next_run = self.last_run + interval
        except OverflowError as exc:
            raise ConfigurationError(
                "Interval out of range",
                detail={"job": self._label, "amount": n, "unit": span.name},
                cause=exc,
            ) from exc
        self.interval, self.next_run = interval, next_run

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    @property
    def is_periodic(self) -> bool:
        return not self.once

    def ready(self) -> bool:
        """True once ``next_run`` has been reached."""
        if self.next_run is None:
            return False
        return self.next_run <= self.clock.now()

    def time_until_next(self) -> timedelta | None:
        """Signed time left until ``next_run``; negative when overdue."""
        if self.next_run is None:
            return None
        return self.next_run - self.clock.now()

    def execute(self) -> None:
        """Run the job now and reschedule it.

        The next cycle is measured from this call, not from the previous
        ``next_run``, so late detection shifts every later run. One-shot
        jobs become terminal (``next_run is None``).

        Raises
        ------
        ExecutionError
            When no callback is attached or the callback raises. In both
            cases the schedule has already advanced and ``run_count`` is
            left unchanged.
        """
        now = self.clock.now()
        self.last_run = now
        self.next_run = None if self.once else now + self.interval

        if self.name is not None:
            logger.info("job.running", job=self.name)

        if self.callback is None:
            raise ExecutionError("No function provided", detail={"job": self._label})

        try:
            self.callback()
        except Exception as exc:
            raise ExecutionError(
                f"Job {self._label!r} raised {type(exc).__name__}",
                detail={"job": self._label},
                cause=exc,
            ) from exc
        self.run_count += 1

    @property
    def _label(self) -> str:
        return self.name if self.name is not None else "UNKNOWN"

    def __repr__(self) -> str:
        return f"Job(name={self._label!r})"


__all__ = ["Callback", "Job"]
