"""Unit tests for the Scheduler run-loop."""
from __future__ import annotations

import threading
import time
from datetime import timedelta

import pytest
from structlog.testing import capture_logs

from mp_scheduler import Job, Scheduler, TimeSpan
from mp_scheduler.config import SchedulerSettings
from mp_scheduler.kernel.errors import ConfigurationError
from mp_scheduler.kernel.time import FrozenClock


def _noop() -> None:
    pass


def _job(clock: FrozenClock, n: int = 5, unit: TimeSpan = TimeSpan.MINUTES) -> Job:
    return Job.every(n, unit, clock=clock).do(_noop)


# ---------------------------------------------------------------------------
# Job collection
# ---------------------------------------------------------------------------
class TestAddJob:
    def test_constructor(self) -> None:
        sched = Scheduler()
        assert len(sched) == 0
        assert sched.jobs == ()

    def test_add_job_to_queue(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        sched.add_job(_job(fake_clock))
        assert len(sched) == 1
        sched.add_job(_job(fake_clock))
        assert len(sched) == 2

    def test_no_deduplication(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        job = _job(fake_clock)
        sched.add_job(job)
        sched.add_job(job)
        assert len(sched) == 2

    def test_rejects_invalid_job(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        with pytest.raises(ConfigurationError, match="No function supplied"):
            sched.add_job(Job.every(1, TimeSpan.SECOND, clock=fake_clock))
        assert len(sched) == 0

    def test_add_job_keeps_time_left(self, fake_clock: FrozenClock) -> None:
        other = FrozenClock(fake_clock.now() - timedelta(days=30))
        job = _job(other, 2, TimeSpan.MINUTES)
        sched = Scheduler(clock=fake_clock)
        sched.add_job(job)
        assert job.clock is fake_clock
        assert sched.time_to_next() == timedelta(minutes=2)
        assert not sched.pending()

    def test_jobs_is_a_snapshot(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        sched.add_job(_job(fake_clock))
        assert isinstance(sched.jobs, tuple)
        assert len(sched.jobs) == 1


# ---------------------------------------------------------------------------
# pending / time_to_next
# ---------------------------------------------------------------------------
class TestPending:
    def test_empty_queue_is_not_pending(self, fake_clock: FrozenClock) -> None:
        assert not Scheduler(clock=fake_clock).pending()

    def test_queue_with_pending_task(self, fake_clock: FrozenClock) -> None:
        job = _job(fake_clock, 10, TimeSpan.MILLISECONDS)
        fake_clock.advance(milliseconds=11)
        assert job.ready()

        sched = Scheduler(clock=fake_clock)
        assert not sched.pending()
        sched.add_job(job)
        assert sched.pending()

    def test_pending_does_not_run_jobs(self, fake_clock: FrozenClock) -> None:
        job = _job(fake_clock, 1, TimeSpan.SECOND)
        sched = Scheduler(clock=fake_clock)
        sched.add_job(job)
        fake_clock.advance(seconds=2)
        assert sched.pending()
        assert sched.pending()
        assert job.run_count == 0


class TestTimeToNext:
    def test_empty(self, fake_clock: FrozenClock) -> None:
        assert Scheduler(clock=fake_clock).time_to_next() is None

    def test_nearest_of_all_jobs(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        sched.add_job(_job(fake_clock, 3, TimeSpan.MINUTES))
        sched.add_job(_job(fake_clock, 90, TimeSpan.SECONDS))
        sched.add_job(_job(fake_clock, 1, TimeSpan.HOUR))
        assert sched.time_to_next() == timedelta(seconds=90)

    def test_ignores_terminal_jobs(self, fake_clock: FrozenClock) -> None:
        once = Job.in_(1, TimeSpan.SECOND, clock=fake_clock).do(_noop)
        sched = Scheduler(clock=fake_clock)
        sched.add_job(once)
        sched.add_job(_job(fake_clock, 10, TimeSpan.MINUTES))
        fake_clock.advance(seconds=1)
        sched.run_pending()
        assert once.next_run is None
        assert sched.time_to_next() == timedelta(minutes=10) - timedelta(seconds=1)

    def test_none_when_all_terminal(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        sched.add_job(Job.in_(1, TimeSpan.SECOND, clock=fake_clock).do(_noop))
        fake_clock.advance(seconds=1)
        assert sched.run_pending() == 1
        assert sched.time_to_next() is None

    def test_overdue_is_zero(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        sched.add_job(_job(fake_clock, 1, TimeSpan.SECOND))
        fake_clock.advance(minutes=1)
        assert sched.time_to_next() == timedelta(0)


# ---------------------------------------------------------------------------
# run_pending
# ---------------------------------------------------------------------------
class TestRunPending:
    def test_runs_only_ready_jobs(self, fake_clock: FrozenClock) -> None:
        fast = _job(fake_clock, 1, TimeSpan.SECOND)
        slow = _job(fake_clock, 1, TimeSpan.HOUR)
        sched = Scheduler(clock=fake_clock)
        sched.add_job(fast)
        sched.add_job(slow)
        fake_clock.advance(seconds=1)
        assert sched.run_pending() == 1
        assert fast.run_count == 1
        assert slow.run_count == 0
        assert not sched.pending()

    def test_nothing_ready(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        sched.add_job(_job(fake_clock))
        assert sched.run_pending() == 0

    def test_failure_is_isolated(self, fake_clock: FrozenClock) -> None:
        def boom() -> None:
            raise ValueError("boom")

        calls: list[str] = []
        failing = Job.every(1, TimeSpan.SECOND, clock=fake_clock).named("failing").do(boom)
        healthy = Job.every(1, TimeSpan.SECOND, clock=fake_clock).named("healthy").do(
            lambda: calls.append("ran")
        )
        sched = Scheduler(clock=fake_clock)
        sched.add_job(failing)
        sched.add_job(healthy)
        fake_clock.advance(seconds=1)

        with capture_logs() as logs:
            assert sched.run_pending() == 1

        assert calls == ["ran"]
        assert failing.run_count == 0
        assert not failing.ready()
        failed = [e for e in logs if e["event"] == "job.failed"]
        assert len(failed) == 1
        assert failed[0]["log_level"] == "error"
        assert failed[0]["detail"] == {"job": "failing"}
        assert failed[0]["job"] == "failing"

    def test_logs_named_job_running(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        sched.add_job(Job.every(1, TimeSpan.SECOND, clock=fake_clock).named("hello").do(_noop))
        fake_clock.advance(seconds=1)
        with capture_logs() as logs:
            sched.run_pending()
        assert {"event": "job.running", "job": "hello", "log_level": "info"} in logs

    def test_execute_jobs_end_to_end(self) -> None:
        num = {"value": 0}

        def set_42() -> None:
            num["value"] = 42

        job = Job.every(10, TimeSpan.MILLISECONDS).do(set_42)
        assert num["value"] == 0

        time.sleep(0.011)
        assert job.ready()

        sched = Scheduler()
        sched.add_job(job)
        assert sched.run_pending() == 1
        assert num["value"] == 42


# ---------------------------------------------------------------------------
# run_forever
# ---------------------------------------------------------------------------
class TestRunForever:
    def test_returns_immediately_when_empty(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        sched.run_forever()
        assert fake_clock.sleeps == []

    def test_one_shot_runs_once_then_exhausts(self, fake_clock: FrozenClock) -> None:
        once = Job.in_(30, TimeSpan.SECONDS, clock=fake_clock).do(_noop)
        sched = Scheduler(clock=fake_clock)
        sched.add_job(once)

        with capture_logs() as logs:
            sched.run_forever()

        assert once.run_count == 1
        assert fake_clock.sleeps == [timedelta(seconds=30)]
        assert logs[-1]["event"] == "scheduler.exhausted"

    def test_sleeps_until_nearest_job(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        sched.add_job(Job.in_(10, TimeSpan.SECONDS, clock=fake_clock).do(_noop))
        sched.add_job(Job.in_(4, TimeSpan.SECONDS, clock=fake_clock).do(_noop))
        sched.run_forever()
        assert fake_clock.sleeps == [timedelta(seconds=4), timedelta(seconds=6)]

    def test_stop_from_callback(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        counter = {"runs": 0}

        def tick() -> None:
            counter["runs"] += 1
            if counter["runs"] == 3:
                sched.stop()

        sched.add_job(Job.every(5, TimeSpan.SECONDS, clock=fake_clock).do(tick))
        sched.run_forever()

        assert counter["runs"] == 3
        assert not sched.stopped
        assert fake_clock.sleeps == [timedelta(seconds=5)] * 3

    def test_restarts_after_stop(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock)
        counter = {"runs": 0}

        def tick() -> None:
            counter["runs"] += 1
            if counter["runs"] % 2 == 0:
                sched.stop()

        sched.add_job(Job.every(1, TimeSpan.SECOND, clock=fake_clock).do(tick))
        sched.run_forever()
        sched.run_forever()
        assert counter["runs"] == 4

    def test_stop_before_start_is_honoured(self, fake_clock: FrozenClock) -> None:
        job = _job(fake_clock, 1, TimeSpan.SECOND)
        sched = Scheduler(clock=fake_clock)
        sched.add_job(job)
        sched.stop()
        assert sched.stopped

        with capture_logs() as logs:
            sched.run_forever()

        assert job.run_count == 0
        assert fake_clock.sleeps == []
        assert logs[-1]["event"] == "scheduler.stopped"
        assert not sched.stopped

    def test_stop_before_threaded_start(self) -> None:
        sched = Scheduler()
        sched.add_job(Job.every(5, TimeSpan.MILLISECONDS).do(_noop))
        sched.stop()
        worker = threading.Thread(target=sched.run_forever)
        worker.start()
        worker.join(timeout=1.0)
        assert not worker.is_alive()
        assert sched.jobs[0].run_count == 0

    def test_jobs_follow_scheduler_clock(self, fake_clock: FrozenClock) -> None:
        job = Job.in_(5, TimeSpan.SECONDS).do(_noop)
        sched = Scheduler(clock=fake_clock)
        sched.add_job(job)
        assert job.clock is fake_clock

        sched.run_forever()

        assert job.run_count == 1
        assert len(fake_clock.sleeps) == 1
        assert timedelta(seconds=4) < fake_clock.sleeps[0] <= timedelta(seconds=5)

    def test_sleep_is_capped_by_settings(self, fake_clock: FrozenClock) -> None:
        sched = Scheduler(clock=fake_clock, settings=SchedulerSettings(max_sleep_seconds=60))
        job = Job.in_(2, TimeSpan.MINUTES, clock=fake_clock).do(_noop)
        sched.add_job(job)
        sched.run_forever()
        assert fake_clock.sleeps == [timedelta(seconds=60), timedelta(seconds=60)]
        assert job.run_count == 1
