"""Testing fakes – in-memory doubles."""
from mp_scheduler.testing.fakes.clock import FakeClock

__all__ = ["FakeClock"]
