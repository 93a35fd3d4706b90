"""Testing fixtures – pytest fixtures for fake doubles."""
from mp_scheduler.testing.fixtures.clock import fake_clock

__all__ = ["fake_clock"]
