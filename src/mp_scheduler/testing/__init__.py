"""Testing support – deterministic clocks for scheduler tests.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_scheduler.testing.fixtures"]
"""

from mp_scheduler.testing.fakes import FakeClock

__all__ = ["FakeClock"]
