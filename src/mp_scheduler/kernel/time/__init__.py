"""Kernel time – Clock port + implementations."""
from mp_scheduler.kernel.time.clock import Clock, FrozenClock, SystemClock, local_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "local_now"]
