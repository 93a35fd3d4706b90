"""Kernel time – Clock protocol + implementations.

All timestamps are timezone-aware and expressed in the host's local zone.
"""
from __future__ import annotations

import time
from datetime import date, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: "now" source plus a sleep primitive, swappable in tests."""

    def now(self) -> datetime: ...
    def today(self) -> date: ...
    def timestamp(self) -> float: ...
    def sleep(self, delay: timedelta) -> None: ...


class SystemClock:
    """Production clock backed by the host's local wall clock."""

    def __eq__(self, other: object) -> bool:
        # every instance reads the same wall clock
        return isinstance(other, SystemClock)

    def __hash__(self) -> int:
        return hash(SystemClock)

    def now(self) -> datetime:
        return local_now()

    def today(self) -> date:
        return local_now().date()

    def timestamp(self) -> float:
        return time.time()

    def sleep(self, delay: timedelta) -> None:
        seconds = delay.total_seconds()
        if seconds > 0:
            time.sleep(seconds)


class FrozenClock:
    """Test clock pinned to a fixed point in time.

    ``sleep`` does not block: it moves the pinned time forward by the
    requested delay and records it in :attr:`sleeps`.
    """

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed
        self.sleeps: list[timedelta] = []

    def now(self) -> datetime:
        return self._fixed

    def today(self) -> date:
        return self._fixed.date()

    def timestamp(self) -> float:
        return self._fixed.timestamp()

    def sleep(self, delay: timedelta) -> None:
        self.sleeps.append(delay)
        if delay > timedelta(0):
            self._fixed += delay

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def local_now() -> datetime:
    """Shorthand for an aware ``datetime`` in the local timezone."""
    return datetime.now().astimezone()


__all__ = ["Clock", "FrozenClock", "SystemClock", "local_now"]
