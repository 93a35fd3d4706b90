"""Jobs – TimeSpan units."""
from __future__ import annotations

from datetime import timedelta
from enum import Enum

from mp_scheduler.kernel.errors import ConfigurationError


class TimeSpan(Enum):
    """Fixed-length time units a job interval is built from.

    Singular and plural names are aliases of the same member, so
    ``TimeSpan.MINUTE is TimeSpan.MINUTES``.
    """

    MILLISECOND = timedelta(milliseconds=1)
    MILLISECONDS = timedelta(milliseconds=1)
    SECOND = timedelta(seconds=1)
    SECONDS = timedelta(seconds=1)
    MINUTE = timedelta(minutes=1)
    MINUTES = timedelta(minutes=1)
    HOUR = timedelta(hours=1)
    HOURS = timedelta(hours=1)
    DAY = timedelta(days=1)
    DAYS = timedelta(days=1)
    WEEK = timedelta(weeks=1)
    WEEKS = timedelta(weeks=1)

    def of(self, n: int) -> timedelta:
        """Return the exact duration of *n* of this unit."""
        return self.value * n

    @classmethod
    def coerce(cls, unit: TimeSpan | str) -> TimeSpan:
        """Accept a member or its (case-insensitive) name."""
        if isinstance(unit, cls):
            return unit
        if isinstance(unit, str):
            try:
                return cls[unit.strip().upper()]
            except KeyError:
                pass
        raise ConfigurationError(
            f"Unknown time unit {unit!r}",
            detail={"unit": repr(unit), "allowed": sorted(cls.__members__)},
        )


__all__ = ["TimeSpan"]
