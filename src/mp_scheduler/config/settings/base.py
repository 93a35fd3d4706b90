"""Config settings – Settings base class and SchedulerSettings."""
from __future__ import annotations

import dataclasses

from mp_scheduler.config.validation.errors import InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class SchedulerSettings(Settings):
    """Runtime knobs for :class:`~mp_scheduler.scheduler.Scheduler`.

    Read from ``SCHEDULER_LOG_LEVEL``, ``SCHEDULER_LOG_JSON`` and
    ``SCHEDULER_MAX_SLEEP_SECONDS`` by :class:`EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "SCHEDULER"

    log_level: str = "INFO"
    log_json: bool = True
    # 0 disables the cap
    max_sleep_seconds: float = 0.0

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )
        if self.max_sleep_seconds < 0:
            raise InvalidSettingValueError(
                "max_sleep_seconds", self.max_sleep_seconds, "must be >= 0"
            )


__all__ = ["SchedulerSettings", "Settings"]
