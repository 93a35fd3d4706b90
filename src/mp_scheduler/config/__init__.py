"""Config – 12-factor scheduler settings and loaders."""

from mp_scheduler.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SchedulerSettings,
    Settings,
    SettingsLoader,
)
from mp_scheduler.config.validation import (
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingsError,
)

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SchedulerSettings",
    "Settings",
    "SettingsError",
    "SettingsLoader",
]
