"""Config validation errors."""
from mp_scheduler.config.validation.errors import (
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingsError,
)

__all__ = ["InvalidSettingValueError", "MissingRequiredSettingError", "SettingsError"]
