"""Config settings – env-based scheduler configuration."""
from mp_scheduler.config.settings.base import SchedulerSettings, Settings
from mp_scheduler.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SchedulerSettings", "Settings", "SettingsLoader"]
