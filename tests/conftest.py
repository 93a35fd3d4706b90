"""Shared pytest configuration."""

pytest_plugins = ["mp_scheduler.testing.fixtures"]
