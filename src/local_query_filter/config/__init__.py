"""Config – env-driven settings for pipeline defaults."""

from local_query_filter.config.settings import (
    EnvSettingsLoader,
    QueryFilterSettings,
    Settings,
    SettingsLoader,
    load_settings,
)
from local_query_filter.kernel.errors import ConfigurationError, InvalidSettingValueError

__all__ = [
    "ConfigurationError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "QueryFilterSettings",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
