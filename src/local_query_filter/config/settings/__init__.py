"""Config settings – env-based configuration."""
from local_query_filter.config.settings.base import Settings
from local_query_filter.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from local_query_filter.config.settings.query import DEFAULT_YIELD_EVERY, QueryFilterSettings, load_settings

__all__ = [
    "DEFAULT_YIELD_EVERY",
    "EnvSettingsLoader",
    "QueryFilterSettings",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
