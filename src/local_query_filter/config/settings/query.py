"""Config settings – QueryFilterSettings and the cached loader."""
from __future__ import annotations

import dataclasses
import functools
import logging
from typing import ClassVar

from local_query_filter.config.settings.base import Settings
from local_query_filter.config.settings.loaders import EnvSettingsLoader
from local_query_filter.kernel.errors import InvalidSettingValueError

DEFAULT_YIELD_EVERY = 500


@dataclasses.dataclass
class QueryFilterSettings(Settings):
    """Pipeline defaults, overridable through ``LOCAL_QUERY_FILTER_*`` variables.

    Attributes:
        yield_every: Items scanned between cooperative yields.
        log_level: Level name passed to ``configure_logging``.
    """

    _prefix: ClassVar[str] = "LOCAL_QUERY_FILTER"

    yield_every: int = DEFAULT_YIELD_EVERY
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.yield_every <= 0:
            raise InvalidSettingValueError("yield_every", self.yield_every, "must be > 0")
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        self.log_level = self.log_level.upper()

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@functools.lru_cache(maxsize=1)
def load_settings() -> QueryFilterSettings:
    """Load settings from the environment once; ``load_settings.cache_clear()`` reloads."""
    return EnvSettingsLoader().load(QueryFilterSettings)


__all__ = ["DEFAULT_YIELD_EVERY", "QueryFilterSettings", "load_settings"]
