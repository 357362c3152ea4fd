"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import abc
import os
from typing import Any, Mapping, TypeVar

from local_query_filter.config.settings.base import Settings
from local_query_filter.kernel.errors import ConfigurationError, InvalidSettingValueError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables named ``<PREFIX>_<FIELD>``.

    Fields absent from the environment keep their dataclass defaults.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        kwargs: dict[str, Any] = {}

        for env_key, field in settings_class.env_fields().items():
            raw = environ.get(env_key)
            if raw is None:
                continue
            kwargs[field.name] = self._coerce(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigurationError:
            raise
        except Exception as exc:
            raise ConfigurationError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, env_key: str, value: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            try:
                return int(value)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, value, "must be an integer") from exc
        return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
