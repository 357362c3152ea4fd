"""Config settings – Settings base class and environment variable naming."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings.

    Each dataclass field is read from ``<_prefix>_<FIELD>``; subclasses set
    ``_prefix`` and override ``_validate`` for range checks, which run on
    every construction, including direct ones.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Return the environment variable that holds *field_name*."""
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix.rstrip('_')}_{field_name}".upper()

    @classmethod
    def env_fields(cls) -> dict[str, dataclasses.Field[Any]]:
        """Map each environment variable name to its dataclass field."""
        return {cls.env_key(f.name): f for f in dataclasses.fields(cls)}


__all__ = ["Settings"]
