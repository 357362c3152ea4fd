"""Query errors — construction, extraction and comparison failures."""

from __future__ import annotations

from typing import Any

from local_query_filter.kernel.errors.base import QueryFilterError


class ConfigurationError(QueryFilterError):
    """A constraint or pipeline was constructed with invalid parameters.

    Always raised synchronously at construction time, before any item is
    evaluated.
    """

    default_code = "configuration_error"


class InvalidSettingValueError(ConfigurationError):
    """A setting's value is present but semantically invalid."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class ExtractorError(QueryFilterError):
    """Raised by caller-supplied extractors or predicates.

    The pipeline never raises this itself and never wraps or suppresses
    extractor failures: whatever an extractor raises reaches the caller of
    ``apply_filter_and_sort`` unchanged.
    """

    default_code = "extractor_error"


class ContractViolationError(QueryFilterError):
    """Two values that must be mutually comparable are not.

    ``left`` and ``right`` are the operands of the failed comparison.
    """

    default_code = "contract_violation"

    def __init__(
        self,
        message: str,
        *,
        left: Any = None,
        right: Any = None,
        **kwargs: Any,
    ) -> None:
        detail = kwargs.pop("detail", None) or {
            "left_type": type(left).__name__,
            "right_type": type(right).__name__,
        }
        super().__init__(message, detail=detail, **kwargs)
        self.left = left
        self.right = right


__all__ = [
    "ConfigurationError",
    "ContractViolationError",
    "ExtractorError",
    "InvalidSettingValueError",
]
