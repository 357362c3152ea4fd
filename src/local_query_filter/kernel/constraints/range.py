"""Inclusive range constraint."""

from __future__ import annotations

import operator
from typing import Any, Callable, TypeVar

from local_query_filter.kernel.constraints.base import QueryConstraint
from local_query_filter.kernel.constraints.ordering import compare
from local_query_filter.kernel.errors import ConfigurationError, ContractViolationError

T = TypeVar("T")


class RangeConstraint(QueryConstraint[T]):
    """Match when ``min_value <= field <= max_value`` (both ends inclusive).

    Raises ``ConfigurationError`` at construction when ``min_value > max_value``
    or the bounds cannot be compared with each other.
    """

    __slots__ = ("_min_value", "_max_value", "_field_extractor")

    def __init__(self, min_value: Any, max_value: Any, field_extractor: Callable[[T], Any]) -> None:
        try:
            inverted = compare(operator.gt, min_value, max_value)
        except ContractViolationError as exc:
            raise ConfigurationError(
                f"Range bounds {min_value!r} and {max_value!r} are not comparable",
                cause=exc,
            ) from exc
        if inverted:
            raise ConfigurationError(
                f"Range minimum {min_value!r} is greater than maximum {max_value!r}",
                detail={"min_value": repr(min_value), "max_value": repr(max_value)},
            )
        self._min_value = min_value
        self._max_value = max_value
        self._field_extractor = field_extractor

    @classmethod
    def for_range(
        cls,
        min_value: Any,
        max_value: Any,
        field_extractor: Callable[[T], Any],
    ) -> "RangeConstraint[T]":
        return cls(min_value, max_value, field_extractor)

    @property
    def min_value(self) -> Any:
        return self._min_value

    @property
    def max_value(self) -> Any:
        return self._max_value

    def matches(self, model: T) -> bool:
        field_value = self._field_extractor(model)
        return compare(operator.ge, field_value, self._min_value) and compare(
            operator.le, field_value, self._max_value
        )

    def __repr__(self) -> str:
        return f"RangeConstraint({self._min_value!r}, {self._max_value!r})"


__all__ = ["RangeConstraint"]
