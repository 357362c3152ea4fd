"""Boolean field constraint."""

from __future__ import annotations

from typing import Callable, TypeVar

from local_query_filter.kernel.constraints.base import QueryConstraint

T = TypeVar("T")


class BooleanConstraint(QueryConstraint[T]):
    """Match when a boolean field equals an expected value.

    Example::

        active = BooleanConstraint.is_true(field_extractor=lambda p: p.is_active)
    """

    __slots__ = ("_expected_value", "_field_extractor")

    def __init__(self, expected_value: bool, field_extractor: Callable[[T], bool]) -> None:
        self._expected_value = expected_value
        self._field_extractor = field_extractor

    @classmethod
    def is_true(cls, field_extractor: Callable[[T], bool]) -> "BooleanConstraint[T]":
        return cls(True, field_extractor)

    @classmethod
    def is_false(cls, field_extractor: Callable[[T], bool]) -> "BooleanConstraint[T]":
        return cls(False, field_extractor)

    @property
    def expected_value(self) -> bool:
        return self._expected_value

    def matches(self, model: T) -> bool:
        return self._field_extractor(model) == self._expected_value

    def __repr__(self) -> str:
        return f"BooleanConstraint(expected_value={self._expected_value!r})"


__all__ = ["BooleanConstraint"]
