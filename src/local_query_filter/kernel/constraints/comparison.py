"""Comparison constraint — ``eq``/``ne``/``gt``/``gte``/``lt``/``lte`` on an ordered field."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any, Callable, TypeVar

from local_query_filter.kernel.constraints.base import QueryConstraint
from local_query_filter.kernel.constraints.ordering import EqualityMode, compare
from local_query_filter.kernel.errors import ConfigurationError

T = TypeVar("T")


class ComparisonOperator(str, Enum):
    EQUAL = "eq"
    NOT_EQUAL = "ne"
    GREATER_THAN = "gt"
    GREATER_THAN_OR_EQUAL = "gte"
    LESS_THAN = "lt"
    LESS_THAN_OR_EQUAL = "lte"


_ORDERING_OPS: dict[ComparisonOperator, Callable[[Any, Any], Any]] = {
    ComparisonOperator.GREATER_THAN: operator.gt,
    ComparisonOperator.GREATER_THAN_OR_EQUAL: operator.ge,
    ComparisonOperator.LESS_THAN: operator.lt,
    ComparisonOperator.LESS_THAN_OR_EQUAL: operator.le,
}


class ComparisonConstraint(QueryConstraint[T]):
    """Compare an extracted field against a fixed value.

    Ordered operators use the value type's native ordering; a ``TypeError``
    from the comparison surfaces as ``ContractViolationError``. ``eq`` and
    ``ne`` use value equality unless ``equality=EqualityMode.ORDERING``.

    Example::

        expensive = ComparisonConstraint.greater_than(value=50.0, field_extractor=lambda p: p.price)
        not_laptop = ComparisonConstraint.not_equal(value="Laptop", field_extractor=lambda p: p.name)
    """

    __slots__ = ("_operator", "_value", "_field_extractor", "_equality")

    def __init__(
        self,
        operator: ComparisonOperator,
        value: Any,
        field_extractor: Callable[[T], Any],
        *,
        equality: EqualityMode = EqualityMode.VALUE,
    ) -> None:
        try:
            self._operator = ComparisonOperator(operator)
            self._equality = EqualityMode(equality)
        except ValueError as exc:
            raise ConfigurationError(str(exc), cause=exc) from exc
        self._value = value
        self._field_extractor = field_extractor

    @classmethod
    def equal(
        cls,
        value: Any,
        field_extractor: Callable[[T], Any],
        *,
        equality: EqualityMode = EqualityMode.VALUE,
    ) -> "ComparisonConstraint[T]":
        return cls(ComparisonOperator.EQUAL, value, field_extractor, equality=equality)

    @classmethod
    def not_equal(
        cls,
        value: Any,
        field_extractor: Callable[[T], Any],
        *,
        equality: EqualityMode = EqualityMode.VALUE,
    ) -> "ComparisonConstraint[T]":
        return cls(ComparisonOperator.NOT_EQUAL, value, field_extractor, equality=equality)

    @classmethod
    def greater_than(cls, value: Any, field_extractor: Callable[[T], Any]) -> "ComparisonConstraint[T]":
        return cls(ComparisonOperator.GREATER_THAN, value, field_extractor)

    @classmethod
    def greater_than_or_equal(cls, value: Any, field_extractor: Callable[[T], Any]) -> "ComparisonConstraint[T]":
        return cls(ComparisonOperator.GREATER_THAN_OR_EQUAL, value, field_extractor)

    @classmethod
    def less_than(cls, value: Any, field_extractor: Callable[[T], Any]) -> "ComparisonConstraint[T]":
        return cls(ComparisonOperator.LESS_THAN, value, field_extractor)

    @classmethod
    def less_than_or_equal(cls, value: Any, field_extractor: Callable[[T], Any]) -> "ComparisonConstraint[T]":
        return cls(ComparisonOperator.LESS_THAN_OR_EQUAL, value, field_extractor)

    @property
    def operator(self) -> ComparisonOperator:
        return self._operator

    @property
    def value(self) -> Any:
        return self._value

    def matches(self, model: T) -> bool:
        field_value = self._field_extractor(model)
        if self._operator is ComparisonOperator.EQUAL:
            return self._equality.equals(field_value, self._value)
        if self._operator is ComparisonOperator.NOT_EQUAL:
            return not self._equality.equals(field_value, self._value)
        return compare(_ORDERING_OPS[self._operator], field_value, self._value)

    def __repr__(self) -> str:
        return f"ComparisonConstraint({self._operator.value}, {self._value!r})"


__all__ = ["ComparisonConstraint", "ComparisonOperator"]
