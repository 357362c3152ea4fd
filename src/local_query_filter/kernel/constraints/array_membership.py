"""Array membership constraint — collection and scalar set-membership tests."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Collection, Iterable, TypeVar

from local_query_filter.kernel.constraints.base import QueryConstraint
from local_query_filter.kernel.errors import ConfigurationError, ContractViolationError

T = TypeVar("T")

_TEXT_TYPES = (str, bytes, bytearray)


class ArrayMembershipOperator(str, Enum):
    CONTAINS = "contains"
    CONTAINS_ANY = "contains_any"
    IN = "in"
    NOT_IN = "not_in"


class ArrayMembershipConstraint(QueryConstraint[T]):
    """Evaluate a field against a fixed set of values.

    ``contains`` and ``contains_any`` read a collection field; ``in`` and
    ``not_in`` read a scalar field. ``contains`` tests for one value only;
    use ``contains_any`` for any-of semantics.

    Example::

        on_sale = ArrayMembershipConstraint.array_contains(value="sale", field_extractor=lambda p: p.tags)
        categories = ArrayMembershipConstraint.where_in(values=["shoes", "hats"], field_extractor=lambda p: p.category)
    """

    __slots__ = ("_operator", "_values", "_field_extractor")

    def __init__(
        self,
        operator: ArrayMembershipOperator,
        values: Iterable[Any],
        field_extractor: Callable[[T], Any],
    ) -> None:
        try:
            self._operator = ArrayMembershipOperator(operator)
        except ValueError as exc:
            raise ConfigurationError(str(exc), cause=exc) from exc
        try:
            self._values: frozenset[Any] = frozenset(values)
        except TypeError as exc:
            raise ConfigurationError(
                f"ArrayMembershipConstraint.{self._operator.value} values must be hashable",
                cause=exc,
            ) from exc
        if self._operator is ArrayMembershipOperator.CONTAINS and len(self._values) != 1:
            raise ConfigurationError(
                "ArrayMembershipConstraint.contains requires exactly one value",
                detail={"values": len(self._values)},
            )
        self._field_extractor = field_extractor

    @classmethod
    def array_contains(
        cls, value: Any, field_extractor: Callable[[T], Collection[Any]]
    ) -> "ArrayMembershipConstraint[T]":
        return cls(ArrayMembershipOperator.CONTAINS, [value], field_extractor)

    @classmethod
    def array_contains_any(
        cls, values: Iterable[Any], field_extractor: Callable[[T], Collection[Any]]
    ) -> "ArrayMembershipConstraint[T]":
        return cls(ArrayMembershipOperator.CONTAINS_ANY, values, field_extractor)

    @classmethod
    def where_in(cls, values: Iterable[Any], field_extractor: Callable[[T], Any]) -> "ArrayMembershipConstraint[T]":
        return cls(ArrayMembershipOperator.IN, values, field_extractor)

    @classmethod
    def where_not_in(
        cls, values: Iterable[Any], field_extractor: Callable[[T], Any]
    ) -> "ArrayMembershipConstraint[T]":
        return cls(ArrayMembershipOperator.NOT_IN, values, field_extractor)

    @property
    def operator(self) -> ArrayMembershipOperator:
        return self._operator

    @property
    def values(self) -> frozenset[Any]:
        return self._values

    def matches(self, model: T) -> bool:
        field_value = self._field_extractor(model)
        if self._operator is ArrayMembershipOperator.CONTAINS:
            (value,) = self._values
            return value in self._collection(field_value)
        if self._operator is ArrayMembershipOperator.CONTAINS_ANY:
            return any(element in self._values for element in self._collection(field_value))
        try:
            found = field_value in self._values
        except TypeError as exc:
            raise ContractViolationError(
                f"ArrayMembershipConstraint.{self._operator.value} field value must be hashable, "
                f"got {type(field_value).__name__}",
                left=field_value,
                detail={"operator": self._operator.value, "field_type": type(field_value).__name__},
                cause=exc,
            ) from exc
        return found if self._operator is ArrayMembershipOperator.IN else not found

    def _collection(self, field_value: Any) -> Any:
        # Text is iterable but is never a collection of members.
        if isinstance(field_value, _TEXT_TYPES):
            raise ContractViolationError(
                f"ArrayMembershipConstraint.{self._operator.value} requires a collection field, "
                f"got {type(field_value).__name__}",
                left=field_value,
                detail={"operator": self._operator.value, "field_type": type(field_value).__name__},
            )
        return field_value

    def __repr__(self) -> str:
        return f"ArrayMembershipConstraint({self._operator.value}, {sorted(map(repr, self._values))})"


__all__ = ["ArrayMembershipConstraint", "ArrayMembershipOperator"]
