"""Query constraints — composable boolean predicates over a model.

Every constraint answers one yes/no question about a single model instance.
Constraints are immutable once built and combine into trees through
:class:`CompoundConstraint`, either explicitly or with the ``&``, ``|`` and
``~`` operators.

Example::

    in_stock = ComparisonConstraint.greater_than(value=0, field_extractor=lambda p: p.stock)
    on_sale = ArrayMembershipConstraint.array_contains(value="sale", field_extractor=lambda p: p.tags)

    constraint = in_stock & ~on_sale
    assert constraint.matches(product)
"""

from __future__ import annotations

import abc
from enum import Enum
from typing import Generic, Iterable, TypeVar

from local_query_filter.kernel.errors import ConfigurationError

T = TypeVar("T")


class QueryConstraint(abc.ABC, Generic[T]):
    """Abstract base for constraints — provides operator overloads.

    Subclasses implement ``matches``; it must be pure and must let any
    exception raised by a caller-supplied extractor propagate.
    """

    __slots__ = ()

    @abc.abstractmethod
    def matches(self, model: T) -> bool: ...

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "QueryConstraint[T]") -> "CompoundConstraint[T]":
        return CompoundConstraint(CompoundOperator.AND, [self, other])

    def __or__(self, other: "QueryConstraint[T]") -> "CompoundConstraint[T]":
        return CompoundConstraint(CompoundOperator.OR, [self, other])

    def __invert__(self) -> "CompoundConstraint[T]":
        return CompoundConstraint(CompoundOperator.NOT, [self])


class CompoundOperator(str, Enum):
    AND = "and"
    OR = "or"
    NOT = "not"


class CompoundConstraint(QueryConstraint[T]):
    """Logical combination of child constraints.

    ``and`` short-circuits on the first child that does not match, ``or`` on
    the first child that does. Children are evaluated left to right. ``not``
    takes exactly one child; ``and`` and ``or`` take at least one.
    """

    __slots__ = ("_operator", "_constraints")

    def __init__(self, operator: CompoundOperator, constraints: Iterable[QueryConstraint[T]]) -> None:
        try:
            operator = CompoundOperator(operator)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown compound operator {operator!r}", cause=exc) from exc
        children = tuple(constraints)
        if not children:
            raise ConfigurationError(
                f"CompoundConstraint.{operator.value} requires at least one constraint",
                detail={"operator": operator.value, "children": 0},
            )
        if operator is CompoundOperator.NOT and len(children) != 1:
            raise ConfigurationError(
                "CompoundConstraint.not requires exactly one constraint",
                detail={"operator": operator.value, "children": len(children)},
            )
        for child in children:
            if not isinstance(child, QueryConstraint):
                raise ConfigurationError(
                    f"CompoundConstraint children must be QueryConstraint instances, got {type(child).__name__}"
                )
        self._operator = operator
        self._constraints = children

    @classmethod
    def and_(cls, constraints: Iterable[QueryConstraint[T]]) -> "CompoundConstraint[T]":
        """Match when every constraint matches."""
        return cls(CompoundOperator.AND, constraints)

    @classmethod
    def or_(cls, constraints: Iterable[QueryConstraint[T]]) -> "CompoundConstraint[T]":
        """Match when at least one constraint matches."""
        return cls(CompoundOperator.OR, constraints)

    @classmethod
    def not_(cls, constraint: QueryConstraint[T]) -> "CompoundConstraint[T]":
        """Match when *constraint* does not match."""
        return cls(CompoundOperator.NOT, [constraint])

    @property
    def operator(self) -> CompoundOperator:
        return self._operator

    @property
    def constraints(self) -> tuple[QueryConstraint[T], ...]:
        return self._constraints

    def matches(self, model: T) -> bool:
        if self._operator is CompoundOperator.AND:
            for c in self._constraints:
                if not c.matches(model):
                    return False
            return True
        if self._operator is CompoundOperator.OR:
            for c in self._constraints:
                if c.matches(model):
                    return True
            return False
        return not self._constraints[0].matches(model)

    def __repr__(self) -> str:
        return f"CompoundConstraint({self._operator.value}, {list(self._constraints)!r})"


__all__ = ["CompoundConstraint", "CompoundOperator", "QueryConstraint"]
