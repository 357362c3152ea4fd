"""Custom predicate constraint."""

from __future__ import annotations

from typing import Callable, TypeVar

from local_query_filter.kernel.constraints.base import QueryConstraint

T = TypeVar("T")


class CustomConstraint(QueryConstraint[T]):
    """Wraps a plain callable as a constraint.

    Example::

        adults_only = CustomConstraint(lambda u: u.age >= 18, name="adults_only")
        assert adults_only.matches(user)
    """

    __slots__ = ("_predicate", "_name")

    def __init__(self, predicate: Callable[[T], bool], *, name: str = "") -> None:
        self._predicate = predicate
        self._name: str = name or getattr(predicate, "__name__", "<lambda>")

    @property
    def name(self) -> str:
        return self._name

    def matches(self, model: T) -> bool:
        return bool(self._predicate(model))

    def __repr__(self) -> str:
        return f"CustomConstraint({self._name!r})"


__all__ = ["CustomConstraint"]
