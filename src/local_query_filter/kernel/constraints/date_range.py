"""Date/time range constraint and the ``DateTimeRange`` value object."""

from __future__ import annotations

import dataclasses
import operator
from datetime import date, datetime, time, timedelta
from typing import Callable, TypeVar

from local_query_filter.kernel.constraints.base import QueryConstraint
from local_query_filter.kernel.constraints.ordering import compare
from local_query_filter.kernel.errors import ConfigurationError, ContractViolationError

T = TypeVar("T")


def _truncate(value: date) -> date:
    """Drop the time component, keeping the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclasses.dataclass(frozen=True)
class DateTimeRange:
    """Closed ``[start, end]`` interval of instants; ``start`` must not be after ``end``."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        try:
            inverted = compare(operator.gt, self.start, self.end)
        except ContractViolationError as exc:
            raise ConfigurationError(
                f"Date range bounds {self.start!r} and {self.end!r} are not comparable",
                cause=exc,
            ) from exc
        if inverted:
            raise ConfigurationError(
                f"Date range start {self.start.isoformat()} is after end {self.end.isoformat()}",
                detail={"start": self.start.isoformat(), "end": self.end.isoformat()},
            )

    @classmethod
    def for_day(cls, day: date) -> "DateTimeRange":
        """Range spanning the whole calendar day of *day*, from midnight to 23:59:59.999999."""
        day = _truncate(day)
        return cls(datetime.combine(day, time.min), datetime.combine(day, time.max))

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, instant: datetime, *, ignore_time: bool = False) -> bool:
        if ignore_time:
            instant = _truncate(instant)  # type: ignore[assignment]
            start, end = _truncate(self.start), _truncate(self.end)
        else:
            start, end = self.start, self.end
        return compare(operator.ge, instant, start) and compare(operator.le, instant, end)


class DateRangeConstraint(QueryConstraint[T]):
    """Match when an extracted instant falls inside a ``DateTimeRange``.

    With ``ignore_time`` the field and both bounds are truncated to their
    calendar date before comparing, so any time on the start or end day
    matches.

    Example::

        today = DateRangeConstraint.for_range(
            date_range=DateTimeRange.for_day(date.today()),
            field_extractor=lambda e: e.scheduled_at,
            ignore_time=True,
        )
    """

    __slots__ = ("_date_range", "_field_extractor", "_ignore_time")

    def __init__(
        self,
        date_range: DateTimeRange,
        field_extractor: Callable[[T], datetime],
        *,
        ignore_time: bool = False,
    ) -> None:
        if not isinstance(date_range, DateTimeRange):
            raise ConfigurationError(
                f"date_range must be a DateTimeRange, got {type(date_range).__name__}"
            )
        self._date_range = date_range
        self._field_extractor = field_extractor
        self._ignore_time = ignore_time

    @classmethod
    def for_range(
        cls,
        date_range: DateTimeRange,
        field_extractor: Callable[[T], datetime],
        *,
        ignore_time: bool = False,
    ) -> "DateRangeConstraint[T]":
        return cls(date_range, field_extractor, ignore_time=ignore_time)

    @classmethod
    def between(
        cls,
        start: datetime,
        end: datetime,
        field_extractor: Callable[[T], datetime],
        *,
        ignore_time: bool = False,
    ) -> "DateRangeConstraint[T]":
        return cls(DateTimeRange(start, end), field_extractor, ignore_time=ignore_time)

    @property
    def date_range(self) -> DateTimeRange:
        return self._date_range

    @property
    def ignore_time(self) -> bool:
        return self._ignore_time

    def matches(self, model: T) -> bool:
        return self._date_range.contains(self._field_extractor(model), ignore_time=self._ignore_time)

    def __repr__(self) -> str:
        return (
            f"DateRangeConstraint({self._date_range.start.isoformat()}, "
            f"{self._date_range.end.isoformat()}, ignore_time={self._ignore_time})"
        )


__all__ = ["DateRangeConstraint", "DateTimeRange"]
