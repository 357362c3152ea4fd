"""Application query – observer hook for pipeline diagnostics."""
from __future__ import annotations

import dataclasses
from datetime import datetime, timezone
from typing import Any, Protocol, runtime_checkable

from local_query_filter.observability.logging import get_logger

__all__ = [
    "LoggingQueryObserver",
    "QueryEvent",
    "QueryObserver",
    "RecordingQueryObserver",
]


@dataclasses.dataclass(frozen=True)
class QueryEvent:
    """One stage notification from ``QueryFilter.apply_filter_and_sort``.

    ``name`` is one of ``query.started``, ``query.sorted`` or
    ``query.completed``; counts that are not known yet are ``None``.
    """

    name: str
    strategy: str
    total: int
    scanned: int | None = None
    matched: int | None = None
    returned: int | None = None
    duration_ms: float | None = None
    timestamp: datetime = dataclasses.field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        payload = {
            "name": self.name,
            "strategy": self.strategy,
            "total": self.total,
            "scanned": self.scanned,
            "matched": self.matched,
            "returned": self.returned,
            "duration_ms": self.duration_ms,
            "timestamp": self.timestamp.isoformat(),
        }
        return {k: v for k, v in payload.items() if v is not None}


@runtime_checkable
class QueryObserver(Protocol):
    def __call__(self, event: QueryEvent) -> None: ...


class LoggingQueryObserver:
    """Forward every ``QueryEvent`` to a structlog logger.

    Args:
        logger: Bound logger to use; defaults to ``get_logger("local_query_filter.query")``.
        level: Name of the logger method to call (``debug``, ``info``, ...).
    """

    def __init__(self, logger: Any = None, *, level: str = "debug") -> None:
        self._logger = logger if logger is not None else get_logger("local_query_filter.query")
        self._level = level

    def __call__(self, event: QueryEvent) -> None:
        fields = event.to_dict()
        name = fields.pop("name")
        getattr(self._logger, self._level)(name, **fields)


class RecordingQueryObserver:
    """Keep every ``QueryEvent`` in memory, in emission order."""

    def __init__(self) -> None:
        self._events: list[QueryEvent] = []

    def __call__(self, event: QueryEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> list[QueryEvent]:
        return list(self._events)

    def names(self) -> list[str]:
        return [e.name for e in self._events]

    def clear(self) -> None:
        self._events.clear()
