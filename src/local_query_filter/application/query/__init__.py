"""Application query – the filter/search/sort/paginate pipeline."""
from local_query_filter.application.query.filter import QueryFilter
from local_query_filter.application.query.observer import (
    LoggingQueryObserver,
    QueryEvent,
    QueryObserver,
    RecordingQueryObserver,
)
from local_query_filter.application.query.scheduling import cooperative_yield

__all__ = [
    "LoggingQueryObserver",
    "QueryEvent",
    "QueryFilter",
    "QueryObserver",
    "RecordingQueryObserver",
    "cooperative_yield",
]
