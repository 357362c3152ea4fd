"""Application pagination – offset/limit window."""
from local_query_filter.application.pagination.window import PageWindow

__all__ = ["PageWindow"]
