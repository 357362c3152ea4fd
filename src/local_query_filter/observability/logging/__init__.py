"""Observability – structured logging helpers."""
from local_query_filter.observability.logging.factory import configure_logging
from local_query_filter.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
