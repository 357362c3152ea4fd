"""Observability – structlog JSON configuration."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def configure_logging(level: int | str | None = None) -> None:
    """Configure structlog for JSON output through the stdlib root logger.

    *level* defaults to ``QueryFilterSettings.log_level``.
    """
    if level is None:
        from local_query_filter.config import load_settings

        level = load_settings().log_level_value
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


__all__ = ["configure_logging"]
