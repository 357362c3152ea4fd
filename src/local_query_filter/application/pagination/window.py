"""Application pagination – PageWindow offset/limit slice."""
from __future__ import annotations

import dataclasses
from typing import Sequence, TypeVar

from local_query_filter.kernel.errors import ConfigurationError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class PageWindow:
    """Offset/limit pagination parameters.

    ``offset`` defaults to 0 and ``limit`` to unbounded; both must be
    non-negative.
    """

    offset: int | None = None
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.offset is not None and self.offset < 0:
            raise ConfigurationError("offset must be >= 0", detail={"offset": self.offset})
        if self.limit is not None and self.limit < 0:
            raise ConfigurationError("limit must be >= 0", detail={"limit": self.limit})

    @classmethod
    def for_page(cls, page: int, size: int) -> "PageWindow":
        """Window for the 1-based *page* of *size* items."""
        if page < 1:
            raise ConfigurationError("page must be >= 1", detail={"page": page})
        if size < 1:
            raise ConfigurationError("size must be >= 1", detail={"size": size})
        return cls(offset=(page - 1) * size, limit=size)

    @property
    def start(self) -> int:
        return self.offset or 0

    @property
    def is_unbounded(self) -> bool:
        return self.offset is None and self.limit is None

    def next(self) -> "PageWindow":
        """The window directly after this one; requires a ``limit``."""
        if self.limit is None:
            raise ConfigurationError("an unbounded window has no next page")
        return PageWindow(offset=self.start + self.limit, limit=self.limit)

    def slice(self, items: Sequence[T]) -> list[T]:
        """Return the ``[start, start + limit)`` slice of *items* as a new list."""
        start = self.start
        if start >= len(items):
            return []
        end = len(items) if self.limit is None else min(start + self.limit, len(items))
        if start >= end:
            return []
        return list(items[start:end])


__all__ = ["PageWindow"]
