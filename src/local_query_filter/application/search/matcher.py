"""Application search – case-insensitive substring matcher."""
from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")

__all__ = ["SearchMatcher", "normalize_term"]


def normalize_term(term: str | None) -> str:
    """Trim and case-fold *term*; ``None`` becomes the empty string."""
    if term is None:
        return ""
    return term.strip().casefold()


class SearchMatcher(Generic[T]):
    """Match items whose extracted text fields contain a search term.

    The term is trimmed and case-folded once; each field is case-folded per
    comparison. An empty term disables matching (``enabled`` is ``False``).
    """

    def __init__(self, term: str | None, fields_extractor: Callable[[T], Iterable[str]]) -> None:
        self._needle = normalize_term(term)
        self._fields_extractor = fields_extractor

    @property
    def needle(self) -> str:
        return self._needle

    @property
    def enabled(self) -> bool:
        return bool(self._needle)

    def matches(self, item: T) -> bool:
        if not self._needle:
            return True
        for field in self._fields_extractor(item):
            if self._needle in field.casefold():
                return True
        return False
