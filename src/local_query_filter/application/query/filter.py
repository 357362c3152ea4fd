"""Application query – QueryFilter pipeline.

Applies constraints, text search, sorting and offset/limit pagination to an
in-memory sequence, in that order:

1. Constraints (implicit AND) and the search predicate, in one forward scan.
2. Sorting by ``sorting_field_extractor``, when configured.
3. Pagination by ``offset`` and ``limit``.

When no sort is configured and a ``limit`` is set, steps 1 and 3 are fused
and the scan stops as soon as ``limit`` items are collected.

Example::

    query = QueryFilter(
        search_fields_extractor=lambda p: [p.name, p.description],
        constraints=[ComparisonConstraint.less_than(value=100, field_extractor=lambda p: p.price)],
        search_term="shoe",
        sorting_field_extractor=lambda p: p.price,
        limit=20,
    )
    products = await query.apply_filter_and_sort(catalogue)
"""
from __future__ import annotations

import dataclasses
import time
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

from local_query_filter.application.pagination import PageWindow
from local_query_filter.application.query.observer import QueryEvent, QueryObserver
from local_query_filter.application.query.scheduling import cooperative_yield, is_checkpoint
from local_query_filter.application.search import SearchMatcher
from local_query_filter.config import load_settings
from local_query_filter.kernel.constraints import QueryConstraint
from local_query_filter.kernel.errors import ConfigurationError, ContractViolationError

T = TypeVar("T")

FAST = "fast"
GENERAL = "general"


def _default_yield_every() -> int:
    return load_settings().yield_every


@dataclasses.dataclass(frozen=True)
class QueryFilter(Generic[T]):
    """Immutable query configuration and the pipeline that executes it.

    Args:
        search_fields_extractor: Returns the text fields searched for ``search_term``.
        constraints: Root constraints; an item must match all of them.
        search_term: Case-insensitive substring; empty or ``None`` disables search.
        sorting_field_extractor: Returns the sort key; ``None`` keeps scan order.
        ascending: Sort direction, used only with ``sorting_field_extractor``.
        limit: Maximum number of items returned; ``None`` is unbounded.
        offset: Number of matches skipped before collecting; ``None`` is 0.
        observer: Receives a ``QueryEvent`` per pipeline stage.
        yield_every: Items scanned between cooperative yields.

    Raises:
        ConfigurationError: negative ``limit``/``offset``, non-positive
            ``yield_every``, or a constraint that is not a ``QueryConstraint``.
    """

    search_fields_extractor: Callable[[T], Iterable[str]]
    constraints: Sequence[QueryConstraint[T]] = ()
    search_term: str | None = None
    sorting_field_extractor: Callable[[T], Any] | None = None
    ascending: bool = True
    limit: int | None = None
    offset: int | None = None
    observer: QueryObserver | None = dataclasses.field(default=None, compare=False)
    yield_every: int = dataclasses.field(default_factory=_default_yield_every)

    def __post_init__(self) -> None:
        if isinstance(self.constraints, QueryConstraint):
            raise ConfigurationError(
                "constraints must be a sequence of QueryConstraint instances, got a single "
                f"{type(self.constraints).__name__}; wrap it in a list",
            )
        try:
            constraints = tuple(self.constraints)
        except TypeError as exc:
            raise ConfigurationError(
                f"constraints must be a sequence, got {type(self.constraints).__name__}",
                cause=exc,
            ) from exc
        for c in constraints:
            if not isinstance(c, QueryConstraint):
                raise ConfigurationError(
                    f"constraints must be QueryConstraint instances, got {type(c).__name__}"
                )
        object.__setattr__(self, "constraints", constraints)
        # Validates offset and limit.
        PageWindow(offset=self.offset, limit=self.limit)
        if self.yield_every <= 0:
            raise ConfigurationError("yield_every must be > 0", detail={"yield_every": self.yield_every})

    # ------------------------------------------------------------------
    # Derived configuration
    # ------------------------------------------------------------------

    @property
    def window(self) -> PageWindow:
        return PageWindow(offset=self.offset, limit=self.limit)

    @property
    def uses_fast_path(self) -> bool:
        """Single-pass early-stop scan: no sort key and a limit is set."""
        return self.sorting_field_extractor is None and self.limit is not None

    def copy_with(self, **changes: Any) -> "QueryFilter[T]":
        """Return a copy with *changes* applied (validated like a new instance)."""
        return dataclasses.replace(self, **changes)

    def next_page(self) -> "QueryFilter[T]":
        """Return a copy whose window is the page after this one."""
        window = self.window.next()
        return self.copy_with(offset=window.offset)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def apply_filter_and_sort(self, items: Sequence[T]) -> list[T]:
        """Return a new list with the matching, sorted and paginated *items*.

        *items* is never mutated. Exceptions raised by extractors and
        predicates propagate unchanged and abort the call.
        """
        if len(items) == 0:
            return []

        started = time.monotonic()
        matcher: SearchMatcher[T] = SearchMatcher(self.search_term, self.search_fields_extractor)
        strategy = FAST if self.uses_fast_path else GENERAL
        self._emit("query.started", strategy, total=len(items))

        if strategy == FAST:
            result, scanned, matched = await self._scan_with_early_stop(items, matcher)
        else:
            collected, scanned = await self._scan(items, matcher)
            matched = len(collected)
            if self.sorting_field_extractor is not None:
                collected = self._sort(collected)
                self._emit("query.sorted", strategy, total=len(items), scanned=scanned, matched=matched)
                await cooperative_yield()
            result = self.window.slice(collected)

        self._emit(
            "query.completed",
            strategy,
            total=len(items),
            scanned=scanned,
            matched=matched,
            returned=len(result),
            duration_ms=(time.monotonic() - started) * 1000,
        )
        return result

    def _matches(self, item: T, matcher: SearchMatcher[T]) -> bool:
        for c in self.constraints:
            if not c.matches(item):
                return False
        return matcher.matches(item)

    async def _scan(self, items: Sequence[T], matcher: SearchMatcher[T]) -> tuple[list[T], int]:
        matched: list[T] = []
        scanned = 0
        for index, item in enumerate(items):
            if is_checkpoint(index, self.yield_every):
                await cooperative_yield()
            scanned += 1
            if self._matches(item, matcher):
                matched.append(item)
        return matched, scanned

    async def _scan_with_early_stop(
        self, items: Sequence[T], matcher: SearchMatcher[T]
    ) -> tuple[list[T], int, int]:
        result: list[T] = []
        start = self.offset or 0
        limit = self.limit or 0
        seen = 0
        scanned = 0
        if limit == 0:
            return result, scanned, seen

        for index, item in enumerate(items):
            if is_checkpoint(index, self.yield_every):
                await cooperative_yield()
            scanned += 1
            if not self._matches(item, matcher):
                continue
            seen += 1
            if seen > start:
                result.append(item)
                if len(result) >= limit:
                    break
        return result, scanned, seen

    def _sort(self, matched: list[T]) -> list[T]:
        extractor = self.sorting_field_extractor
        if extractor is None:
            return matched
        keys = [extractor(item) for item in matched]
        order = list(range(len(matched)))
        try:
            order.sort(key=keys.__getitem__, reverse=not self.ascending)
        except TypeError as exc:
            raise ContractViolationError(
                f"Sort keys are not mutually comparable: {exc}",
                detail={"key_types": sorted({type(k).__name__ for k in keys})},
                cause=exc,
            ) from exc
        return [matched[i] for i in order]

    def _emit(self, name: str, strategy: str, **fields: Any) -> None:
        if self.observer is None:
            return
        self.observer(QueryEvent(name=name, strategy=strategy, **fields))


__all__ = ["QueryFilter"]
