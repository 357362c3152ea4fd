"""Ordering helpers shared by the comparison-based constraints."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any, Callable

from local_query_filter.kernel.errors import ContractViolationError


class EqualityMode(str, Enum):
    """How ``eq`` / ``ne`` comparisons decide that two values are equal.

    ``VALUE`` uses ``==``. ``ORDERING`` treats two values as equal when
    neither orders before the other, matching ``compareTo(...) == 0``.
    """

    VALUE = "value"
    ORDERING = "ordering"

    def equals(self, left: Any, right: Any) -> bool:
        if self is EqualityMode.VALUE:
            return bool(left == right)
        return not compare(operator.lt, left, right) and not compare(operator.lt, right, left)


def compare(op: Callable[[Any, Any], Any], left: Any, right: Any) -> bool:
    """Apply the ordering operator *op*, raising ``ContractViolationError``
    when *left* and *right* are not mutually comparable."""
    try:
        return bool(op(left, right))
    except TypeError as exc:
        raise ContractViolationError(
            f"Cannot compare {type(left).__name__} with {type(right).__name__}",
            left=left,
            right=right,
            cause=exc,
        ) from exc


__all__ = ["EqualityMode", "compare"]
