"""Root error class for the local_query_filter error hierarchy.

Every error carries a stable ``code`` slug and a ``detail`` dict, so a
failed query can be logged as one structured record::

    except QueryFilterError as exc:
        log.warning("query.failed", **exc.to_dict())
"""

from __future__ import annotations

import json
from typing import Any


def _restore(cls: type["QueryFilterError"], state: dict[str, Any]) -> "QueryFilterError":
    error = cls.__new__(cls)
    Exception.__init__(error, state["message"])
    error.__dict__.update(state)
    return error


class QueryFilterError(Exception):
    """Root of the error hierarchy.

    Subclasses set ``default_code`` and may take their own constructor
    arguments; pickling restores the instance state directly, so those
    signatures need not match ``(message)``.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context; keys and values should be JSON-friendly.
        cause: Underlying exception, also set as ``__cause__``.
    """

    default_code: str = "query_filter_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        state = dict(self.__dict__)
        # The cause may not be picklable; keep its repr only.
        if state.get("cause") is not None:
            state["cause"] = None
            state["detail"] = {**self.detail, "cause": repr(self.cause)}
        return (_restore, (type(self), state))

    def to_dict(self) -> dict[str, Any]:
        """Return ``code``, ``message``, ``detail`` and, when set, ``cause`` (as repr)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["QueryFilterError"]
