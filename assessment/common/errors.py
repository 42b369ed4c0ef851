"""Classification helpers for errors raised by the Supabase/PostgREST client."""

from __future__ import annotations

from typing import Any, List

from postgrest.exceptions import APIError

UNIQUE_VIOLATION_CODE = "23505"

_CONFLICT_TOKENS = (
    "duplicate key",
    "unique constraint",
    UNIQUE_VIOLATION_CODE,
)


class DataServiceError(Exception):
    """A call to the hosted data service failed."""


class DuplicateRecordError(DataServiceError):
    """An insert collided with a uniqueness constraint."""


def error_code(exc: BaseException) -> str | None:
    code = getattr(exc, "code", None)
    return str(code) if code else None


def _error_text(exc: BaseException) -> str:
    parts: List[str] = []
    for attr in ("message", "details", "hint", "code"):
        value = getattr(exc, attr, None)
        if value:
            parts.append(str(value))
    if getattr(exc, "args", None):
        parts.extend(_stringify(arg) for arg in exc.args if arg)
    text = " ".join(parts).strip()
    if not text:
        text = str(exc)
    return text.lower()


def _stringify(value: Any) -> str:
    if isinstance(value, dict):
        return " ".join(str(v) for v in value.values() if v)
    return str(value)


def is_unique_violation(exc: BaseException) -> bool:
    if isinstance(exc, DuplicateRecordError):
        return True
    if isinstance(exc, APIError) and error_code(exc) == UNIQUE_VIOLATION_CODE:
        return True
    text = _error_text(exc)
    return any(token in text for token in _CONFLICT_TOKENS)


__all__ = [
    "DataServiceError",
    "DuplicateRecordError",
    "UNIQUE_VIOLATION_CODE",
    "is_unique_violation",
]
