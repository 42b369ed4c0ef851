"""Key-value store behind the candidate session key.

The page only needs one key (the candidate's email), but it talks to the
store through this small interface so the backing mechanism can change
without touching the controller.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Protocol
from urllib.parse import quote, unquote

from fastapi import Request, Response

from assessment.core.config import Settings, get_settings


class SessionStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemorySessionStore:
    """Dict-backed store for tests and scripts."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class CookieSessionStore:
    """Reads from the request cookies, stages writes for the response.

    Values are percent-encoded so emails survive cookie quoting rules.
    Call ``apply`` on the outgoing response to flush staged writes.
    """

    def __init__(self, cookies: Mapping[str, str], settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._cookies = dict(cookies)
        self._pending: Dict[str, Optional[str]] = {}

    def get(self, key: str) -> Optional[str]:
        if key in self._pending:
            return self._pending[key]
        raw = self._cookies.get(key)
        if not raw:
            return None
        return unquote(raw)

    def set(self, key: str, value: str) -> None:
        self._pending[key] = value

    def delete(self, key: str) -> None:
        self._pending[key] = None

    @property
    def dirty(self) -> bool:
        return bool(self._pending)

    def apply(self, resp: Response) -> None:
        s = self._settings
        for key, value in self._pending.items():
            if value is None:
                resp.delete_cookie(key=key, domain=s.cookie_domain, path="/")
                continue
            resp.set_cookie(
                key=key,
                value=quote(value, safe=""),
                max_age=s.session_cookie_max_age,
                httponly=True,
                secure=s.cookie_secure,
                samesite=s.cookie_samesite.lower(),  # type: ignore[arg-type]
                domain=s.cookie_domain,
                path="/",
            )
        self._pending.clear()


def get_session_store(request: Request) -> CookieSessionStore:
    """FastAPI dependency: a cookie-backed store bound to the current request."""
    return CookieSessionStore(request.cookies)


__all__ = ["SessionStore", "MemorySessionStore", "CookieSessionStore", "get_session_store"]
