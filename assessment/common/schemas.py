from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Body returned for unhandled server errors."""
    error_code: str
    message: str
    request_id: Optional[str] = None
    timestamp: datetime = Field(default_factory=_utcnow)


class HealthCheckResponse(BaseModel):
    status: str = "ok"
    app: str
    version: str
    timestamp: datetime = Field(default_factory=_utcnow)
