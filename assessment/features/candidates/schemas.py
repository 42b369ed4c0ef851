"""Pydantic models for candidate resources."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class CandidateSchema(BaseModel):
    """A registered test-taker. Identity is the email string."""
    id: str
    email: str
    name: str

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value)


class CandidateRegistration(BaseModel):
    """Registration payload.

    Email format is deliberately not validated; any non-empty string is
    accepted and the data service is the authority on uniqueness.
    """
    email: str
    name: str

    @field_validator("email", "name")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value
