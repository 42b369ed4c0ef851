"""Pydantic models for challenge resources."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator

from .models import ChallengeCategory, ChallengeDifficulty


class ChallengeSchema(BaseModel):
    """A single assessment challenge as stored in the ``challenges`` table.

    ``difficulty`` and ``category`` stay plain strings so rows carrying values
    outside the known enums still load; presentation falls back to a neutral
    badge for those.
    """

    id: str
    challenge_number: int
    title: str
    description: str = ""
    difficulty: str = ""
    category: str = "other"
    points: int = 0
    hint: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value)

    @field_validator("difficulty", "category", mode="before")
    @classmethod
    def _lower(cls, value):
        return str(value or "").strip().lower()

    @property
    def has_hint(self) -> bool:
        return bool(self.hint and self.hint.strip())


class ChallengeSeed(BaseModel):
    """A catalog entry loaded from a seed file (no id; the database assigns it)."""

    challenge_number: int
    title: str
    description: str
    difficulty: str
    category: str = "other"
    points: int = 10
    hint: Optional[str] = None

    @field_validator("difficulty")
    @classmethod
    def _known_difficulty(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in {m.value for m in ChallengeDifficulty}:
            raise ValueError(f"unknown difficulty {value!r}")
        return value

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in {m.value for m in ChallengeCategory}:
            raise ValueError(f"unknown category {value!r}")
        return value
