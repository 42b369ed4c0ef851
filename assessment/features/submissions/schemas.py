from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, field_validator


class SubmissionCreate(BaseModel):
    candidate_id: str
    challenge_id: str
    answer: str
    code_snippet: Optional[str] = None

    @field_validator("answer")
    @classmethod
    def _require_answer(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("answer must not be empty")
        return value

    @field_validator("code_snippet")
    @classmethod
    def _blank_snippet_is_null(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class SubmissionReceipt(BaseModel):
    challenge_id: str
    submitted: bool = True
    duplicate: bool = False


class CompletionMap(BaseModel):
    """challenge_id -> True for every challenge the candidate has submitted."""
    submissions: Dict[str, bool]
    completed: int
