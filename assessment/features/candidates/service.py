from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from assessment.common.errors import DataServiceError, DuplicateRecordError, is_unique_violation
from .repository import candidate_repository
from .schemas import CandidateSchema

logger = logging.getLogger("candidates.service")


@dataclass(frozen=True)
class RegistrationOutcome:
    candidate: CandidateSchema
    existing: bool = False


class CandidateService:
    async def find_by_email(self, email: str) -> Optional[CandidateSchema]:
        row = await candidate_repository.get_by_email(email)
        return CandidateSchema.model_validate(row) if row else None

    async def register(self, email: str, name: str) -> RegistrationOutcome:
        """Create a candidate, or adopt the existing one for a repeat email.

        Raises ``DataServiceError`` when the insert fails for any reason other
        than a uniqueness violation, or when the conflicting row cannot be
        read back.
        """
        try:
            row = await candidate_repository.insert(email, name)
        except Exception as exc:  # noqa: BLE001
            if not is_unique_violation(exc):
                logger.warning("candidates.insert_failed email=%s error=%s", email, exc)
                raise DataServiceError("Could not register candidate") from exc
            logger.info("candidates.insert_conflict email=%s; falling back to lookup", email)
            try:
                existing = await self.find_by_email(email)
            except Exception as lookup_exc:  # noqa: BLE001
                raise DataServiceError("Could not look up existing candidate") from lookup_exc
            if existing is None:
                raise DuplicateRecordError(f"candidate {email!r} exists but is not readable") from exc
            return RegistrationOutcome(candidate=existing, existing=True)
        logger.info("candidates.created email=%s", email)
        return RegistrationOutcome(candidate=CandidateSchema.model_validate(row))


candidate_service = CandidateService()

__all__ = ["candidate_service", "CandidateService", "RegistrationOutcome"]
