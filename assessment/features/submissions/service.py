from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from assessment.common.errors import DataServiceError, is_unique_violation
from .repository import submissions_repository
from .schemas import SubmissionReceipt

logger = logging.getLogger("submissions.service")


def build_completion_map(challenge_ids: Iterable[str]) -> Dict[str, bool]:
    return {str(cid): True for cid in challenge_ids}


class SubmissionsService:
    async def load_completion_map(self, candidate_id: str) -> Dict[str, bool]:
        ids = await submissions_repository.list_challenge_ids(candidate_id)
        return build_completion_map(ids)

    async def submit(
        self,
        candidate_id: str,
        challenge_id: str,
        answer: str,
        code_snippet: Optional[str] = None,
    ) -> SubmissionReceipt:
        """Record one answer for (candidate, challenge).

        A uniqueness violation on the pair means the challenge was already
        submitted (another tab or a double fire) and is reported as such
        rather than as a failure.
        """
        if not answer or not answer.strip():
            raise ValueError("answer_required")
        try:
            await submissions_repository.insert(candidate_id, challenge_id, answer, code_snippet or None)
        except Exception as exc:  # noqa: BLE001
            if is_unique_violation(exc):
                logger.info(
                    "submissions.duplicate candidate_id=%s challenge_id=%s", candidate_id, challenge_id
                )
                return SubmissionReceipt(challenge_id=challenge_id, duplicate=True)
            logger.warning(
                "submissions.insert_failed candidate_id=%s challenge_id=%s error=%s",
                candidate_id,
                challenge_id,
                exc,
            )
            raise DataServiceError("Could not record submission") from exc
        logger.info("submissions.recorded candidate_id=%s challenge_id=%s", candidate_id, challenge_id)
        return SubmissionReceipt(challenge_id=challenge_id)


submissions_service = SubmissionsService()

__all__ = ["submissions_service", "SubmissionsService", "build_completion_map"]
