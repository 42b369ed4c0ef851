# assessment/features/submissions/endpoints.py
from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, HTTPException, status

from assessment.common.errors import DataServiceError
from assessment.features.challenges.service import challenge_catalog_service
from .schemas import CompletionMap, SubmissionCreate, SubmissionReceipt
from .service import submissions_service

logger = logging.getLogger("submissions")

router = APIRouter(prefix="/api", tags=["submissions"])


@router.get("/candidates/{candidate_id}/submissions", response_model=CompletionMap)
async def list_candidate_submissions(candidate_id: str) -> CompletionMap:
    """Completed challenges for a candidate, limited to the current catalog."""
    try:
        completion, catalog = await asyncio.gather(
            submissions_service.load_completion_map(candidate_id),
            challenge_catalog_service.load_catalog(),
        )
    except Exception as exc:  # noqa: BLE001
        logger.error("submissions.list_failed candidate_id=%s error=%s", candidate_id, exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to load submissions") from exc
    known = {c.id for c in catalog}
    completed = {cid: True for cid in completion if cid in known}
    return CompletionMap(submissions=completed, completed=len(completed))


@router.post("/submissions", response_model=SubmissionReceipt, status_code=status.HTTP_201_CREATED)
async def create_submission(payload: SubmissionCreate) -> SubmissionReceipt:
    try:
        return await submissions_service.submit(
            payload.candidate_id,
            payload.challenge_id,
            payload.answer,
            payload.code_snippet,
        )
    except DataServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
