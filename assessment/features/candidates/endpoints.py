"""Candidate API endpoints (Supabase-backed)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from assessment.common.errors import DataServiceError
from .schemas import CandidateRegistration, CandidateSchema
from .service import candidate_service

logger = logging.getLogger("candidates")

router = APIRouter(prefix="/api/candidates", tags=["candidates"])


@router.post("", response_model=CandidateSchema)
async def register_candidate(payload: CandidateRegistration) -> CandidateSchema:
    """Register a candidate; repeat emails resolve to the existing record."""
    try:
        outcome = await candidate_service.register(payload.email, payload.name)
    except DataServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return outcome.candidate


@router.get("/lookup", response_model=CandidateSchema)
async def lookup_candidate(email: str = Query(..., min_length=1)) -> CandidateSchema:
    try:
        candidate = await candidate_service.find_by_email(email)
    except Exception as exc:  # noqa: BLE001
        logger.error("candidates.lookup_failed email=%s error=%s", email, exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Candidate lookup failed") from exc
    if candidate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Candidate not found")
    return candidate
