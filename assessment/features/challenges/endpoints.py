from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from .schemas import ChallengeSchema
from .service import challenge_catalog_service

logger = logging.getLogger("challenges")

router = APIRouter(prefix="/api/challenges", tags=["challenges"])


@router.get("", response_model=List[ChallengeSchema])
async def list_challenges() -> List[ChallengeSchema]:
    """Return the full catalog ordered by challenge number."""
    try:
        return await challenge_catalog_service.load_catalog()
    except Exception as exc:  # noqa: BLE001
        logger.error("challenges.list_failed error=%s", exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to load challenges") from exc
