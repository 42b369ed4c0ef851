from __future__ import annotations

import logging
from typing import Any, Dict, List

from assessment.db.supabase import get_supabase

logger = logging.getLogger("challenges.repository")


class ChallengeRepository:
    """Access to the ``challenges`` table. The page itself only reads."""

    _TABLE = "challenges"

    async def list_challenges(self) -> List[Dict[str, Any]]:
        client = await get_supabase()
        resp = await client.table(self._TABLE).select("*").order("challenge_number").execute()
        rows = resp.data or []
        logger.debug("challenges.list count=%d", len(rows))
        return rows

    async def upsert_challenges(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Insert or update catalog rows keyed by ``challenge_number`` (seeding only)."""
        if not rows:
            return []
        client = await get_supabase()
        resp = await client.table(self._TABLE).upsert(rows, on_conflict="challenge_number").execute()
        logger.info("challenges.upsert count=%d", len(resp.data or []))
        return resp.data or []


challenge_repository = ChallengeRepository()

__all__ = ["challenge_repository", "ChallengeRepository"]
