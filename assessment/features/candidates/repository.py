from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from assessment.db.supabase import get_supabase

logger = logging.getLogger("candidates.repository")


class CandidateRepository:
    """Supabase (PostgREST) based async repository for candidates."""

    _TABLE = "candidates"

    async def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        client = await get_supabase()
        resp = await client.table(self._TABLE).select("*").eq("email", email).limit(1).execute()
        rows = resp.data or []
        return rows[0] if rows else None

    async def insert(self, email: str, name: str) -> Dict[str, Any]:
        """Insert a candidate row; raises the client's error on conflict."""
        client = await get_supabase()
        resp = await client.table(self._TABLE).insert({"email": email, "name": name}).execute()
        if not resp.data:
            raise RuntimeError("Failed to create candidate record")
        return resp.data[0]


candidate_repository = CandidateRepository()

__all__ = ["candidate_repository", "CandidateRepository"]
