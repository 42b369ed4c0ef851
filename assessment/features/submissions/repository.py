from __future__ import annotations

from typing import Any, Dict, List, Optional

from assessment.db.supabase import get_supabase


class SubmissionsRepository:
    """Append-only access to the ``submissions`` table."""

    _TABLE = "submissions"

    async def list_challenge_ids(self, candidate_id: str) -> List[str]:
        client = await get_supabase()
        resp = await client.table(self._TABLE).select("challenge_id").eq("candidate_id", candidate_id).execute()
        return [str(row["challenge_id"]) for row in resp.data or [] if row.get("challenge_id") is not None]

    async def insert(
        self,
        candidate_id: str,
        challenge_id: str,
        answer: str,
        code_snippet: Optional[str],
    ) -> List[Dict[str, Any]]:
        client = await get_supabase()
        record = {
            "candidate_id": candidate_id,
            "challenge_id": challenge_id,
            "answer": answer,
            "code_snippet": code_snippet or None,
        }
        resp = await client.table(self._TABLE).insert(record).execute()
        return resp.data or []


submissions_repository = SubmissionsRepository()

__all__ = ["submissions_repository", "SubmissionsRepository"]
