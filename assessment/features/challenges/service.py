from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from .repository import challenge_repository
from .schemas import ChallengeSchema, ChallengeSeed

logger = logging.getLogger("challenges.service")


class ChallengeCatalogService:
    async def load_catalog(self) -> List[ChallengeSchema]:
        """Return every challenge ordered by ``challenge_number``.

        The repository already asks the service to order the rows; the sort is
        repeated locally (stable) so the catalog order holds even if a row
        source ignores the ordering hint.
        """
        rows = await challenge_repository.list_challenges()
        catalog = [ChallengeSchema.model_validate(row) for row in rows]
        catalog.sort(key=lambda c: c.challenge_number)
        return catalog

    async def seed_catalog(self, entries: Iterable[Dict[str, Any]]) -> int:
        seeds = [ChallengeSeed.model_validate(e) for e in entries]
        numbers = [s.challenge_number for s in seeds]
        if len(numbers) != len(set(numbers)):
            raise ValueError("duplicate challenge_number in seed data")
        written = await challenge_repository.upsert_challenges([s.model_dump() for s in seeds])
        return len(written)


challenge_catalog_service = ChallengeCatalogService()

__all__ = ["challenge_catalog_service", "ChallengeCatalogService"]
