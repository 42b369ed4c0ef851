"""
Seed (or refresh) the challenge catalog in Supabase from a JSON file.

Rows are upserted by challenge_number, so re-running the script updates
titles, descriptions and hints in place without duplicating challenges.

Run:

python scripts/seed_challenges.py --file scripts/challenges.json
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from assessment.features.challenges.service import challenge_catalog_service

logger = logging.getLogger("scripts.seed_challenges")


async def main(path: Path) -> int:
    with open(path, "r", encoding="utf-8") as fh:
        entries = json.load(fh)
    written = await challenge_catalog_service.seed_catalog(entries)
    logger.info("Seeded %d challenges from %s", written, path)
    return written


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", dest="path", default=str(ROOT / "scripts" / "challenges.json"))
    args = parser.parse_args()
    asyncio.run(main(Path(args.path)))
