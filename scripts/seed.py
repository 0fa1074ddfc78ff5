#!/usr/bin/env python3
"""Seed database with demo scores.

Creates the `scores` table if missing and submits a handful of demo scores
through the submission service, so seeds obey the same validation as the API.

Not idempotent: scores are append-only, so running twice doubles the rows.

Usage:
    python -m scripts.seed

Optional env vars:
  DATABASE_URL=postgresql://...   (defaults from settings / .env)
  SEED_PLAYERS="Alice:100,Bob:250,Charlie:150"
"""

import asyncio
import logging
import os
import sys

# Ensure imports work when executed as a script/module
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from scoreboard.services.errors import ValidationError  # noqa: E402
from scoreboard.services.submission import submit_score  # noqa: E402
from scoreboard.settings import get_settings  # noqa: E402
from scoreboard.stores.postgres import Database  # noqa: E402
from scoreboard.stores.scores import ScoreRepository  # noqa: E402

load_dotenv()

logger = logging.getLogger("scripts.seed")

DEMO_SCORES: list[tuple[str, int]] = [
    ("Alice", 100),
    ("Bob", 250),
    ("Charlie", 150),
    ("David", 300),
    ("Eve", 200),
    ("Alice", 180),
]


def _parse_seed_env(raw: str) -> list[tuple[str, int]]:
    """Parse "name:score,name:score" into pairs; malformed parts are skipped."""
    pairs: list[tuple[str, int]] = []
    for part in raw.split(","):
        name, sep, score = part.strip().rpartition(":")
        if not sep or not name:
            continue
        try:
            pairs.append((name, int(score)))
        except ValueError:
            logger.warning(f"Skipping malformed seed entry: {part!r}")
    return pairs


async def seed(scores: list[tuple[str, int]]) -> int:
    db = Database.from_settings(get_settings())
    await db.connect()
    try:
        await db.create_tables()
        store = ScoreRepository(db)

        created = 0
        for player_name, score in scores:
            try:
                record = await submit_score(store, player_name, score)
            except ValidationError as e:
                logger.warning(f"Rejected seed score {player_name!r}={score}: {e.message}")
                continue
            created += 1
            logger.info(f"  + #{record.id} {record.player_name}: {record.score}")
        return created
    finally:
        await db.dispose()


async def main() -> None:
    raw = os.getenv("SEED_PLAYERS", "")
    scores = _parse_seed_env(raw) if raw.strip() else DEMO_SCORES

    logger.info(f"Seeding {len(scores)} scores...")
    created = await seed(scores)
    logger.info(f"Done: {created} scores created")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    asyncio.run(main())
