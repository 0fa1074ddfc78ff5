"""Ranking service for leaderboard views.

Ranking logic:
1. Sort by score DESC (highest first)
2. Then by id ASC (earliest submission wins ties; stable across reads)

Read-only: nothing here writes to the store.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from scoreboard.models import Score
from scoreboard.services.validation import (
    DEFAULT_LEADERBOARD_LIMIT,
    validate_leaderboard_query,
    validate_player_best_query,
)
from scoreboard.stores.scores import ScoreRepository


@dataclass(frozen=True)
class RankedScore:
    rank: int
    record: Score


async def get_leaderboard(store: ScoreRepository, limit: object = DEFAULT_LEADERBOARD_LIMIT) -> Sequence[Score]:
    """Get the global top-N scores.

    Args:
        store: Score repository.
        limit: Maximum number of records (1-100, default 10).

    Returns:
        Up to `limit` records, sorted by score DESC, id ASC.

    Raises:
        InvalidLimitError: If limit is not an integer in 1..100.
    """
    query = validate_leaderboard_query(limit).unwrap()
    return await store.query_top(query.limit)


async def get_player_best(store: ScoreRepository, player_name: object) -> Score | None:
    """Get a player's highest-scoring record.

    Matching is exact and case-sensitive. Returns None when the player has
    never submitted; that is a normal result, not an error.

    Raises:
        InvalidInputError: If player_name is empty.
    """
    query = validate_player_best_query(player_name).unwrap()
    records = await store.query_by_player(query.player_name, limit=1)
    return records[0] if records else None


def rank_entries(records: Iterable[Score], start: int = 1) -> list[RankedScore]:
    """Attach display ranks to an already ordered leaderboard.

    Ties get sequential ranks in display order; no re-sorting happens here.
    """
    return [RankedScore(rank=rank, record=record) for rank, record in enumerate(records, start=start)]
