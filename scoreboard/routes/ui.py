"""UI bootstrap endpoints.

GET /v1/ui/home - Returns HomeResponse for the scoreboard page.

Routers are thin: call services for business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query

from scoreboard.routes.deps import get_score_store
from scoreboard.schemas import HomeResponse, Leaderboard, LeaderboardEntry, PlayerBest
from scoreboard.services.ranking import get_leaderboard, get_player_best, rank_entries
from scoreboard.stores.scores import ScoreRepository

router = APIRouter()

HOME_LEADERBOARD_SIZE = 10


@router.get("/home", response_model=HomeResponse, operation_id="getHome")
async def get_home(
    player: str | None = Query(
        default=None,
        description="Player whose personal best should be included",
        examples=["Alice"],
    ),
    store: ScoreRepository = Depends(get_score_store),
) -> HomeResponse:
    """Get home screen data: Top-10 table plus the player's best, if asked.

    Returns:
        HomeResponse with leaderboard (<=10 entries), total score count and
        playerBest (null when the player has no scores or none was given).
    """
    records = await get_leaderboard(store, HOME_LEADERBOARD_SIZE)
    total_count = await store.count()

    entries = [
        LeaderboardEntry(
            rank=ranked.rank,
            id=ranked.record.id,
            player_name=ranked.record.player_name,
            score=ranked.record.score,
            created_at=ranked.record.created_at,
        )
        for ranked in rank_entries(records)
    ]

    player_best = None
    if player:
        best = await get_player_best(store, player)
        if best is not None:
            player_best = PlayerBest(
                id=best.id,
                player_name=best.player_name,
                score=best.score,
                created_at=best.created_at,
            )

    return HomeResponse(
        leaderboard=Leaderboard(
            entries=entries,
            match_count=total_count,
            last_updated_at=datetime.now(timezone.utc),
        ),
        player_name=player,
        player_best=player_best,
    )
