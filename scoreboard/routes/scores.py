"""Score endpoints.

POST /v1/scores             - submitScore
GET  /v1/leaderboard        - getLeaderboard
GET  /v1/scores/best        - getPlayerBestScore

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, Query

from scoreboard.routes.deps import get_score_store
from scoreboard.schemas import ErrorResponse, ScoreRecord, SubmitScoreRequest
from scoreboard.services.ranking import get_leaderboard, get_player_best
from scoreboard.services.submission import submit_score
from scoreboard.stores.scores import ScoreRepository

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        503: {"model": ErrorResponse, "description": "Score store unavailable"},
    },
)


@router.post("/scores", response_model=ScoreRecord, status_code=201, operation_id="submitScore")
async def create_score(
    request: SubmitScoreRequest,
    store: ScoreRepository = Depends(get_score_store),
) -> ScoreRecord:
    """Submit a new score.

    Returns:
        The created record with its store-assigned id and created_at.
    """
    record = await submit_score(store, request.player_name, request.score)
    return ScoreRecord.model_validate(record)


@router.get("/leaderboard", response_model=list[ScoreRecord], operation_id="getLeaderboard")
async def read_leaderboard(
    limit: int | None = Query(
        default=None,
        description="Maximum number of scores (1-100, default 10)",
        examples=[10],
    ),
    store: ScoreRepository = Depends(get_score_store),
) -> list[ScoreRecord]:
    """Get top scores, highest first; equal scores keep submission order."""
    records = await get_leaderboard(store, limit)
    return [ScoreRecord.model_validate(r) for r in records]


@router.get("/scores/best", response_model=ScoreRecord | None, operation_id="getPlayerBestScore")
async def read_player_best(
    player_name: str = Query(
        description="Exact, case-sensitive player name",
        examples=["Alice"],
    ),
    store: ScoreRepository = Depends(get_score_store),
) -> ScoreRecord | None:
    """Get a player's best score, or null if they have none."""
    record = await get_player_best(store, player_name)
    if record is None:
        return None
    return ScoreRecord.model_validate(record)
