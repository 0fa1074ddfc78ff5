"""Pydantic schemas for API request/response validation."""

from scoreboard.schemas.common import ErrorDetail, ErrorResponse, HealthResponse
from scoreboard.schemas.score import ScoreRecord, SubmitScoreRequest
from scoreboard.schemas.ui import HomeResponse, Leaderboard, LeaderboardEntry, PlayerBest

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "ScoreRecord",
    "SubmitScoreRequest",
    "HomeResponse",
    "Leaderboard",
    "LeaderboardEntry",
    "PlayerBest",
]
