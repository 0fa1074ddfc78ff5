"""Schemas for the UI bootstrap endpoint (/v1/ui/home)."""

from datetime import datetime

from pydantic import BaseModel, Field


class PlayerBest(BaseModel):
    """A player's best score, as shown next to the submission form."""

    id: int
    player_name: str = Field(alias="playerName")
    score: int = Field(ge=0)
    created_at: datetime = Field(alias="createdAt")

    model_config = {"populate_by_name": True}


class LeaderboardEntry(PlayerBest):
    """A single row in the leaderboard table."""

    rank: int = Field(ge=1, le=100)


class Leaderboard(BaseModel):
    """Leaderboard containing top scores."""

    entries: list[LeaderboardEntry] = Field(max_length=100)
    match_count: int = Field(alias="matchCount", ge=0)
    last_updated_at: datetime = Field(alias="lastUpdatedAt")

    model_config = {"populate_by_name": True}


class HomeResponse(BaseModel):
    """Response payload for GET /v1/ui/home.

    Matches the UI structure: leaderboard table + optional personal best.
    """

    leaderboard: Leaderboard
    player_name: str | None = Field(alias="playerName", default=None)
    player_best: PlayerBest | None = Field(alias="playerBest", default=None)

    model_config = {"populate_by_name": True}
