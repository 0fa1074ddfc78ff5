"""Schemas for the score endpoints (/v1/scores, /v1/leaderboard)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScoreRecord(BaseModel):
    """Wire shape of one persisted score."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    player_name: str
    score: int
    created_at: datetime


class SubmitScoreRequest(BaseModel):
    """Request body for POST /v1/scores.

    Only JSON types are checked here (strict: no "100" -> 100 coercion).
    JSON numbers with a zero fraction (100.0) are integers and are accepted.
    Length and range rules live in the submission service.
    """

    player_name: str = Field(strict=True, examples=["Alice"])
    score: int = Field(strict=True, examples=[100])

    @field_validator("score", mode="before")
    @classmethod
    def _integral_float_to_int(cls, v: object) -> object:
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v
