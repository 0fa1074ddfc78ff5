"""SQLAlchemy ORM models.

Models represent database tables:
- scores: append-only score submissions (leaderboard source of truth)
"""

from scoreboard.models.score import PLAYER_NAME_MAX_LENGTH, Score

__all__ = ["PLAYER_NAME_MAX_LENGTH", "Score"]
