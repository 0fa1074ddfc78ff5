"""Score repository: the only reads/writes against the `scores` table.

Ordering contract for every ranked read:
    score DESC, id ASC
`id` is assigned monotonically, so equal scores list the earliest submission
first and repeated reads against the same rows return the same order.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from scoreboard.models import Score
from scoreboard.services.errors import StoreUnavailableError
from scoreboard.stores.postgres import Database

logger = logging.getLogger("uvicorn.error")

RANKED_ORDER = (Score.score.desc(), Score.id.asc())


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    """Re-raise driver/ORM failures as StoreUnavailableError."""
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        logger.exception(f"Score store failure while trying to {action}")
        raise StoreUnavailableError(f"Score store unavailable: could not {action}") from e


class ScoreRepository:
    """Append-only access to score records."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def insert(self, player_name: str, score: int) -> Score:
        """Persist one score; the store assigns id and created_at."""
        with _store_errors("insert score"):
            async with self.db.session() as session:
                record = Score(player_name=player_name, score=score)
                session.add(record)
                await session.flush()
                await session.refresh(record)
        return record

    async def query_top(self, limit: int) -> Sequence[Score]:
        """Highest scores first, at most `limit` rows."""
        with _store_errors("load leaderboard"):
            async with self.db.session() as session:
                result = await session.execute(select(Score).order_by(*RANKED_ORDER).limit(limit))
                return result.scalars().all()

    async def query_by_player(self, player_name: str, limit: int | None = None) -> Sequence[Score]:
        """All scores for an exact (case-sensitive) player name, best first."""
        query = select(Score).where(Score.player_name == player_name).order_by(*RANKED_ORDER)
        if limit is not None:
            query = query.limit(limit)

        with _store_errors("load player scores"):
            async with self.db.session() as session:
                result = await session.execute(query)
                return result.scalars().all()

    async def count(self) -> int:
        with _store_errors("count scores"):
            async with self.db.session() as session:
                result = await session.execute(select(func.count(Score.id)))
                return result.scalar() or 0
