"""FastAPI dependencies for routes.

The Database handle lives on `app.state.db` (set by the lifespan, or by
tests); routes get a repository bound to it per request.
"""

from fastapi import Depends, Request

from scoreboard.stores.postgres import Database
from scoreboard.stores.scores import ScoreRepository


def get_db(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database not initialized. Call connect() first.")
    return db


def get_score_store(db: Database = Depends(get_db)) -> ScoreRepository:
    return ScoreRepository(db)
