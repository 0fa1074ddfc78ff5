"""Shared fixtures: a throwaway SQLite database per test."""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from scoreboard.main import create_app
from scoreboard.stores.postgres import Database
from scoreboard.stores.scores import ScoreRepository


@pytest.fixture
async def db(tmp_path: Path):
    """Connected database with the schema created."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'scores.db'}")
    await database.connect()
    await database.create_tables()
    yield database
    await database.dispose()


@pytest.fixture
def store(db: Database) -> ScoreRepository:
    return ScoreRepository(db)


@pytest.fixture
async def client(db: Database):
    """Test client wired to the per-test database (lifespan is not run)."""
    app = create_app()
    app.state.db = db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
