"""End-to-end tests for the score endpoints against SQLite."""

import pytest
from httpx import AsyncClient

from scoreboard.stores.postgres import Database


async def _post(client: AsyncClient, player_name, score):
    return await client.post("/v1/scores", json={"player_name": player_name, "score": score})


@pytest.mark.asyncio
async def test_submit_score_returns_created_record(client: AsyncClient):
    response = await _post(client, "Alice", 100)

    assert response.status_code == 201
    data = response.json()
    assert set(data) == {"id", "player_name", "score", "created_at"}
    assert data["player_name"] == "Alice"
    assert data["score"] == 100
    assert isinstance(data["id"], int)


@pytest.mark.asyncio
async def test_leaderboard_scenario(client: AsyncClient):
    for name, score in [("Alice", 100), ("Bob", 250), ("Charlie", 150)]:
        assert (await _post(client, name, score)).status_code == 201

    response = await client.get("/v1/leaderboard", params={"limit": 10})

    assert response.status_code == 200
    assert [(r["player_name"], r["score"]) for r in response.json()] == [
        ("Bob", 250),
        ("Charlie", 150),
        ("Alice", 100),
    ]


@pytest.mark.asyncio
async def test_leaderboard_default_limit(client: AsyncClient):
    for i in range(12):
        await _post(client, f"P{i}", i)

    response = await client.get("/v1/leaderboard")

    assert response.status_code == 200
    assert len(response.json()) == 10


@pytest.mark.asyncio
async def test_empty_store(client: AsyncClient):
    board = await client.get("/v1/leaderboard", params={"limit": 10})
    best = await client.get("/v1/scores/best", params={"player_name": "Anyone"})

    assert board.status_code == 200
    assert board.json() == []
    assert best.status_code == 200
    assert best.json() is None


@pytest.mark.asyncio
async def test_player_best(client: AsyncClient):
    await _post(client, "P", 100)
    await _post(client, "P", 100)
    await _post(client, "p", 999)

    response = await client.get("/v1/scores/best", params={"player_name": "P"})

    assert response.status_code == 200
    assert response.json()["score"] == 100
    assert response.json()["player_name"] == "P"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"player_name": "", "score": 10},
        {"player_name": "x" * 51, "score": 10},
        {"player_name": "Alice", "score": -1},
        {"player_name": "Alice", "score": 1.5},
        {"player_name": "Alice", "score": "100"},
        {"player_name": "Alice", "score": 2147483648},
        {"player_name": "Alice", "score": 2**63},
        {"player_name": "Alice"},
        {"score": 10},
    ],
)
async def test_submit_score_rejects_invalid(client: AsyncClient, payload):
    response = await client.post("/v1/scores", json=payload)

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["detail"]["errors"]

    board = await client.get("/v1/leaderboard")
    assert board.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", ["0", "-1", "101"])
async def test_leaderboard_rejects_out_of_range_limit(client: AsyncClient, limit: str):
    response = await client.get("/v1/leaderboard", params={"limit": limit})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_LIMIT"


@pytest.mark.asyncio
async def test_leaderboard_rejects_non_integer_limit(client: AsyncClient):
    response = await client.get("/v1/leaderboard", params={"limit": "ten"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_LIMIT"


@pytest.mark.asyncio
async def test_player_best_rejects_empty_name(client: AsyncClient):
    response = await client.get("/v1/scores/best", params={"player_name": ""})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_store_failure_maps_to_503(client: AsyncClient, db: Database):
    await db.drop_tables()

    response = await client.get("/v1/leaderboard")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"


@pytest.mark.asyncio
async def test_submit_score_accepts_largest_int4(client: AsyncClient):
    response = await _post(client, "Max", 2147483647)

    assert response.status_code == 201
    assert response.json()["score"] == 2147483647


@pytest.mark.asyncio
async def test_submit_score_too_large_is_bad_input(client: AsyncClient):
    response = await _post(client, "Big", 2147483648)

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["detail"]["errors"][0]["code"] == "too_large"


@pytest.mark.asyncio
async def test_submit_score_accepts_integral_float(client: AsyncClient):
    response = await _post(client, "Alice", 100.0)

    assert response.status_code == 201
    assert response.json()["score"] == 100
    assert isinstance(response.json()["score"], int)
