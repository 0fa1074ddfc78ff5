import pytest

from scoreboard.services.errors import InvalidInputError, InvalidLimitError, ValidationError
from scoreboard.services.validation import (
    Invalid,
    LeaderboardQuery,
    SubmitScore,
    Valid,
    validate_leaderboard_query,
    validate_player_best_query,
    validate_submit_score,
)


def test_submit_score_valid():
    result = validate_submit_score("Alice", 100)
    assert isinstance(result, Valid)
    assert result.ok
    assert result.unwrap() == SubmitScore(player_name="Alice", score=100)


def test_submit_score_keeps_name_verbatim():
    result = validate_submit_score("  alice ", 0)
    assert result.unwrap().player_name == "  alice "


def test_submit_score_accepts_exactly_fifty_characters():
    assert validate_submit_score("x" * 50, 1).ok


@pytest.mark.parametrize(
    ("player_name", "score", "field", "code"),
    [
        ("", 10, "player_name", "required"),
        ("x" * 51, 10, "player_name", "too_long"),
        (None, 10, "player_name", "type"),
        ("Alice", -1, "score", "negative"),
        ("Alice", 2**31, "score", "too_large"),
        ("Alice", 1.5, "score", "type"),
        ("Alice", 100.0, "score", "type"),
        ("Alice", "100", "score", "type"),
        ("Alice", True, "score", "type"),
    ],
)
def test_submit_score_invalid(player_name, score, field, code):
    result = validate_submit_score(player_name, score)
    assert isinstance(result, Invalid)
    assert not result.ok
    assert [(e.field, e.code) for e in result.errors] == [(field, code)]


def test_submit_score_collects_all_errors():
    result = validate_submit_score("", -5)
    assert {e.field for e in result.errors} == {"player_name", "score"}


def test_invalid_unwrap_raises_with_detail():
    result = validate_submit_score("", 10)
    with pytest.raises(ValidationError) as exc_info:
        result.unwrap()
    assert exc_info.value.code == "VALIDATION_ERROR"
    assert exc_info.value.detail["errors"][0]["field"] == "player_name"


def test_leaderboard_query_default():
    assert validate_leaderboard_query().unwrap() == LeaderboardQuery(limit=10)
    assert validate_leaderboard_query(None).unwrap().limit == 10


@pytest.mark.parametrize("limit", [1, 10, 100])
def test_leaderboard_query_bounds_ok(limit):
    assert validate_leaderboard_query(limit).unwrap().limit == limit


@pytest.mark.parametrize("limit", [0, -1, 101, 2.5, "10", True])
def test_leaderboard_query_rejects(limit):
    result = validate_leaderboard_query(limit)
    assert not result.ok
    with pytest.raises(InvalidLimitError):
        result.unwrap()


def test_player_best_query_rejects_empty():
    with pytest.raises(InvalidInputError):
        validate_player_best_query("").unwrap()


def test_player_best_query_allows_long_names():
    # Nothing that long can exist, but asking is not an error.
    assert validate_player_best_query("x" * 80).ok


def test_submit_score_upper_bound_inclusive():
    assert validate_submit_score("Alice", 2**31 - 1).ok
