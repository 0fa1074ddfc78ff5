"""Typed requests and per-operation validation.

Each operation has a frozen request dataclass and a validator that returns
either `Valid(value)` or `Invalid(errors)`. Callers branch on `.ok` or call
`.unwrap()`, which raises the matching ValidationError subclass.

Rules:
- player_name: str, 1..50 characters on submit (non-empty on lookup),
  kept verbatim (no strip / case-fold)
- score: int (bool and float rejected), 0..2**31-1
- limit: int (bool rejected), 1..100, default 10
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Generic, TypeVar, Union

from scoreboard.models import PLAYER_NAME_MAX_LENGTH
from scoreboard.services.errors import InvalidInputError, InvalidLimitError, ValidationError

DEFAULT_LEADERBOARD_LIMIT = 10
MAX_LEADERBOARD_LIMIT = 100
# scores.score is a 4-byte INTEGER column
MAX_SCORE = 2**31 - 1

T = TypeVar("T")


@dataclass(frozen=True)
class SubmitScore:
    player_name: str
    score: int


@dataclass(frozen=True)
class LeaderboardQuery:
    limit: int = DEFAULT_LEADERBOARD_LIMIT


@dataclass(frozen=True)
class PlayerBestQuery:
    player_name: str


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T
    ok: bool = field(default=True, init=False)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Invalid:
    errors: tuple[FieldError, ...]
    error_cls: type[ValidationError] = ValidationError
    ok: bool = field(default=False, init=False)

    @property
    def message(self) -> str:
        return "; ".join(e.message for e in self.errors)

    def to_exception(self) -> ValidationError:
        return self.error_cls(
            self.message,
            detail={"errors": [asdict(e) for e in self.errors]},
        )

    def unwrap(self):
        raise self.to_exception()


Validation = Union[Valid[T], Invalid]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _player_name_errors(value: object, *, max_length: int | None) -> list[FieldError]:
    if not isinstance(value, str):
        return [FieldError("player_name", "type", "Player name must be a string")]
    if len(value) == 0:
        return [FieldError("player_name", "required", "Player name is required")]
    if max_length is not None and len(value) > max_length:
        return [
            FieldError(
                "player_name",
                "too_long",
                f"Player name must be {max_length} characters or less",
            )
        ]
    return []


def validate_submit_score(
    player_name: object,
    score: object,
    *,
    max_name_length: int = PLAYER_NAME_MAX_LENGTH,
) -> Validation[SubmitScore]:
    errors = _player_name_errors(player_name, max_length=max_name_length)

    if not _is_int(score):
        errors.append(FieldError("score", "type", "Score must be an integer"))
    elif score < 0:  # type: ignore[operator]
        errors.append(FieldError("score", "negative", "Score must be non-negative"))
    elif score > MAX_SCORE:  # type: ignore[operator]
        errors.append(FieldError("score", "too_large", f"Score must be at most {MAX_SCORE}"))

    if errors:
        return Invalid(tuple(errors))
    return Valid(SubmitScore(player_name=player_name, score=score))  # type: ignore[arg-type]


def validate_leaderboard_query(
    limit: object = None,
    *,
    default: int = DEFAULT_LEADERBOARD_LIMIT,
    max_limit: int = MAX_LEADERBOARD_LIMIT,
) -> Validation[LeaderboardQuery]:
    """Validate a leaderboard request; `None` means "use the default"."""
    if limit is None:
        limit = default

    if not _is_int(limit):
        error = FieldError("limit", "type", "Limit must be an integer")
    elif limit < 1:  # type: ignore[operator]
        error = FieldError("limit", "too_small", "Limit must be at least 1")
    elif limit > max_limit:  # type: ignore[operator]
        error = FieldError("limit", "too_large", f"Limit must be at most {max_limit}")
    else:
        return Valid(LeaderboardQuery(limit=limit))  # type: ignore[arg-type]

    return Invalid((error,), error_cls=InvalidLimitError)


def validate_player_best_query(player_name: object) -> Validation[PlayerBestQuery]:
    # Only non-empty is required; an over-long name simply has no records.
    errors = _player_name_errors(player_name, max_length=None)
    if errors:
        return Invalid(tuple(errors), error_cls=InvalidInputError)
    return Valid(PlayerBestQuery(player_name=player_name))  # type: ignore[arg-type]
