"""Error taxonomy shared by services and routes.

Routes translate these into the structured error body:
{ "error": { "code": str, "message": str, "detail": object } }
"""

from __future__ import annotations

from typing import Any


class ScoreboardError(Exception):
    """Base class for expected service errors."""

    code = "SCOREBOARD_ERROR"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(ScoreboardError):
    """Malformed input. Never retried."""

    code = "VALIDATION_ERROR"


class InvalidLimitError(ValidationError):
    code = "INVALID_LIMIT"


class InvalidInputError(ValidationError):
    code = "INVALID_INPUT"


class StoreUnavailableError(ScoreboardError):
    """The underlying database failed (connection loss, constraint violation, ...)."""

    code = "STORE_UNAVAILABLE"
