"""Submission gate: validate, then persist exactly one score.

Nothing is written unless the whole submission is valid. There is no
deduplication; the same (player, score) pair submitted twice yields two rows.
"""

import logging

from scoreboard.models import Score
from scoreboard.services.validation import validate_submit_score
from scoreboard.stores.scores import ScoreRepository

logger = logging.getLogger("uvicorn.error")


async def submit_score(store: ScoreRepository, player_name: object, score: object) -> Score:
    """Validate and persist one submission.

    Args:
        store: Score repository bound to the process database.
        player_name: Raw player name (1..50 characters, stored verbatim).
        score: Raw score (non-negative integer).

    Returns:
        The persisted Score with store-assigned id and created_at.

    Raises:
        ValidationError: If the name or score is malformed.
        StoreUnavailableError: If the insert fails.
    """
    request = validate_submit_score(player_name, score).unwrap()

    record = await store.insert(request.player_name, request.score)
    logger.info(f"Score accepted: id={record.id} player={record.player_name!r} score={record.score}")
    return record
