"""Decoding of the roulette create-response envelope.

The backend answers a roulette creation with ``id``, a
``needs_clarification`` flag and, when set, the raw clarification
``questions`` in tagged-pair form.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from clarifier.errors import InvalidInput
from clarifier.logic.coercion import coerce_flag, is_sequence
from clarifier.logic.decoder import decode_clarification_questions
from clarifier.models.roulette import CreateOutcome

logger = logging.getLogger(__name__)


def _roulette_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def decode_create_response(payload: Mapping[str, Any]) -> CreateOutcome:
    if not isinstance(payload, Mapping):
        raise InvalidInput(
            f"create response must be an object, got {type(payload).__name__}"
        )
    roulette_id = _roulette_id(payload.get("id"))
    needs_clarification = coerce_flag(payload.get("needs_clarification"))
    if not needs_clarification:
        return CreateOutcome(roulette_id=roulette_id, needs_clarification=False)

    raw_questions = payload.get("questions")
    if not is_sequence(raw_questions):
        logger.warning(
            "create_response_questions_malformed roulette_id=%s type=%s",
            roulette_id,
            type(raw_questions).__name__,
        )
        raw_questions = []
    questions = decode_clarification_questions(raw_questions)
    logger.info(
        "create_response_decoded roulette_id=%s questions=%d", roulette_id, len(questions)
    )
    return CreateOutcome(
        roulette_id=roulette_id,
        needs_clarification=True,
        questions=tuple(questions),
    )


__all__ = ["decode_create_response"]
