"""Roulette clarification package.

Decodes the tagged-pair clarification questions sent by the roulette
backend into typed models and collects the user's answers for the
generate step. Network access and rendering belong to the caller;
decoding lives in `clarifier/logic/` and the models in `clarifier/models/`.
"""

from __future__ import annotations

from clarifier.errors import AnswerValidationError, InvalidInput
from clarifier.logic.answers import ClarificationSession, initial_answers
from clarifier.logic.create_response import decode_create_response
from clarifier.logic.decoder import decode_clarification_questions
from clarifier.models.clarification import Option, ParsedQuestion

__all__ = [
    "AnswerValidationError",
    "InvalidInput",
    "ClarificationSession",
    "initial_answers",
    "decode_create_response",
    "decode_clarification_questions",
    "Option",
    "ParsedQuestion",
]
