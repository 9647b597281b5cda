"""Typed models for clarification payloads."""

from __future__ import annotations

from clarifier.models.clarification import Option, ParsedQuestion, RawPair, RawRecord
from clarifier.models.field_names import OptionField, QuestionField
from clarifier.models.roulette import CreateOutcome, GenerateRequest

__all__ = [
    "Option",
    "ParsedQuestion",
    "RawPair",
    "RawRecord",
    "OptionField",
    "QuestionField",
    "CreateOutcome",
    "GenerateRequest",
]
