"""Pydantic models for the roulette create/generate exchange."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from clarifier.models.clarification import ParsedQuestion


class CreateOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    roulette_id: Optional[int] = None
    needs_clarification: bool = False
    questions: Tuple[ParsedQuestion, ...] = ()


class GenerateRequest(BaseModel):
    # Answers keyed by question key
    clarifications: Dict[str, str] = Field(default_factory=dict)


__all__ = ["CreateOutcome", "GenerateRequest"]
