"""Pydantic models for decoded clarification questions."""

from __future__ import annotations

from typing import Any, Sequence, Tuple

from pydantic import BaseModel, ConfigDict


# Wire shapes: a record is an ordered sequence of [field_name, value] pairs.
RawPair = Sequence[Any]
RawRecord = Sequence[RawPair]


class Option(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = ""
    label: str = ""


class ParsedQuestion(BaseModel):
    """A fully decoded clarification question.

    Every field has a default so a question is never partially populated,
    and instances are frozen once built.
    """

    model_config = ConfigDict(frozen=True)

    key: str = ""
    question: str = ""
    suggested_options: Tuple[Option, ...] = ()
    allows_custom: bool = False


__all__ = ["RawPair", "RawRecord", "Option", "ParsedQuestion"]
