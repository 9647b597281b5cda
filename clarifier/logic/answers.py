"""Answer collection for a clarification question flow.

Questions are answered one at a time, either by picking a suggested
option (its ``value`` is stored) or by typing free text that must pass a
minimum length check (`answers.min_length` from configuration unless
given explicitly). Free text is stored stripped. Collected answers are
handed to the generate step as a ``GenerateRequest``.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from clarifier.config import load_config
from clarifier.errors import (
    ANSWER_REQUIRED,
    ANSWER_TOO_SHORT,
    SESSION_COMPLETE,
    AnswerValidationError,
)
from clarifier.models.clarification import Option, ParsedQuestion
from clarifier.models.roulette import GenerateRequest

logger = logging.getLogger(__name__)


def initial_answers(questions: Sequence[ParsedQuestion]) -> Dict[str, str]:
    """Return an answer map with an empty entry per question key."""
    return {q.key: "" for q in questions}


def configured_min_length() -> int:
    return load_config().answers.min_length


def validate_answer_text(text: str | None, min_length: Optional[int] = None) -> str:
    """Return the stripped answer or raise AnswerValidationError.

    Without an explicit ``min_length`` the configured `answers.min_length`
    applies.
    """
    if min_length is None:
        min_length = configured_min_length()
    cleaned = (text or "").strip()
    if not cleaned:
        raise AnswerValidationError(ANSWER_REQUIRED, "an answer is required")
    if len(cleaned) < min_length:
        raise AnswerValidationError(
            ANSWER_TOO_SHORT, f"answer must be at least {min_length} characters"
        )
    return cleaned


class ClarificationSession:
    """Steps through decoded questions and records one answer per key."""

    def __init__(
        self,
        questions: Sequence[ParsedQuestion],
        min_answer_length: Optional[int] = None,
    ) -> None:
        self._questions: List[ParsedQuestion] = list(questions)
        self._answers: Dict[str, str] = initial_answers(self._questions)
        self._index = 0
        if min_answer_length is None:
            min_answer_length = configured_min_length()
        self.min_answer_length = min_answer_length

    @property
    def questions(self) -> List[ParsedQuestion]:
        return list(self._questions)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Optional[ParsedQuestion]:
        if self._index < len(self._questions):
            return self._questions[self._index]
        return None

    @property
    def is_complete(self) -> bool:
        return self._index >= len(self._questions)

    @property
    def answers(self) -> Dict[str, str]:
        return dict(self._answers)

    def _require_current(self) -> ParsedQuestion:
        question = self.current
        if question is None:
            raise AnswerValidationError(SESSION_COMPLETE, "all questions are already answered")
        return question

    def _record(self, question: ParsedQuestion, value: str) -> None:
        self._answers[question.key] = value
        self._index += 1
        logger.debug(
            "clarification_answer_recorded key=%s index=%d complete=%s",
            question.key,
            self._index,
            self.is_complete,
        )

    def choose_option(self, option: Option) -> None:
        """Answer the current question with a suggested option."""
        self._record(self._require_current(), option.value)

    def answer(self, text: str | None) -> None:
        """Answer the current question with free text."""
        question = self._require_current()
        self._record(question, validate_answer_text(text, self.min_answer_length))

    def to_generate_request(self) -> GenerateRequest:
        return GenerateRequest(clarifications=self.answers)


__all__ = [
    "configured_min_length",
    "initial_answers",
    "validate_answer_text",
    "ClarificationSession",
]
