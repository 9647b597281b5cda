"""Exception types raised to callers of the clarification package.

Malformed data inside an otherwise valid payload never raises; these
exceptions cover caller contract violations and rejected answers only.
"""

from __future__ import annotations


class InvalidInput(ValueError):
    """Top-level payload is not the shape the caller promised."""


class AnswerValidationError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


ANSWER_REQUIRED = "answer_required"
ANSWER_TOO_SHORT = "answer_too_short"
SESSION_COMPLETE = "session_complete"


__all__ = [
    "InvalidInput",
    "AnswerValidationError",
    "ANSWER_REQUIRED",
    "ANSWER_TOO_SHORT",
    "SESSION_COMPLETE",
]
