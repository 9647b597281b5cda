"""Field names recognized in clarification question payloads.

Simple constants containers instead of Enums, matching how question kinds
are declared elsewhere in the package.
"""

from __future__ import annotations


class QuestionField:
    KEY = "key"
    QUESTION = "question"
    ALLOWS_CUSTOM = "allows_custom"
    SUGGESTED_OPTIONS = "suggested_options"


class OptionField:
    VALUE = "value"
    LABEL = "label"


__all__ = ["QuestionField", "OptionField"]
