"""Functional tests for decoding the roulette create-response envelope."""

from __future__ import annotations

import pytest

from clarifier.errors import InvalidInput
from clarifier.logic.create_response import decode_create_response
from clarifier.models.clarification import Option


def test_clarification_needed_decodes_questions(topic_payload):
    outcome = decode_create_response(
        {"id": 42, "needs_clarification": True, "questions": topic_payload}
    )
    assert outcome.roulette_id == 42
    assert outcome.needs_clarification is True
    assert len(outcome.questions) == 1
    assert outcome.questions[0].key == "q1"
    assert outcome.questions[0].suggested_options[1] == Option(value="art", label="Art")


def test_no_clarification_ignores_questions(topic_payload):
    outcome = decode_create_response(
        {"id": "7", "needs_clarification": False, "questions": topic_payload}
    )
    assert outcome.roulette_id == 7
    assert outcome.needs_clarification is False
    assert outcome.questions == ()


@pytest.mark.parametrize("questions", [None, "q1", {"key": "q1"}])
def test_malformed_questions_give_no_questions(questions):
    outcome = decode_create_response({"id": 1, "needs_clarification": 1, "questions": questions})
    assert outcome.needs_clarification is True
    assert outcome.questions == ()


@pytest.mark.parametrize("raw_id", [None, True, "abc", 3.5])
def test_unusable_id_becomes_none(raw_id):
    assert decode_create_response({"id": raw_id}).roulette_id is None


@pytest.mark.parametrize("payload", [None, [], "text"])
def test_non_mapping_payload_raises_invalid_input(payload):
    with pytest.raises(InvalidInput):
        decode_create_response(payload)  # type: ignore[arg-type]
