"""Truth tables for the wire value coercion helpers."""

from __future__ import annotations

import pytest

from clarifier.logic.coercion import coerce_flag, coerce_text, is_sequence


@pytest.mark.parametrize(
    "value, expected",
    [
        ("plain", "plain"),
        ("", ""),
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-3, "-3"),
        (1.0, "1"),
        (0.25, "0.25"),
        (float("inf"), "inf"),
        ([1, "a", None], "1,a,"),
        ((), ""),
        ([[1, 2], [None, 3]], "1,2,,3"),
    ],
)
def test_coerce_text(value, expected):
    assert coerce_text(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, False),
        (False, False),
        (0, False),
        (0.0, False),
        (float("nan"), False),
        ("", False),
        (True, True),
        (1, True),
        (-1, True),
        (0.5, True),
        ("no", True),
        ("false", True),
        (" ", True),
        ([], True),
        ({}, True),
    ],
)
def test_coerce_flag(value, expected):
    assert coerce_flag(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [([], True), ((1, 2), True), ("ab", False), (b"ab", False), ({"a": 1}, False), (None, False)],
)
def test_is_sequence(value, expected):
    assert is_sequence(value) is expected


def test_coerce_text_breaks_cycles():
    looped = ["a"]
    looped.append(looped)
    assert coerce_text(looped) == "a,"
