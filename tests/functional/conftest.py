from __future__ import annotations

"""Functional test bootstrap for the clarification package.

Provides shared raw payloads and isolates configuration tests from the
developer's environment: CLARIFIER_* variables are removed and the working
directory is a fresh temporary path so no stray `config/` files are read.
"""

import os
from typing import Any, List

import pytest


@pytest.fixture
def topic_payload() -> List[Any]:
    """Raw backend payload with one fully populated question."""
    return [
        [
            ["key", "q1"],
            ["question", "Pick a topic"],
            ["allows_custom", 1],
            [
                "suggested_options",
                [
                    [["value", "math"], ["label", "Math"]],
                    [["value", "art"], ["label", "Art"]],
                ],
            ],
        ]
    ]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    for name in list(os.environ):
        if name.startswith("CLARIFIER_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
