"""Configuration utilities for the clarification package.

Two settings are read, each from the first source that provides it:
environment variable, text file under `config/`, then the dotted path in
`clarifier_config.json` at the project root. Unset settings fall back to
the model defaults and every value is validated by Pydantic.

| Setting               | Environment variable          | Read by                    |
|-----------------------|-------------------------------|----------------------------|
| `answers.min_length`  | `CLARIFIER_MIN_ANSWER_LENGTH` | `logic.answers`            |
| `logging.level`       | `CLARIFIER_LOG_LEVEL`         | `logging_setup`            |
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator


CONFIG_DIR = Path("config")
ROOT_CONFIG = Path("clarifier_config.json")
logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

# dotted setting path -> environment variable; the `config/` file shares the dotted name
_SETTINGS: Tuple[Tuple[str, str], ...] = (
    ("answers.min_length", "CLARIFIER_MIN_ANSWER_LENGTH"),
    ("logging.level", "CLARIFIER_LOG_LEVEL"),
)


class AnswersConfig(BaseModel):
    min_length: int = Field(default=5, ge=1)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {sorted(_LOG_LEVELS)}")
        return level


class AppConfig(BaseModel):
    answers: AnswersConfig = Field(default_factory=AnswersConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_override(name: str) -> Optional[str]:
    path = CONFIG_DIR / name
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip() or None
    except (OSError, UnicodeDecodeError) as e:
        # Recoverable: an unreadable override counts as unset
        logger.warning("Failed to read override %s: %s", path, e)
    return None


def _read_base(path: Path) -> Dict[str, Any]:
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            return data if isinstance(data, dict) else {}
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def _dig(base: Dict[str, Any], dotted: str) -> Optional[str]:
    cur: object = base
    for key in dotted.split("."):
        if not isinstance(cur, dict) or key not in cur:
            return None
        cur = cur[key]
    return None if cur is None else str(cur)


def load_config() -> AppConfig:
    """Load and validate configuration; re-raise Pydantic errors after logging."""
    base = _read_base(ROOT_CONFIG)
    sections: Dict[str, Dict[str, str]] = {}
    for dotted, env_key in _SETTINGS:
        raw = os.environ.get(env_key) or _read_override(dotted) or _dig(base, dotted)
        if raw is None:
            continue
        section, field = dotted.split(".", 1)
        sections.setdefault(section, {})[field] = raw.strip()

    try:
        return AppConfig.model_validate(sections)
    except PydanticValidationError as e:
        logger.error("Invalid clarifier configuration: %s", e)
        raise


__all__ = [
    "AppConfig",
    "AnswersConfig",
    "LoggingConfig",
    "load_config",
]
