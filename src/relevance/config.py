"""
Configuration for relevant word extraction.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"

MIN_COMBINATION_SIZE = 1
MAX_COMBINATION_SIZE = 5


def _get_env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass
class RelevanceConfig:
    """Limits used by the relevant word pipeline."""

    density_lower_limit: float = 0.0
    density_upper_limit: float = 0.03
    relevant_word_limit: int = 100
    one_word_limit: int = 100
    word_count_lower_limit: int = 200
    max_combination_size: int = MAX_COMBINATION_SIZE

    def __post_init__(self) -> None:
        if not MIN_COMBINATION_SIZE <= self.max_combination_size <= MAX_COMBINATION_SIZE:
            raise ValueError(
                f"max_combination_size must be between {MIN_COMBINATION_SIZE} and {MAX_COMBINATION_SIZE}"
            )


def load_config() -> RelevanceConfig:
    """
    Build a config from the environment (and a project-root .env, if present).

    Environment variables:
    - RELEVANT_WORDS_LIMIT (default: 100)
    - RELEVANT_WORDS_DENSITY_UPPER_LIMIT (default: 0.03)
    - RELEVANT_WORDS_WORD_COUNT_LOWER_LIMIT (default: 200)
    """
    if _ENV_FILE.exists():
        load_dotenv(_ENV_FILE)

    defaults = RelevanceConfig()
    return RelevanceConfig(
        density_upper_limit=_get_env_float(
            "RELEVANT_WORDS_DENSITY_UPPER_LIMIT", defaults.density_upper_limit
        ),
        relevant_word_limit=_get_env_int("RELEVANT_WORDS_LIMIT", defaults.relevant_word_limit),
        word_count_lower_limit=_get_env_int(
            "RELEVANT_WORDS_WORD_COUNT_LOWER_LIMIT", defaults.word_count_lower_limit
        ),
    )
