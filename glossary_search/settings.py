"""Tuning knobs for the glossary search engine.

All settings can be overridden via environment variables (optionally read
from a ``.env`` file) or by passing values directly to ``SearchConfig``.
The engine never reads the environment itself; callers build a config once
and hand it in.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

ENV_PREFIX = "GLOSSARY_SEARCH_"


def _parse_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Invalid number for {name}: {value!r}") from None


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Invalid integer for {name}: {value!r}") from None


@dataclass
class SearchConfig:
    """Query expansion, scoring boosts and paging defaults."""

    fuzzy_distance: int = 1
    min_word_length: int = 2
    exact_boost: float = 1.0
    prefix_boost: float = 0.5
    suffix_boost: float = 0.5
    fuzzy_boost: float = 0.25
    per_page: int = 12
    pages_per_group: int = 5
    log_level: str = "INFO"

    @property
    def strategy_boosts(self) -> dict[str, float]:
        """Boost per query-variant strategy, keyed by strategy value."""
        return {
            "exact": self.exact_boost,
            "prefix": self.prefix_boost,
            "suffix": self.suffix_boost,
            "fuzzy": self.fuzzy_boost,
        }


_INT_KEYS = ("fuzzy_distance", "min_word_length", "per_page", "pages_per_group")
_FLOAT_KEYS = ("exact_boost", "prefix_boost", "suffix_boost", "fuzzy_boost")


def load_config(
    env_path: Optional[Union[str, Path]] = None,
    **overrides,
) -> SearchConfig:
    """Build a SearchConfig with env-var and keyword overrides.

    Resolution order (later wins):
      1. Dataclass defaults
      2. Environment variables (``GLOSSARY_SEARCH_FUZZY_DISTANCE``, etc.),
         after loading *env_path* with python-dotenv when given
      3. Explicit keyword arguments

    Supported env vars:
      - GLOSSARY_SEARCH_FUZZY_DISTANCE / GLOSSARY_SEARCH_MIN_WORD_LENGTH
      - GLOSSARY_SEARCH_EXACT_BOOST / GLOSSARY_SEARCH_PREFIX_BOOST
      - GLOSSARY_SEARCH_SUFFIX_BOOST / GLOSSARY_SEARCH_FUZZY_BOOST
      - GLOSSARY_SEARCH_PER_PAGE / GLOSSARY_SEARCH_PAGES_PER_GROUP
      - GLOSSARY_SEARCH_LOG_LEVEL
    """
    if env_path is not None:
        load_dotenv(env_path)

    cfg = SearchConfig()

    # Env-var layer
    for key in _INT_KEYS:
        name = ENV_PREFIX + key.upper()
        value = os.getenv(name)
        if value:
            setattr(cfg, key, _parse_int(name, value))

    for key in _FLOAT_KEYS:
        name = ENV_PREFIX + key.upper()
        value = os.getenv(name)
        if value:
            setattr(cfg, key, _parse_float(name, value))

    log_level = os.getenv(ENV_PREFIX + "LOG_LEVEL")
    if log_level:
        cfg.log_level = log_level.upper()

    # Explicit overrides layer
    for key, value in overrides.items():
        if hasattr(cfg, key):
            setattr(cfg, key, value)
        else:
            raise TypeError(f"Unknown config key: {key!r}")

    for key in ("per_page", "pages_per_group"):
        if getattr(cfg, key) < 1:
            raise ValueError(f"{key} must be >= 1, got {getattr(cfg, key)}")

    return cfg
