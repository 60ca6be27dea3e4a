"""
Central configuration loaded from environment variables with sensible defaults.
The defaults reproduce the game's observable behavior; override only to experiment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass(frozen=True)
class CanonicalizerConfig:
    # Log a warning the first time a raw name falls through every lookup
    warn_unmapped: bool = os.getenv("GEOQUEST_WARN_UNMAPPED", "true").lower() == "true"


@dataclass(frozen=True)
class AnswerConfig:
    min_guess_length: int = int(os.getenv("GEOQUEST_ANSWER_MIN_GUESS", "3"))
    min_token_length: int = int(os.getenv("GEOQUEST_ANSWER_MIN_TOKEN", "3"))
    # Share of phrase tokens that must be hit for a word-overlap match
    overlap_ratio: float = float(os.getenv("GEOQUEST_ANSWER_OVERLAP_RATIO", "0.7"))
    min_containment_length: int = int(os.getenv("GEOQUEST_ANSWER_MIN_CONTAINMENT", "4"))
    min_acronym_length: int = int(os.getenv("GEOQUEST_ANSWER_MIN_ACRONYM", "2"))
    min_synonym_length: int = int(os.getenv("GEOQUEST_ANSWER_MIN_SYNONYM", "4"))


@dataclass(frozen=True)
class ColorConfig:
    # Substituted for any palette color that is not #rgb / #rrggbb hex
    fallback_color: str = os.getenv("GEOQUEST_FALLBACK_COLOR", "#cccccc")
    # Fill for map entities that have no value in the quiz
    default_color: str = os.getenv("GEOQUEST_DEFAULT_COLOR", "#ffffff")
    ratio_mode: str = os.getenv("GEOQUEST_RATIO_MODE", "rank")  # rank | linear


@dataclass(frozen=True)
class PaletteConfig:
    strategy: str = os.getenv("GEOQUEST_PALETTE_STRATEGY", "random")  # random | category
    seed: Optional[int] = _optional_int(os.getenv("GEOQUEST_PALETTE_SEED"))


@dataclass(frozen=True)
class Settings:
    canonicalizer: CanonicalizerConfig = field(default_factory=CanonicalizerConfig)
    answers: AnswerConfig = field(default_factory=AnswerConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)
    palettes: PaletteConfig = field(default_factory=PaletteConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    env: str = os.getenv("APP_ENV", "development")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
