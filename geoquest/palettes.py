"""
Palette pool and palette selection.

Two strategies, chosen per quiz by the caller:
  - RANDOM: uniform pick from a pool of high-contrast palettes, so players
    cannot learn that "blue means population" across sessions.
  - CATEGORY_KEYED: fixed palette per subject tag ("economics", ...).

Randomness always comes from an injected random.Random, never the global one.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from types import MappingProxyType
from typing import Optional

from geoquest.config import get_settings
from geoquest.models import Palette

logger = logging.getLogger(__name__)


class PaletteStrategy(str, Enum):
    RANDOM = "random"
    CATEGORY_KEYED = "category"


# ── Pool for random selection ─────────────────────────────────────────

PALETTE_POOL: tuple[Palette, ...] = (
    Palette(name="orange", colors=("#fff3e0", "#e65100")),
    Palette(name="green", colors=("#e8f5e8", "#2e7d32")),
    Palette(name="blue", colors=("#e3f2fd", "#1976d2")),
    Palette(name="pink", colors=("#fce4ec", "#c2185b")),
    Palette(name="purple", colors=("#f3e5f5", "#7b1fa2")),
    Palette(name="amber", colors=("#fff8e1", "#f57c00")),
    Palette(name="teal", colors=("#e0f2f1", "#00695c")),
    Palette(name="olive", colors=("#f1f8e9", "#558b2f")),
    Palette(name="viridis", colors=("#440154", "#3b528b", "#21918c", "#5ec962", "#fde725")),
    Palette(name="magma", colors=("#000004", "#51127c", "#b73779", "#fc8961", "#fcfdbf")),
    Palette(name="sunset", colors=("#fff5eb", "#fd8d3c", "#7f2704")),
)


# ── Fixed palette per subject ─────────────────────────────────────────

GENERAL_PALETTE = Palette(name="general", colors=("#e3f2fd", "#1976d2"))

CATEGORY_PALETTES: MappingProxyType[str, Palette] = MappingProxyType({
    "geography": Palette(name="geography", colors=("#e8f5e8", "#2e7d32")),
    "agriculture": Palette(name="agriculture", colors=("#fff3e0", "#8d6e63")),
    "demographics": Palette(name="demographics", colors=("#f3e5f5", "#7b1fa2")),
    "economics": Palette(name="economics", colors=("#e8f5e8", "#2e7d32")),
    "environment": Palette(name="environment", colors=("#f1f8e9", "#558b2f")),
    "climate": Palette(name="climate", colors=("#313695", "#ffffbf", "#a50026")),
    "society": Palette(name="society", colors=("#fce4ec", "#c2185b")),
    "sports": Palette(name="sports", colors=("#fff8e1", "#f57c00")),
    "culture": Palette(name="culture", colors=("#e0f2f1", "#00695c")),
    "general": GENERAL_PALETTE,
})


_default_rng: Optional[random.Random] = None


def get_default_rng() -> random.Random:
    """
    Process-wide generator for callers that do not inject one.

    Seeded once from GEOQUEST_PALETTE_SEED, so a seed fixes the sequence of
    picks rather than making every pick the same.
    """
    global _default_rng
    if _default_rng is None:
        _default_rng = random.Random(get_settings().palettes.seed)
    return _default_rng


def pick_palette(
    category: Optional[str],
    cardinality: int,
    strategy: PaletteStrategy = PaletteStrategy.RANDOM,
    rng: Optional[random.Random] = None,
) -> Palette:
    """
    Choose a palette for a quiz with `cardinality` distinct values.

    A palette never has more stops than the data has distinct values: random
    picks skip such palettes, category picks are reduced to their endpoints.
    """
    strategy = PaletteStrategy(strategy)

    if strategy is PaletteStrategy.CATEGORY_KEYED:
        palette = CATEGORY_PALETTES.get((category or "").strip().lower(), GENERAL_PALETTE)
        if cardinality >= 2 and len(palette.colors) > cardinality:
            palette = palette.endpoints()
        logger.debug("Category palette for %r: %s", category, palette.name)
        return palette

    # Two-stop palettes are always eligible
    eligible = [p for p in PALETTE_POOL if len(p.colors) <= max(2, cardinality)]
    rng = rng or get_default_rng()
    palette = rng.choice(eligible)
    logger.debug("Random palette (%d eligible): %s", len(eligible), palette.name)
    return palette
