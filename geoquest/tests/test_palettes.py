"""
Tests for palette selection.
"""

from __future__ import annotations

import random

import pytest

from geoquest import palettes
from geoquest.config import PaletteConfig, Settings
from geoquest.palettes import (
    CATEGORY_PALETTES,
    GENERAL_PALETTE,
    PALETTE_POOL,
    PaletteStrategy,
    pick_palette,
)


class TestPool:
    def test_every_palette_has_two_or_more_hex_stops(self):
        for palette in (*PALETTE_POOL, *CATEGORY_PALETTES.values()):
            assert len(palette.colors) >= 2
            assert all(c.startswith("#") and len(c) == 7 for c in palette.colors), palette.name

    def test_pool_names_unique(self):
        names = [p.name for p in PALETTE_POOL]
        assert len(names) == len(set(names))


class TestRandomStrategy:
    def test_seeded_pick_is_reproducible(self):
        first = [pick_palette(None, 10, PaletteStrategy.RANDOM, random.Random(42)) for _ in range(5)]
        second = [pick_palette(None, 10, PaletteStrategy.RANDOM, random.Random(42)) for _ in range(5)]
        assert first == second

    def test_pick_comes_from_pool(self):
        rng = random.Random(7)
        for _ in range(50):
            assert pick_palette("economics", 10, PaletteStrategy.RANDOM, rng) in PALETTE_POOL

    def test_varies_across_draws(self):
        rng = random.Random(1)
        names = {pick_palette(None, 10, PaletteStrategy.RANDOM, rng).name for _ in range(200)}
        assert len(names) > 1

    @pytest.mark.parametrize("cardinality", [0, 1, 2])
    def test_low_cardinality_never_multi_stop(self, cardinality):
        rng = random.Random(3)
        for _ in range(100):
            palette = pick_palette(None, cardinality, PaletteStrategy.RANDOM, rng)
            assert len(palette.colors) == 2

    def test_three_values_allow_three_stops(self):
        rng = random.Random(5)
        for _ in range(100):
            assert len(pick_palette(None, 3, PaletteStrategy.RANDOM, rng).colors) <= 3


class TestCategoryStrategy:
    def test_fixed_palette_per_category(self):
        picked = pick_palette("economics", 10, PaletteStrategy.CATEGORY_KEYED)
        assert picked == CATEGORY_PALETTES["economics"]
        assert pick_palette("economics", 10, PaletteStrategy.CATEGORY_KEYED) == picked

    def test_category_normalized(self):
        assert pick_palette(" Economics ", 10, "category") == CATEGORY_PALETTES["economics"]

    @pytest.mark.parametrize("category", [None, "", "astrology"])
    def test_unknown_category_uses_general(self, category):
        assert pick_palette(category, 10, PaletteStrategy.CATEGORY_KEYED) == GENERAL_PALETTE

    def test_multi_stop_reduced_to_endpoints(self):
        full = CATEGORY_PALETTES["climate"]
        reduced = pick_palette("climate", 2, PaletteStrategy.CATEGORY_KEYED)
        assert reduced.colors == (full.colors[0], full.colors[-1])

    def test_multi_stop_kept_when_enough_values(self):
        picked = pick_palette("climate", 10, PaletteStrategy.CATEGORY_KEYED)
        assert picked == CATEGORY_PALETTES["climate"]

    def test_ignores_rng(self):
        a = pick_palette("sports", 10, PaletteStrategy.CATEGORY_KEYED, random.Random(1))
        b = pick_palette("sports", 10, PaletteStrategy.CATEGORY_KEYED, random.Random(2))
        assert a == b


class TestStrategyValues:
    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError):
            pick_palette("economics", 10, "rainbow")


class TestDefaultGenerator:
    @pytest.fixture
    def seeded(self, monkeypatch):
        settings = Settings(palettes=PaletteConfig(seed=5))
        monkeypatch.setattr(palettes, "get_settings", lambda: settings)
        monkeypatch.setattr(palettes, "_default_rng", None)

    def test_seed_fixes_sequence_not_single_pick(self, seeded):
        picks = [pick_palette(None, 10).name for _ in range(20)]
        expected_rng = random.Random(5)
        expected = [expected_rng.choice(PALETTE_POOL).name for _ in range(20)]
        assert picks == expected
        assert len(set(picks)) > 1

    def test_generator_built_once(self, seeded):
        assert palettes.get_default_rng() is palettes.get_default_rng()
