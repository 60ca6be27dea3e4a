"""
Tests for the pydantic data models.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from geoquest.models import DatasetRecord, DistributionSummary, Palette, QuizAnswerSpec


class TestQuizAnswerSpec:
    def test_variations_normalized(self):
        spec = QuizAnswerSpec(title="Land Area", answer_variations=["  Land Area ", "land area", "", "Size"])
        assert spec.answer_variations == ["land area", "size"]

    def test_title_added_to_accepted_phrases(self):
        spec = QuizAnswerSpec(title="Coffee Consumption", answer_variations=["coffee"])
        assert spec.accepted_phrases == ["coffee", "coffee consumption"]

    def test_title_not_duplicated(self):
        spec = QuizAnswerSpec(title="Land Area", answer_variations=["land area"])
        assert spec.accepted_phrases == ["land area"]

    def test_no_variations(self):
        spec = QuizAnswerSpec(title="Population")
        assert spec.accepted_phrases == ["population"]

    def test_none_variations(self):
        assert QuizAnswerSpec(title="X", answer_variations=None).answer_variations == []

    def test_frozen(self):
        spec = QuizAnswerSpec(title="Population")
        with pytest.raises(ValidationError):
            spec.title = "Other"


class TestPalette:
    def test_requires_two_colors(self):
        with pytest.raises(ValidationError):
            Palette(name="one", colors=("#ffffff",))

    def test_two_stop(self):
        p = Palette(name="blue", colors=("#e3f2fd", "#1976d2"))
        assert not p.is_multi_stop
        assert p.min_color == "#e3f2fd"
        assert p.max_color == "#1976d2"
        assert p.endpoints() is p

    def test_endpoints_of_multi_stop(self):
        p = Palette(name="rgb", colors=("#ff0000", "#00ff00", "#0000ff"), default_color="#eeeeee")
        reduced = p.endpoints()
        assert p.is_multi_stop
        assert reduced.colors == ("#ff0000", "#0000ff")
        assert reduced.default_color == "#eeeeee"
        assert reduced.name == "rgb"


class TestDistributionSummary:
    def test_fields(self):
        s = DistributionSummary(min=1, q1=2, median=3, q3=4, max=5)
        assert s.model_dump() == {"min": 1.0, "q1": 2.0, "median": 3.0, "q3": 4.0, "max": 5.0}


class TestDatasetRecord:
    def test_extra_fields_ignored(self):
        record = DatasetRecord(country="Japan", value=3, unit="km", rank=1)
        assert record.value == 3.0
        assert not hasattr(record, "rank")

    def test_unit_optional(self):
        assert DatasetRecord(country="Japan", value=1).unit is None
