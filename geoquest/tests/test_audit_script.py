"""
Tests for the country-name audit script over a directory of dataset files.
"""

from __future__ import annotations

import json
import sys

import pytest

from geoquest.canonicalize import NameCanonicalizer
from geoquest.config import CanonicalizerConfig
from geoquest.country_table import CanonicalCountryTable, PartialMatchTable
from scripts.audit_country_names import audit, main, suggest_mappings


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "a.json").write_text(json.dumps({
        "title": "A",
        "data": [
            {"country": "South Korea", "value": 1},
            {"country": "Korea, Republic of", "value": 2},
            {"country": "Atlantis", "value": 3},
            {"country": "World", "value": 9},
            {"country": "united kingdom", "value": 4},
        ],
    }), encoding="utf-8")
    (tmp_path / "b.json").write_text(json.dumps({
        "countries": {
            "South Korea": 5,
            "The Democratic Republic of the Congo": 6,
            "Atlantis": 7,
            "Lemuria": 8,
        },
    }), encoding="utf-8")
    (tmp_path / "c.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "d.json").write_text("[1, 2]", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path


class TestAudit:
    def test_counts_per_strategy(self, data_dir):
        report = audit(data_dir)
        assert report.by_strategy["exact"] == {
            ("South Korea", "Korea, Republic of"): 2,
            ("Korea, Republic of", "Korea, Republic of"): 1,
        }
        assert report.by_strategy["case_insensitive"] == {("united kingdom", "United Kingdom"): 1}
        assert report.by_strategy["partial"] == {
            ("The Democratic Republic of the Congo", "Congo, Democratic Republic of the"): 1,
        }

    def test_unmapped_bucket(self, data_dir):
        report = audit(data_dir)
        assert report.by_strategy["unmapped"] == {("Atlantis", "Atlantis"): 2, ("Lemuria", "Lemuria"): 1}
        assert report.unmapped() == ["Atlantis", "Lemuria"]

    def test_aggregates_not_counted(self, data_dir):
        report = audit(data_dir)
        names = {raw for counts in report.by_strategy.values() for raw, _ in counts}
        assert "World" not in names

    def test_malformed_files_skipped(self, data_dir):
        report = audit(data_dir)
        assert report.scanned == ["a.json", "b.json"]
        assert report.skipped == ["c.json", "d.json"]

    def test_empty_directory(self, tmp_path):
        report = audit(tmp_path)
        assert report.scanned == []
        assert report.unmapped() == []


class TestSuggestions:
    def test_candidates_per_unmapped_name(self):
        canon = NameCanonicalizer(
            table=CanonicalCountryTable([("Guinea", "Guinea"), ("Papua New Guinea", "Papua New Guinea")]),
            partial=PartialMatchTable([]),
            config=CanonicalizerConfig(warn_unmapped=False),
        )
        assert suggest_mappings(["New Guinea", "Atlantis"], canon) == {
            "New Guinea": ["Guinea", "Papua New Guinea"],
        }


class TestMain:
    def test_prints_report(self, data_dir, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["audit_country_names.py", str(data_dir), "--show-partial"])
        main()
        out = capsys.readouterr().out
        assert "Scanned 2 files, skipped 2" in out
        assert "unmapped (2 distinct)" in out
        assert "Atlantis -> Atlantis" in out
        assert "The Democratic Republic of the Congo -> Congo, Democratic Republic of the" in out
