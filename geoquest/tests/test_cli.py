"""
Tests for the command-line entrypoint.
"""

from __future__ import annotations

import json

from geoquest.__main__ import main


class TestCanonicalizeCommand:
    def test_prints_key_and_strategy(self, capsys):
        assert main(["canonicalize", "South Korea", "Atlantis"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "South Korea -> Korea, Republic of (exact)"
        assert out[1] == "Atlantis -> Atlantis (unmapped)"


class TestCheckCommand:
    def test_correct_guess(self, capsys):
        assert main(["check", "hdi", "--title", "Human Development Index"]) == 0
        assert capsys.readouterr().out.strip() == "correct (acronym)"

    def test_wrong_guess(self, capsys):
        assert main(["check", "rainfall", "--title", "Human Development Index", "--answer", "hdi"]) == 1
        assert capsys.readouterr().out.strip() == "incorrect"


class TestSummarizeCommand:
    def test_json_output(self, capsys):
        assert main(["summarize", "5", "1", "3", "2", "4"]) == 0
        assert json.loads(capsys.readouterr().out) == {"min": 1, "q1": 2, "median": 3, "q3": 4, "max": 5}


class TestColorCommand:
    def test_explicit_colors(self, capsys):
        assert main(["color", "0.5", "--colors", "#000000", "#ffffff"]) == 0
        assert capsys.readouterr().out.strip() == "#808080"

    def test_named_palette(self, capsys):
        assert main(["color", "1", "--palette", "blue"]) == 0
        assert capsys.readouterr().out.strip() == "#1976d2"

    def test_unknown_palette(self, capsys):
        assert main(["color", "1", "--palette", "rainbow"]) == 2
        assert "Unknown palette" in capsys.readouterr().err


class TestBuildCommand:
    def test_builds_quiz_json(self, tmp_path, capsys):
        path = tmp_path / "coffee_consumption.json"
        path.write_text(json.dumps({
            "title": "Coffee Consumption",
            "data": [
                {"country": "Finland", "value": 12},
                {"country": "USA", "value": 4.2},
            ],
        }), encoding="utf-8")

        assert main(["build", str(path), "--strategy", "category", "--category", "culture"]) == 0
        quiz = json.loads(capsys.readouterr().out)
        assert quiz["id"] == "coffee_consumption"
        assert set(quiz["countries"]) == {"Finland", "United States of America"}
        assert quiz["palette"]["name"] == "culture"

    def test_empty_dataset_fails(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"title": "Empty", "data": []}), encoding="utf-8")
        assert main(["build", str(path)]) == 1
        assert "Cannot build quiz" in capsys.readouterr().err
