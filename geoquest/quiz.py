"""
Builds a colored quiz from one raw dataset.

Accepted dataset shapes:
  {"title": ..., "data": [{"country": ..., "value": ..., "unit": ...}, ...]}
  {"title": ..., "data": {"<country>": {"value": ..., "unit": ...}, ...}}
  {"title": ..., "countries": {"<country>": {"value": ...} | <number>, ...}}

Every country name is canonicalized before records are merged, so two
spellings of one country collapse into a single map entity (first record wins).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional

from pydantic import ValidationError

from geoquest.canonicalize import NameCanonicalizer, get_canonicalizer
from geoquest.color_scale import ColorScaleEngine, ValueDistribution, get_engine
from geoquest.config import get_settings
from geoquest.models import ColoredEntity, DatasetRecord, Quiz
from geoquest.palettes import PaletteStrategy, pick_palette

logger = logging.getLogger(__name__)

# Aggregate rows some datasets carry alongside real countries
AGGREGATE_NAMES = frozenset({"World", "Earth", "Antarctica"})

# Title words shorter than this never become tags or answer variations
_MIN_KEYWORD_LENGTH = 4


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def iter_records(dataset: Mapping[str, Any], value_field: str = "value") -> Iterator[DatasetRecord]:
    """Yield numeric records from any supported dataset shape, skipping the rest."""
    rows = dataset.get("data")
    if rows is None:
        rows = dataset.get("countries", {})

    if isinstance(rows, list):
        for item in rows:
            if not isinstance(item, Mapping):
                continue
            value = item.get(value_field)
            if not item.get("country") or not _is_number(value):
                continue
            yield DatasetRecord(country=str(item["country"]), value=value, unit=item.get("unit"))
    elif isinstance(rows, Mapping):
        for country, entry in rows.items():
            if isinstance(entry, Mapping):
                value, unit = entry.get(value_field), entry.get("unit")
            else:
                value, unit = entry, None
            if not _is_number(value):
                continue
            yield DatasetRecord(country=str(country), value=value, unit=unit)


def title_keywords(title: str) -> list[str]:
    words: list[str] = []
    for word in title.lower().split():
        if len(word) >= _MIN_KEYWORD_LENGTH and word not in words:
            words.append(word)
    return words


@dataclass
class QuizBuilder:
    canonicalizer: NameCanonicalizer = field(default_factory=get_canonicalizer)
    engine: ColorScaleEngine = field(default_factory=get_engine)
    strategy: PaletteStrategy = field(
        default_factory=lambda: PaletteStrategy(get_settings().palettes.strategy)
    )
    rng: Optional[random.Random] = None

    def merge_records(self, dataset: Mapping[str, Any], value_field: str = "value") -> dict[str, DatasetRecord]:
        """Canonicalize every record; later spellings of an already-seen key are dropped."""
        merged: dict[str, DatasetRecord] = {}
        for record in iter_records(dataset, value_field):
            if record.country in AGGREGATE_NAMES:
                continue
            key = self.canonicalizer.canonicalize(record.country)
            if key in merged:
                logger.debug("Duplicate record for %r (%r), keeping first", key, record.country)
                continue
            merged[key] = record
        return merged

    def build(
        self,
        dataset: Mapping[str, Any],
        quiz_id: str,
        category: Optional[str] = None,
        value_field: str = "value",
    ) -> Quiz:
        title = dataset.get("title") or quiz_id.replace("_", " ")
        records = self.merge_records(dataset, value_field)
        if not records:
            raise ValueError(f"No numeric records found in dataset {quiz_id!r}")

        values = {key: record.value for key, record in records.items()}
        distribution = ValueDistribution.from_values(values.values())
        category = category or dataset.get("category") or "general"
        palette = pick_palette(
            category,
            cardinality=len(set(distribution.sorted_values)),
            strategy=self.strategy,
            rng=self.rng,
        )
        colors = self.engine.colorize(values, palette)

        variations = dataset.get("answer_variations")
        if not variations:
            variations = [title.lower(), *title_keywords(title)]

        try:
            quiz = Quiz(
                id=quiz_id,
                title=title,
                description=dataset.get("description") or f"Countries colored by {title.lower()}",
                category=category,
                tags=dataset.get("tags") or title_keywords(title),
                answer_variations=variations,
                palette=palette.model_copy(update={"default_color": self.engine.config.default_color}),
                summary=distribution.summary,
                countries={
                    key: ColoredEntity(value=record.value, unit=record.unit or "count", color=colors[key])
                    for key, record in records.items()
                },
            )
        except ValidationError as e:
            raise ValueError(f"Dataset {quiz_id!r} has malformed metadata: {e}") from e

        logger.info(
            "Built quiz %s: %d countries, palette %s", quiz_id, len(quiz.countries), palette.name
        )
        return quiz
