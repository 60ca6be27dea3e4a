from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from geoquest.canonicalize import NameCanonicalizer, NameMatch
from geoquest.config import CanonicalizerConfig
from geoquest.logging_config import setup_logging
from geoquest.quiz import AGGREGATE_NAMES, iter_records

logger = logging.getLogger(__name__)


@dataclass
class AuditReport:
    # strategy value -> Counter of (raw name, resolved key)
    by_strategy: dict[str, Counter] = field(
        default_factory=lambda: {m.value: Counter() for m in NameMatch}
    )
    scanned: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def unmapped(self) -> list[str]:
        """Distinct cleaned names that fell through every lookup, first seen first."""
        names: list[str] = []
        for _raw, key in self.by_strategy[NameMatch.UNMAPPED.value]:
            if key not in names:
                names.append(key)
        return names


def _read_json(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def audit(data_dir: Path, value_field: str = "value", canonicalizer: NameCanonicalizer | None = None) -> AuditReport:
    """Count, per lookup strategy, how often each raw country name resolves that way."""
    # Warnings would repeat what the report already lists
    canonicalizer = canonicalizer or NameCanonicalizer(config=CanonicalizerConfig(warn_unmapped=False))
    report = AuditReport()

    for path in sorted(data_dir.glob("*.json")):
        try:
            dataset = _read_json(path)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Skipping %s: %s", path.name, e)
            report.skipped.append(path.name)
            continue
        if not isinstance(dataset, dict):
            report.skipped.append(path.name)
            continue

        report.scanned.append(path.name)
        for record in iter_records(dataset, value_field):
            if record.country in AGGREGATE_NAMES:
                continue
            result = canonicalizer.resolve(record.country)
            report.by_strategy[result.strategy.value][(record.country, result.key)] += 1

    return report


def suggest_mappings(
    names: Iterable[str], canonicalizer: NameCanonicalizer, limit: int = 3
) -> dict[str, list[str]]:
    """Up to `limit` candidate keys per unmapped name; names without candidates are left out."""
    suggestions: dict[str, list[str]] = {}
    for name in names:
        candidates = canonicalizer.suggest(name, limit=limit)
        if candidates:
            suggestions[name] = candidates
    return suggestions


def main() -> None:
    parser = argparse.ArgumentParser(description="Report country names the canonical table does not cover.")
    parser.add_argument("data_dir", type=Path)
    parser.add_argument("--value-field", default="value")
    parser.add_argument("--show-partial", action="store_true", help="Also list substring matches")
    args = parser.parse_args()

    setup_logging()
    canonicalizer = NameCanonicalizer(config=CanonicalizerConfig(warn_unmapped=False))
    report = audit(args.data_dir, args.value_field, canonicalizer)
    print(f"Scanned {len(report.scanned)} files, skipped {len(report.skipped)}")

    sections = [NameMatch.UNMAPPED.value]
    if args.show_partial:
        sections.append(NameMatch.PARTIAL.value)

    for section in sections:
        counts = report.by_strategy[section]
        print(f"\n{section} ({len(counts)} distinct)")
        for (raw, key), count in counts.most_common():
            print(f"  {count:4d}  {raw} -> {key}")

    suggestions = suggest_mappings(report.unmapped(), canonicalizer)
    if suggestions:
        print("\nsuggestions")
        for name, candidates in suggestions.items():
            print(f"  {name!r} might map to: {', '.join(candidates)}")


if __name__ == "__main__":
    main()
