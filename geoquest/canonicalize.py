"""
Country-name canonicalization.

Strategy (first success wins, no backtracking):
  1. Strip whitespace and any trailing "(...)" qualifiers
     ("United States (Alaska)" -> "United States")
  2. Exact lookup in the canonical table
  3. Case-insensitive lookup (first table entry in declaration order)
  4. Partial match: first declared pattern contained in the lowercased name
  5. Fall back to the cleaned name itself

Callers must tolerate unmapped names in the output; the table cannot cover
every spelling a dataset may use. A canonicalizer holds nothing but its
tables, so one instance is safely shared; every unmapped lookup is logged
while warnings are enabled.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from geoquest.config import CanonicalizerConfig, get_settings
from geoquest.country_table import (
    COUNTRY_TABLE,
    PARTIAL_MATCH_TABLE,
    CanonicalCountryTable,
    PartialMatchTable,
)

logger = logging.getLogger(__name__)

_TRAILING_QUALIFIER_RE = re.compile(r"\s*\([^()]*\)\s*$")

# Spellings shorter than this never produce an audit suggestion
_MIN_SUGGESTION_LENGTH = 4


class NameMatch(str, Enum):
    EXACT = "exact"
    CASE_INSENSITIVE = "case_insensitive"
    PARTIAL = "partial"
    UNMAPPED = "unmapped"


@dataclass(frozen=True)
class CanonicalName:
    key: str
    strategy: NameMatch
    cleaned: str


def strip_qualifiers(raw: object) -> str:
    """Trim whitespace and drop trailing parenthetical qualifiers."""
    if raw is None:
        return ""
    cleaned = str(raw).strip()
    while True:
        stripped = _TRAILING_QUALIFIER_RE.sub("", cleaned)
        if stripped == cleaned:
            return cleaned
        cleaned = stripped.strip()


class NameCanonicalizer:
    """Maps raw dataset country names onto the map layer's canonical keys."""

    def __init__(
        self,
        table: CanonicalCountryTable = COUNTRY_TABLE,
        partial: PartialMatchTable = PARTIAL_MATCH_TABLE,
        config: CanonicalizerConfig | None = None,
    ):
        self.table = table
        self.partial = partial
        self.config = config or get_settings().canonicalizer

    def canonicalize(self, raw: object) -> str:
        return self.resolve(raw).key

    def resolve(self, raw: object) -> CanonicalName:
        """Canonicalize and report which step produced the key."""
        cleaned = strip_qualifiers(raw)

        key = self.table.get(cleaned)
        if key is not None:
            return CanonicalName(key, NameMatch.EXACT, cleaned)

        key = self.table.get_case_insensitive(cleaned)
        if key is not None:
            logger.debug("Case-insensitive match: %r -> %r", cleaned, key)
            return CanonicalName(key, NameMatch.CASE_INSENSITIVE, cleaned)

        hit = self.partial.first_match(cleaned.lower())
        if hit is not None:
            pattern, key = hit
            logger.debug("Partial match: %r contains %r -> %r", cleaned, pattern, key)
            return CanonicalName(key, NameMatch.PARTIAL, cleaned)

        if self.config.warn_unmapped:
            logger.warning("No mapping found for country: %r", cleaned)
        return CanonicalName(cleaned, NameMatch.UNMAPPED, cleaned)

    def is_canonical(self, key: str) -> bool:
        return key in self.table.canonical_keys()

    def canonical_keys(self) -> frozenset[str]:
        return self.table.canonical_keys()

    def aliases(self, key: object) -> list[str]:
        """Known variants of a canonical key (matched case-insensitively), in table order."""
        wanted = str(key).strip().lower() if key is not None else ""
        if not wanted:
            return []
        for canonical in self._keys_in_order():
            if canonical.lower() == wanted:
                return self.table.variants_of(canonical)
        return []

    def search(self, query: object) -> list[str]:
        """Canonical keys whose key or any variant contains `query` (case-insensitive)."""
        needle = str(query).strip().lower() if query is not None else ""
        if not needle:
            return []
        found: list[str] = []
        for variant, canonical in self.table:
            if canonical not in found and needle in variant.lower():
                found.append(canonical)
        return found

    def suggest(self, name: object, limit: int = 3) -> list[str]:
        """
        Candidate keys for a name the tables do not map, for the audit report.

        A key qualifies when the name contains one of its spellings or one of
        its spellings contains the name. Spellings shorter than
        `_MIN_SUGGESTION_LENGTH` are skipped so that "US" does not suggest the
        United States for every name containing "us".
        """
        needle = strip_qualifiers(name).lower()
        if len(needle) < _MIN_SUGGESTION_LENGTH:
            return []
        found: list[str] = []
        for variant, canonical in self.table:
            spelling = variant.lower()
            if canonical in found or len(spelling) < _MIN_SUGGESTION_LENGTH:
                continue
            if needle in spelling or spelling in needle:
                found.append(canonical)
                if len(found) >= limit:
                    break
        return found

    def _keys_in_order(self) -> list[str]:
        seen: list[str] = []
        for _variant, canonical in self.table:
            if canonical not in seen:
                seen.append(canonical)
        return seen


_canonicalizer: Optional[NameCanonicalizer] = None


def get_canonicalizer() -> NameCanonicalizer:
    global _canonicalizer
    if _canonicalizer is None:
        _canonicalizer = NameCanonicalizer()
    return _canonicalizer


def canonicalize(raw: object) -> str:
    """Canonicalize with the default tables."""
    return get_canonicalizer().canonicalize(raw)
