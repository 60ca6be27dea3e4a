"""
Synonym table for answer matching.

Each entry is (concept, synonyms). When an accepted answer phrase contains
the concept as a substring, a guess that contains (or is contained in) one of
the synonyms is accepted. Synonyms shorter than the configured minimum
(4 characters by default) are ignored at match time, so short entries such as
"co2" are harmless but inert.
"""

from __future__ import annotations

from typing import Iterable, Iterator


class SynonymTable:
    """Immutable ordered (concept, synonyms) pairs, all lowercase."""

    def __init__(self, entries: Iterable[tuple[str, Iterable[str]]]):
        self._entries = tuple(
            (concept.strip().lower(), tuple(s.strip().lower() for s in synonyms))
            for concept, synonyms in entries
        )

    def concepts_in(self, phrase: str) -> Iterator[tuple[str, tuple[str, ...]]]:
        """Entries whose concept occurs in `phrase`, in declaration order."""
        for concept, synonyms in self._entries:
            if concept and concept in phrase:
                yield concept, synonyms

    def __iter__(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


SYNONYM_TABLE = SynonymTable([
    # ── Demographics ──────────────────────────────────────────────────
    ("population", ["people", "inhabitants", "residents", "populace", "citizens"]),
    ("density", ["crowding", "crowdedness", "people per square kilometer"]),
    ("fertility", ["birth rate", "births per woman", "children per woman"]),
    ("median age", ["average age", "age of population"]),
    ("literacy", ["reading", "literate", "able to read"]),
    ("height", ["tallness", "stature", "tall people"]),
    ("marriage", ["weddings", "married"]),
    # ── Economics ─────────────────────────────────────────────────────
    ("gdp", ["gross domestic product", "economy", "economic output", "economic size"]),
    ("gni", ["gross national income", "national income"]),
    ("wealth", ["rich", "riches", "money", "fortune", "net worth"]),
    ("debt", ["borrowing", "liabilities", "owed"]),
    ("wages", ["salary", "salaries", "income", "earnings", "pay"]),
    ("tax", ["taxes", "taxation"]),
    ("billionaires", ["billionaire", "richest people", "super rich"]),
    ("exports", ["exporting", "shipments abroad", "trade"]),
    ("imports", ["importing", "trade"]),
    ("currency", ["money", "exchange rate"]),
    # ── Geography ─────────────────────────────────────────────────────
    ("land area", ["size", "territory", "landmass", "surface area"]),
    ("water", ["lakes", "rivers", "inland water"]),
    ("forest", ["trees", "woodland", "woods", "jungle"]),
    ("elevation", ["altitude", "mountain", "highest point", "height above sea"]),
    ("temperature", ["heat", "cold", "climate", "weather"]),
    ("islands", ["island", "archipelago"]),
    ("earthquakes", ["earthquake", "seismic", "quakes", "tremors"]),
    ("volcanoes", ["volcano", "volcanic", "eruptions"]),
    ("time zones", ["timezones", "time zone", "hours"]),
    ("arable", ["farmland", "agricultural land", "cropland", "farming"]),
    # ── Consumption and production ────────────────────────────────────
    ("alcohol", ["drinking", "booze", "liquor", "beer"]),
    ("coffee", ["caffeine", "espresso"]),
    ("wine", ["vino", "grapes"]),
    ("consumption", ["intake", "usage", "consumed"]),
    ("production", ["output", "produced", "manufacturing", "producer"]),
    ("emissions", ["pollution", "carbon", "greenhouse", "co2"]),
    ("oil production", ["petroleum", "crude"]),
    # ── Society and technology ────────────────────────────────────────
    ("internet", ["online", "broadband", "connectivity"]),
    ("military", ["army", "armed forces", "troops", "soldiers", "defense"]),
    ("firearms", ["guns", "weapons", "gun ownership"]),
    ("languages", ["tongues", "dialects", "speakers"]),
    ("nobel", ["nobel prize", "laureates"]),
    ("olympic", ["olympics", "medals", "games"]),
    ("world cup", ["football", "soccer", "fifa"]),
    ("unesco", ["heritage sites", "world heritage"]),
    ("human development", ["development", "quality of life", "living standards"]),
])
