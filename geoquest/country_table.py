"""
Country-name tables for the map layer.

Every dataset spells countries its own way ("Korea, Rep.", "South Korea",
"Republic of Korea"). The map layer only understands one name per shape, so
each surface form is mapped to exactly one canonical key.

Design:
  - CanonicalCountryTable: case-sensitive variant -> canonical key, many-to-one.
    Declaration order is kept; a variant may never point at two keys.
  - PartialMatchTable: lowercase substring pattern -> canonical key, consulted
    only after every exact lookup failed. First pattern in declaration order
    wins, so more specific patterns are declared before the general ones
    ("democratic republic of the congo" before "congo").
  - Canonical keys that carry a parenthetical qualifier are also registered in
    their stripped form, because names are stripped before lookup.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Optional


class CanonicalCountryTable:
    """Immutable ordered mapping from raw name variant to canonical key."""

    def __init__(self, pairs: Iterable[tuple[str, str]]):
        exact: dict[str, str] = {}
        for variant, canonical in pairs:
            existing = exact.get(variant)
            if existing is not None and existing != canonical:
                raise ValueError(
                    f"Variant {variant!r} maps to both {existing!r} and {canonical!r}"
                )
            exact.setdefault(variant, canonical)

        folded: dict[str, str] = {}
        for variant, canonical in exact.items():
            # First variant in table order wins for a given lowercase spelling
            folded.setdefault(variant.lower(), canonical)

        self._pairs = tuple(exact.items())
        self._exact = MappingProxyType(exact)
        self._folded = MappingProxyType(folded)
        self._canonical = frozenset(exact.values())

    def get(self, variant: str) -> Optional[str]:
        return self._exact.get(variant)

    def get_case_insensitive(self, variant: str) -> Optional[str]:
        return self._folded.get(variant.lower())

    def canonical_keys(self) -> frozenset[str]:
        return self._canonical

    def variants_of(self, canonical: str) -> list[str]:
        """Every variant that maps to `canonical`, in table order, excluding the key itself."""
        return [v for v, c in self._pairs if c == canonical and v != canonical]

    def __contains__(self, variant: object) -> bool:
        return variant in self._exact

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


class PartialMatchTable:
    """Ordered (pattern, canonical key) cascade; first contained pattern wins."""

    def __init__(self, pairs: Iterable[tuple[str, str]]):
        ordered: list[tuple[str, str]] = []
        for pattern, canonical in pairs:
            pattern = pattern.lower()
            if not pattern:
                raise ValueError(f"Empty partial-match pattern for {canonical!r}")
            ordered.append((pattern, canonical))
        self._pairs = tuple(ordered)

    def first_match(self, text: str) -> Optional[tuple[str, str]]:
        """Return the first (pattern, key) whose pattern occurs in lowercase `text`."""
        if not text:
            return None
        for pattern, canonical in self._pairs:
            if pattern in text:
                return pattern, canonical
        return None

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


# ══════════════════════════════════════════════════════════════════════
# CANONICAL COUNTRY TABLE
# ══════════════════════════════════════════════════════════════════════

_COUNTRY_PAIRS: list[tuple[str, str]] = []


def _add(variants: list[str], canonical: str) -> None:
    # The canonical key always maps to itself
    for variant in [canonical, *variants]:
        _COUNTRY_PAIRS.append((variant, canonical))


# ── Names that differ between datasets and the map layer ─────────────

_add(["United States", "USA", "US", "U.S.", "U.S.A.", "America"], "United States of America")
_add(["Democratic Republic of the Congo", "DR Congo", "DRC", "Congo, Dem. Rep.",
      "Congo-Kinshasa"], "Congo, Democratic Republic of the")
_add(["Republic of the Congo", "Congo", "Congo, Rep.", "Congo-Brazzaville"],
     "Congo, Republic of the")
_add(["UK", "Great Britain", "Britain",
      "United Kingdom of Great Britain and Northern Ireland"], "United Kingdom")
_add(["Czechia"], "Czech Republic")
_add(["Ivory Coast", "Cote d'Ivoire", "Côte d’Ivoire"], "Côte d'Ivoire")
_add(["North Korea", "Korea, Dem. People's Rep.", "Korea, North", "DPRK",
      "Democratic People's Republic of Korea"], "Korea, Democratic People's Republic of")
_add(["South Korea", "Korea, Rep.", "Korea, South", "Republic of Korea", "Korea"],
     "Korea, Republic of")
_add(["North Macedonia", "Macedonia", "Republic of North Macedonia"],
     "Macedonia, The Former Yugoslav Republic of")
_add(["East Timor"], "Timor-Leste")
_add(["Eswatini"], "Swaziland")
_add(["Palestine", "State of Palestine", "West Bank and Gaza",
      "Palestinian Territories"], "Palestine, State of")
_add(["Vatican City", "Vatican", "Holy See"], "Holy See (Vatican City State)")
_add(["São Tomé and Príncipe", "Sao Tome & Principe"], "Sao Tome and Principe")
_add([], "Saint Barthélemy")
_add(["Saint Martin", "St. Martin"], "Saint Martin (French part)")
_add(["Sint Maarten"], "Sint Maarten (Dutch part)")
_add(["Macau"], "Macao")
_add(["Hong Kong SAR, China", "China, Hong Kong SAR"], "Hong Kong")
_add(["Macao SAR, China", "China, Macao SAR"], "Macao")
_add(["Taiwan", "Chinese Taipei"], "Taiwan, Province of China")
_add(["Moldova", "Republic of Moldova"], "Moldova, Republic of")
_add(["Russia"], "Russian Federation")
_add(["Iran", "Iran, Islamic Rep."], "Iran, Islamic Republic of")
_add(["Bolivia"], "Bolivia, Plurinational State of")
_add(["Tanzania", "United Republic of Tanzania"], "Tanzania, United Republic of")
_add(["Venezuela", "Venezuela, RB"], "Venezuela, Bolivarian Republic of")
_add(["Vietnam"], "Viet Nam")
_add(["Laos", "Lao PDR"], "Lao People's Democratic Republic")
_add(["Syria"], "Syrian Arab Republic")
_add(["Brunei"], "Brunei Darussalam")
_add(["Cape Verde"], "Cabo Verde")
_add(["Micronesia", "Micronesia, Fed. Sts."], "Micronesia, Federated States of")
_add(["U.S. Virgin Islands", "US Virgin Islands", "United States Virgin Islands",
      "Virgin Islands of the United States"],
     "Virgin Islands, U.S.")
_add(["British Virgin Islands"], "Virgin Islands, British")
_add(["U.S. Minor Outlying Islands", "US Minor Outlying Islands"],
     "United States Minor Outlying Islands")
_add(["Saint Helena, Ascension and Tristan da Cunha"], "Saint Helena")
_add(["Denmark Kingdom of Denmark"], "Denmark")
_add(["Turkiye", "Türkiye"], "Turkey")
_add(["Egypt, Arab Rep."], "Egypt")
_add(["Yemen, Rep."], "Yemen")
_add(["Gambia, The", "The Gambia"], "Gambia")
_add(["Bahamas, The", "The Bahamas"], "Bahamas")
_add(["Kyrgyz Republic"], "Kyrgyzstan")
_add(["Slovak Republic"], "Slovakia")
_add(["St. Lucia"], "Saint Lucia")
_add(["St. Kitts and Nevis"], "Saint Kitts and Nevis")
_add(["St. Vincent and the Grenadines"], "Saint Vincent and the Grenadines")
_add(["UAE"], "United Arab Emirates")
_add(["Burma"], "Myanmar")
_add(["Holland", "The Netherlands"], "Netherlands")

# ── Territories and dependencies ──────────────────────────────────────

for _name in [
    "Bermuda", "Jersey", "Guernsey", "Aruba", "Curaçao", "Puerto Rico", "Guam",
    "American Samoa", "Tokelau", "Anguilla", "Kosovo", "Isle of Man",
    "Saint Pierre and Miquelon", "Niue", "Montserrat", "Western Sahara",
    "Greenland", "Gibraltar",
]:
    _add([], _name)

# ── Names every source already agrees on ──────────────────────────────

for _name in [
    "France", "Norway", "South Sudan", "Serbia", "Bosnia and Herzegovina",
    "Belarus", "Ukraine", "China", "India", "Brazil", "Australia", "Canada",
    "Argentina", "Kazakhstan", "Algeria", "Saudi Arabia", "Mexico", "Indonesia",
    "Sudan", "Libya", "Mongolia", "Peru", "Chad", "Niger", "Angola", "Mali",
    "South Africa", "Colombia", "Ethiopia", "Mauritania", "Nigeria", "Pakistan",
    "Namibia", "Mozambique", "Chile", "Zambia", "Afghanistan", "Somalia",
    "Central African Republic", "Madagascar", "Botswana", "Kenya", "Thailand",
    "Spain", "Turkmenistan", "Cameroon", "Papua New Guinea", "Sweden",
    "Uzbekistan", "Morocco", "Iraq", "Paraguay", "Zimbabwe", "Japan", "Germany",
    "Finland", "Malaysia", "Poland", "Oman", "Italy", "Philippines", "Ecuador",
    "Burkina Faso", "New Zealand", "Gabon", "Guinea", "Uganda", "Ghana",
    "Romania", "Guyana", "Senegal", "Cambodia", "Uruguay", "Suriname", "Tunisia",
    "Bangladesh", "Nepal", "Tajikistan", "Greece", "Nicaragua", "Malawi",
    "Eritrea", "Benin", "Honduras", "Liberia", "Bulgaria", "Cuba", "Guatemala",
    "Iceland", "Hungary", "Portugal", "Jordan", "Azerbaijan", "Austria",
    "Panama", "Sierra Leone", "Ireland", "Georgia", "Sri Lanka", "Lithuania",
    "Latvia", "Togo", "Croatia", "Costa Rica", "Dominican Republic", "Estonia",
    "Switzerland", "Bhutan", "Guinea-Bissau", "Belgium", "Lesotho", "Armenia",
    "Solomon Islands", "Albania", "Equatorial Guinea", "Burundi", "Haiti",
    "Rwanda", "Djibouti", "Belize", "Israel", "El Salvador", "Slovenia", "Fiji",
    "Kuwait", "Montenegro", "Vanuatu", "Qatar", "Jamaica", "Lebanon", "Cyprus",
    "Trinidad and Tobago", "Samoa", "Luxembourg", "Mauritius", "Comoros",
    "Kiribati", "Bahrain", "Dominica", "Tonga", "Singapore", "Andorra", "Palau",
    "Seychelles", "Antigua and Barbuda", "Barbados", "Grenada", "Malta",
    "Maldives", "Marshall Islands", "Liechtenstein", "San Marino", "Tuvalu",
    "Nauru", "Monaco",
]:
    _add([], _name)


COUNTRY_TABLE = CanonicalCountryTable(_COUNTRY_PAIRS)


# ══════════════════════════════════════════════════════════════════════
# PARTIAL MATCH TABLE
# ══════════════════════════════════════════════════════════════════════

# Declaration order is the tie-break when several patterns occur in one name.
_PARTIAL_PAIRS: list[tuple[str, str]] = [
    ("democratic republic of the congo", "Congo, Democratic Republic of the"),
    ("democratic republic of congo", "Congo, Democratic Republic of the"),
    ("congo, dem", "Congo, Democratic Republic of the"),
    ("dr congo", "Congo, Democratic Republic of the"),
    ("kinshasa", "Congo, Democratic Republic of the"),
    ("republic of the congo", "Congo, Republic of the"),
    ("brazzaville", "Congo, Republic of the"),
    ("congo", "Congo, Republic of the"),
    ("democratic people's republic of korea", "Korea, Democratic People's Republic of"),
    ("korea, dem", "Korea, Democratic People's Republic of"),
    ("korea, democratic", "Korea, Democratic People's Republic of"),
    ("north korea", "Korea, Democratic People's Republic of"),
    ("south korea", "Korea, Republic of"),
    ("korea", "Korea, Republic of"),
    ("united states virgin", "Virgin Islands, U.S."),
    ("minor outlying", "United States Minor Outlying Islands"),
    ("united states", "United States of America"),
    ("united kingdom", "United Kingdom"),
    ("great britain", "United Kingdom"),
    ("england", "United Kingdom"),
    ("scotland", "United Kingdom"),
    ("northern ireland", "United Kingdom"),
    ("ireland", "Ireland"),
    ("russia", "Russian Federation"),
    ("iran", "Iran, Islamic Republic of"),
    ("syria", "Syrian Arab Republic"),
    ("viet", "Viet Nam"),
    ("laos", "Lao People's Democratic Republic"),
    ("lao people", "Lao People's Democratic Republic"),
    ("czech", "Czech Republic"),
    ("macedonia", "Macedonia, The Former Yugoslav Republic of"),
    ("bolivia", "Bolivia, Plurinational State of"),
    ("venezuela", "Venezuela, Bolivarian Republic of"),
    ("tanzania", "Tanzania, United Republic of"),
    ("moldova", "Moldova, Republic of"),
    ("micronesia", "Micronesia, Federated States of"),
    ("taiwan", "Taiwan, Province of China"),
    ("hong kong", "Hong Kong"),
    ("macau", "Macao"),
    ("macao", "Macao"),
    ("ivoire", "Côte d'Ivoire"),
    ("ivory coast", "Côte d'Ivoire"),
    ("timor", "Timor-Leste"),
    ("palestin", "Palestine, State of"),
    ("gaza", "Palestine, State of"),
    ("vatican", "Holy See (Vatican City State)"),
    ("holy see", "Holy See (Vatican City State)"),
    ("brunei", "Brunei Darussalam"),
    ("cabo verde", "Cabo Verde"),
    ("cape verde", "Cabo Verde"),
    ("eswatini", "Swaziland"),
    ("swazi", "Swaziland"),
    ("gambia", "Gambia"),
    ("bahamas", "Bahamas"),
    ("turkey", "Turkey"),
    ("türkiye", "Turkey"),
    ("turkiye", "Turkey"),
    ("sao tome", "Sao Tome and Principe"),
    ("são tomé", "Sao Tome and Principe"),
    ("sint maarten", "Sint Maarten (Dutch part)"),
    ("saint martin", "Saint Martin (French part)"),
    ("virgin islands, u.s", "Virgin Islands, U.S."),
    ("u.s. virgin", "Virgin Islands, U.S."),
    ("british virgin", "Virgin Islands, British"),
    ("virgin islands, british", "Virgin Islands, British"),
    ("kyrgyz", "Kyrgyzstan"),
    ("slovak republic", "Slovakia"),
    ("egypt", "Egypt"),
    ("yemen", "Yemen"),
    ("saint helena", "Saint Helena"),
    ("greenland", "Greenland"),
]

PARTIAL_MATCH_TABLE = PartialMatchTable(_PARTIAL_PAIRS)
