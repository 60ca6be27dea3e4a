"""
Value distribution summaries and value -> color mapping.

Two palette shapes behave differently on purpose:
  - Two stops: the ratio is eased first (sqrt below the midpoint, power 1.5
    above it) so the extremes stand out, then each channel is interpolated.
  - Three or more stops: [0, 1] is split into equal segments and the color is
    interpolated linearly inside the segment, with no easing.

Malformed palette colors never raise; they are replaced by a neutral fallback.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence, Union

import numpy as np

from geoquest.config import ColorConfig, get_settings
from geoquest.models import DistributionSummary, Palette

logger = logging.getLogger(__name__)

NEUTRAL_FALLBACK = "#cccccc"

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

PaletteLike = Union[Palette, Sequence[str]]


# ── Colors ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RGBColor:
    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_hex(cls, value: object) -> Optional["RGBColor"]:
        """Parse "#rgb" or "#rrggbb"; None for anything else."""
        if not isinstance(value, str):
            return None
        value = value.strip()
        if not _HEX_RE.match(value):
            return None
        digits = value[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def parse_hex_color(value: object, fallback: str = NEUTRAL_FALLBACK) -> RGBColor:
    color = RGBColor.from_hex(value)
    if color is not None:
        return color
    logger.debug("Malformed color %r, using fallback %s", value, fallback)
    return RGBColor.from_hex(fallback) or RGBColor.from_hex(NEUTRAL_FALLBACK)


def ease_ratio(ratio: float) -> float:
    """Stretch both ends of the scale and compress the middle."""
    if ratio < 0.5:
        return math.sqrt(ratio * 2) * 0.5
    return 0.5 + ((ratio - 0.5) * 2) ** 1.5 * 0.5


def _clamp_ratio(ratio: object) -> float:
    try:
        value = float(ratio)
    except (TypeError, ValueError):
        logger.debug("Non-numeric ratio %r treated as 0", ratio)
        return 0.0
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


def _lerp_channel(a: int, b: int, t: float) -> int:
    # Round half up, matching the browser's Math.round
    return int(math.floor(a + (b - a) * t + 0.5))


def _lerp(c1: RGBColor, c2: RGBColor, t: float) -> RGBColor:
    return RGBColor(_lerp_channel(c1.r, c2.r, t), _lerp_channel(c1.g, c2.g, t), _lerp_channel(c1.b, c2.b, t))


# ── Distributions ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class ValueDistribution:
    """Sorted values of one quiz plus their legend summary."""
    sorted_values: tuple[float, ...]
    summary: DistributionSummary

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "ValueDistribution":
        arr = np.sort(np.asarray(list(values), dtype=float))
        n = int(arr.size)
        if n == 0:
            raise ValueError("Cannot summarize an empty distribution")
        if np.isnan(arr).any():
            raise ValueError("Distribution contains NaN values")

        def at(p: float) -> float:
            return float(arr[math.floor(n * p)])

        summary = DistributionSummary(
            min=at(0.0),
            q1=at(0.25),
            median=at(0.5),
            q3=at(0.75),
            max=float(arr[n - 1]),
        )
        return cls(tuple(float(v) for v in arr), summary)

    def rank_ratio(self, value: float) -> float:
        """Position of the value's first occurrence, scaled to [0, 1]."""
        n = len(self.sorted_values)
        if n == 1:
            return 0.0
        idx = int(np.searchsorted(self.sorted_values, value, side="left"))
        return min(idx, n - 1) / (n - 1)

    def linear_ratio(self, value: float) -> float:
        lo, hi = self.summary.min, self.summary.max
        if hi == lo:
            return 0.0
        return max(0.0, min(1.0, (value - lo) / (hi - lo)))

    def ratio(self, value: float, mode: str = "rank") -> float:
        if mode == "linear":
            return self.linear_ratio(value)
        return self.rank_ratio(value)


def summarize(values: Iterable[float]) -> DistributionSummary:
    """min / q1 / median / q3 / max by index into the sorted values."""
    return ValueDistribution.from_values(values).summary


# ── Engine ────────────────────────────────────────────────────────────

class ColorScaleEngine:
    def __init__(self, config: ColorConfig | None = None):
        self.config = config or get_settings().colors

    def color_for(self, ratio: object, palette: PaletteLike) -> RGBColor:
        stops = list(palette.colors) if isinstance(palette, Palette) else list(palette)
        if not stops:
            return parse_hex_color(self.config.fallback_color)

        colors = [parse_hex_color(c, self.config.fallback_color) for c in stops]
        r = _clamp_ratio(ratio)

        if len(colors) == 1:
            return colors[0]
        if len(colors) == 2:
            return _lerp(colors[0], colors[1], ease_ratio(r))

        segments = len(colors) - 1
        index = min(math.floor(r * segments), segments - 1)
        local = r * segments - index
        return _lerp(colors[index], colors[index + 1], local)

    def color_hex(self, ratio: object, palette: PaletteLike) -> str:
        return self.color_for(ratio, palette).to_hex()

    def colorize(self, values: Mapping[str, float], palette: PaletteLike) -> dict[str, str]:
        """Color every entity by its value's position in the whole set."""
        if not values:
            return {}
        distribution = ValueDistribution.from_values(values.values())
        return {
            key: self.color_hex(distribution.ratio(value, self.config.ratio_mode), palette)
            for key, value in values.items()
        }

    def legend_stops(self, summary: DistributionSummary, palette: PaletteLike) -> list[tuple[float, str]]:
        """(value, color) pairs for the legend: min, q1, median, q3, max."""
        points = [
            (summary.min, 0.0),
            (summary.q1, 0.25),
            (summary.median, 0.5),
            (summary.q3, 0.75),
            (summary.max, 1.0),
        ]
        return [(value, self.color_hex(ratio, palette)) for value, ratio in points]


_engine: Optional[ColorScaleEngine] = None


def get_engine() -> ColorScaleEngine:
    global _engine
    if _engine is None:
        _engine = ColorScaleEngine()
    return _engine


def color_for(ratio: object, palette: PaletteLike) -> RGBColor:
    return get_engine().color_for(ratio, palette)
