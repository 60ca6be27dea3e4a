"""
Pydantic models shared by the answer, color and quiz layers.
These are pure data objects with no I/O.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ── Answers ───────────────────────────────────────────────────────────

class QuizAnswerSpec(BaseModel):
    """Canonical title plus the answer phrases a guess is matched against."""
    title: str
    answer_variations: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("answer_variations", mode="before")
    @classmethod
    def normalize_variations(cls, v):
        """Lowercase and trim phrases, dropping blanks and repeats but keeping order."""
        if v is None:
            return []
        out: list[str] = []
        for phrase in v:
            norm = str(phrase).strip().lower()
            if norm and norm not in out:
                out.append(norm)
        return out

    @property
    def accepted_phrases(self) -> list[str]:
        phrases = list(self.answer_variations)
        title = self.title.strip().lower()
        if title and title not in phrases:
            phrases.append(title)
        return phrases


# ── Colors ────────────────────────────────────────────────────────────

class Palette(BaseModel):
    """Two colors give an eased gradient, three or more a multi-stop gradient."""
    name: str
    colors: tuple[str, ...] = Field(..., min_length=2)
    default_color: str = "#ffffff"

    model_config = {"frozen": True}

    @property
    def is_multi_stop(self) -> bool:
        return len(self.colors) >= 3

    @property
    def min_color(self) -> str:
        return self.colors[0]

    @property
    def max_color(self) -> str:
        return self.colors[-1]

    def endpoints(self) -> "Palette":
        """The same palette reduced to its first and last stop."""
        if not self.is_multi_stop:
            return self
        return Palette(
            name=self.name,
            colors=(self.min_color, self.max_color),
            default_color=self.default_color,
        )


class DistributionSummary(BaseModel):
    """Legend statistics picked by index from the sorted values (no interpolation)."""
    min: float
    q1: float
    median: float
    q3: float
    max: float

    model_config = {"frozen": True}


# ── Quizzes ───────────────────────────────────────────────────────────

class DatasetRecord(BaseModel):
    """One row of a raw dataset, before its country name is canonicalized."""
    country: str
    value: float
    unit: Optional[str] = None

    model_config = {"extra": "ignore"}


class ColoredEntity(BaseModel):
    value: float
    unit: str = "count"
    color: str


class Quiz(BaseModel):
    id: str
    title: str
    description: str
    category: str = "general"
    tags: list[str] = Field(default_factory=list)
    answer_variations: list[str] = Field(default_factory=list)
    palette: Palette
    summary: DistributionSummary
    # Keyed by canonical map key
    countries: dict[str, ColoredEntity] = Field(default_factory=dict)

    def answer_spec(self) -> QuizAnswerSpec:
        return QuizAnswerSpec(title=self.title, answer_variations=self.answer_variations)
