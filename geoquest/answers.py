"""
Free-text answer matching.

A guess is normalized (trimmed, lowercased) and rejected outright when it is
shorter than `min_guess_length`. It is then tried against every accepted
phrase of the quiz; for each phrase the strategies below run in order and the
first acceptance anywhere ends the search:

  1. exact        - guess == phrase
  2. word overlap - enough phrase tokens share a substring with a guess token
  3. containment  - one string contains the other (both >= 4 chars)
  4. acronym      - guess equals the phrase's initials ("hdi")
  5. synonym      - phrase mentions a concept whose synonym overlaps the guess

Every substring comparison is gated by a minimum length so that incidental
short words ("is", "to") never produce a match.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Optional

from geoquest.config import AnswerConfig, get_settings
from geoquest.models import QuizAnswerSpec
from geoquest.synonyms import SYNONYM_TABLE, SynonymTable

logger = logging.getLogger(__name__)


class AnswerStrategy(str, Enum):
    EXACT = "exact"
    WORD_OVERLAP = "word_overlap"
    CONTAINMENT = "containment"
    ACRONYM = "acronym"
    SYNONYM = "synonym"


def normalize_guess(guess: object) -> str:
    if guess is None:
        return ""
    return str(guess).strip().lower()


class AnswerResolver:
    def __init__(
        self,
        config: AnswerConfig | None = None,
        synonyms: SynonymTable = SYNONYM_TABLE,
    ):
        self.config = config or get_settings().answers
        self.synonyms = synonyms

    def is_correct(self, guess: object, spec: QuizAnswerSpec) -> bool:
        return self.match(guess, spec) is not None

    def match(self, guess: object, spec: QuizAnswerSpec) -> Optional[AnswerStrategy]:
        """Return the strategy that accepted the guess, or None if it is wrong."""
        normalized = normalize_guess(guess)
        if len(normalized) < self.config.min_guess_length:
            logger.debug("Rejected %r: shorter than %d chars", normalized, self.config.min_guess_length)
            return None

        for phrase in spec.accepted_phrases:
            strategy = self._match_phrase(normalized, phrase)
            if strategy is not None:
                logger.debug("Accepted %r against %r via %s", normalized, phrase, strategy.value)
                return strategy

        logger.debug("No phrase of %r accepts %r", spec.title, normalized)
        return None

    def _match_phrase(self, guess: str, phrase: str) -> Optional[AnswerStrategy]:
        if guess == phrase:
            return AnswerStrategy.EXACT
        if self._word_overlap(guess, phrase):
            return AnswerStrategy.WORD_OVERLAP
        if self._containment(guess, phrase):
            return AnswerStrategy.CONTAINMENT
        if self._acronym(guess, phrase):
            return AnswerStrategy.ACRONYM
        if self._synonym(guess, phrase):
            return AnswerStrategy.SYNONYM
        return None

    # ── Strategies ────────────────────────────────────────────────────

    def _word_overlap(self, guess: str, phrase: str) -> bool:
        min_len = self.config.min_token_length
        guess_tokens = [t for t in guess.split() if len(t) >= min_len]
        if not guess_tokens:
            return False
        phrase_tokens = [t for t in phrase.split() if len(t) >= min_len]
        if not phrase_tokens:
            return False

        hits = sum(
            1 for pt in phrase_tokens
            if any(gt in pt or pt in gt for gt in guess_tokens)
        )
        return hits >= math.ceil(self.config.overlap_ratio * len(phrase_tokens))

    def _containment(self, guess: str, phrase: str) -> bool:
        min_len = self.config.min_containment_length
        if len(guess) < min_len or len(phrase) < min_len:
            return False
        return guess in phrase or phrase in guess

    def _acronym(self, guess: str, phrase: str) -> bool:
        if len(guess) < self.config.min_acronym_length:
            return False
        acronym = "".join(word[0] for word in phrase.split())
        return guess == acronym.lower()

    def _synonym(self, guess: str, phrase: str) -> bool:
        min_len = self.config.min_synonym_length
        if len(guess) < min_len:
            return False
        for _concept, synonyms in self.synonyms.concepts_in(phrase):
            for synonym in synonyms:
                if len(synonym) < min_len:
                    continue
                if guess in synonym or synonym in guess:
                    return True
        return False


_resolver: Optional[AnswerResolver] = None


def get_resolver() -> AnswerResolver:
    global _resolver
    if _resolver is None:
        _resolver = AnswerResolver()
    return _resolver


def is_correct(guess: object, spec: QuizAnswerSpec) -> bool:
    """Check a guess with the default thresholds and synonym table."""
    return get_resolver().is_correct(guess, spec)
