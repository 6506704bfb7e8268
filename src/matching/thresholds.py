"""Constants driving keyword extraction, scoring, matching and spread classification.

Everything lives in one frozen ``MatchingConfig`` that is passed into the
extractor, scorer, matcher and classifier, so tests can swap in alternate
constant sets without touching module state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


# (emitted token, substrings that trigger it in the lowercased title)
COMPOUND_TERMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("trump", ("trump",)),
    ("biden", ("biden",)),
    ("harris", ("harris",)),
    ("president", ("president", "presidential")),
    ("election", ("election",)),
    ("2024", ("2024",)),
    ("2025", ("2025",)),
    ("winner", ("win", "winner")),
)

KEY_TERMS: tuple[str, ...] = ("trump", "biden", "harris", "president", "2024", "winner")


@dataclass(frozen=True)
class MatchingConfig:
    """Immutable set of matching and classification constants.

    Attributes:
        compound_terms: Domain markers added to a keyword set when present in the title.
        key_terms: High-signal tokens that earn ``key_term_bonus`` when shared.
        key_term_bonus: Score increment per shared key term.
        min_token_length: Shorter base tokens are dropped.
        min_match_score: Lowest similarity accepted as a cross-venue pair.
        high_confidence: Score floor for HIGH match confidence.
        medium_confidence: Score floor for MEDIUM match confidence.
        arbitrage_spread_pct: Spread % strictly above which a pair is an arbitrage.
        direction_spread_pct: Spread % strictly above which a buy direction is suggested.
        default_price_cents: Price used when a venue price cannot be read.
    """

    compound_terms: tuple[tuple[str, tuple[str, ...]], ...] = COMPOUND_TERMS
    key_terms: tuple[str, ...] = KEY_TERMS
    key_term_bonus: float = 0.15
    min_token_length: int = 3
    min_match_score: float = 0.3
    high_confidence: float = 0.6
    medium_confidence: float = 0.4
    arbitrage_spread_pct: float = 5.0
    direction_spread_pct: float = 3.0
    default_price_cents: int = 50

    @classmethod
    def from_settings(cls, settings: Any) -> "MatchingConfig":
        """Build a config from a ``config.settings.Settings`` instance."""
        return cls(
            key_term_bonus=settings.MATCH_KEY_TERM_BONUS,
            min_match_score=settings.MATCH_MIN_SCORE,
            high_confidence=settings.MATCH_HIGH_CONFIDENCE,
            medium_confidence=settings.MATCH_MEDIUM_CONFIDENCE,
            arbitrage_spread_pct=settings.ARB_SPREAD_PCT,
            direction_spread_pct=settings.ARB_DIRECTION_SPREAD_PCT,
            default_price_cents=settings.DEFAULT_PRICE_CENTS,
        )


DEFAULT_MATCHING_CONFIG = MatchingConfig()
