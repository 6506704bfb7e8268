"""Market normalization and cross-venue matching."""

from src.matching.thresholds import DEFAULT_MATCHING_CONFIG, MatchingConfig
from src.matching.keywords import canonical_key, extract_keywords
from src.matching.normalizer import MarketNormalizer, NormalizedMarket, Venue
from src.matching.similarity import calculate_match_score
from src.matching.spread import ArbitrageDirection, SpreadSignal, classify_spread
from src.matching.event_matcher import (
    CrossVenueMatcher,
    MatchConfidence,
    UnifiedMarket,
    confidence_for_score,
)

__all__ = [
    "ArbitrageDirection",
    "CrossVenueMatcher",
    "DEFAULT_MATCHING_CONFIG",
    "MarketNormalizer",
    "MatchConfidence",
    "MatchingConfig",
    "NormalizedMarket",
    "SpreadSignal",
    "UnifiedMarket",
    "Venue",
    "calculate_match_score",
    "canonical_key",
    "classify_spread",
    "confidence_for_score",
    "extract_keywords",
]
