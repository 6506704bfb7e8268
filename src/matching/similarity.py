"""Keyword-overlap similarity between markets from two venues."""

from src.matching.normalizer import NormalizedMarket
from src.matching.thresholds import DEFAULT_MATCHING_CONFIG, MatchingConfig


def calculate_match_score(
    market_a: NormalizedMarket,
    market_b: NormalizedMarket,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> float:
    """
    Score how likely two markets describe the same event.

    Jaccard overlap of the keyword sets, plus ``config.key_term_bonus`` for
    every key term (candidate names, "president", "2024", "winner") present
    on both sides, clamped to 1.0. The bonus lets a thin overlap on
    high-value political terms clear the match threshold.

    Args:
        market_a: Market from the first venue.
        market_b: Market from the second venue.
        config: Matching constants.

    Returns:
        Similarity score between 0.0 and 1.0.
    """
    keywords_a = market_a.keyword_set
    keywords_b = market_b.keyword_set

    overlap = sum(1 for token in keywords_a if token in keywords_b)
    union_size = len(keywords_a | keywords_b)
    jaccard = overlap / union_size if union_size > 0 else 0.0

    bonus = sum(
        config.key_term_bonus
        for term in config.key_terms
        if term in keywords_a and term in keywords_b
    )

    return min(jaccard + bonus, 1.0)
