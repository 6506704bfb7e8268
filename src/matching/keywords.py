"""Keyword extraction for market titles."""

import re

from src.matching.thresholds import DEFAULT_MATCHING_CONFIG, MatchingConfig

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def extract_keywords(
    text: str,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> frozenset[str]:
    """
    Turn a market title into a normalized token set.

    Base tokens come from the lowercased title with punctuation replaced by
    spaces; tokens shorter than ``config.min_token_length`` are dropped.
    Compound markers are then looked up in the lowercased (unstripped) title
    and their canonical token added, e.g. "Presidential" contributes
    "president" and "wins" contributes "winner".

    Args:
        text: The title to tokenize.
        config: Matching constants.

    Returns:
        The union of base and compound tokens; empty for empty text.
    """
    lowered = text.lower()
    base = {
        token
        for token in _NON_ALNUM.sub(" ", lowered).split()
        if len(token) >= config.min_token_length
    }
    compounds = {
        token
        for token, markers in config.compound_terms
        if any(marker in lowered for marker in markers)
    }
    return frozenset(base | compounds)


def canonical_key(text: str) -> str:
    """Lowercase, drop punctuation, collapse whitespace and trim."""
    stripped = _NON_ALNUM.sub("", text.lower())
    return _WHITESPACE.sub(" ", stripped).strip()
