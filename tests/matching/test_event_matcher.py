"""Tests for the greedy CrossVenueMatcher."""

import pytest

from src.matching.event_matcher import (
    CrossVenueMatcher,
    MatchConfidence,
    UnifiedMarket,
    confidence_for_score,
)
from src.matching.keywords import canonical_key, extract_keywords
from src.matching.normalizer import NormalizedMarket, Venue
from src.matching.spread import ArbitrageDirection
from src.matching.thresholds import MatchingConfig


def _market(identifier, title, price, venue):
    return NormalizedMarket(
        identifier=identifier,
        venue=venue,
        display_name=title,
        canonical_key=canonical_key(title),
        price_cents=price,
        keyword_set=extract_keywords(title),
        reference_url=f"https://{venue.value}.test/{identifier}",
        volume=1000,
    )


def poly(identifier, title, price=50):
    return _market(identifier, title, price, Venue.POLYMARKET)


def kalshi(identifier, title, price=50):
    return _market(identifier, title, price, Venue.KALSHI)


@pytest.fixture
def matcher():
    return CrossVenueMatcher()


def test_matched_pair_scores_spread(matcher):
    result = matcher.match(
        [poly("pm1", "Trump wins 2024 Presidential Election", 52)],
        [kalshi("PRES24", "Will Trump win the 2024 presidential election?", 58)],
    )

    [pair] = result
    assert pair.is_matched
    assert pair.identifier == "pm1-PRES24"
    assert pair.display_name == "Trump wins 2024 Presidential Election"
    assert pair.polymarket_price == 52
    assert pair.kalshi_price == 58
    assert pair.spread_abs == 6
    assert pair.spread_pct == pytest.approx(10.909, abs=1e-3)
    assert pair.has_arbitrage is True
    assert pair.arbitrage_direction is ArbitrageDirection.BUY_POLYMARKET
    assert pair.match_confidence is MatchConfidence.HIGH
    assert pair.match_score == 1.0
    assert pair.polymarket_url == "https://polymarket.test/pm1"
    assert pair.kalshi_url == "https://kalshi.test/PRES24"


def test_low_overlap_markets_stay_unmatched(matcher):
    result = matcher.match(
        [poly("pm1", "Democrats win Senate majority", 40)],
        [kalshi("K1", "Democrats flip Texas governor seat", 20)],
    )

    assert len(result) == 2
    assert all(not m.is_matched for m in result)
    assert all(m.match_confidence is MatchConfidence.LOW for m in result)
    assert all(m.spread_pct == 0.0 and m.spread_abs == 0 for m in result)
    assert all(m.arbitrage_direction is ArbitrageDirection.NONE for m in result)
    assert [m.identifier for m in result] == ["pm1", "K1"]


def test_state_markets_pair_on_shared_candidate_terms(matcher):
    # the key-term bonus pairs these despite different states
    result = matcher.match(
        [poly("pm1", "Trump wins Pennsylvania", 54)],
        [kalshi("K1", "Trump wins Georgia", 55)],
    )

    [pair] = result
    assert pair.is_matched
    assert pair.match_score == pytest.approx(0.9)
    assert pair.match_confidence is MatchConfidence.HIGH


def test_score_between_acceptance_and_medium_is_matched_low(matcher):
    result = matcher.match(
        [poly("pm1", "Biden approval above 45 percent", 40)],
        [kalshi("K1", "Biden pardons Hunter", 41)],
    )

    [pair] = result
    assert pair.is_matched
    assert 0.3 <= pair.match_score < 0.4
    assert pair.match_confidence is MatchConfidence.LOW


def test_medium_confidence_pair(matcher):
    [pair] = matcher.match(
        [poly("pm1", "Fed cuts rates by March", 30)],
        [kalshi("K1", "Fed cuts interest rates by June", 30)],
    )

    assert pair.match_score == pytest.approx(0.5)
    assert pair.match_confidence is MatchConfidence.MEDIUM


def test_greedy_first_claim_wins(matcher):
    polymarket = [
        poly("pm1", "Fed cuts interest rates", 40),
        poly("pm2", "Fed cuts rates by March", 45),
    ]
    kalshi_markets = [kalshi("K1", "Fed cuts rates by March", 60)]

    result = matcher.match(polymarket, kalshi_markets)

    pairs = [m for m in result if m.is_matched]
    assert [m.identifier for m in pairs] == ["pm1-K1"]
    assert any(m.identifier == "pm2" and m.kalshi_price is None for m in result)


def test_greedy_result_depends_on_input_order(matcher):
    polymarket = [
        poly("pm2", "Fed cuts rates by March", 45),
        poly("pm1", "Fed cuts interest rates", 40),
    ]
    kalshi_markets = [kalshi("K1", "Fed cuts rates by March", 60)]

    pairs = [m for m in matcher.match(polymarket, kalshi_markets) if m.is_matched]
    assert [m.identifier for m in pairs] == ["pm2-K1"]


def test_ties_keep_first_candidate(matcher):
    result = matcher.match(
        [poly("pm1", "Republicans win Senate majority", 70)],
        [
            kalshi("K1", "Republicans win Senate majority", 75),
            kalshi("K2", "Republicans win Senate majority", 80),
        ],
    )

    pairs = [m for m in result if m.is_matched]
    assert [m.identifier for m in pairs] == ["pm1-K1"]
    assert any(m.identifier == "K2" and m.polymarket_price is None for m in result)


def test_each_kalshi_market_claimed_once_and_all_markets_covered(matcher):
    polymarket = [
        poly("pm1", "Republicans win Senate majority", 78),
        poly("pm2", "Republicans win Senate majority", 70),
        poly("pm3", "Democrats win House majority", 32),
        poly("pm4", "Recession declared before July", 20),
    ]
    kalshi_markets = [
        kalshi("K1", "Republicans win Senate majority", 75),
        kalshi("K2", "Democrats win House majority", 35),
        kalshi("K3", "Bitcoin above 100k", 60),
    ]

    result = matcher.match(polymarket, kalshi_markets)

    poly_urls = [m.polymarket_url for m in result if m.polymarket_url is not None]
    kalshi_urls = [m.kalshi_url for m in result if m.kalshi_url is not None]
    assert sorted(poly_urls) == sorted(m.reference_url for m in polymarket)
    assert sorted(kalshi_urls) == sorted(m.reference_url for m in kalshi_markets)
    assert len(result) == 5  # 2 pairs + 2 polymarket-only + 1 kalshi-only


def test_results_sorted_by_spread_pct_descending(matcher):
    result = matcher.match(
        [
            poly("pm1", "Republicans win Senate majority", 78),
            poly("pm2", "Democrats win House majority", 32),
            poly("pm3", "Recession declared before July", 20),
        ],
        [
            kalshi("K1", "Republicans win Senate majority", 75),
            kalshi("K2", "Democrats win House majority", 35),
        ],
    )

    spreads = [m.spread_pct for m in result]
    assert spreads == sorted(spreads, reverse=True)
    assert [m.identifier for m in result] == ["pm2-K2", "pm1-K1", "pm3"]


def test_zero_priced_pair_has_no_spread(matcher):
    [pair] = matcher.match(
        [poly("pm1", "Electoral college tie", 0)],
        [kalshi("K1", "Electoral college tie", 0)],
    )

    assert pair.is_matched
    assert pair.spread_pct == 0.0
    assert pair.has_arbitrage is False
    assert pair.arbitrage_direction is ArbitrageDirection.NONE


def test_match_is_deterministic(matcher):
    polymarket = [
        poly("pm1", "Trump wins Pennsylvania", 54),
        poly("pm2", "Trump wins Georgia", 58),
    ]
    kalshi_markets = [
        kalshi("K1", "Trump wins Georgia", 55),
        kalshi("K2", "Trump wins Pennsylvania", 52),
    ]

    assert matcher.match(polymarket, kalshi_markets) == matcher.match(polymarket, kalshi_markets)


def test_empty_inputs(matcher):
    assert matcher.match([], []) == []


def test_custom_threshold_rejects_pair():
    matcher = CrossVenueMatcher(MatchingConfig(min_match_score=0.95))

    result = matcher.match(
        [poly("pm1", "Fed cuts rates by March", 30)],
        [kalshi("K1", "Fed cuts interest rates by June", 30)],
    )

    assert not any(m.is_matched for m in result)


@pytest.mark.parametrize(
    "score,expected",
    [
        (1.0, MatchConfidence.HIGH),
        (0.6, MatchConfidence.HIGH),
        (0.59, MatchConfidence.MEDIUM),
        (0.4, MatchConfidence.MEDIUM),
        (0.39, MatchConfidence.LOW),
        (0.3, MatchConfidence.LOW),
    ],
)
def test_confidence_bands(score, expected):
    assert confidence_for_score(score) is expected


def test_unified_market_requires_a_price():
    with pytest.raises(ValueError):
        UnifiedMarket(identifier="x", display_name="X", canonical_key="x")


def test_unified_market_to_dict(matcher):
    [pair] = matcher.match(
        [poly("pm1", "Republicans win Senate majority", 78)],
        [kalshi("K1", "Republicans win Senate majority", 75)],
    )

    data = pair.to_dict()
    assert data["id"] == "pm1-K1"
    assert data["match_confidence"] == "high"
    assert data["arbitrage_direction"] == "buy_kalshi"
    assert data["has_arbitrage"] is False
    assert data["spread"] == 3
