import pytest

from src.matching.keywords import canonical_key, extract_keywords
from src.matching.normalizer import NormalizedMarket, Venue
from src.matching.similarity import calculate_match_score
from src.matching.thresholds import MatchingConfig


def _market(title, venue=Venue.POLYMARKET, identifier="m-1", config=MatchingConfig()):
    return NormalizedMarket(
        identifier=identifier,
        venue=venue,
        display_name=title,
        canonical_key=canonical_key(title),
        price_cents=50,
        keyword_set=extract_keywords(title, config),
        reference_url=f"https://example.test/{identifier}",
        volume=0,
    )


def test_identical_titles_score_one():
    a = _market("Republicans win Senate majority")
    b = _market("Republicans win Senate majority", venue=Venue.KALSHI)

    assert calculate_match_score(a, b) == 1.0


def test_score_is_clamped_to_one():
    a = _market("Trump wins 2024 presidential election")
    b = _market("Trump wins the 2024 presidential election", venue=Venue.KALSHI)

    # jaccard 7/8 plus four shared key terms would exceed 1
    assert calculate_match_score(a, b) == 1.0


def test_same_candidate_different_state():
    a = _market("Trump wins Pennsylvania")
    b = _market("Trump wins Georgia", venue=Venue.KALSHI)

    # {trump, wins, winner} shared out of 5 tokens, plus trump and winner bonuses
    assert calculate_match_score(a, b) == pytest.approx(0.6 + 0.15 + 0.15)


def test_generic_overlap_scores_below_threshold():
    a = _market("Democrats win Senate majority")
    b = _market("Democrats flip Texas governor seat", venue=Venue.KALSHI)

    score = calculate_match_score(a, b)
    assert score == pytest.approx(1 / 9)
    assert score < 0.3


def test_key_term_bonus_lifts_thin_overlap():
    a = _market("Biden approval above 45 percent")
    b = _market("Biden pardons Hunter", venue=Venue.KALSHI)

    assert calculate_match_score(a, b) == pytest.approx(1 / 6 + 0.15)


def test_bonus_is_configurable():
    config = MatchingConfig(key_term_bonus=0.0)
    a = _market("Biden approval above 45 percent", config=config)
    b = _market("Biden pardons Hunter", venue=Venue.KALSHI, config=config)

    assert calculate_match_score(a, b, config) == pytest.approx(1 / 6)


def test_empty_keyword_sets_score_zero():
    a = _market("")
    b = _market("", venue=Venue.KALSHI)

    assert calculate_match_score(a, b) == 0.0


def test_one_empty_side_scores_zero():
    a = _market("")
    b = _market("Trump wins Georgia", venue=Venue.KALSHI)

    assert calculate_match_score(a, b) == 0.0


@pytest.mark.parametrize(
    "title_a,title_b",
    [
        ("Trump wins 2024", "Harris wins 2024"),
        ("Fed cuts rates by March", "Fed cuts interest rates by June"),
        ("Biden drops out before election", "Biden president 2024 winner election"),
        ("x", "y"),
    ],
)
def test_score_bounds(title_a, title_b):
    a = _market(title_a)
    b = _market(title_b, venue=Venue.KALSHI)

    assert 0.0 <= calculate_match_score(a, b) <= 1.0
    assert 0.0 <= calculate_match_score(b, a) <= 1.0


def test_score_is_symmetric_and_deterministic():
    a = _market("Fed cuts rates by March")
    b = _market("Fed cuts interest rates by June", venue=Venue.KALSHI)

    first = calculate_match_score(a, b)
    assert first == calculate_match_score(a, b)
    assert first == pytest.approx(calculate_match_score(b, a))
    assert first == pytest.approx(0.5)
