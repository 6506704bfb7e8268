"""Fixed demo dataset shown when live venue data is missing or too thin."""

from typing import Optional

from src.matching.event_matcher import MatchConfidence, UnifiedMarket
from src.matching.spread import ArbitrageDirection

POLYMARKET_EVENT_URL = "https://polymarket.com/event"
KALSHI_MARKET_URL = "https://kalshi.com/markets"

_BUY_POLY = ArbitrageDirection.BUY_POLYMARKET
_BUY_KALSHI = ArbitrageDirection.BUY_KALSHI
_NONE = ArbitrageDirection.NONE
_HIGH = MatchConfidence.HIGH
_MEDIUM = MatchConfidence.MEDIUM

# id, name, normalized, poly, kalshi, spread, spread %, poly slug, kalshi ticker,
# poly volume, kalshi volume, confidence, has arbitrage, direction
_DEMO_ROWS: tuple[tuple, ...] = (
    ("demo-1", "Trump wins 2024 Presidential Election", "trump wins 2024 presidential election",
     52, 58, 6, 10.9, "presidential-election-winner-2024", "PRES-2024",
     "125000000", 45000000, _HIGH, True, _BUY_POLY),
    ("demo-2", "Harris wins 2024 Presidential Election", "harris wins 2024 presidential election",
     47, 41, 6, 13.6, "presidential-election-winner-2024", "PRES-2024",
     "98000000", 38000000, _HIGH, True, _BUY_KALSHI),
    ("demo-3", "Republicans win Senate majority", "republicans win senate majority",
     78, 75, 3, 3.9, "senate-control-2024", "SENATE-2024",
     "45000000", 12000000, _HIGH, False, _BUY_KALSHI),
    ("demo-4", "Democrats win House majority", "democrats win house majority",
     32, 35, 3, 8.9, "house-control-2024", "HOUSE-2024",
     "28000000", 8500000, _HIGH, True, _BUY_POLY),
    ("demo-5", "Trump wins Pennsylvania", "trump wins pennsylvania",
     54, 52, 2, 3.8, "pennsylvania-2024", "PA-2024",
     "18000000", 5200000, _MEDIUM, False, _NONE),
    ("demo-6", "Trump wins Georgia", "trump wins georgia",
     58, 55, 3, 5.3, "georgia-2024", "GA-2024",
     "15000000", 4800000, _MEDIUM, True, _BUY_KALSHI),
    ("demo-7", "Trump wins Michigan", "trump wins michigan",
     48, 51, 3, 6.1, "michigan-2024", "MI-2024",
     "14000000", 4200000, _MEDIUM, True, _BUY_POLY),
    ("demo-8", "Trump wins Arizona", "trump wins arizona",
     56, 54, 2, 3.6, "arizona-2024", "AZ-2024",
     "12000000", 3800000, _MEDIUM, False, _NONE),
    ("demo-9", "Electoral college tie (269-269)", "electoral college tie",
     1, 2, 1, 66.7, "electoral-tie-2024", "EC-TIE-2024",
     "2000000", 450000, _HIGH, True, _BUY_POLY),
    ("demo-10", "Trump wins popular vote", "trump wins popular vote",
     38, 42, 4, 10.0, "popular-vote-2024", "POPVOTE-2024",
     "8500000", 2800000, _HIGH, True, _BUY_POLY),
    ("demo-11", "Biden drops out before election", "biden drops out before election",
     95, 94, 1, 1.1, "biden-dropout", "BIDEN-DROP",
     "35000000", 15000000, _HIGH, False, _NONE),
    ("demo-12", "Third party candidate gets >5% votes", "third party candidate votes",
     8, 12, 4, 40.0, "third-party-2024", "3RD-PARTY-2024",
     "3200000", 980000, _MEDIUM, True, _BUY_POLY),
    ("demo-13", "Trump wins Wisconsin", "trump wins wisconsin",
     49, 47, 2, 4.2, "wisconsin-2024", "WI-2024",
     "11000000", 3500000, _MEDIUM, False, _NONE),
    ("demo-14", "Trump wins Nevada", "trump wins nevada",
     53, 50, 3, 5.8, "nevada-2024", "NV-2024",
     "9500000", 2900000, _MEDIUM, True, _BUY_KALSHI),
    ("demo-15", "Trump wins North Carolina", "trump wins north carolina",
     62, 60, 2, 3.3, "north-carolina-2024", "NC-2024",
     "10500000", 3200000, _MEDIUM, False, _NONE),
)


def get_demo_markets(
    polymarket_event_url: Optional[str] = None,
    kalshi_market_url: Optional[str] = None,
) -> list[UnifiedMarket]:
    """Build a fresh list of the demo markets, in display order."""
    poly_base = (polymarket_event_url or POLYMARKET_EVENT_URL).rstrip("/")
    kalshi_base = (kalshi_market_url or KALSHI_MARKET_URL).rstrip("/")

    return [
        UnifiedMarket(
            identifier=identifier,
            display_name=name,
            canonical_key=normalized,
            polymarket_price=poly_price,
            kalshi_price=kalshi_price,
            spread_abs=spread,
            spread_pct=spread_pct,
            polymarket_url=f"{poly_base}/{slug}",
            kalshi_url=f"{kalshi_base}/{ticker}",
            polymarket_volume=poly_volume,
            kalshi_volume=kalshi_volume,
            match_confidence=confidence,
            has_arbitrage=has_arbitrage,
            arbitrage_direction=direction,
        )
        for (
            identifier, name, normalized, poly_price, kalshi_price, spread, spread_pct,
            slug, ticker, poly_volume, kalshi_volume, confidence, has_arbitrage, direction,
        ) in _DEMO_ROWS
    ]
