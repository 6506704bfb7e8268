"""Spread scoring and arbitrage classification for a matched price pair."""

from dataclasses import dataclass
from enum import Enum

from src.matching.thresholds import DEFAULT_MATCHING_CONFIG, MatchingConfig


class ArbitrageDirection(Enum):
    """Which venue to buy on: the one quoting the lower YES price."""

    BUY_POLYMARKET = "buy_polymarket"
    BUY_KALSHI = "buy_kalshi"
    NONE = "none"


@dataclass(frozen=True)
class SpreadSignal:
    """Spread between two venue prices and what it suggests.

    Attributes:
        spread_abs: Absolute price difference in cents
        spread_pct: spread_abs as a percentage of the mean price
        has_arbitrage: spread_pct is above the arbitrage threshold
        direction: Cheaper venue, set once spread_pct clears the direction threshold
    """

    spread_abs: int
    spread_pct: float
    has_arbitrage: bool
    direction: ArbitrageDirection


def classify_spread(
    polymarket_cents: int,
    kalshi_cents: int,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> SpreadSignal:
    """Classify the spread between a Polymarket and a Kalshi YES price.

    The arbitrage and direction thresholds are independent, so a spread in
    (direction_spread_pct, arbitrage_spread_pct] suggests a side without
    being flagged as arbitrage.
    """
    spread_abs = abs(polymarket_cents - kalshi_cents)
    mean_price = (polymarket_cents + kalshi_cents) / 2
    spread_pct = spread_abs * 100 / mean_price if mean_price > 0 else 0.0

    direction = ArbitrageDirection.NONE
    if spread_pct > config.direction_spread_pct:
        direction = (
            ArbitrageDirection.BUY_POLYMARKET
            if polymarket_cents < kalshi_cents
            else ArbitrageDirection.BUY_KALSHI
        )

    return SpreadSignal(
        spread_abs=spread_abs,
        spread_pct=spread_pct,
        has_arbitrage=spread_pct > config.arbitrage_spread_pct,
        direction=direction,
    )
