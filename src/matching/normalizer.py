"""Market normalizer turning raw venue records into one comparable shape."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

import structlog

from config.settings import settings
from src.feeds.kalshi_events import KalshiEvent, KalshiMarket
from src.feeds.polymarket_events import PolymarketEvent, PolymarketMarket
from src.matching.keywords import canonical_key, extract_keywords
from src.matching.thresholds import DEFAULT_MATCHING_CONFIG, MatchingConfig
from src.utils.parsing import decode_json_list, to_finite_float

logger = structlog.get_logger()

DEFAULT_OUTCOMES: list[str] = ["Yes", "No"]


class Venue(Enum):
    """Prediction market venues the scanner compares."""

    POLYMARKET = "polymarket"
    KALSHI = "kalshi"


@dataclass(frozen=True)
class NormalizedMarket:
    """A venue market reduced to what matching and spread scoring need.

    Attributes:
        identifier: Venue-scoped key (Polymarket market id, Kalshi ticker)
        venue: Venue the market was listed on
        display_name: Human-readable market title
        canonical_key: Lowercase, punctuation-free form of display_name
        price_cents: YES price on a 0-100 cent scale
        keyword_set: Normalized title tokens
        reference_url: Link back to the venue listing
        volume: Venue-reported volume, kept opaque
    """

    identifier: str
    venue: Venue
    display_name: str
    canonical_key: str
    price_cents: int
    keyword_set: frozenset[str]
    reference_url: str
    volume: Union[str, int, float]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class MarketNormalizer:
    """Normalizes Polymarket and Kalshi events into ``NormalizedMarket`` lists."""

    def __init__(
        self,
        config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
        polymarket_event_base_url: Optional[str] = None,
        kalshi_market_base_url: Optional[str] = None,
    ) -> None:
        self.config = config
        self._polymarket_base = (
            polymarket_event_base_url or settings.POLYMARKET_EVENT_BASE_URL
        ).rstrip("/")
        self._kalshi_base = (
            kalshi_market_base_url or settings.KALSHI_MARKET_BASE_URL
        ).rstrip("/")

    def _build(
        self,
        identifier: str,
        venue: Venue,
        display_name: str,
        price_cents: int,
        reference_url: str,
        volume: Union[str, int, float],
    ) -> NormalizedMarket:
        return NormalizedMarket(
            identifier=identifier,
            venue=venue,
            display_name=display_name,
            canonical_key=canonical_key(display_name),
            price_cents=price_cents,
            keyword_set=extract_keywords(display_name, self.config),
            reference_url=reference_url,
            volume=volume,
        )

    # ------------------------------------------------------------------
    # Polymarket
    # ------------------------------------------------------------------

    def polymarket_yes_price(self, market: PolymarketMarket) -> int:
        """
        Read the YES price of a Polymarket market in integer cents.

        ``outcomes`` and ``outcomePrices`` are parallel JSON arrays. The YES
        label is matched case-insensitively, defaulting to index 0. Malformed
        JSON, a missing price array, an out-of-range index, or a price that is
        not a number in [0, 1] yields ``config.default_price_cents``.

        Args:
            market: The Polymarket sub-market.

        Returns:
            The YES price in cents.
        """
        default = self.config.default_price_cents

        if market.outcomes is None:
            outcomes: Optional[list[Any]] = DEFAULT_OUTCOMES
        else:
            outcomes = decode_json_list(market.outcomes)
        prices = decode_json_list(market.outcome_prices)
        if outcomes is None or prices is None:
            logger.warning(
                "polymarket_price_unparseable",
                market_id=market.id,
                outcomes=market.outcomes,
                outcome_prices=market.outcome_prices,
            )
            return default

        yes_index = next(
            (
                idx
                for idx, label in enumerate(outcomes)
                if isinstance(label, str) and label.lower() == "yes"
            ),
            0,
        )
        if yes_index >= len(prices):
            logger.warning("polymarket_price_missing", market_id=market.id, index=yes_index)
            return default

        fraction = to_finite_float(prices[yes_index])
        if fraction is None or not 0.0 <= fraction <= 1.0:
            logger.warning(
                "polymarket_price_invalid",
                market_id=market.id,
                value=prices[yes_index],
            )
            return default
        return _round_half_up(fraction * 100)

    def normalize_polymarket(self, events: list[PolymarketEvent]) -> list[NormalizedMarket]:
        """Normalize every active, open Polymarket sub-market."""
        markets: list[NormalizedMarket] = []
        skipped = 0

        for event in events:
            for market in event.markets:
                if not market.is_tradable:
                    skipped += 1
                    continue

                display_name = market.group_item_title or market.question or event.title
                markets.append(
                    self._build(
                        identifier=market.id,
                        venue=Venue.POLYMARKET,
                        display_name=display_name,
                        price_cents=self.polymarket_yes_price(market),
                        reference_url=f"{self._polymarket_base}/{event.slug}",
                        volume=market.volume if market.volume is not None else "0",
                    )
                )

        logger.debug("polymarket_normalized", markets=len(markets), skipped=skipped)
        return markets

    # ------------------------------------------------------------------
    # Kalshi
    # ------------------------------------------------------------------

    def kalshi_yes_price(self, market: KalshiMarket) -> int:
        """YES bid, else last traded price, else the default price (all in cents).

        A zero bid or last price means no resting bid / no trade on Kalshi and
        falls through to the next source.
        """
        for candidate in (market.yes_bid, market.last_price):
            if candidate is None or candidate == 0:
                continue
            if 0 < candidate <= 100:
                return _round_half_up(candidate)
            logger.warning("kalshi_price_out_of_range", ticker=market.ticker, value=candidate)
        return self.config.default_price_cents

    def normalize_kalshi(self, events: list[KalshiEvent]) -> list[NormalizedMarket]:
        """Normalize every Kalshi sub-market whose status is exactly "active"."""
        markets: list[NormalizedMarket] = []
        skipped = 0

        for event in events:
            for market in event.markets:
                if market.status != "active":
                    skipped += 1
                    continue

                display_name = market.title or event.title
                markets.append(
                    self._build(
                        identifier=market.ticker,
                        venue=Venue.KALSHI,
                        display_name=display_name,
                        price_cents=self.kalshi_yes_price(market),
                        reference_url=f"{self._kalshi_base}/{market.ticker}",
                        volume=market.volume if market.volume is not None else 0,
                    )
                )

        logger.debug("kalshi_normalized", markets=len(markets), skipped=skipped)
        return markets
