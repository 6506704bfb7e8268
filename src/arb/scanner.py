"""Arbitrage scanner: one fetch -> normalize -> match cycle per call.

Each scan is stateless. Both venues are fetched concurrently over a single
HTTP client, then normalization and matching run synchronously in memory.
When a feed fails, or the run yields fewer than ``min_markets`` unified
markets, the demo dataset is substituted and the substitution is signalled
on the result.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Optional

import httpx
import structlog

from config.settings import settings
from src.arb.demo_data import get_demo_markets
from src.exceptions import FeedError
from src.feeds.kalshi_events import KalshiEvent, KalshiEventsClient
from src.feeds.polymarket_events import PolymarketEvent, PolymarketEventsClient
from src.matching.event_matcher import CrossVenueMatcher, UnifiedMarket
from src.matching.normalizer import MarketNormalizer
from src.matching.thresholds import MatchingConfig

logger = structlog.get_logger()

LIMITED_DATA_MESSAGE = "Limited API data - showing demo data"


@dataclass
class ScanResult:
    """Outcome of one scan cycle.

    Attributes:
        markets: Unified markets, sorted by descending spread percentage
        used_demo: True when the demo dataset replaced live data
        error: Why live data was replaced, if it was
        scanned_at: Unix timestamp of the scan
    """

    markets: list[UnifiedMarket]
    used_demo: bool = False
    error: Optional[str] = None
    scanned_at: float = field(default_factory=time.time)


def apply_demo_fallback(
    markets: list[UnifiedMarket],
    min_markets: Optional[int] = None,
) -> ScanResult:
    """Keep live markets unless there are fewer than ``min_markets`` of them."""
    threshold = settings.DEMO_FALLBACK_MIN_MARKETS if min_markets is None else min_markets
    if len(markets) < threshold:
        logger.warning("limited_live_data", markets=len(markets), min_markets=threshold)
        return ScanResult(markets=get_demo_markets(), used_demo=True, error=LIMITED_DATA_MESSAGE)
    return ScanResult(markets=markets)


class ArbitrageScanner:
    """Fetches both venues and produces a ``ScanResult``."""

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        polymarket_client: Optional[PolymarketEventsClient] = None,
        kalshi_client: Optional[KalshiEventsClient] = None,
        min_markets: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.config = config or MatchingConfig.from_settings(settings)
        self.polymarket_client = polymarket_client or PolymarketEventsClient()
        self.kalshi_client = kalshi_client or KalshiEventsClient()
        self.normalizer = MarketNormalizer(self.config)
        self.matcher = CrossVenueMatcher(self.config)
        self.min_markets = settings.DEMO_FALLBACK_MIN_MARKETS if min_markets is None else min_markets
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECONDS

    async def fetch_events(
        self,
        client: httpx.AsyncClient,
    ) -> tuple[list[PolymarketEvent], list[KalshiEvent]]:
        """Fetch both venues concurrently.

        Raises:
            FeedError: If either venue fails.
        """
        polymarket_events, kalshi_events = await asyncio.gather(
            self.polymarket_client.fetch_events(client),
            self.kalshi_client.fetch_events(client),
        )
        return polymarket_events, kalshi_events

    def build_markets(
        self,
        polymarket_events: list[PolymarketEvent],
        kalshi_events: list[KalshiEvent],
    ) -> list[UnifiedMarket]:
        """Normalize both venues and match them. Pure and synchronous."""
        polymarket_markets = self.normalizer.normalize_polymarket(polymarket_events)
        kalshi_markets = self.normalizer.normalize_kalshi(kalshi_events)
        return self.matcher.match(polymarket_markets, kalshi_markets)

    async def scan(self, client: Optional[httpx.AsyncClient] = None) -> ScanResult:
        """Run one full cycle, falling back to demo data on feed failure."""
        try:
            if client is None:
                async with httpx.AsyncClient(timeout=self.timeout) as owned_client:
                    polymarket_events, kalshi_events = await self.fetch_events(owned_client)
            else:
                polymarket_events, kalshi_events = await self.fetch_events(client)
        except FeedError as exc:
            logger.error("scan_fetch_failed_using_demo", error=str(exc))
            return ScanResult(markets=get_demo_markets(), used_demo=True, error=str(exc))

        markets = self.build_markets(polymarket_events, kalshi_events)
        result = apply_demo_fallback(markets, self.min_markets)
        logger.info(
            "scan_complete",
            markets=len(result.markets),
            used_demo=result.used_demo,
            arbitrage=sum(1 for m in result.markets if m.has_arbitrage),
        )
        return result
