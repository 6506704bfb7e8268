"""Filtering and sorting of unified markets for display."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from src.matching.event_matcher import UnifiedMarket

MISSING_PRICE_SORT_VALUE = -1


class SortField(Enum):
    EVENT_NAME = "event_name"
    POLYMARKET_PRICE = "polymarket_price"
    KALSHI_PRICE = "kalshi_price"
    SPREAD = "spread"
    SPREAD_PCT = "spread_pct"


@dataclass(frozen=True)
class FilterConfig:
    """User-facing filters.

    Attributes:
        min_spread_pct: Keep markets whose spread % is at least this (0 disables)
        only_arbitrage: Keep flagged arbitrage opportunities only
        search_query: Case-insensitive substring of the market name
    """

    min_spread_pct: float = 0.0
    only_arbitrage: bool = False
    search_query: str = ""

    @property
    def is_active(self) -> bool:
        return self.only_arbitrage or self.min_spread_pct > 0


def filter_markets(markets: Iterable[UnifiedMarket], filters: FilterConfig) -> list[UnifiedMarket]:
    result = list(markets)
    if filters.only_arbitrage:
        result = [m for m in result if m.has_arbitrage]
    if filters.min_spread_pct > 0:
        result = [m for m in result if m.spread_pct >= filters.min_spread_pct]
    if filters.search_query:
        query = filters.search_query.lower()
        result = [m for m in result if query in m.display_name.lower()]
    return result


def _sort_value(market: UnifiedMarket, field: SortField) -> Union[str, float]:
    if field is SortField.EVENT_NAME:
        return market.display_name.lower()
    if field is SortField.POLYMARKET_PRICE:
        return market.polymarket_price if market.polymarket_price is not None else MISSING_PRICE_SORT_VALUE
    if field is SortField.KALSHI_PRICE:
        return market.kalshi_price if market.kalshi_price is not None else MISSING_PRICE_SORT_VALUE
    if field is SortField.SPREAD:
        return market.spread_abs
    return market.spread_pct


def sort_markets(
    markets: Iterable[UnifiedMarket],
    field: SortField = SortField.SPREAD_PCT,
    descending: bool = True,
) -> list[UnifiedMarket]:
    """Stable sort; a missing venue price sorts as -1, below every real price."""
    return sorted(markets, key=lambda m: _sort_value(m, field), reverse=descending)


def count_arbitrage(markets: Iterable[UnifiedMarket]) -> int:
    return sum(1 for m in markets if m.has_arbitrage)
