# src/arb/__init__.py
"""Arbitrage scanning - pipeline wrapper, demo fallback and display filters."""

from .demo_data import get_demo_markets
from .filters import FilterConfig, SortField, count_arbitrage, filter_markets, sort_markets
from .scanner import ArbitrageScanner, ScanResult, apply_demo_fallback

__all__ = [
    "ArbitrageScanner",
    "FilterConfig",
    "ScanResult",
    "SortField",
    "apply_demo_fallback",
    "count_arbitrage",
    "filter_markets",
    "get_demo_markets",
    "sort_markets",
]
