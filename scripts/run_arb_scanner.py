#!/usr/bin/env python3
# scripts/run_arb_scanner.py
"""
Cross-Venue Arbitrage Scanner - Main Entry Point

Usage:
    python scripts/run_arb_scanner.py [--once] [--scan-interval SECONDS]
        [--min-spread PCT] [--only-arb] [--search TEXT] [--sort FIELD] [--asc]

This script:
1. Fetches political events from Polymarket and Kalshi
2. Matches equivalent markets across the two venues
3. Scores price spreads and flags arbitrage opportunities
4. Prints a table, then refreshes every scan interval (unless --once)
"""

import asyncio
import argparse
import signal
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
_project_root = Path(__file__).parent.parent
sys.path.insert(0, str(_project_root))

import structlog

from config.settings import settings
from config.validators import validate_feed_urls, validate_matching_thresholds
from src.arb.filters import FilterConfig, SortField, count_arbitrage, filter_markets, sort_markets
from src.arb.scanner import ArbitrageScanner, ScanResult
from src.matching.event_matcher import UnifiedMarket
from src.matching.spread import ArbitrageDirection
from src.utils.formatting import format_price, format_spread, format_spread_pct, format_volume
from src.utils.logging import configure_logging

logger = structlog.get_logger()

NAME_WIDTH = 44


def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


def render_table(markets: list[UnifiedMarket]) -> str:
    """Render unified markets as a fixed-width text table."""
    header = (
        f"{'EVENT':<{NAME_WIDTH}} {'POLY':>6} {'KALSHI':>6} {'SPREAD':>7} "
        f"{'SPREAD%':>8} {'CONF':<6} {'ARB':<4} {'BUY':<10} {'POLY VOL':>9} {'KALSHI VOL':>10}"
    )
    lines = [header, "-" * len(header)]
    for m in markets:
        buy = "-" if m.arbitrage_direction is ArbitrageDirection.NONE else m.arbitrage_direction.value
        lines.append(
            f"{_truncate(m.display_name, NAME_WIDTH):<{NAME_WIDTH}} "
            f"{format_price(m.polymarket_price):>6} {format_price(m.kalshi_price):>6} "
            f"{format_spread(m.spread_abs):>7} {format_spread_pct(m.spread_pct):>8} "
            f"{m.match_confidence.value:<6} {'YES' if m.has_arbitrage else '':<4} {buy:<10} "
            f"{format_volume(m.polymarket_volume):>9} {format_volume(m.kalshi_volume):>10}"
        )
    if not markets:
        lines.append("No markets found matching your filters")
    return "\n".join(lines)


class ArbScannerRunner:
    """Periodic scan loop: scan, filter, sort, print."""

    def __init__(
        self,
        scan_interval: float = 60.0,
        once: bool = False,
        filters: Optional[FilterConfig] = None,
        sort_field: SortField = SortField.SPREAD_PCT,
        descending: bool = True,
        scanner: Optional[ArbitrageScanner] = None,
    ):
        """Initialize the scanner runner.

        Args:
            scan_interval: Seconds between scans (default: 60.0)
            once: Run a single scan then exit
            filters: Display filters applied to each result
            sort_field: Column to sort the table by
            descending: Sort direction
            scanner: Scanner to use; built from settings if not provided
        """
        self.scan_interval = scan_interval
        self.once = once
        self.filters = filters or FilterConfig()
        self.sort_field = sort_field
        self.descending = descending
        self.scanner = scanner or ArbitrageScanner()

        self._running = False
        self.last_result: Optional[ScanResult] = None

    async def start(self) -> None:
        """Run the scan loop until stopped (or once)."""
        logger.info(
            "starting_arb_scanner",
            scan_interval=self.scan_interval,
            once=self.once,
        )
        self._running = True
        await self._scan_loop()

    async def stop(self) -> None:
        logger.info("stopping_arb_scanner")
        self._running = False

    async def _scan_loop(self) -> None:
        while self._running:
            try:
                await self._run_scan_cycle()
            except Exception as e:
                logger.error("scan_cycle_error", error=str(e))

            if self.once:
                self._running = False
                break
            await asyncio.sleep(self.scan_interval)

    async def _run_scan_cycle(self) -> None:
        result = await self.scanner.scan()
        self.last_result = result
        print(self.render(result))

    def render(self, result: ScanResult) -> str:
        """Table plus summary for one scan result."""
        shown = sort_markets(
            filter_markets(result.markets, self.filters),
            field=self.sort_field,
            descending=self.descending,
        )
        summary = (
            f"{len(shown)} of {len(result.markets)} markets"
            f"{' (filtered)' if self.filters.is_active else ''} | "
            f"{count_arbitrage(result.markets)} arbitrage opportunities"
        )
        parts = [render_table(shown), "", summary]
        if result.used_demo:
            parts.append(f"DEMO DATA: {result.error or 'live data unavailable'}")
        return "\n".join(parts)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cross-Venue Arbitrage Scanner")
    parser.add_argument("--once", action="store_true", help="Run one scan then exit")
    parser.add_argument(
        "--scan-interval",
        type=float,
        default=settings.SCAN_INTERVAL_SECONDS,
        help=f"Seconds between scans (default: {settings.SCAN_INTERVAL_SECONDS})",
    )
    parser.add_argument("--min-spread", type=float, default=0.0, help="Minimum spread %% to show")
    parser.add_argument("--only-arb", action="store_true", help="Show arbitrage opportunities only")
    parser.add_argument("--search", default="", help="Filter by market name")
    parser.add_argument(
        "--sort",
        choices=[f.value for f in SortField],
        default=SortField.SPREAD_PCT.value,
        help="Sort column (default: spread_pct)",
    )
    parser.add_argument("--asc", action="store_true", help="Sort ascending")
    parser.add_argument("--verbose", action="store_true", help="Log per-market debug events")
    return parser


async def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    validate_feed_urls()
    validate_matching_thresholds()

    runner = ArbScannerRunner(
        scan_interval=args.scan_interval,
        once=args.once,
        filters=FilterConfig(
            min_spread_pct=args.min_spread,
            only_arbitrage=args.only_arb,
            search_query=args.search,
        ),
        sort_field=SortField(args.sort),
        descending=not args.asc,
    )

    # Handle shutdown signals
    loop = asyncio.get_running_loop()

    def signal_handler() -> None:
        logger.info("shutdown_signal_received")
        asyncio.create_task(runner.stop())

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, signal_handler)

    try:
        await runner.start()
    except KeyboardInterrupt:
        await runner.stop()


if __name__ == "__main__":
    asyncio.run(main())
