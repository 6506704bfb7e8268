"""Tests for the arbitrage scanner entry point script."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.arb.demo_data import get_demo_markets
from src.arb.filters import FilterConfig, SortField
from src.arb.scanner import LIMITED_DATA_MESSAGE, ArbitrageScanner, ScanResult


def _mock_scanner(result=None, error=None):
    scanner = MagicMock()
    scanner.scan = AsyncMock(return_value=result, side_effect=error)
    return scanner


def test_script_imports():
    """Verify the module can be imported without errors."""
    from scripts import run_arb_scanner

    assert hasattr(run_arb_scanner, "ArbScannerRunner")
    assert hasattr(run_arb_scanner, "main")


def test_runner_init_defaults():
    from scripts.run_arb_scanner import ArbScannerRunner

    runner = ArbScannerRunner()

    assert runner.scan_interval == 60.0
    assert runner.once is False
    assert runner.sort_field is SortField.SPREAD_PCT
    assert runner.descending is True
    assert runner._running is False
    assert isinstance(runner.scanner, ArbitrageScanner)


def test_parser_defaults():
    from scripts.run_arb_scanner import build_parser

    args = build_parser().parse_args([])

    assert args.once is False
    assert args.scan_interval == 60.0
    assert args.min_spread == 0.0
    assert args.sort == "spread_pct"
    assert args.asc is False


def test_parser_rejects_unknown_sort():
    from scripts.run_arb_scanner import build_parser

    with pytest.raises(SystemExit):
        build_parser().parse_args(["--sort", "volume"])


@pytest.mark.asyncio
async def test_run_once_prints_demo_banner(capsys):
    from scripts.run_arb_scanner import ArbScannerRunner

    result = ScanResult(markets=get_demo_markets(), used_demo=True, error=LIMITED_DATA_MESSAGE)
    runner = ArbScannerRunner(once=True, scanner=_mock_scanner(result))

    await runner.start()

    out = capsys.readouterr().out
    assert "15 of 15 markets | 9 arbitrage opportunities" in out
    assert f"DEMO DATA: {LIMITED_DATA_MESSAGE}" in out
    assert "Trump wins 2024 Presidential Election" in out
    assert runner.last_result is result
    assert runner._running is False


@pytest.mark.asyncio
async def test_scan_cycle_error_does_not_crash_loop():
    from scripts.run_arb_scanner import ArbScannerRunner

    runner = ArbScannerRunner(once=True, scanner=_mock_scanner(error=RuntimeError("boom")))

    await runner.start()

    assert runner.last_result is None


def test_render_with_filters():
    from scripts.run_arb_scanner import ArbScannerRunner

    runner = ArbScannerRunner(
        filters=FilterConfig(only_arbitrage=True),
        scanner=_mock_scanner(),
    )
    output = runner.render(ScanResult(markets=get_demo_markets()))

    assert "9 of 15 markets (filtered) | 9 arbitrage opportunities" in output
    assert "DEMO DATA" not in output


def test_render_empty_table():
    from scripts.run_arb_scanner import ArbScannerRunner

    runner = ArbScannerRunner(
        filters=FilterConfig(search_query="no such market"),
        scanner=_mock_scanner(),
    )
    output = runner.render(ScanResult(markets=get_demo_markets()))

    assert "No markets found matching your filters" in output


def test_render_table_shows_missing_price():
    from scripts.run_arb_scanner import render_table
    from src.matching.event_matcher import UnifiedMarket

    table = render_table([
        UnifiedMarket(identifier="K1", display_name="Kalshi only", canonical_key="kalshi only", kalshi_price=40),
    ])

    assert "—" in table
    assert "40¢" in table


@pytest.mark.asyncio
async def test_main_once_runs_single_scan(capsys):
    from scripts import run_arb_scanner

    result = ScanResult(markets=get_demo_markets())
    with patch.object(ArbitrageScanner, "scan", new=AsyncMock(return_value=result)) as scan:
        await run_arb_scanner.main(["--once", "--only-arb", "--sort", "event_name", "--asc"])

    scan.assert_awaited_once()
    assert "9 of 15 markets (filtered)" in capsys.readouterr().out
