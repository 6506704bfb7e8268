"""Display formatting for prices, spreads and volumes."""

from __future__ import annotations

from typing import Optional, Union

from src.utils.parsing import to_finite_float

MISSING = "—"


def format_price(price: Optional[int]) -> str:
    if price is None:
        return MISSING
    return f"{price}¢"


def format_spread(spread: float) -> str:
    return f"{spread:.1f}"


def format_spread_pct(percent: float) -> str:
    return f"{percent:.1f}%"


def format_volume(volume: Optional[Union[str, int, float]]) -> str:
    """Compact dollar volume: ``$1.2B``, ``$3.4M``, ``$5.6K`` or ``$12``.

    Polymarket reports volume as a numeric string, Kalshi as a number.
    """
    if volume is None:
        return MISSING
    amount = to_finite_float(volume)
    if amount is None:
        return MISSING
    if amount >= 1_000_000_000:
        return f"${amount / 1_000_000_000:.1f}B"
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"${amount / 1_000:.1f}K"
    return f"${amount:.0f}"
