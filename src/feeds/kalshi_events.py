"""Kalshi Trade API v2 events feed.

Kalshi specifics:
- Sub-markets carry an explicit ``status`` ("active", "closed", "settled")
- Prices are integer cents (0-100), not 0.0-1.0 fractions
- Markets are identified by ``ticker``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import httpx
import structlog

from config.settings import settings
from src.exceptions import FeedError
from src.feeds.topic_filter import is_political_category, mentions_political_keyword
from src.utils.parsing import _optional_str, parse_json_list, to_finite_float

logger = structlog.get_logger()


@dataclass(slots=True)
class KalshiMarket:
    """One Kalshi contract. Absent price fields stay ``None``."""

    ticker: str
    event_ticker: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None
    yes_bid: Optional[float] = None
    last_price: Optional[float] = None
    volume: Optional[float] = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "KalshiMarket":
        return cls(
            ticker=str(raw.get("ticker", "")),
            event_ticker=_optional_str(raw.get("event_ticker")),
            title=_optional_str(raw.get("title")),
            status=_optional_str(raw.get("status")),
            yes_bid=to_finite_float(raw.get("yes_bid")),
            last_price=to_finite_float(raw.get("last_price")),
            volume=to_finite_float(raw.get("volume")),
        )


@dataclass(slots=True)
class KalshiEvent:
    """A Kalshi event with its nested markets."""

    event_ticker: str
    title: str
    category: Optional[str] = None
    sub_title: Optional[str] = None
    markets: list[KalshiMarket] = field(default_factory=list)

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "KalshiEvent":
        return cls(
            event_ticker=str(raw.get("event_ticker", "")),
            title=str(raw.get("title") or ""),
            category=_optional_str(raw.get("category")),
            sub_title=_optional_str(raw.get("sub_title")),
            markets=[
                KalshiMarket.from_api(row)
                for row in parse_json_list(raw.get("markets"))
                if isinstance(row, dict)
            ],
        )


def is_political_event(event: KalshiEvent) -> bool:
    text = f"{event.title} {event.sub_title or ''} {event.category or ''}"
    return mentions_political_keyword(text) or is_political_category(event.category)


class KalshiEventsClient:
    """Fetches open political events, with nested markets, from Kalshi."""

    def __init__(
        self,
        events_url: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> None:
        self.events_url = events_url or settings.KALSHI_EVENTS_URL
        self.limit = limit or settings.KALSHI_EVENTS_LIMIT

    async def fetch_events(self, client: httpx.AsyncClient) -> list[KalshiEvent]:
        """Fetch open events and keep the political ones.

        Raises:
            FeedError: On transport errors, non-2xx responses or invalid JSON.
        """
        try:
            response = await client.get(
                self.events_url,
                params={
                    "status": "open",
                    "limit": self.limit,
                    "with_nested_markets": "true",
                },
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error("kalshi_fetch_failed", status=exc.response.status_code)
            raise FeedError(f"Kalshi API error: {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.error("kalshi_fetch_failed", error=str(exc))
            raise FeedError(f"Kalshi API error: {exc}") from exc
        except ValueError as exc:
            logger.error("kalshi_invalid_json", error=str(exc))
            raise FeedError("Kalshi API returned invalid JSON") from exc

        rows = payload.get("events") if isinstance(payload, dict) else None
        events = [
            KalshiEvent.from_api(row)
            for row in (rows or [])
            if isinstance(row, dict)
        ]
        political = [event for event in events if is_political_event(event)]
        logger.info("kalshi_events_fetched", total=len(events), political=len(political))
        return political
