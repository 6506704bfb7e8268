"""Polymarket Gamma events feed.

Fetches active events from the Gamma ``/events`` endpoint, keeps the
political/election ones, and turns each JSON row into typed records whose
optional fields are explicit. Outcome labels and prices are kept exactly as
received; decoding them is left to the normalizer, which owns the fallback.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

import httpx
import structlog

from config.settings import settings
from src.exceptions import FeedError
from src.feeds.topic_filter import (
    POLITICAL_TAGS,
    is_political_category,
    mentions_political_keyword,
)
from src.utils.parsing import _optional_bool, _optional_str, parse_json_list

logger = structlog.get_logger()

RawJsonList = Union[str, list[Any], None]


def _raw_json_list(value: Any) -> RawJsonList:
    if isinstance(value, (str, list)):
        return value
    return None


def _tag_labels(value: Any) -> list[str]:
    """Gamma tags arrive as strings or as ``{"label": ..., "slug": ...}`` objects."""
    labels: list[str] = []
    for tag in parse_json_list(value):
        if isinstance(tag, str):
            labels.append(tag.lower())
        elif isinstance(tag, dict):
            label = tag.get("label") or tag.get("slug")
            if isinstance(label, str):
                labels.append(label.lower())
    return labels


@dataclass(slots=True)
class PolymarketMarket:
    """One tradable sub-market of a Polymarket event."""

    id: str
    question: Optional[str] = None
    group_item_title: Optional[str] = None
    outcomes: RawJsonList = None  # e.g. '["Yes", "No"]'
    outcome_prices: RawJsonList = None  # e.g. '["0.55", "0.45"]'
    active: Optional[bool] = None
    closed: Optional[bool] = None
    volume: Optional[Union[str, int, float]] = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "PolymarketMarket":
        volume = raw.get("volume")
        return cls(
            id=str(raw.get("id", "")),
            question=_optional_str(raw.get("question")),
            group_item_title=_optional_str(raw.get("groupItemTitle")),
            outcomes=_raw_json_list(raw.get("outcomes")),
            outcome_prices=_raw_json_list(raw.get("outcomePrices")),
            active=_optional_bool(raw.get("active")),
            closed=_optional_bool(raw.get("closed")),
            volume=volume if isinstance(volume, (str, int, float)) else None,
        )

    @property
    def is_tradable(self) -> bool:
        return self.active is True and self.closed is not True


@dataclass(slots=True)
class PolymarketEvent:
    """A Polymarket event grouping one or more sub-markets."""

    id: str
    slug: str
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    markets: list[PolymarketMarket] = field(default_factory=list)

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "PolymarketEvent":
        markets = [
            PolymarketMarket.from_api(row)
            for row in parse_json_list(raw.get("markets"))
            if isinstance(row, dict)
        ]
        return cls(
            id=str(raw.get("id", "")),
            slug=str(raw.get("slug") or ""),
            title=str(raw.get("title") or ""),
            description=_optional_str(raw.get("description")),
            category=_optional_str(raw.get("category")),
            tags=_tag_labels(raw.get("tags")),
            markets=markets,
        )


def is_political_event(event: PolymarketEvent) -> bool:
    text = f"{event.title} {event.description or ''} {event.slug}"
    if mentions_political_keyword(text, event.tags):
        return True
    return is_political_category(event.category) or any(
        tag in POLITICAL_TAGS for tag in event.tags
    )


def _event_rows(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        return payload.get("events") or payload.get("data") or []
    return []


class PolymarketEventsClient:
    """Fetches political events from the Polymarket Gamma API."""

    def __init__(
        self,
        events_url: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> None:
        self.events_url = events_url or settings.POLYMARKET_EVENTS_URL
        self.limit = limit or settings.POLYMARKET_EVENTS_LIMIT

    async def fetch_events(self, client: httpx.AsyncClient) -> list[PolymarketEvent]:
        """Fetch active, open events and keep the political ones.

        Raises:
            FeedError: On transport errors, non-2xx responses or invalid JSON.
        """
        try:
            response = await client.get(
                self.events_url,
                params={"active": "true", "closed": "false", "limit": self.limit},
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error("polymarket_fetch_failed", status=exc.response.status_code)
            raise FeedError(f"Polymarket API error: {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.error("polymarket_fetch_failed", error=str(exc))
            raise FeedError(f"Polymarket API error: {exc}") from exc
        except ValueError as exc:
            logger.error("polymarket_invalid_json", error=str(exc))
            raise FeedError("Polymarket API returned invalid JSON") from exc

        events = [
            PolymarketEvent.from_api(row)
            for row in _event_rows(payload)
            if isinstance(row, dict)
        ]
        political = [event for event in events if is_political_event(event)]
        logger.info(
            "polymarket_events_fetched",
            total=len(events),
            political=len(political),
        )
        return political
