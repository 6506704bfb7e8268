"""Cross-venue market matcher pairing Polymarket and Kalshi markets.

Matching is greedy and one-pass: each Polymarket market, in input order,
claims the best-scoring Kalshi market that nobody has claimed yet. An earlier
market can take a Kalshi market that would have suited a later one better;
results depend on input order and are reproducible for a given order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

import structlog

from src.matching.normalizer import NormalizedMarket
from src.matching.similarity import calculate_match_score
from src.matching.spread import ArbitrageDirection, SpreadSignal, classify_spread
from src.matching.thresholds import DEFAULT_MATCHING_CONFIG, MatchingConfig

logger = structlog.get_logger()

Volume = Union[str, int, float]


class MatchConfidence(Enum):
    """Coarse bucket for the textual evidence behind a pairing."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def confidence_for_score(
    score: float,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> MatchConfidence:
    if score >= config.high_confidence:
        return MatchConfidence.HIGH
    if score >= config.medium_confidence:
        return MatchConfidence.MEDIUM
    return MatchConfidence.LOW


@dataclass(frozen=True)
class UnifiedMarket:
    """One real-world event as seen on one or both venues.

    Attributes:
        identifier: "<polymarket id>-<kalshi ticker>" for pairs, else the single side's key
        display_name: Title shown to the user (Polymarket's for pairs)
        canonical_key: Normalized form of display_name
        polymarket_price: Polymarket YES price in cents, if listed there
        kalshi_price: Kalshi YES price in cents, if listed there
        spread_abs: Absolute price difference (0 unless matched)
        spread_pct: Spread as a percentage of the mean price (0 unless matched)
        polymarket_url: Polymarket listing link
        kalshi_url: Kalshi listing link
        polymarket_volume: Polymarket-reported volume
        kalshi_volume: Kalshi-reported volume
        match_confidence: Bucketed similarity of the pairing (LOW if unmatched)
        match_score: Similarity score that produced the pairing (0.0 if unmatched)
        has_arbitrage: Spread is large enough to flag an opportunity
        arbitrage_direction: Cheaper venue to buy, if the spread warrants one
    """

    identifier: str
    display_name: str
    canonical_key: str
    polymarket_price: Optional[int] = None
    kalshi_price: Optional[int] = None
    spread_abs: int = 0
    spread_pct: float = 0.0
    polymarket_url: Optional[str] = None
    kalshi_url: Optional[str] = None
    polymarket_volume: Optional[Volume] = None
    kalshi_volume: Optional[Volume] = None
    match_confidence: MatchConfidence = MatchConfidence.LOW
    match_score: float = 0.0
    has_arbitrage: bool = False
    arbitrage_direction: ArbitrageDirection = ArbitrageDirection.NONE

    def __post_init__(self) -> None:
        if self.polymarket_price is None and self.kalshi_price is None:
            raise ValueError(f"UnifiedMarket {self.identifier!r} has no venue price")

    @property
    def is_matched(self) -> bool:
        """True when the market is priced on both venues."""
        return self.polymarket_price is not None and self.kalshi_price is not None

    @classmethod
    def from_pair(
        cls,
        polymarket: NormalizedMarket,
        kalshi: NormalizedMarket,
        score: float,
        config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
    ) -> "UnifiedMarket":
        signal: SpreadSignal = classify_spread(polymarket.price_cents, kalshi.price_cents, config)
        return cls(
            identifier=f"{polymarket.identifier}-{kalshi.identifier}",
            display_name=polymarket.display_name,
            canonical_key=polymarket.canonical_key,
            polymarket_price=polymarket.price_cents,
            kalshi_price=kalshi.price_cents,
            spread_abs=signal.spread_abs,
            spread_pct=signal.spread_pct,
            polymarket_url=polymarket.reference_url,
            kalshi_url=kalshi.reference_url,
            polymarket_volume=polymarket.volume,
            kalshi_volume=kalshi.volume,
            match_confidence=confidence_for_score(score, config),
            match_score=score,
            has_arbitrage=signal.has_arbitrage,
            arbitrage_direction=signal.direction,
        )

    @classmethod
    def polymarket_only(cls, market: NormalizedMarket) -> "UnifiedMarket":
        return cls(
            identifier=market.identifier,
            display_name=market.display_name,
            canonical_key=market.canonical_key,
            polymarket_price=market.price_cents,
            polymarket_url=market.reference_url,
            polymarket_volume=market.volume,
        )

    @classmethod
    def kalshi_only(cls, market: NormalizedMarket) -> "UnifiedMarket":
        return cls(
            identifier=market.identifier,
            display_name=market.display_name,
            canonical_key=market.canonical_key,
            kalshi_price=market.price_cents,
            kalshi_url=market.reference_url,
            kalshi_volume=market.volume,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for serialization."""
        return {
            "id": self.identifier,
            "event_name": self.display_name,
            "normalized_name": self.canonical_key,
            "polymarket_price": self.polymarket_price,
            "kalshi_price": self.kalshi_price,
            "spread": self.spread_abs,
            "spread_pct": self.spread_pct,
            "polymarket_url": self.polymarket_url,
            "kalshi_url": self.kalshi_url,
            "polymarket_volume": self.polymarket_volume,
            "kalshi_volume": self.kalshi_volume,
            "match_confidence": self.match_confidence.value,
            "match_score": self.match_score,
            "has_arbitrage": self.has_arbitrage,
            "arbitrage_direction": self.arbitrage_direction.value,
        }


class CrossVenueMatcher:
    """Greedy one-to-one matcher between Polymarket and Kalshi markets."""

    def __init__(self, config: MatchingConfig = DEFAULT_MATCHING_CONFIG) -> None:
        self.config = config

    def _best_candidate(
        self,
        polymarket: NormalizedMarket,
        kalshi_markets: list[NormalizedMarket],
        claimed: set[str],
    ) -> tuple[Optional[NormalizedMarket], float]:
        """Highest-scoring unclaimed Kalshi market at or above the match threshold.

        Ties keep the first candidate seen.
        """
        best: Optional[NormalizedMarket] = None
        best_score = 0.0

        for kalshi in kalshi_markets:
            if kalshi.identifier in claimed:
                continue
            score = calculate_match_score(polymarket, kalshi, self.config)
            if score < self.config.min_match_score:
                continue
            if best is None or score > best_score:
                best = kalshi
                best_score = score

        return best, best_score

    def match(
        self,
        polymarket_markets: list[NormalizedMarket],
        kalshi_markets: list[NormalizedMarket],
    ) -> list[UnifiedMarket]:
        """
        Pair markets across venues and score their spreads.

        Every input market appears exactly once in the result: as part of a
        pair, or as a single-venue entry. Each Kalshi market is claimed at
        most once.

        Args:
            polymarket_markets: Normalized Polymarket markets, in priority order.
            kalshi_markets: Normalized Kalshi markets.

        Returns:
            Unified markets sorted by descending spread percentage (stable).
        """
        claimed: set[str] = set()
        unified: list[UnifiedMarket] = []
        matched = 0

        for polymarket in polymarket_markets:
            best, score = self._best_candidate(polymarket, kalshi_markets, claimed)

            if best is None:
                unified.append(UnifiedMarket.polymarket_only(polymarket))
                continue

            claimed.add(best.identifier)
            pair = UnifiedMarket.from_pair(polymarket, best, score, self.config)
            unified.append(pair)
            matched += 1
            logger.debug(
                "markets_paired",
                polymarket=polymarket.display_name,
                kalshi=best.display_name,
                score=round(score, 3),
                confidence=pair.match_confidence.value,
                spread_pct=round(pair.spread_pct, 2),
            )

        unmatched_kalshi = [m for m in kalshi_markets if m.identifier not in claimed]
        unified.extend(UnifiedMarket.kalshi_only(m) for m in unmatched_kalshi)

        unified.sort(key=lambda m: m.spread_pct, reverse=True)

        logger.info(
            "matching_complete",
            polymarket_markets=len(polymarket_markets),
            kalshi_markets=len(kalshi_markets),
            matched=matched,
            unmatched_polymarket=len(polymarket_markets) - matched,
            unmatched_kalshi=len(unmatched_kalshi),
            arbitrage=sum(1 for m in unified if m.has_arbitrage),
        )
        return unified
