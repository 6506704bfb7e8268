from .kalshi_events import KalshiEvent, KalshiEventsClient, KalshiMarket
from .polymarket_events import PolymarketEvent, PolymarketEventsClient, PolymarketMarket
from .topic_filter import POLITICAL_KEYWORDS

__all__ = [
    "KalshiEvent",
    "KalshiEventsClient",
    "KalshiMarket",
    "POLITICAL_KEYWORDS",
    "PolymarketEvent",
    "PolymarketEventsClient",
    "PolymarketMarket",
]
