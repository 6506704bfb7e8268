"""Scanner configuration, overridable through environment variables or ``.env``."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # === Polymarket (Gamma events API) ===
    POLYMARKET_EVENTS_URL: str = "https://gamma-api.polymarket.com/events"
    POLYMARKET_EVENTS_LIMIT: int = 100
    POLYMARKET_EVENT_BASE_URL: str = "https://polymarket.com/event"

    # === Kalshi (Trade API v2) ===
    KALSHI_EVENTS_URL: str = "https://api.elections.kalshi.com/trade-api/v2/events"
    KALSHI_EVENTS_LIMIT: int = 100
    KALSHI_MARKET_BASE_URL: str = "https://kalshi.com/markets"

    # === HTTP ===
    HTTP_TIMEOUT_SECONDS: float = 15.0

    # === Scan loop ===
    SCAN_INTERVAL_SECONDS: float = 60.0
    DEMO_FALLBACK_MIN_MARKETS: int = 3  # fewer unified markets -> demo data

    # === Matching ===
    MATCH_MIN_SCORE: float = 0.3
    MATCH_HIGH_CONFIDENCE: float = 0.6
    MATCH_MEDIUM_CONFIDENCE: float = 0.4
    MATCH_KEY_TERM_BONUS: float = 0.15
    DEFAULT_PRICE_CENTS: int = 50

    # === Arbitrage classification (percent of mean price) ===
    ARB_SPREAD_PCT: float = 5.0
    ARB_DIRECTION_SPREAD_PCT: float = 3.0

    model_config = {"env_file": ".env"}


settings = Settings()
