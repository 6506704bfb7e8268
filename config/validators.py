"""Configuration validators."""

from src.exceptions import ConfigError


def validate_matching_thresholds() -> None:
    """Raise ConfigError if the matching/arbitrage thresholds are inconsistent."""
    from config.settings import settings
    if not 0.0 <= settings.MATCH_MIN_SCORE <= 1.0:
        raise ConfigError("MATCH_MIN_SCORE must be within [0, 1]")
    if settings.MATCH_MEDIUM_CONFIDENCE > settings.MATCH_HIGH_CONFIDENCE:
        raise ConfigError("MATCH_MEDIUM_CONFIDENCE must not exceed MATCH_HIGH_CONFIDENCE")
    if settings.ARB_DIRECTION_SPREAD_PCT > settings.ARB_SPREAD_PCT:
        raise ConfigError("ARB_DIRECTION_SPREAD_PCT must not exceed ARB_SPREAD_PCT")
    if not 0 <= settings.DEFAULT_PRICE_CENTS <= 100:
        raise ConfigError("DEFAULT_PRICE_CENTS must be within [0, 100]")


def validate_feed_urls() -> None:
    """Raise ConfigError if a venue endpoint is missing."""
    from config.settings import settings
    if not settings.POLYMARKET_EVENTS_URL:
        raise ConfigError("POLYMARKET_EVENTS_URL is required")
    if not settings.KALSHI_EVENTS_URL:
        raise ConfigError("KALSHI_EVENTS_URL is required")
