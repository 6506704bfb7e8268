"""Custom exceptions for the arbitrage scanner."""


class ScannerError(Exception):
    """Base exception for all scanner errors."""


class FeedError(ScannerError):
    """Error connecting to or reading from a venue feed."""


class ConfigError(ScannerError):
    """Missing or invalid configuration."""
