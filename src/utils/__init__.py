"""Utility modules for the scanner.

Sub-modules:
- logging: configure_logging() for structlog setup
- parsing: JSON/float helpers for venue payloads (import directly from src.utils.parsing)
- formatting: price/spread/volume display strings (import directly from src.utils.formatting)
"""

from .logging import configure_logging

__all__ = [
    "configure_logging",
]
