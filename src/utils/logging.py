"""Centralized structlog configuration for the scanner scripts."""

import logging

import structlog

_configured = False


def configure_logging(verbose: bool = False) -> None:
    """Install the project processor chain and the minimum log level.

    Only the first call takes effect, so library code and scripts may both
    call it. ``verbose`` lets per-market debug events (candidate scores,
    skipped markets) through; otherwise the floor is INFO.
    """
    global _configured
    if _configured:
        return
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
    )
    _configured = True
