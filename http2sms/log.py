"""
Logging Setup
=============
Structured logging configuration for applications using http2sms.

The library itself only emits structlog events. Applications that do not
configure structlog themselves can call ``setup_logging`` at startup:

    from http2sms.log import setup_logging
    setup_logging(level="DEBUG")
"""

import logging
import sys

import structlog


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structlog output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render JSON lines instead of console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )
