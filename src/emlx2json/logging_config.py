"""
Structured logging for the converter and the API.

Events are rendered as JSON lines or, for interactive use, by the structlog
console renderer (LOG_JSON setting).
"""

import logging
from typing import Optional

import structlog

from .config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog.

    Args:
        level: Level name overriding the LOG_LEVEL setting ("DEBUG" also shows
            per-message parser events)
    """
    level_name = (level or settings.log_level).upper()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if settings.log_json
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
