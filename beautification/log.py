"""
Logging setup for the beautification manager.

Modules log through ``structlog.get_logger(__name__)`` with snake_case event
names and key/value context. Nothing is configured on import; entry points
(the CLI, a host application) call configure_logging() once.
"""

import logging
import sys

import structlog

from .config import BeautificationConfig

__all__ = ["configure_logging"]


def configure_logging(
    level: str = "WARNING",
    json: bool = False,
    config: BeautificationConfig | None = None,
) -> None:
    """Configure structlog for console or JSON output on stderr.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR)
        json: Render one JSON object per line instead of console output
        config: If given, level and json are taken from it
    """
    if config is not None:
        level = config.log_level
        json = config.log_json

    min_level = getattr(logging, level.upper(), logging.WARNING)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
