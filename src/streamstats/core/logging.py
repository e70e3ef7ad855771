"""Structured logging for streamstats.

Usage:
    from streamstats.core.logging import configure_logging, get_logger, log_context

    configure_logging()  # level and format from STREAMSTATS_LOG_*
    logger = get_logger(__name__)

    with log_context(command="correlate"):
        logger.info("dataset_loaded", path="tracks_sample.json", rows=1000)

Events go to stderr so command output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import cast

import structlog
from structlog.contextvars import bound_contextvars
from structlog.typing import FilteringBoundLogger, Processor

from streamstats.core.config import get_settings

# Scoped key-values (e.g. the CLI command) merged into every event
log_context = bound_contextvars


def _renderer(log_format: str, color: bool) -> list[Processor]:
    if log_format == "json":
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=color)]


def configure_logging(
    log_level: str | None = None,
    log_format: str | None = None,
    show_timestamps: bool = True,
    color: bool | None = None,
) -> None:
    """Configure structlog for the process.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR (None = Settings.log_level)
        log_format: "console" or "json" (None = Settings.log_format)
        show_timestamps: Prefix events with an ISO UTC timestamp
        color: Colored console output (None = only when stderr is a terminal)
    """
    if log_level is None or log_format is None:
        settings = get_settings()
        log_level = log_level or settings.log_level
        log_format = log_format or settings.log_format
    if color is None:
        color = sys.stderr.isatty()

    level = logging.getLevelNamesMapping()[log_level.upper()]
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
    ]
    if show_timestamps:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    structlog.configure(
        processors=processors + _renderer(log_format, color),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger, typically with ``__name__``."""
    return cast(FilteringBoundLogger, structlog.get_logger(name))


# Quiet by default for library use; the CLI reconfigures from settings
configure_logging(log_level="WARNING", log_format="console")
