"""Structured logging setup with structlog.

Usage:
    from lessons.observability import configure_logging

    configure_logging(level="DEBUG")              # console output
    configure_logging(level="INFO", fmt="json")   # one JSON object per line

    log = structlog.get_logger(__name__)
    log.debug("timer_scheduled", delay_seconds=1.0)

Log lines go to stderr so they never interleave with the demo output on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Literal

import structlog
from structlog.typing import Processor


def _level_number(level: str) -> int:
    """Map a level name to its logging constant, INFO when unknown."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(
    level: str = "WARNING",
    fmt: Literal["console", "json"] = "console",
) -> None:
    """Configure structlog for the process.

    Args:
        level: minimum level name; lower-priority events are dropped.
        fmt: 'console' for a readable renderer, 'json' for machine parsing.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if fmt == "json":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


__all__ = ("configure_logging",)
