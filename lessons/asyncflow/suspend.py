"""
async/await style
=================

One suspension point: the coroutine yields to the loop until the timer
settles the underlying future, then resumes exactly once. Failures are
ordinary exceptions, handled with try/except around the await.
"""

from __future__ import annotations

import structlog

from .._errors import LoadError
from .._types import Report
from .promise import fetch_data_future
from .source import MockSource

log = structlog.get_logger(__name__)


async def fetch_data(source: MockSource | None = None) -> str:
    """Suspend until the mocked operation settles. Raises LoadError on failure."""
    return await fetch_data_future(source)


async def load_data(
    *,
    source: MockSource | None = None,
    report: Report = print,
) -> str | None:
    """async/await demo: report the data, or "Error: <reason>" when it raises."""
    try:
        data = await fetch_data(source)
    except LoadError as exc:
        log.warning("load_failed", style="async", reason=exc.reason)
        report(f"Error: {exc.reason}")
        return None
    report(data)
    return data


__all__ = ("fetch_data", "load_data")
