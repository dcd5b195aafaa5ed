"""
All-style composition
=====================

Run several mocked operations at once and continue when every one has
settled. Total latency is the longest delay, not the sum.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

import structlog
from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import LoadError
from .promise import fetch_data, fetch_data_future
from .source import MockSource

log = structlog.get_logger(__name__)


async def load_all(sources: Iterable[MockSource]) -> list[str]:
    """
    Await every source concurrently. Results keep input order.

    The first LoadError propagates. Timers of the other sources still fire,
    their outcomes are dropped.
    """
    futures = [fetch_data_future(source) for source in sources]
    return list(await asyncio.gather(*futures))


def load_all_result(sources: Iterable[MockSource]) -> LazyCoroResult[list[str], LoadError]:
    """
    Result rendition of load_all. Fail-fast on the first error in input order.
    """
    interps = [fetch_data(source) for source in sources]

    async def run() -> Result[list[str], LoadError]:
        results: list[Result[str, LoadError]] = await asyncio.gather(*(i() for i in interps))
        values: list[str] = []
        for result in results:
            match result:
                case Ok(v):
                    values.append(v)
                case Error(e):
                    log.warning("load_all_failed", reason=e.reason, settled=len(results))
                    return Error(e)
        return Ok(values)

    return LazyCoroResult(run)


__all__ = ("load_all", "load_all_result")
