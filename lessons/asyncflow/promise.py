"""
Promise style
=============

Two renditions of "a value that will exist later":

- fetch_data_future: an asyncio.Future the timer resolves or rejects,
- fetch_data: a lazy LazyCoroResult[str, LoadError], started only when awaited.

`settle` is the `.then(on_ok).catch(on_error)` pair over a LazyCoroResult.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import structlog
from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import LoadError
from .._types import Report
from .source import MockSource

log = structlog.get_logger(__name__)


def fetch_data_future(
    source: MockSource | None = None,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Future[str]:
    """
    Start the mocked operation and return its future.

    The timer resolves the future with the payload or rejects it with
    LoadError. A future cancelled by its consumer is left alone.
    """
    source = source if source is not None else MockSource()
    loop = loop if loop is not None else asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()

    def on_settle(error: LoadError | None, data: str | None) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(str(data))

    source.schedule(loop, on_settle)
    return future


def fetch_data(source: MockSource | None = None) -> LazyCoroResult[str, LoadError]:
    """
    Lazy rendition: nothing is scheduled until the result is awaited.

    Example:
        result = await fetch_data()()   # Ok("Data loaded!")
    """

    async def run() -> Result[str, LoadError]:
        try:
            return Ok(await fetch_data_future(source))
        except LoadError as exc:
            return Error(exc)

    return LazyCoroResult(run)


async def settle[T, E, R](
    interp: LazyCoroResult[T, E],
    *,
    on_ok: Callable[[T], R],
    on_error: Callable[[E], R],
) -> R:
    """Run interp, then continue with on_ok or on_error. Exactly one of them runs."""
    match await interp():
        case Ok(value):
            return on_ok(value)
        case Error(err):
            return on_error(err)


async def load_data(
    *,
    source: MockSource | None = None,
    report: Report = print,
) -> Result[str, LoadError]:
    """Promise demo: report the data, or "Error: <reason>" on rejection."""

    def on_ok(data: str) -> Result[str, LoadError]:
        report(data)
        return Ok(data)

    def on_error(err: LoadError) -> Result[str, LoadError]:
        log.warning("load_failed", style="promise", reason=err.reason)
        report(f"Error: {err.reason}")
        return Error(err)

    return await settle(fetch_data(source), on_ok=on_ok, on_error=on_error)


__all__ = ("fetch_data", "fetch_data_future", "load_data", "settle")
