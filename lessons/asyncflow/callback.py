"""
Callback style
==============

The caller hands over an error-first continuation; the mocked operation
invokes it once the timer fires. Nothing is returned but the timer handle.
"""

from __future__ import annotations

import asyncio

import structlog

from .._errors import LoadError
from .._types import NodeCallback, Report
from .source import MockSource

log = structlog.get_logger(__name__)


def fetch_data(
    callback: NodeCallback,
    *,
    source: MockSource | None = None,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.TimerHandle:
    """
    Start the mocked operation and call callback(error, data) when it settles.

    Without an explicit loop this must be called from a running event loop.
    """
    source = source if source is not None else MockSource()
    loop = loop if loop is not None else asyncio.get_running_loop()
    return source.schedule(loop, callback)


def load_data(
    *,
    source: MockSource | None = None,
    report: Report = print,
) -> asyncio.Future[None]:
    """
    Callback demo: report the data, or "Error: <reason>" on failure.

    The returned future resolves after the callback has run, so callers can
    await completion without the callback itself being awaitable. An error
    raised by report rejects the future.
    """
    loop = asyncio.get_running_loop()
    done: asyncio.Future[None] = loop.create_future()

    def on_settle(error: LoadError | None, data: str | None) -> None:
        if done.done():
            return
        try:
            if error is not None:
                log.warning("load_failed", style="callback", reason=error.reason)
                report(f"Error: {error.reason}")
            else:
                report(str(data))
        except Exception as exc:
            # surface report errors to whoever awaits the future
            done.set_exception(exc)
            return
        done.set_result(None)

    fetch_data(on_settle, source=source, loop=loop)
    return done


__all__ = ("fetch_data", "load_data")
