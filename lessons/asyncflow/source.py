"""
Mocked delayed operation
========================

A MockSource stands in for slow I/O: after `delay_seconds` it settles with
either its payload or a new LoadError built from its `failure` reason.
The delay is a loop timer, never a blocked thread.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import structlog

from .._errors import LoadError
from .._types import NodeCallback
from ..config import get_settings

log = structlog.get_logger(__name__)

DATA_LOADED = "Data loaded!"


def _default_delay() -> float:
    return get_settings().delay_seconds


@dataclass(frozen=True, slots=True)
class MockSource:
    payload: str = DATA_LOADED
    delay_seconds: float = field(default_factory=_default_delay)
    failure: str | None = None

    def schedule(
        self,
        loop: asyncio.AbstractEventLoop,
        on_settle: NodeCallback,
    ) -> asyncio.TimerHandle:
        """
        Register one timer; on_settle(error, data) runs exactly once when it fires.

        Cancelling the returned handle before it fires means on_settle never runs.
        """
        log.debug("timer_scheduled", delay_seconds=self.delay_seconds)
        return loop.call_later(self.delay_seconds, self._fire, on_settle)

    def _fire(self, on_settle: NodeCallback) -> None:
        if self.failure is not None:
            log.debug("timer_fired", outcome="failure", reason=self.failure)
            on_settle(LoadError(self.failure), None)
        else:
            log.debug("timer_fired", outcome="ok")
            on_settle(None, self.payload)


__all__ = ("DATA_LOADED", "MockSource")
