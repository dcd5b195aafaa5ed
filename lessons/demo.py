"""Console surface: run every snippet in order and print what it computes."""

from __future__ import annotations

import asyncio

import structlog

from ._types import Report
from .asyncflow import MockSource, callback, load_all, promise, suspend
from .config import LessonSettings, get_settings
from .generics import ALICE, PERSON_AGE, get_property
from .observability import configure_logging
from .shapes import area_of
from .transcript import Transcript

log = structlog.get_logger(__name__)


async def run_demos(
    settings: LessonSettings | None = None,
    *,
    echo: Report | None = print,
) -> Transcript:
    """
    Run property access, shape areas and the async styles.

    Every line is echoed (printed by default) and also returned, in order.
    """
    settings = settings if settings is not None else get_settings()
    transcript = Transcript(echo=echo)
    report = transcript.report

    def source() -> MockSource:
        return MockSource(delay_seconds=settings.delay_seconds)

    # generic property access
    report(str(get_property(ALICE, "name")))
    report(str(PERSON_AGE(ALICE)))

    # discriminated union
    report(str(area_of({"shape": "circle", "radius": 5})))
    report(str(area_of({"shape": "rectangle", "width": 4, "height": 6})))

    # three equivalent async styles, one after another
    await callback.load_data(source=source(), report=report)
    await promise.load_data(source=source(), report=report)
    await suspend.load_data(source=source(), report=report)

    # all-style composition
    report(str(await load_all(source() for _ in range(settings.parallel_sources))))

    log.info("demos_finished", lines=len(transcript))
    return transcript


def main() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, fmt=settings.log_format)
    asyncio.run(run_demos(settings))


__all__ = ("main", "run_demos")
