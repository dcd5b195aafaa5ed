"""
Transcript - ordered record of console output
=============================================

Demos report every line through `Transcript.report`. The line is kept for
the caller and echoed to the console in the same step, so what a demo
returns is exactly what it printed.
"""

from __future__ import annotations

from collections.abc import Iterable

from ._types import Report


class Transcript(list[str]):
    """
    Lines in print order, plus the sink they are echoed to.

    Example:
        transcript = Transcript()
        await suspend.load_data(report=transcript.report)
        transcript  # ["Data loaded!"], also printed

        Transcript(echo=None)  # record only, print nothing
    """

    __slots__ = ("_echo",)

    def __init__(self, lines: Iterable[str] = (), /, *, echo: Report | None = print) -> None:
        super().__init__(lines)
        self._echo = echo

    def report(self, line: str, /) -> None:
        """Record line, then echo it. Usable wherever a Report is expected."""
        self.append(line)
        if self._echo is not None:
            self._echo(line)


__all__ = ("Transcript",)
