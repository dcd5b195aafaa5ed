"""Tests for all-style composition."""

from __future__ import annotations

import time

import pytest
from kungfu import Error, Ok

from lessons import DATA_LOADED, LoadError, MockSource, load_all, load_all_result


class TestLoadAll:
    @pytest.mark.asyncio
    async def test_collects_every_result(self) -> None:
        assert await load_all([MockSource()] * 3) == [DATA_LOADED] * 3

    @pytest.mark.asyncio
    async def test_keeps_input_order(self) -> None:
        sources = [
            MockSource(payload="slow", delay_seconds=0.05),
            MockSource(payload="fast", delay_seconds=0.01),
        ]
        assert await load_all(sources) == ["slow", "fast"]

    @pytest.mark.asyncio
    async def test_runs_concurrently(self) -> None:
        sources = [MockSource(delay_seconds=0.1) for _ in range(3)]

        started = time.perf_counter()
        await load_all(sources)

        assert time.perf_counter() - started < 0.25

    @pytest.mark.asyncio
    async def test_empty(self) -> None:
        assert await load_all([]) == []

    @pytest.mark.asyncio
    async def test_first_error_propagates(self) -> None:
        sources = [
            MockSource(delay_seconds=0.01),
            MockSource(delay_seconds=0.01, failure="second"),
        ]
        with pytest.raises(LoadError, match="second"):
            await load_all(sources)


class TestLoadAllResult:
    @pytest.mark.asyncio
    async def test_ok(self) -> None:
        result = await load_all_result([MockSource(payload="a"), MockSource(payload="b")])()
        assert result.unwrap() == ["a", "b"]

    @pytest.mark.asyncio
    async def test_fail_fast_in_input_order(self) -> None:
        sources = [
            MockSource(delay_seconds=0.05, failure="first"),
            MockSource(delay_seconds=0.01, failure="second"),
        ]
        match await load_all_result(sources)():
            case Ok(values):
                pytest.fail(f"unexpected values {values!r}")
            case Error(err):
                assert err.reason == "first"
