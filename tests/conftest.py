"""
Pytest configuration and shared fixtures for lessons tests.

- Async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Mocked latency is forced to zero unless a test builds its own MockSource
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from lessons import LessonSettings, MockSource, configure_logging, get_settings


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Only warnings and above reach stderr during the run."""
    configure_logging(level="WARNING")


@pytest.fixture(autouse=True)
def zero_delay(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Default MockSource settles on the next loop iteration."""
    monkeypatch.setenv("LESSONS_DELAY_SECONDS", "0")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> LessonSettings:
    return LessonSettings(delay_seconds=0.0, parallel_sources=3)


@pytest.fixture
def lines() -> list[str]:
    """Console sink for the demo functions."""
    return []


@pytest.fixture
def fast_source() -> MockSource:
    return MockSource(delay_seconds=0.01)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """
    Rebind the logger to the real stderr once capsys has been torn down.

    Request it before capsys so its teardown runs after capsys restores stderr.
    """
    yield
    configure_logging(level="WARNING")
