"""Settings for the lessons demos.

Values come from ``LESSONS_*`` environment variables or a local ``.env`` file,
validated with pydantic-settings.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LessonSettings(BaseSettings):
    """Knobs for the mocked latency and for log output."""

    model_config = SettingsConfigDict(
        env_prefix="LESSONS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    delay_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Nominal latency of the mocked operation (seconds).",
    )
    parallel_sources: int = Field(
        default=3,
        ge=1,
        description="How many mocked sources the all-style demo runs at once.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Minimum structlog level (DEBUG, INFO, WARNING, ...).",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Console renderer for humans, JSON for machines.",
    )


@lru_cache(maxsize=1)
def get_settings() -> LessonSettings:
    return LessonSettings()


__all__ = ("LessonSettings", "get_settings")
