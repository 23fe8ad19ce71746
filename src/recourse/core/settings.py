"""Settings for the recourse front ends.

Values come from ``RECOURSE_``-prefixed environment variables and an optional
``.env`` file, validated by pydantic at startup.

Fields
──────
log_level   : structlog level for the CLI and walkthrough
json_logs   : render logs as JSON instead of console lines
fallback    : default used by ``unwrap_or`` in the CLI and walkthrough
multiplier  : factor applied by the walkthrough's ``map`` demonstration

Examples:
    >>> RecourseSettings(fallback=0).fallback
    0
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecourseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RECOURSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "WARNING"
    json_logs: bool = False

    # ── Walkthrough ──────────────────────────────────────────────
    fallback: int = Field(default=-1, description="Value substituted for a failed outcome")
    multiplier: int = Field(default=2, description="Factor applied by the map demonstration")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RecourseSettings:
    """Return the process-wide settings, loading them on first use."""
    return RecourseSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    get_settings.cache_clear()


__all__ = ["RecourseSettings", "get_settings", "reset_settings"]
