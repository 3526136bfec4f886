"""
SSS Configuration — Pydantic-validated settings.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from sss.codec import ShareEncoding
from sss.field import DEFAULT_MAX_DRAW_ATTEMPTS


class SSSConfig(BaseSettings):
    """
    Defaults for share creation and the command-line front end.

    Loads from environment variables prefixed with SSS_,
    e.g. SSS_ENCODING=hex, SSS_DEFAULT_MINIMUM=2
    """
    model_config = {"env_prefix": "SSS_"}

    encoding: ShareEncoding = ShareEncoding.BASE64
    default_shares: int = Field(default=5, ge=1, le=1024)
    default_minimum: int = Field(default=3, ge=1, le=1024)
    max_draw_attempts: int = Field(default=DEFAULT_MAX_DRAW_ATTEMPTS, ge=1, le=10_000)
    log_level: str = "WARNING"

    @field_validator("default_minimum")
    @classmethod
    def minimum_lte_shares(cls, v: int, info) -> int:
        total = info.data.get("default_shares", 5)
        if v > total:
            raise ValueError(f"default_minimum ({v}) must be <= default_shares ({total})")
        return v

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level
