"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
resolver and member queries.

Usage:
    from sigresolve.config import ResolverSettings

    # Load from environment variables (SIGRESOLVE_*)
    settings = ResolverSettings()

    # Or override with explicit values
    settings = ResolverSettings(cache_max_entries=128, include_supertypes=True)
    resolver = Resolver.from_settings(settings)
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolverSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for resolution and member lookup.

    Attributes:
        cache_enabled: Memoize resolution results (successes and errors).
        cache_max_entries: Upper bound on memoized results.
        include_supertypes: Default supertype search for MemberQuery.for_type().
        log_level: Level name applied by configure_logging().

    Environment Variables:
        SIGRESOLVE_CACHE_ENABLED
        SIGRESOLVE_CACHE_MAX_ENTRIES
        SIGRESOLVE_INCLUDE_SUPERTYPES
        SIGRESOLVE_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="SIGRESOLVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cache_enabled: bool = True
    cache_max_entries: int = Field(default=1024, ge=1)
    include_supertypes: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level: {value}")
        return level
