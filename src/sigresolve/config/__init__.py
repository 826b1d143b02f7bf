"""Configuration module using Pydantic Settings.

Provides typed configuration for the resolver with environment variable support.

Usage:
    from sigresolve.config import ResolverSettings, configure_logging

    settings = ResolverSettings(cache_max_entries=256)
    configure_logging(level=settings.log_level)
"""

from sigresolve.config.logging import configure_logging
from sigresolve.config.settings import ResolverSettings

__all__ = [
    "ResolverSettings",
    "configure_logging",
]
