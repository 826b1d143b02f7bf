"""Resolution functionality: the resolver, its results, and memoization."""

from sigresolve.resolution.cache import ResolutionCache
from sigresolve.resolution.resolver import (
    Resolver,
    resolve,
    resolve_values,
    try_resolve,
)
from sigresolve.resolution.result import ResolutionResult

__all__ = [
    "resolve",
    "resolve_values",
    "try_resolve",
    "Resolver",
    "ResolutionResult",
    "ResolutionCache",
]
