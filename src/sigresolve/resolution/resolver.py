"""Overload resolution over a candidate collection.

Usage:
    from sigresolve import Primitive, Signature, resolve

    f_int = Signature((Primitive.INT,), name="f")
    f_long = Signature((Primitive.LONG,), name="f")
    resolve([f_int, f_long], (Primitive.INT,))   # f_int

    # Runtime values instead of types
    resolve_values([f_str, f_obj], None)          # f_str

    # Memoized
    resolver = Resolver(cache=ResolutionCache(max_entries=256))
    resolver.resolve(candidates, arguments)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from logging import getLogger
from typing import TYPE_CHECKING, Any, TypeVar

from sigresolve.core.candidate import Candidate, classify_candidate, more_specific
from sigresolve.core.errors import (
    AmbiguousResolutionError,
    CatalogInconsistencyError,
    NoMatchError,
    ResolutionError,
)
from sigresolve.core.types import Classification, ProvidedType, argument_types
from sigresolve.resolution.cache import ResolutionCache
from sigresolve.resolution.result import ResolutionResult

if TYPE_CHECKING:
    from sigresolve.config import ResolverSettings

log = getLogger(__name__)

C = TypeVar("C", bound=Candidate)


def _resolve_no_arguments(candidates: Sequence[C]) -> C:
    found: C | None = None
    for candidate in candidates:
        if candidate.parameter_types:
            continue
        if found is not None:
            raise AmbiguousResolutionError(
                found, candidate, reason="more than one zero-parameter candidate"
            )
        found = candidate
    if found is None:
        raise NoMatchError((), detail="No zero-parameter candidate")
    return found


def resolve(candidates: Iterable[C], arguments: Sequence[ProvidedType]) -> C:
    """Pick the single most specific candidate applicable to the arguments.

    Steps:
    1. No arguments: the unique zero-parameter candidate.
    2. Classify every candidate; drop INVALID ones.
    3. Two EXACT candidates mean the catalog holds duplicate signatures.
    4. Reduce all applicable candidates (catalog order) with more_specific().
    5. An EXACT candidate must also be the reduction winner.

    Args:
        candidates: Candidate collection, in catalog order.
        arguments: Provided argument types (NULL for None).

    Returns:
        The resolved candidate.

    Raises:
        NoMatchError: No candidate is applicable.
        AmbiguousResolutionError: Two applicable candidates cannot be ordered.
        CatalogInconsistencyError: Duplicate exact matches, or the exact match
            lost the specificity reduction.
    """
    pool = tuple(candidates)
    arguments = tuple(arguments)

    if not arguments:
        return _resolve_no_arguments(pool)

    exact: list[C] = []
    applicable: list[C] = []
    for candidate in pool:
        classification = classify_candidate(candidate, arguments)
        if classification is Classification.INVALID:
            continue
        if classification is Classification.EXACT:
            exact.append(candidate)
        applicable.append(candidate)

    if len(exact) > 1:
        log.warning("Duplicate exact signatures: %r and %r", exact[0], exact[1])
        raise CatalogInconsistencyError(
            exact[0], exact[1], arguments, reason="more than one exact match"
        )
    if not applicable:
        raise NoMatchError(arguments)

    best = applicable[0]
    for candidate in applicable[1:]:
        try:
            best = more_specific(best, candidate)
        except AmbiguousResolutionError as e:
            raise e.with_arguments(arguments) from None

    if exact and best is not exact[0]:
        log.warning("Exact match %r lost specificity reduction to %r", exact[0], best)
        raise CatalogInconsistencyError(
            best, exact[0], arguments, reason="exact match is not the most specific"
        )

    log.debug("Resolved %r for %d argument(s)", best, len(arguments))
    return best


def try_resolve(
    candidates: Iterable[C], arguments: Sequence[ProvidedType]
) -> ResolutionResult[C]:
    """Like resolve(), but returns failures as a ResolutionResult."""
    try:
        return ResolutionResult(candidate=resolve(candidates, arguments))
    except ResolutionError as e:
        return ResolutionResult(error=e)


def resolve_values(candidates: Iterable[C], *values: Any) -> C:
    """Resolve against runtime values instead of argument types."""
    return resolve(candidates, argument_types(*values))


class Resolver:
    """Resolution entrypoint with an optional memoization layer.

    Args:
        cache: Cache for results keyed by (candidates, arguments). None
            disables memoization.
    """

    def __init__(self, cache: ResolutionCache | None = None) -> None:
        self._cache = cache

    @classmethod
    def from_settings(cls, settings: ResolverSettings | None = None) -> Resolver:
        """Build a resolver honouring ResolverSettings (env-driven by default)."""
        from sigresolve.config import ResolverSettings

        settings = settings or ResolverSettings()
        cache = ResolutionCache(settings.cache_max_entries) if settings.cache_enabled else None
        return cls(cache=cache)

    @property
    def cache(self) -> ResolutionCache | None:
        return self._cache

    def try_resolve(
        self, candidates: Iterable[C], arguments: Sequence[ProvidedType]
    ) -> ResolutionResult[C]:
        """Resolve, returning failures as a result instead of raising."""
        pool = tuple(candidates)
        arguments = tuple(arguments)
        if self._cache is None:
            return try_resolve(pool, arguments)
        return self._cache.get_or_compute(pool, arguments, lambda: try_resolve(pool, arguments))

    def resolve(self, candidates: Iterable[C], arguments: Sequence[ProvidedType]) -> C:
        """Resolve, raising NoMatchError/AmbiguousResolutionError on failure."""
        return self.try_resolve(candidates, arguments).unwrap()

    def resolve_values(self, candidates: Iterable[C], *values: Any) -> C:
        """Resolve against runtime values instead of argument types."""
        return self.resolve(candidates, argument_types(*values))
