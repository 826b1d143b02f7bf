"""Tests for resolution memoization.

Critical Invariants:
1. Cached and uncached resolution give identical answers
2. Failures are cached as well as successes
3. The cache never grows past max_entries
4. Concurrent use never corrupts results
5. Candidates are keyed by identity, never by equality
"""

import traceback
from concurrent.futures import ThreadPoolExecutor

import pytest

from sigresolve import (
    NoMatchError,
    Primitive,
    ResolutionCache,
    ResolutionResult,
    Resolver,
    Signature,
    StaticCatalog,
)


class Codec:
    pass


@pytest.fixture
def cache():
    return ResolutionCache(max_entries=4)


@pytest.fixture
def resolver(cache):
    return Resolver(cache=cache)


def test_rejects_non_positive_capacity():
    with pytest.raises(ValueError, match="at least 1"):
        ResolutionCache(max_entries=0)


def test_second_lookup_is_a_hit(resolver, cache, f_int, f_long):
    assert resolver.resolve([f_int, f_long], (Primitive.INT,)) is f_int
    assert resolver.resolve([f_int, f_long], (Primitive.INT,)) is f_int
    assert cache.misses == 1
    assert cache.hits == 1
    assert len(cache) == 1


def test_failures_are_cached(resolver, cache, f_int):
    """CRITICAL: A cached failure re-raises the same error.

    Why: Resolution is deterministic, so recomputing a failure only costs time.
    """
    with pytest.raises(NoMatchError) as first:
        resolver.resolve([f_int], (str,))
    with pytest.raises(NoMatchError) as second:
        resolver.resolve([f_int], (str,))
    assert first.value is second.value
    assert cache.hits == 1


def test_different_arguments_are_different_entries(resolver, cache, f_int, f_long):
    resolver.resolve([f_int, f_long], (Primitive.INT,))
    resolver.resolve([f_int, f_long], (Primitive.LONG,))
    assert len(cache) == 2
    assert cache.hits == 0


def test_oldest_entries_are_evicted(cache):
    """CRITICAL: Size stays bounded by max_entries."""
    candidates = tuple(Signature((str,), name=f"s{i}") for i in range(10))
    for candidate in candidates:
        cache.get_or_compute(
            (candidate,), (str,), lambda c=candidate: ResolutionResult(candidate=c)
        )
    assert len(cache) == 4

    calls = []

    def compute():
        calls.append(1)
        return ResolutionResult(candidate=candidates[0])

    cache.get_or_compute((candidates[0],), (str,), compute)
    assert calls == [1]


def test_unhashable_candidates_are_cached(resolver, cache):
    unhashable = Signature((str,), target=[], name="list_target")
    assert resolver.resolve([unhashable], (str,)) is unhashable
    assert resolver.resolve([unhashable], (str,)) is unhashable
    assert len(cache) == 1
    assert cache.hits == 1


def test_equal_candidates_from_different_catalogs_do_not_share_entries(resolver):
    """CRITICAL: The cache keys on candidate identity, not equality.

    Why: Members that differ only in their target compare equal, and handing
    back another catalog's member would return the wrong declaration.
    """
    h1, h2 = object(), object()
    first, second = StaticCatalog(), StaticCatalog()
    first.declare(Codec, "write", Primitive.INT, target=h1)
    second.declare(Codec, "write", Primitive.INT, target=h2)

    assert first.members(Codec) == second.members(Codec)
    assert resolver.resolve(first.members(Codec), (Primitive.INT,)).target is h1
    assert resolver.resolve(second.members(Codec), (Primitive.INT,)).target is h2


def test_cached_failure_traceback_does_not_grow(resolver, f_int):
    """CRITICAL: Re-raising a cached error must not accumulate caller frames.

    Why: A stored exception keeps its traceback, and with it every frame it
    was raised through.
    """
    depths = []
    for _ in range(5):
        with pytest.raises(NoMatchError) as exc:
            resolver.resolve([f_int], (str,))
        depths.append(len(list(traceback.walk_tb(exc.value.__traceback__))))
    assert len(set(depths)) == 1


def test_clear_resets_entries_and_counters(resolver, cache, f_int):
    resolver.resolve([f_int], (Primitive.INT,))
    resolver.resolve([f_int], (Primitive.INT,))
    cache.clear()
    assert len(cache) == 0
    assert cache.hits == cache.misses == 0


def test_concurrent_resolution_agrees(f_int, f_long, f_double):
    """PROPERTY: Many threads sharing one resolver see the same answers."""
    resolver = Resolver(cache=ResolutionCache(max_entries=2))
    pool = [f_double, f_long, f_int]
    arguments = [(Primitive.INT,), (Primitive.LONG,), (Primitive.FLOAT,)] * 50
    expected = {(Primitive.INT,): f_int, (Primitive.LONG,): f_long, (Primitive.FLOAT,): f_double}

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda args: (args, resolver.resolve(pool, args)), arguments))

    for args, winner in results:
        assert winner is expected[args]
    assert len(resolver.cache) <= 2
