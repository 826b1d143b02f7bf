"""Tests for overload resolution.

Critical Invariants:
1. The winner is applicable and has exactly as many parameters as arguments
2. Resolution is idempotent: same inputs, same winner or same failure
3. Ambiguity is raised, never resolved by picking the first candidate
4. Duplicate exact matches are reported as a broken catalog (fatal)
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

import sigresolve.resolution.resolver as resolver_module
from sigresolve import (
    NULL,
    AmbiguousResolutionError,
    CatalogInconsistencyError,
    Classification,
    Integer,
    NoMatchError,
    Primitive,
    ResolutionError,
    ResolutionResult,
    Resolver,
    Signature,
    classify_candidate,
    more_specific,
    resolve,
    resolve_values,
    try_resolve,
)

slot_types = [
    Primitive.INT,
    Primitive.LONG,
    Primitive.DOUBLE,
    Primitive.BOOLEAN,
    Integer,
    str,
    object,
]
provided_types = [*slot_types, NULL]


@st.composite
def candidate_pool(draw):
    """A few signatures of arity 0-2, possibly overlapping."""
    signatures = draw(
        st.lists(
            st.lists(st.sampled_from(slot_types), max_size=2).map(tuple),
            min_size=1,
            max_size=5,
            unique=True,
        )
    )
    return [Signature(types, name=f"c{i}") for i, types in enumerate(signatures)]


arguments_strategy = st.lists(st.sampled_from(provided_types), max_size=2).map(tuple)


class TestScenarios:
    def test_exact_primitive_beats_widening(self, f_int, f_long):
        """Scenario: f(int), f(long) called with int picks f(int)."""
        assert resolve([f_int, f_long], (Primitive.INT,)) is f_int
        assert resolve([f_long, f_int], (Primitive.INT,)) is f_int

    def test_narrowest_widening_wins(self, f_long, f_double):
        """Scenario: f(long), f(double) called with int picks f(long)."""
        assert resolve([f_long, f_double], (Primitive.INT,)) is f_long
        assert resolve([f_double, f_long], (Primitive.INT,)) is f_long

    def test_null_goes_to_most_specific_reference(self, f_str, f_object):
        """Scenario: f(str), f(object) called with null picks f(str)."""
        assert resolve([f_object, f_str], (NULL,)) is f_str

    def test_crossed_positions_are_ambiguous(self):
        """CRITICAL: f(int, object) vs f(long, str) for (int, str) is ambiguous.

        Why: Each candidate is narrower at one position, so picking either
        one would silently depend on declaration order.
        """
        a = Signature((Primitive.INT, object), name="a")
        b = Signature((Primitive.LONG, str), name="b")
        with pytest.raises(AmbiguousResolutionError) as exc:
            resolve([a, b], (Primitive.INT, str))
        assert {exc.value.first, exc.value.second} == {a, b}
        assert exc.value.arguments == (Primitive.INT, str)
        assert "(int, str)" in str(exc.value)

    def test_single_zero_parameter_candidate(self, f_int):
        """Scenario: no arguments resolve to the only zero-parameter candidate."""
        g = Signature((), name="g")
        assert resolve([f_int, g], ()) is g

    def test_zero_arguments_skip_classification(self, f_int, monkeypatch):
        """CRITICAL: A zero-argument call never consults the oracle or comparator."""

        def fail(*args):
            raise AssertionError("called for a zero-argument call")

        monkeypatch.setattr(resolver_module, "classify_candidate", fail)
        monkeypatch.setattr(resolver_module, "more_specific", fail)
        g = Signature((), name="g")
        assert resolve([f_int, g], ()) is g

    def test_two_zero_parameter_candidates_are_ambiguous(self):
        g1 = Signature((), name="g1")
        g2 = Signature((), name="g2")
        with pytest.raises(AmbiguousResolutionError, match="zero-parameter"):
            resolve([g1, g2], ())


class TestFailures:
    def test_no_candidates(self):
        with pytest.raises(NoMatchError):
            resolve([], (str,))

    def test_no_zero_parameter_candidate(self, f_int):
        with pytest.raises(NoMatchError, match="zero-parameter"):
            resolve([f_int], ())

    def test_nothing_accepts_arguments(self, f_int, f_long):
        with pytest.raises(NoMatchError) as exc:
            resolve([f_int, f_long], (Primitive.DOUBLE,))
        assert exc.value.arguments == (Primitive.DOUBLE,)

    def test_null_never_reaches_primitive(self, f_int, f_long):
        with pytest.raises(NoMatchError):
            resolve([f_int, f_long], (NULL,))

    def test_duplicate_exact_matches_are_fatal(self):
        """CRITICAL: Two exact matches mean the catalog holds duplicates."""
        a = Signature((str,), name="a")
        b = Signature((str,), name="b")
        with pytest.raises(CatalogInconsistencyError) as exc:
            resolve([a, b], (str,))
        assert exc.value.fatal is True
        assert isinstance(exc.value, AmbiguousResolutionError)

    def test_primitive_and_wrapper_slots_are_both_exact(self):
        boxed = Signature((Integer,), name="boxed")
        unboxed = Signature((Primitive.INT,), name="unboxed")
        with pytest.raises(CatalogInconsistencyError):
            resolve([boxed, unboxed], (Integer,))

    def test_exact_match_losing_reduction_is_fatal(self, f_int, f_object):
        """CRITICAL: An exact match that is not the most specific is reported.

        Why: A reference slot outranks a primitive slot, so f(object) beats
        f(int) for a boxed Integer even though f(int) is the exact match.
        """
        with pytest.raises(CatalogInconsistencyError, match="exact match is not") as exc:
            resolve_values([f_int, f_object], Integer(3))
        assert exc.value.first is f_object
        assert exc.value.second is f_int

    def test_errors_share_a_base(self):
        assert issubclass(NoMatchError, ResolutionError)
        assert issubclass(AmbiguousResolutionError, LookupError)


class TestProperties:
    @given(candidate_pool(), arguments_strategy)
    def test_winner_is_applicable_with_matching_arity(self, pool, arguments):
        """PROPERTY: A resolved candidate has len(arguments) parameters and is applicable."""
        result = try_resolve(pool, arguments)
        if result.ok:
            winner = result.unwrap()
            assert len(winner.parameter_types) == len(arguments)
            if arguments:
                assert classify_candidate(winner, arguments) is not Classification.INVALID

    @given(candidate_pool(), arguments_strategy)
    def test_resolution_is_idempotent(self, pool, arguments):
        """PROPERTY: Resolving twice gives the same winner or the same failure."""
        first = try_resolve(pool, arguments)
        second = try_resolve(pool, arguments)
        assert first.ok == second.ok
        if first.ok:
            assert first.candidate is second.candidate
        else:
            assert type(first.error) is type(second.error)

    @given(candidate_pool(), arguments_strategy)
    def test_winner_is_more_specific_than_every_applicable(self, pool, arguments):
        """PROPERTY: The winner beats each other applicable candidate head to head."""
        result = try_resolve(pool, arguments)
        if not result.ok or not arguments:
            return
        winner = result.unwrap()
        for other in pool:
            if other is winner:
                continue
            if classify_candidate(other, arguments) is Classification.INVALID:
                continue
            assert more_specific(winner, other) is winner
            assert more_specific(other, winner) is winner


class TestEntrypoints:
    def test_resolve_values(self, f_str, f_object, f_int):
        assert resolve_values([f_object, f_str], None) is f_str
        assert resolve_values([f_object, f_str], "text") is f_str
        assert resolve_values([f_object, f_int], 3) is f_object

    def test_try_resolve_wraps_errors(self, f_int):
        result = try_resolve([f_int], (str,))
        assert not result.ok
        assert isinstance(result.error, NoMatchError)
        with pytest.raises(NoMatchError):
            result.unwrap()

    def test_try_resolve_success(self, f_int):
        result = try_resolve([f_int], (Primitive.INT,))
        assert result.ok
        assert result.unwrap() is f_int

    def test_result_needs_exactly_one_outcome(self, f_int):
        with pytest.raises(ValueError):
            ResolutionResult()
        with pytest.raises(ValueError):
            ResolutionResult(candidate=f_int, error=NoMatchError())

    def test_resolver_without_cache(self, f_int, f_long):
        resolver = Resolver()
        assert resolver.cache is None
        assert resolver.resolve([f_int, f_long], (Primitive.SHORT,)) is f_int
        assert resolver.resolve_values([f_int, f_long], Integer(1)) is f_int

    def test_resolver_accepts_generators(self, f_int, f_long):
        resolver = Resolver()
        assert resolver.resolve((s for s in [f_long, f_int]), [Primitive.INT]) is f_int
