"""Member query operations: validation, member selection, and matching."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from sigresolve.catalog import IntrospectionCatalog, Member, MemberCatalog, MemberKind
from sigresolve.catalog.operations import constructor_members
from sigresolve.core.errors import InvalidQueryError
from sigresolve.core.types import NULL, ParameterType, ProvidedType

if TYPE_CHECKING:
    from sigresolve.query.models import MemberQuery


def validate_query(query: MemberQuery) -> None:
    """Reject parameter-count predicates that no member could satisfy.

    Positional predicates raise the minimum to their highest index + 1, and
    unordered predicates add one required parameter each.

    Args:
        query: Query to check.

    Raises:
        InvalidQueryError: If the maximum is below the effective minimum, or a
            fixed count is below the number of parameter predicates.
    """
    required = sum(1 for m in query.positional if m is not None) + len(query.anywhere)
    minimum = max(query.min_count or 0, len(query.positional), required)
    if query.count is not None and required > query.count:
        raise InvalidQueryError(
            f"Can't expect ({query.count}) fewer parameters than the ({required}) "
            "parameter predicates provided"
        )
    if query.max_count is not None and query.max_count < minimum:
        raise InvalidQueryError(
            f"max_parameters ({query.max_count}) < min_parameters ({minimum})"
        )


def select_members(query: MemberQuery) -> tuple[Member, ...]:
    """Members the query's predicates are applied to.

    Constructors come from the nearest class in the MRO that declares one;
    everything else from the owner (and bases, if requested).
    """
    if query.kind is MemberKind.CONSTRUCTOR:
        return constructor_members(query.owner, query.catalog.members)
    return query.catalog.members(query.owner, query.include_supertypes)


def match_anywhere(
    matchers: Sequence[Callable[[ParameterType], bool]],
    types: Sequence[ParameterType],
) -> bool:
    """Check that each matcher can be paired with a distinct parameter type."""
    used = [False] * len(types)

    def assign(i: int) -> bool:
        if i == len(matchers):
            return True
        for j, declared in enumerate(types):
            if not used[j] and matchers[i](declared):
                used[j] = True
                if assign(i + 1):
                    return True
                used[j] = False
        return False

    return assign(0)


def _markers_match(predicates: Sequence[Callable[[Any], bool]], markers: Sequence[Any]) -> bool:
    return all(any(p(marker) for marker in markers) for p in predicates)


def matches_member(query: MemberQuery, member: Member) -> bool:
    """Check a member against every predicate of the query.

    Args:
        query: Query holding the predicates.
        member: Candidate member.

    Returns:
        True if every predicate holds.
    """
    if query.kind is not None and member.kind is not query.kind:
        return False
    if query.name_predicate is not None and not query.name_predicate(member.name):
        return False
    if query.index is not None and member.index != query.index:
        return False
    if not query.required_modifiers <= member.modifiers:
        return False
    if query.forbidden_modifiers & member.modifiers:
        return False
    if not _markers_match(query.marker_predicates, member.markers):
        return False

    arity = member.arity
    if query.min_count is not None and arity < query.min_count:
        return False
    if query.max_count is not None and arity > query.max_count:
        return False
    if len(query.positional) > arity:
        return False
    for matcher, declared in zip(query.positional, member.parameter_types, strict=False):
        if matcher is not None and not matcher(declared):
            return False
    if query.anywhere and not match_anywhere(query.anywhere, member.parameter_types):
        return False

    if query.value_matcher is not None:
        if member.value_type is None or not query.value_matcher(member.value_type):
            return False
    return True


def query_arguments(query: MemberQuery) -> tuple[ProvidedType, ...]:
    """Argument types recorded by the query, NULL where none was recorded."""
    return tuple(NULL if t is None else t for t in query.recorded_arguments)


def find_matching_method(
    owner: type, name: str, *values: Any, catalog: MemberCatalog | None = None
) -> Member:
    """Most specific method `name` of `owner` (or its bases) for runtime values.

    Args:
        owner: Class to search.
        name: Method name.
        *values: Runtime argument values (receiver excluded).
        catalog: Member provider; introspection by default.

    Returns:
        The resolved member.

    Raises:
        NoMatchError: No method accepts the values.
        AmbiguousResolutionError: No single most specific method.
    """
    from sigresolve.query.models import MemberQuery

    query = MemberQuery(owner, catalog=catalog or IntrospectionCatalog())
    return (
        query.methods()
        .named(name)
        .including_supertypes()
        .parameter_count(len(values))
        .find_best_for(*values)
    )


def find_matching_constructor(
    owner: type, *values: Any, catalog: MemberCatalog | None = None
) -> Member:
    """Most specific constructor variant of `owner` for runtime values.

    Raises:
        NoMatchError: No constructor accepts the values.
        AmbiguousResolutionError: No single most specific constructor.
    """
    from sigresolve.query.models import MemberQuery

    query = MemberQuery(owner, catalog=catalog or IntrospectionCatalog())
    return query.constructors().parameter_count(len(values)).find_best_for(*values)
