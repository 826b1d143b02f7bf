"""Member query models: type matchers and the fluent query builder.

Usage:
    # All public single-argument methods named "write"
    MemberQuery(Codec).methods().named("write").parameter_count(1).find_all()

    # Best overload for runtime values
    MemberQuery(Codec).methods().named("write").find_best_for(Integer(5))

    # Fields by type and modifiers
    MemberQuery(Config).fields().value_type(str).without_modifiers(Modifier.PRIVATE).find_all()

    # Constructors accepting a value
    MemberQuery(Point).constructors().with_parameters_accepting(1.0, 2.0).find_best()
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

from sigresolve.catalog import IntrospectionCatalog, Member, MemberCatalog, MemberKind, Modifier
from sigresolve.core.errors import AmbiguousResolutionError, InvalidQueryError, NoMatchError
from sigresolve.core.types import (
    ParameterType,
    Primitive,
    ProvidedType,
    argument_types,
    is_assignable,
    type_name,
    type_of,
)
from sigresolve.query.operations import (
    matches_member,
    query_arguments,
    select_members,
    validate_query,
)
from sigresolve.resolution import Resolver

if TYPE_CHECKING:
    from sigresolve.config import ResolverSettings


class MatchMode(Enum):
    """How a TypeMatcher compares a declared type to its reference type."""

    IS = auto()  # declared type is exactly the reference
    ASSIGNABLE_TO = auto()  # declared type can be passed where the reference is expected
    ACCEPTING = auto()  # declared slot accepts the reference (provided) type
    PREDICATE = auto()  # custom predicate


@dataclass(frozen=True, slots=True)
class TypeMatcher:
    """Predicate over one declared type (parameter, return, or field type)."""

    mode: MatchMode
    reference: ProvidedType | None = None
    predicate: Callable[[ParameterType], bool] | None = field(default=None, compare=False)

    def __call__(self, declared: ParameterType) -> bool:
        match self.mode:
            case MatchMode.IS:
                return declared == self.reference
            case MatchMode.ASSIGNABLE_TO:
                return is_assignable(declared, self.reference)  # type: ignore[arg-type]
            case MatchMode.ACCEPTING:
                return is_assignable(self.reference, declared)  # type: ignore[arg-type]
            case MatchMode.PREDICATE:
                return bool(self.predicate(declared))  # type: ignore[misc]

    def __repr__(self) -> str:
        if self.mode is MatchMode.PREDICATE:
            return f"matching({self.predicate!r})"
        return f"{self.mode.name.lower()}({type_name(self.reference)})"  # type: ignore[arg-type]


def is_type(t: ParameterType) -> TypeMatcher:
    """Declared type must be exactly `t`."""
    return TypeMatcher(MatchMode.IS, t)


def assignable_to(t: ParameterType) -> TypeMatcher:
    """Declared type must be usable where `t` is expected."""
    return TypeMatcher(MatchMode.ASSIGNABLE_TO, t)


def accepting(t: ProvidedType) -> TypeMatcher:
    """Declared slot must accept an argument of type `t` (NULL allowed)."""
    return TypeMatcher(MatchMode.ACCEPTING, t)


def matching(predicate: Callable[[ParameterType], bool]) -> TypeMatcher:
    """Declared type must satisfy `predicate`."""
    return TypeMatcher(MatchMode.PREDICATE, predicate=predicate)


def _as_matcher(
    spec: TypeMatcher | ParameterType | Callable[[ParameterType], bool],
) -> TypeMatcher:
    if isinstance(spec, TypeMatcher):
        return spec
    if isinstance(spec, (type, Primitive)):
        return is_type(spec)
    if callable(spec):
        return matching(spec)
    raise TypeError(f"Expected a type, Primitive, or TypeMatcher, got {spec!r}")


def _marker_predicate(spec: Any) -> Callable[[Any], bool]:
    if isinstance(spec, type):
        return lambda marker: marker is spec or isinstance(marker, spec)
    return lambda marker: marker == spec


@dataclass(frozen=True)
class MemberQuery:
    """Declarative lookup of members of a type.

    Immutable - each method returns a new MemberQuery instance.
    """

    owner: type
    catalog: MemberCatalog = field(default_factory=IntrospectionCatalog, compare=False)
    resolver: Resolver = field(default_factory=Resolver, compare=False)
    kind: MemberKind | None = None
    name_predicate: Callable[[str], bool] | None = field(default=None, compare=False)
    include_supertypes: bool = False
    required_modifiers: frozenset[Modifier] = frozenset()
    forbidden_modifiers: frozenset[Modifier] = frozenset()
    marker_predicates: tuple[Callable[[Any], bool], ...] = field(default=(), compare=False)
    count: int | None = None
    min_count: int | None = None
    max_count: int | None = None
    positional: tuple[TypeMatcher | None, ...] = ()
    recorded_arguments: tuple[ProvidedType | None, ...] = ()
    anywhere: tuple[TypeMatcher, ...] = ()
    value_matcher: TypeMatcher | None = None
    index: int | None = None

    @classmethod
    def for_type(
        cls,
        owner: type,
        catalog: MemberCatalog | None = None,
        settings: ResolverSettings | None = None,
    ) -> MemberQuery:
        """Query honouring ResolverSettings (supertype default and resolver cache)."""
        from sigresolve.config import ResolverSettings

        settings = settings or ResolverSettings()
        return cls(
            owner,
            catalog=catalog or IntrospectionCatalog(),
            resolver=Resolver.from_settings(settings),
            include_supertypes=settings.include_supertypes,
        )

    # Member kind

    def methods(self) -> MemberQuery:
        """Only methods."""
        return replace(self, kind=MemberKind.METHOD)

    def constructors(self) -> MemberQuery:
        """Only constructor variants of the nearest class declaring `__init__`."""
        return replace(self, kind=MemberKind.CONSTRUCTOR, name_predicate=None)

    def fields(self) -> MemberQuery:
        """Only fields and properties."""
        return replace(self, kind=MemberKind.FIELD)

    # Name

    def named(self, name: str) -> MemberQuery:
        """Name must equal `name`."""
        return self.name(lambda n: n == name)

    def name_matches(self, pattern: str | re.Pattern[str]) -> MemberQuery:
        """Name must contain a match of the regular expression."""
        compiled = re.compile(pattern)
        return self.name(lambda n: compiled.search(n) is not None)

    def name(self, predicate: Callable[[str], bool]) -> MemberQuery:
        """Name must satisfy `predicate`."""
        if self.kind is MemberKind.CONSTRUCTOR:
            raise InvalidQueryError("Can't change lookup name of constructors")
        return replace(self, name_predicate=predicate)

    # Hierarchy

    def including_supertypes(self) -> MemberQuery:
        """Also search base classes (members shadowed by subclasses are hidden)."""
        return replace(self, include_supertypes=True)

    def excluding_supertypes(self) -> MemberQuery:
        """Search only the owner itself."""
        return replace(self, include_supertypes=False)

    # Modifiers and markers

    def with_modifiers(self, *modifiers: Modifier) -> MemberQuery:
        """Members must carry all of these modifiers."""
        return replace(self, required_modifiers=self.required_modifiers | frozenset(modifiers))

    def without_modifiers(self, *modifiers: Modifier) -> MemberQuery:
        """Members must carry none of these modifiers."""
        return replace(self, forbidden_modifiers=self.forbidden_modifiers | frozenset(modifiers))

    def marked_with(self, *markers: Any) -> MemberQuery:
        """Members must carry each marker (given as a class or an equal instance)."""
        predicates = tuple(_marker_predicate(m) for m in markers)
        return replace(self, marker_predicates=self.marker_predicates + predicates)

    def with_marker(self, predicate: Callable[[Any], bool]) -> MemberQuery:
        """Members must carry some marker satisfying `predicate`."""
        return replace(self, marker_predicates=(*self.marker_predicates, predicate))

    # Parameter count

    def parameter_count(self, count: int) -> MemberQuery:
        """Exactly `count` positional parameters."""
        _check_count(count)
        return replace(self, count=count, min_count=count, max_count=count)

    def min_parameters(self, count: int) -> MemberQuery:
        """At least `count` positional parameters."""
        _check_count(count)
        return replace(self, min_count=count)

    def max_parameters(self, count: int) -> MemberQuery:
        """At most `count` positional parameters."""
        _check_count(count)
        return replace(self, max_count=count)

    # Parameter types

    def with_parameters(self, *types: ParameterType) -> MemberQuery:
        """Next parameters must be exactly these types (also used for find_best)."""
        return self._append(tuple(is_type(t) for t in types), types)

    def with_assignable_parameters(self, *types: ParameterType) -> MemberQuery:
        """Next parameters must be assignable to these types."""
        return self._append(tuple(assignable_to(t) for t in types), (None,) * len(types))

    def with_parameter_types_accepting(self, *types: ProvidedType) -> MemberQuery:
        """Next parameters must accept arguments of these types."""
        return self._append(tuple(accepting(t) for t in types), types)

    def with_parameters_accepting(self, *values: Any) -> MemberQuery:
        """Next parameters must accept these runtime values (None included)."""
        return self.with_parameter_types_accepting(*argument_types(*values))

    def with_parameter_at(
        self,
        index: int,
        spec: TypeMatcher | ParameterType | Callable[[ParameterType], bool],
    ) -> MemberQuery:
        """Parameter at `index` must match `spec` (a type means exactly that type)."""
        if index < 0:
            raise InvalidQueryError(f"Parameter index must be non-negative, got {index}")
        matcher = _as_matcher(spec)
        width = max(index + 1, len(self.positional))
        positional = list(self.positional) + [None] * (width - len(self.positional))
        recorded = list(self.recorded_arguments)
        recorded += [None] * (width - len(recorded))
        positional[index] = matcher
        if matcher.mode in (MatchMode.IS, MatchMode.ACCEPTING):
            recorded[index] = matcher.reference
        else:
            recorded[index] = None
        return replace(self, positional=tuple(positional), recorded_arguments=tuple(recorded))

    def with_parameters_anywhere(
        self, *specs: TypeMatcher | ParameterType | Callable[[ParameterType], bool]
    ) -> MemberQuery:
        """Each spec must match a distinct parameter, at any position."""
        return replace(self, anywhere=self.anywhere + tuple(_as_matcher(s) for s in specs))

    def _append(
        self, matchers: tuple[TypeMatcher, ...], recorded: Sequence[ProvidedType | None]
    ) -> MemberQuery:
        start = len(self.positional)
        padding = (None,) * (start - len(self.recorded_arguments))
        arguments = self.recorded_arguments + padding
        return replace(
            self,
            positional=self.positional + matchers,
            recorded_arguments=arguments + tuple(recorded),
        )

    # Value type and position

    def value_type(self, spec: TypeMatcher | ParameterType) -> MemberQuery:
        """Return type (methods) or declared type (fields) must match."""
        return replace(self, value_matcher=_as_matcher(spec))

    def value_type_assignable_to(self, t: ParameterType) -> MemberQuery:
        """Return/field type must be assignable to `t`."""
        return replace(self, value_matcher=assignable_to(t))

    def at_index(self, index: int) -> MemberQuery:
        """Declaration index within the owner must equal `index`."""
        return replace(self, index=index)

    # Terminal operations

    def matches(self, member: Member) -> bool:
        """Check a single member against every predicate of this query."""
        return matches_member(self, member)

    def find_all(self) -> list[Member]:
        """All matching members, in catalog order.

        Raises:
            InvalidQueryError: If count predicates contradict each other.
        """
        validate_query(self)
        return [m for m in select_members(self) if self.matches(m)]

    def try_find_any(self) -> Member | None:
        """First matching member, or None."""
        found = self.find_all()
        return found[0] if found else None

    def find_any(self) -> Member:
        """First matching member.

        Raises:
            NoMatchError: If nothing matches.
        """
        member = self.try_find_any()
        if member is None:
            raise NoMatchError(detail=f"Can't find member matching {self!r}")
        return member

    def try_find_exact(self) -> Member | None:
        """The only matching member, or None.

        Raises:
            AmbiguousResolutionError: If more than one member matches.
        """
        found = self.find_all()
        if len(found) > 1:
            raise AmbiguousResolutionError(
                found[0], found[1], reason=f"query matched {len(found)} members"
            )
        return found[0] if found else None

    def find_exact(self) -> Member:
        """The only matching member.

        Raises:
            NoMatchError: If nothing matches.
            AmbiguousResolutionError: If more than one member matches.
        """
        member = self.try_find_exact()
        if member is None:
            raise NoMatchError(detail=f"Can't find member matching {self!r}")
        return member

    def try_find_best(self, arguments: Sequence[ProvidedType] | None = None) -> Member | None:
        """Most specific matching member for the arguments, or None if nothing matches.

        Args:
            arguments: Provided argument types. Defaults to the types recorded
                by with_parameters()/with_parameters_accepting(); positions
                without a recorded type count as NULL.

        Raises:
            NoMatchError: Members matched, but none accepts the arguments.
            AmbiguousResolutionError: No single most specific member.
        """
        found = self.find_all()
        if not found:
            return None
        if arguments is None:
            arguments = query_arguments(self)
        return self.resolver.resolve(found, arguments)

    def find_best(self, arguments: Sequence[ProvidedType] | None = None) -> Member:
        """Most specific matching member for the arguments.

        Raises:
            NoMatchError: If nothing matches or accepts the arguments.
            AmbiguousResolutionError: No single most specific member.
        """
        member = self.try_find_best(arguments)
        if member is None:
            raise NoMatchError(detail=f"Can't find member matching {self!r}")
        return member

    def find_best_for(self, *values: Any) -> Member:
        """find_best() for runtime values."""
        return self.find_best(tuple(type_of(v) for v in values))

    def __repr__(self) -> str:
        parts = [self.owner.__qualname__]
        if self.kind is not None:
            parts.append(self.kind.name.lower())
        if self.positional:
            parts.append("params=" + ", ".join(repr(m) if m else "?" for m in self.positional))
        if self.count is not None:
            parts.append(f"count={self.count}")
        return f"MemberQuery({'; '.join(parts)})"


def _check_count(count: int) -> None:
    if count < 0:
        raise InvalidQueryError(f"Parameter count must be non-negative, got {count}")
