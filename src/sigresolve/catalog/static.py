"""Member catalog of explicitly declared members.

Useful for descriptor tables generated ahead of time, or for describing
signatures that live Python code cannot express.

Usage:
    catalog = StaticCatalog()
    catalog.declare(Codec, "write", Primitive.INT)
    catalog.declare(Codec, "write", Primitive.LONG)
    catalog.declare(Codec, "write", str)

Build the catalog up front; registration is not synchronized with reads.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from sigresolve.catalog.models import Member, MemberKind, Modifier
from sigresolve.catalog.operations import collect_hierarchy
from sigresolve.core.types import ParameterType


class StaticCatalog:
    """MemberCatalog backed by registered Member declarations."""

    def __init__(self, members: Iterable[Member] = ()) -> None:
        self._by_owner: dict[type, list[Member]] = {}
        for member in members:
            self.register(member)

    def register(self, member: Member) -> Member:
        """Add a member, assigning its declaration index within the owner.

        Returns:
            The stored member (with its index set).
        """
        declared = self._by_owner.setdefault(member.owner, [])
        stored = replace(member, index=len(declared))
        declared.append(stored)
        return stored

    def declare(
        self,
        owner: type,
        name: str,
        *parameter_types: ParameterType,
        kind: MemberKind = MemberKind.METHOD,
        value_type: ParameterType | None = None,
        modifiers: Iterable[Modifier] = (),
        markers: Iterable[Any] = (),
        target: Any = None,
    ) -> Member:
        """Register a member from its parts.

        Args:
            owner: Declaring class.
            name: Member name.
            *parameter_types: Positional parameter types.
            kind: Member kind (METHOD by default).
            value_type: Return/field type; constructors default to `owner`.
            modifiers: Modifiers to record.
            markers: Marker objects to record.
            target: Opaque object handed back after resolution.

        Returns:
            The stored member.
        """
        if kind is MemberKind.FIELD and parameter_types:
            raise ValueError(f"Field {name!r} cannot declare parameters")
        if kind is MemberKind.CONSTRUCTOR and value_type is None:
            value_type = owner
        return self.register(
            Member(
                name=name,
                kind=kind,
                owner=owner,
                parameter_types=tuple(parameter_types),
                value_type=value_type,
                modifiers=frozenset(modifiers),
                markers=tuple(markers),
                target=target,
            )
        )

    def declared(self, owner: type) -> tuple[Member, ...]:
        """Members registered directly on `owner`."""
        return tuple(self._by_owner.get(owner, ()))

    def members(self, owner: type, include_supertypes: bool = False) -> tuple[Member, ...]:
        """Registered members of `owner`, optionally including base classes."""
        return collect_hierarchy(owner, self.declared, include_supertypes)
