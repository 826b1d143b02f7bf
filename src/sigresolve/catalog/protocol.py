"""Catalog protocol for swappable member providers.

The catalog layer abstracts where declarations come from, enabling:
- Introspection of live Python classes (default)
- Explicitly registered declarations (tests, generated descriptor tables)

Usage:
    catalog = IntrospectionCatalog()
    MemberQuery(Foo, catalog=catalog).methods().named("bar").find_all()
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sigresolve.catalog.models import Member


@runtime_checkable
class MemberCatalog(Protocol):
    """Read-only source of member declarations. Implementations own any caching."""

    def members(self, owner: type, include_supertypes: bool = False) -> tuple[Member, ...]:
        """Declarations of `owner`, in declaration order.

        Args:
            owner: Class whose members are requested.
            include_supertypes: Also yield members declared on base classes
                (MRO order, `object` excluded).

        Returns:
            Tuple of members; empty if the owner declares nothing.
        """
        ...
