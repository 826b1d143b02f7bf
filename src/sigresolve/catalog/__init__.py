"""Catalog functionality: member declarations and their providers."""

from sigresolve.catalog.introspection import IntrospectionCatalog
from sigresolve.catalog.models import Member, MemberKind, Modifier, marked
from sigresolve.catalog.operations import (
    collect_hierarchy,
    constructor_members,
    parameter_type_of,
)
from sigresolve.catalog.protocol import MemberCatalog
from sigresolve.catalog.static import StaticCatalog

__all__ = [
    # Models
    "Member",
    "MemberKind",
    "Modifier",
    "marked",
    # Providers
    "MemberCatalog",
    "IntrospectionCatalog",
    "StaticCatalog",
    # Operations
    "parameter_type_of",
    "collect_hierarchy",
    "constructor_members",
]
