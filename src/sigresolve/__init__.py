"""sigresolve: runtime overload resolution and member queries.

Usage:
    from typing import Annotated, overload
    from sigresolve import Integer, MemberQuery, Primitive, Signature, resolve

    # Pick the most specific signature for some argument types
    f_int = Signature((Primitive.INT,), name="f")
    f_long = Signature((Primitive.LONG,), name="f")
    resolve([f_int, f_long], (Primitive.SHORT,))   # f_int

    # Or query live classes, overloads included
    class Codec:
        @overload
        def write(self, v: Annotated[int, Primitive.INT]) -> None: ...
        @overload
        def write(self, v: Annotated[int, Primitive.LONG]) -> None: ...
        def write(self, v): ...

    MemberQuery(Codec).methods().named("write").find_best_for(Integer(5))
"""

__version__ = "0.1.0"

# Catalog
from sigresolve.catalog import (
    IntrospectionCatalog,
    Member,
    MemberCatalog,
    MemberKind,
    Modifier,
    StaticCatalog,
    marked,
)

# Configuration
from sigresolve.config import ResolverSettings, configure_logging

# Core primitives
from sigresolve.core import (
    NULL,
    AmbiguousResolutionError,
    Boolean,
    Byte,
    Candidate,
    CatalogInconsistencyError,
    Character,
    Classification,
    Double,
    Float,
    Integer,
    InvalidQueryError,
    Long,
    NoMatchError,
    ParameterType,
    Primitive,
    ProvidedType,
    ResolutionError,
    Short,
    Signature,
    argument_types,
    classify,
    classify_candidate,
    is_assignable,
    more_specific,
    type_of,
)

# Queries
from sigresolve.query import (
    MemberQuery,
    TypeMatcher,
    accepting,
    assignable_to,
    find_matching_constructor,
    find_matching_method,
    is_type,
    matching,
)

# Resolution
from sigresolve.resolution import (
    ResolutionCache,
    ResolutionResult,
    Resolver,
    resolve,
    resolve_values,
    try_resolve,
)

__all__ = [
    # Version
    "__version__",
    # Types
    "Primitive",
    "Classification",
    "NULL",
    "ParameterType",
    "ProvidedType",
    "Byte",
    "Short",
    "Integer",
    "Long",
    "Float",
    "Double",
    "Character",
    "Boolean",
    "classify",
    "is_assignable",
    "type_of",
    "argument_types",
    # Candidates
    "Candidate",
    "Signature",
    "classify_candidate",
    "more_specific",
    # Resolution
    "resolve",
    "resolve_values",
    "try_resolve",
    "Resolver",
    "ResolutionResult",
    "ResolutionCache",
    # Catalog
    "Member",
    "MemberKind",
    "Modifier",
    "marked",
    "MemberCatalog",
    "IntrospectionCatalog",
    "StaticCatalog",
    # Queries
    "MemberQuery",
    "TypeMatcher",
    "is_type",
    "assignable_to",
    "accepting",
    "matching",
    "find_matching_method",
    "find_matching_constructor",
    # Errors
    "ResolutionError",
    "NoMatchError",
    "AmbiguousResolutionError",
    "CatalogInconsistencyError",
    "InvalidQueryError",
    # Config
    "ResolverSettings",
    "configure_logging",
]
