"""Core functionalities: stateless type algebra and candidate ordering.

Architecture Note:
    core/ contains pure, stateless functions and immutable models. Nothing
    here caches, logs, or discovers types on its own. For orchestration see
    resolution/; for declaration discovery see catalog/ and query/.
"""

from sigresolve.core.candidate import (
    Candidate,
    Signature,
    classify_candidate,
    is_less_specialized,
    more_specific,
    position_vote,
)
from sigresolve.core.errors import (
    AmbiguousResolutionError,
    CatalogInconsistencyError,
    InvalidQueryError,
    NoMatchError,
    ResolutionError,
)
from sigresolve.core.types import (
    NULL,
    Boolean,
    Boxed,
    Byte,
    Character,
    Classification,
    Double,
    Float,
    Integer,
    Long,
    NullType,
    Number,
    ParameterType,
    Primitive,
    ProvidedType,
    Short,
    argument_types,
    boxed,
    classify,
    is_assignable,
    is_subclass,
    type_name,
    type_of,
    unboxed,
    widens,
)

__all__ = [
    # Types
    "Primitive",
    "Classification",
    "NullType",
    "NULL",
    "ParameterType",
    "ProvidedType",
    "Boxed",
    "Number",
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
    "is_subclass",
    "boxed",
    "unboxed",
    "widens",
    "type_of",
    "argument_types",
    "type_name",
    # Candidate
    "Candidate",
    "Signature",
    "classify_candidate",
    "more_specific",
    "is_less_specialized",
    "position_vote",
    # Errors
    "ResolutionError",
    "NoMatchError",
    "AmbiguousResolutionError",
    "CatalogInconsistencyError",
    "InvalidQueryError",
]
