"""Type model and the type compatibility oracle."""

from sigresolve.core.types.models import (
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
)
from sigresolve.core.types.operations import (
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
    # Models
    "Primitive",
    "Classification",
    "NullType",
    "NULL",
    "ParameterType",
    "ProvidedType",
    # Wrappers
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
    # Operations
    "classify",
    "is_assignable",
    "is_subclass",
    "boxed",
    "unboxed",
    "widens",
    "type_of",
    "argument_types",
    "type_name",
]
