"""Type models: primitive kinds, boxed wrappers, and the null sentinel.

Usage:
    from sigresolve.core.types import Primitive, Integer, NULL

    Primitive.INT.boxed        # Integer
    Integer(5)                 # boxed runtime value
    Annotated[int, Primitive.LONG]   # declare a primitive slot on a Python signature
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeAlias


class Primitive(Enum):
    """Primitive value kinds. Each has exactly one boxed equivalent."""

    BYTE = "byte"
    SHORT = "short"
    CHAR = "char"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"

    @property
    def boxed(self) -> type[Boxed]:
        """Reference wrapper class for this primitive."""
        return _BOXES[self]

    def widens_to(self, other: Primitive) -> bool:
        """Check if a value of this kind converts to `other` without narrowing."""
        return other in _WIDENING[self]

    def __repr__(self) -> str:
        return self.value


class Classification(Enum):
    """How well a provided argument (or argument list) matches a declaration."""

    EXACT = auto()  # Identical, or primitive/box equivalent
    COMPATIBLE = auto()  # Widening, subclassing, or null to reference
    INVALID = auto()  # Not applicable


class NullType(Enum):
    """Type of the absence sentinel."""

    NULL = "null"

    def __repr__(self) -> str:
        return "null"


NULL = NullType.NULL
"""Provided-argument type of `None`. Accepted by reference types only."""


class Boxed:
    """Base for boxed primitive wrappers."""

    __slots__ = ()

    primitive: Primitive


class Number(Boxed):
    """Base for numeric wrappers."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Byte(Number):
    value: int

    primitive = Primitive.BYTE


@dataclass(frozen=True, slots=True)
class Short(Number):
    value: int

    primitive = Primitive.SHORT


@dataclass(frozen=True, slots=True)
class Integer(Number):
    value: int

    primitive = Primitive.INT


@dataclass(frozen=True, slots=True)
class Long(Number):
    value: int

    primitive = Primitive.LONG


@dataclass(frozen=True, slots=True)
class Float(Number):
    value: float

    primitive = Primitive.FLOAT


@dataclass(frozen=True, slots=True)
class Double(Number):
    value: float

    primitive = Primitive.DOUBLE


@dataclass(frozen=True, slots=True)
class Character(Boxed):
    value: str

    primitive = Primitive.CHAR


@dataclass(frozen=True, slots=True)
class Boolean(Boxed):
    value: bool

    primitive = Primitive.BOOLEAN


_BOXES: dict[Primitive, type[Boxed]] = {
    Primitive.BYTE: Byte,
    Primitive.SHORT: Short,
    Primitive.CHAR: Character,
    Primitive.INT: Integer,
    Primitive.LONG: Long,
    Primitive.FLOAT: Float,
    Primitive.DOUBLE: Double,
    Primitive.BOOLEAN: Boolean,
}

_WIDENING: dict[Primitive, frozenset[Primitive]] = {
    Primitive.BYTE: frozenset(
        {Primitive.SHORT, Primitive.INT, Primitive.LONG, Primitive.FLOAT, Primitive.DOUBLE}
    ),
    Primitive.SHORT: frozenset({Primitive.INT, Primitive.LONG, Primitive.FLOAT, Primitive.DOUBLE}),
    Primitive.CHAR: frozenset({Primitive.INT, Primitive.LONG, Primitive.FLOAT, Primitive.DOUBLE}),
    Primitive.INT: frozenset({Primitive.LONG, Primitive.FLOAT, Primitive.DOUBLE}),
    Primitive.LONG: frozenset({Primitive.FLOAT, Primitive.DOUBLE}),
    Primitive.FLOAT: frozenset({Primitive.DOUBLE}),
    Primitive.DOUBLE: frozenset(),
    Primitive.BOOLEAN: frozenset(),
}


ParameterType: TypeAlias = Primitive | type
"""Declared type of one parameter slot: a primitive kind or any class."""

ProvidedType: TypeAlias = ParameterType | NullType
"""Runtime type of one supplied argument, or NULL for `None`."""
