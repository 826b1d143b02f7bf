"""Catalog models: member declarations, kinds, modifiers, and markers.

Usage:
    @marked(Deprecated(since="2.0"))
    def old_api(self, x: Annotated[int, Primitive.INT]) -> None: ...

    Member(name="f", kind=MemberKind.METHOD, owner=Foo, parameter_types=(Primitive.INT,))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, TypeVar

from sigresolve.core.types import ParameterType, type_name

F = TypeVar("F", bound=Callable[..., Any])

MARKERS_ATTRIBUTE = "__member_markers__"


class MemberKind(Enum):
    """Kind of declaration."""

    METHOD = auto()
    CONSTRUCTOR = auto()
    FIELD = auto()


class Modifier(Enum):
    """Declaration modifiers observable on Python class members."""

    STATIC = auto()  # staticmethod
    CLASS = auto()  # classmethod
    ABSTRACT = auto()  # __isabstractmethod__
    FINAL = auto()  # typing.final / Final[...]
    PRIVATE = auto()  # __name (mangled)
    PROTECTED = auto()  # _name
    VARARGS = auto()  # *args or **kwargs
    ASYNC = auto()  # coroutine function
    READONLY = auto()  # property without setter
    CLASS_VAR = auto()  # ClassVar[...] field


@dataclass(frozen=True, slots=True)
class Member:
    """One declaration of a type: a method, constructor, or field.

    Members are candidates for overload resolution: `parameter_types` holds
    the positional parameter types (receiver excluded; empty for fields).

    Attributes:
        name: Declared name (`__init__` for constructors).
        kind: Method, constructor, or field.
        owner: Class that declares the member.
        parameter_types: Positional parameter types.
        value_type: Return type for methods, declared type for fields, the
            owner for constructors.
        modifiers: Observed modifiers.
        markers: Marker objects attached with @marked.
        target: Underlying function, property, or None for plain fields.
        index: Declaration order within the owner.
    """

    name: str
    kind: MemberKind
    owner: type
    parameter_types: tuple[ParameterType, ...] = ()
    value_type: ParameterType | None = None
    modifiers: frozenset[Modifier] = frozenset()
    markers: tuple[Any, ...] = ()
    target: Any = field(default=None, compare=False)
    index: int = 0

    @property
    def arity(self) -> int:
        return len(self.parameter_types)

    def has_modifier(self, modifier: Modifier) -> bool:
        return modifier in self.modifiers

    def __repr__(self) -> str:
        owner = self.owner.__qualname__
        if self.kind is MemberKind.FIELD:
            value = type_name(self.value_type) if self.value_type is not None else "?"
            return f"{owner}.{self.name}: {value}"
        params = ", ".join(type_name(t) for t in self.parameter_types)
        return f"{owner}.{self.name}({params})"


def marked(*markers: Any) -> Callable[[F], F]:
    """Attach marker objects to a function, the way annotations tag declarations.

    Markers accumulate when the decorator is stacked. Apply it below
    @staticmethod/@classmethod/@property so it sees the plain function.

    Args:
        *markers: Arbitrary marker instances (or classes).

    Returns:
        Decorator returning the same function.
    """

    def decorator(func: F) -> F:
        existing = getattr(func, MARKERS_ATTRIBUTE, ())
        setattr(func, MARKERS_ATTRIBUTE, (*markers, *existing))
        return func

    return decorator
