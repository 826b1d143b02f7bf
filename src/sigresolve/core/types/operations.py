"""Type compatibility operations.

Pure functions over ParameterType/ProvidedType. `classify` is the single
decision point for "can this argument go into that slot, and how well".
"""

from __future__ import annotations

from typing import Any

from sigresolve.core.types.models import (
    NULL,
    Boxed,
    Classification,
    NullType,
    ParameterType,
    Primitive,
    ProvidedType,
)


def boxed(t: ParameterType) -> type:
    """Reference form of a type: the wrapper for primitives, identity otherwise.

    Args:
        t: Primitive kind or class.

    Returns:
        Class usable with issubclass().
    """
    if isinstance(t, Primitive):
        return t.boxed
    return t


def unboxed(t: ParameterType) -> Primitive | None:
    """Primitive form of a type, if it has one.

    Args:
        t: Primitive kind or class.

    Returns:
        The primitive itself, the primitive behind a wrapper class, or None.
    """
    if isinstance(t, Primitive):
        return t
    if isinstance(t, type) and issubclass(t, Boxed) and hasattr(t, "primitive"):
        return t.primitive
    return None


def widens(source: Primitive, target: Primitive) -> bool:
    """Check primitive widening (strict: a kind does not widen to itself)."""
    return source.widens_to(target)


def is_subclass(sub: Any, sup: Any) -> bool:
    """issubclass() that answers False instead of raising.

    Typing constructs (generic aliases, non-runtime protocols) are not
    assignable to or from anything here.
    """
    if not (isinstance(sub, type) and isinstance(sup, type)):
        return False
    try:
        return issubclass(sub, sup)
    except TypeError:
        return False


def classify(provided: ProvidedType, declared: ParameterType) -> Classification:
    """Classify one provided argument type against one declared parameter type.

    Rules, first match wins:
    - NULL vs primitive: INVALID; NULL vs reference: COMPATIBLE
    - identical types: EXACT
    - primitive vs its own wrapper, either direction: EXACT
    - declared primitive: COMPATIBLE if the (unboxed) provided kind widens to it
    - declared reference: COMPATIBLE if the (boxed) provided type subclasses it
    - otherwise INVALID

    Args:
        provided: Runtime type of the argument, or NULL.
        declared: Declared parameter type.

    Returns:
        Classification. Never raises.
    """
    if provided is NULL:
        if isinstance(declared, Primitive):
            return Classification.INVALID
        return Classification.COMPATIBLE

    if provided == declared:
        return Classification.EXACT

    provided_kind = unboxed(provided)
    declared_kind = unboxed(declared)
    if isinstance(provided, Primitive) or isinstance(declared, Primitive):
        if provided_kind is not None and provided_kind is declared_kind:
            return Classification.EXACT

    if isinstance(declared, Primitive):
        if provided_kind is not None and widens(provided_kind, declared):
            return Classification.COMPATIBLE
        return Classification.INVALID

    if is_subclass(boxed(provided), declared):
        return Classification.COMPATIBLE
    return Classification.INVALID


def is_assignable(provided: ProvidedType, declared: ParameterType) -> bool:
    """Boolean view of classify(): True unless INVALID."""
    return classify(provided, declared) is not Classification.INVALID


def type_of(value: Any) -> ProvidedType:
    """Runtime type of a value as seen by resolution.

    Args:
        value: Any runtime value.

    Returns:
        NULL for None, the value's class otherwise (wrapper class for boxes).
    """
    if value is None:
        return NULL
    return type(value)


def argument_types(*values: Any) -> tuple[ProvidedType, ...]:
    """Map runtime values to a provided-argument tuple."""
    return tuple(type_of(v) for v in values)


def type_name(t: ProvidedType) -> str:
    """Short display name for diagnostics."""
    if isinstance(t, (Primitive, NullType)):
        return t.value
    return getattr(t, "__qualname__", repr(t))
