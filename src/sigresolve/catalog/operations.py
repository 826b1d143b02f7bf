"""Catalog operations: annotation-to-type mapping and hierarchy walks."""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from logging import getLogger
from typing import Annotated, Any, ClassVar, Final, Union, get_args, get_origin, get_type_hints

from sigresolve.catalog.models import Member, MemberKind, Modifier
from sigresolve.core.types import ParameterType, Primitive

log = getLogger(__name__)

_WRAPPERS = (ClassVar, Final)


def parameter_type_of(hint: Any) -> ParameterType:
    """Map a Python annotation to a ParameterType.

    - `Primitive.X` or `Annotated[..., Primitive.X]` declares a primitive slot
    - classes map to themselves; generic aliases to their origin class
    - `X | None` maps to `X`; other unions, type variables, unresolved
      string annotations, and missing annotations map to `object`
    - ClassVar/Final wrappers are looked through

    Args:
        hint: Annotation object (possibly inspect.Parameter.empty).

    Returns:
        Primitive kind or class.
    """
    if isinstance(hint, Primitive):
        return hint
    if hint is None:
        return type(None)
    if hint is inspect.Parameter.empty or hint is Any:
        return object

    origin = get_origin(hint)
    if origin is Annotated:
        base, *metadata = get_args(hint)
        for item in metadata:
            if isinstance(item, Primitive):
                return item
        return parameter_type_of(base)
    if origin in _WRAPPERS:
        args = get_args(hint)
        return parameter_type_of(args[0]) if args else object
    if origin is Union or origin is types.UnionType:
        options = [arg for arg in get_args(hint) if arg is not type(None)]
        return parameter_type_of(options[0]) if len(options) == 1 else object
    if origin is not None:
        return origin if isinstance(origin, type) else object
    if isinstance(hint, type):
        return hint
    return object


def resolved_hints(obj: Any) -> dict[str, Any]:
    """get_type_hints() with extras, or {} when forward references don't resolve."""
    try:
        return get_type_hints(obj, include_extras=True)
    except (NameError, TypeError, AttributeError) as e:
        log.debug("Unresolved annotations on %r: %s", obj, e)
        return {}


def visibility_modifiers(name: str, owner: type | None = None) -> frozenset[Modifier]:
    """PRIVATE for mangled names, PROTECTED for single-underscore names.

    Class namespaces hold `__name` as `_Owner__name`; pass `owner` to
    recognise that form.
    """
    mangled = owner is not None and name.startswith(f"_{owner.__name__.lstrip('_')}__")
    if mangled or (name.startswith("__") and not name.endswith("__")):
        return frozenset({Modifier.PRIVATE})
    if name.startswith("_") and not name.endswith("__"):
        return frozenset({Modifier.PROTECTED})
    return frozenset()


def hint_modifiers(hint: Any) -> frozenset[Modifier]:
    """CLASS_VAR/FINAL for wrapped field annotations."""
    origin = get_origin(hint)
    if origin is ClassVar:
        return frozenset({Modifier.CLASS_VAR})
    if origin is Final or hint is Final:
        return frozenset({Modifier.FINAL})
    return frozenset()


def collect_hierarchy(
    owner: type,
    declared: Callable[[type], tuple[Member, ...]],
    include_supertypes: bool,
) -> tuple[Member, ...]:
    """Gather members of `owner` and optionally of its bases.

    Bases are walked in MRO order, `object` excluded. A base member is hidden
    when a more derived class already declares the same name, matching
    Python attribute lookup.

    Args:
        owner: Class to start from.
        declared: Returns the members a single class declares itself.
        include_supertypes: Walk the MRO instead of stopping at `owner`.

    Returns:
        Members in MRO order, declaration order within each class.
    """
    if not include_supertypes:
        return declared(owner)

    result: list[Member] = []
    seen: set[str] = set()
    for cls in owner.__mro__:
        if cls is object:
            continue
        own = declared(cls)
        result.extend(m for m in own if m.name not in seen)
        seen.update(m.name for m in own)
    return tuple(result)


def constructor_members(
    owner: type, declared: Callable[[type], tuple[Member, ...]]
) -> tuple[Member, ...]:
    """Constructor variants of the nearest class in the MRO that declares one."""
    for cls in owner.__mro__:
        if cls is object:
            break
        ctors = tuple(m for m in declared(cls) if m.kind is MemberKind.CONSTRUCTOR)
        if ctors:
            return ctors
    return ()
