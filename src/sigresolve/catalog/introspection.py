"""Member catalog built from live Python classes.

Each `@typing.overload` variant of a function becomes its own member, so a
class can expose several signatures under one name the way overloaded
declarations do.

Usage:
    class Greeter:
        @overload
        def greet(self, who: str) -> str: ...
        @overload
        def greet(self, who: Annotated[int, Primitive.INT]) -> str: ...
        def greet(self, who): ...

    catalog = IntrospectionCatalog()
    catalog.members(Greeter)   # two `greet` members plus nothing else
"""

from __future__ import annotations

import inspect
import threading
import typing
from collections.abc import Iterator
from typing import Any

from sigresolve.catalog.models import MARKERS_ATTRIBUTE, Member, MemberKind, Modifier
from sigresolve.catalog.operations import (
    collect_hierarchy,
    hint_modifiers,
    parameter_type_of,
    resolved_hints,
    visibility_modifiers,
)
from sigresolve.core.types import ParameterType

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
# Compiler-generated annotation functions (3.14+)
_IGNORED = frozenset({"__annotate__", "__annotate_func__"})


def _function_modifiers(func: Any) -> set[Modifier]:
    modifiers: set[Modifier] = set()
    if getattr(func, "__isabstractmethod__", False):
        modifiers.add(Modifier.ABSTRACT)
    if getattr(func, "__final__", False):
        modifiers.add(Modifier.FINAL)
    if inspect.iscoroutinefunction(func):
        modifiers.add(Modifier.ASYNC)
    return modifiers


def _signature_of(
    func: Any, skip_receiver: bool
) -> tuple[tuple[ParameterType, ...], ParameterType, bool]:
    """Positional parameter types, return type, and whether it is variadic."""
    hints = resolved_hints(func)
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return (), object, True

    parameters = list(signature.parameters.values())
    if skip_receiver and parameters and parameters[0].kind in _POSITIONAL:
        parameters = parameters[1:]

    variadic = False
    types: list[ParameterType] = []
    for parameter in parameters:
        if parameter.kind in _VARIADIC:
            variadic = True
        elif parameter.kind in _POSITIONAL:
            types.append(parameter_type_of(hints.get(parameter.name, parameter.annotation)))

    returns = parameter_type_of(hints.get("return", signature.return_annotation))
    return tuple(types), returns, variadic


def _unwrap(attr: Any) -> tuple[Any, set[Modifier], bool] | None:
    """Plain function behind a class attribute, its modifiers, and receiver flag."""
    if isinstance(attr, staticmethod):
        return attr.__func__, {Modifier.STATIC}, False
    if isinstance(attr, classmethod):
        return attr.__func__, {Modifier.CLASS}, True
    if inspect.isfunction(attr):
        return attr, set(), True
    return None


def _declared_members(owner: type) -> Iterator[Member]:
    index = 0
    own_annotations = inspect.get_annotations(owner)
    hints = resolved_hints(owner)

    for name, raw in own_annotations.items():
        hint = hints.get(name, raw)
        yield Member(
            name=name,
            kind=MemberKind.FIELD,
            owner=owner,
            value_type=parameter_type_of(hint),
            modifiers=hint_modifiers(hint) | visibility_modifiers(name, owner),
            index=index,
        )
        index += 1

    for name, attr in vars(owner).items():
        if name in own_annotations or name in _IGNORED:
            continue

        if isinstance(attr, property):
            modifiers = visibility_modifiers(name, owner)
            if attr.fset is None:
                modifiers |= {Modifier.READONLY}
            getter_returns: ParameterType = object
            if attr.fget is not None:
                _, getter_returns, _ = _signature_of(attr.fget, skip_receiver=True)
                modifiers |= _function_modifiers(attr.fget)
            yield Member(
                name=name,
                kind=MemberKind.FIELD,
                owner=owner,
                value_type=getter_returns,
                modifiers=frozenset(modifiers),
                markers=getattr(attr.fget, MARKERS_ATTRIBUTE, ()),
                target=attr,
                index=index,
            )
            index += 1
            continue

        unwrapped = _unwrap(attr)
        if unwrapped is None:
            continue
        func, modifiers, receiver = unwrapped
        kind = MemberKind.CONSTRUCTOR if name == "__init__" else MemberKind.METHOD
        modifiers |= _function_modifiers(func) | visibility_modifiers(name, owner)
        markers = getattr(func, MARKERS_ATTRIBUTE, ())

        variants = typing.get_overloads(func) if inspect.isfunction(func) else []
        for variant in variants or [func]:
            variant_func = getattr(variant, "__func__", variant)
            parameter_types, returns, variadic = _signature_of(variant_func, receiver)
            variant_modifiers = (modifiers | {Modifier.VARARGS}) if variadic else modifiers
            variant_markers = markers
            if variant_func is not func:
                variant_markers = (*getattr(variant_func, MARKERS_ATTRIBUTE, ()), *markers)
            yield Member(
                name=name,
                kind=kind,
                owner=owner,
                parameter_types=parameter_types,
                value_type=owner if kind is MemberKind.CONSTRUCTOR else returns,
                modifiers=frozenset(variant_modifiers),
                markers=variant_markers,
                target=attr,
                index=index,
            )
            index += 1


class IntrospectionCatalog:
    """MemberCatalog over live classes, caching each class's declarations.

    Args:
        cache: Optional pre-existing cache to share between catalogs. A fresh
            one is created otherwise.
    """

    def __init__(self, cache: dict[type, tuple[Member, ...]] | None = None) -> None:
        self._cache: dict[type, tuple[Member, ...]] = {} if cache is None else cache
        self._lock = threading.Lock()

    def declared(self, owner: type) -> tuple[Member, ...]:
        """Members `owner` declares itself."""
        with self._lock:
            cached = self._cache.get(owner)
        if cached is not None:
            return cached

        members = tuple(_declared_members(owner))
        with self._lock:
            return self._cache.setdefault(owner, members)

    def members(self, owner: type, include_supertypes: bool = False) -> tuple[Member, ...]:
        """Declarations of `owner`, optionally including non-shadowed base members."""
        return collect_hierarchy(owner, self.declared, include_supertypes)

    def clear(self) -> None:
        """Forget cached declarations (e.g. after redefining classes)."""
        with self._lock:
            self._cache.clear()
