"""Candidate models.

A candidate is anything with an ordered tuple of declared parameter types.
Catalog members satisfy the protocol directly; `Signature` is the minimal
standalone form.

Usage:
    from sigresolve.core.candidate import Signature
    from sigresolve.core.types import Primitive

    f_int = Signature((Primitive.INT,), target="f(int)")
    f_obj = Signature((object,), target=handler)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from sigresolve.core.types import ParameterType, type_name


@runtime_checkable
class Candidate(Protocol):
    """Declaration eligible for overload resolution."""

    @property
    def parameter_types(self) -> tuple[ParameterType, ...]:
        """Declared parameter types, in positional order."""
        ...


@dataclass(frozen=True, slots=True)
class Signature:
    """Parameter types plus an opaque reference back to the declaration.

    Attributes:
        parameter_types: Declared parameter types, in positional order.
        target: Whatever the caller wants back after resolution.
        name: Display name for diagnostics.
    """

    parameter_types: tuple[ParameterType, ...]
    target: Any = None
    name: str = ""

    @property
    def arity(self) -> int:
        return len(self.parameter_types)

    def __repr__(self) -> str:
        params = ", ".join(type_name(t) for t in self.parameter_types)
        return f"{self.name or 'signature'}({params})"
