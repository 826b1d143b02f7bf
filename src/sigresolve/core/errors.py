"""Resolution and lookup errors.

All resolution failures are terminal: the same inputs always fail the same
way, so callers must surface them instead of falling back to some candidate.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sigresolve.core.types import ProvidedType, type_name


def _describe_arguments(arguments: Sequence[ProvidedType]) -> str:
    return "(" + ", ".join(type_name(t) for t in arguments) + ")"


class ResolutionError(LookupError):
    """Base class for failed overload resolution."""

    fatal: bool = False

    def __init__(self, message: str, arguments: Sequence[ProvidedType] = ()) -> None:
        super().__init__(message)
        self.arguments = tuple(arguments)


class NoMatchError(ResolutionError):
    """Raised when no candidate accepts the provided arguments."""

    def __init__(self, arguments: Sequence[ProvidedType] = (), detail: str | None = None) -> None:
        message = detail or f"No matching candidate for arguments {_describe_arguments(arguments)}"
        super().__init__(message, arguments)


class AmbiguousResolutionError(ResolutionError):
    """Raised when two applicable candidates cannot be ordered by specificity.

    Attributes:
        first: One of the conflicting candidates.
        second: The other conflicting candidate.
    """

    def __init__(
        self,
        first: Any,
        second: Any,
        arguments: Sequence[ProvidedType] = (),
        reason: str = "neither candidate is more specific",
    ) -> None:
        message = (
            f"Ambiguous candidates for arguments {_describe_arguments(arguments)}: "
            f"{reason}\n    A: {first!r}\n    B: {second!r}"
        )
        super().__init__(message, arguments)
        self.first = first
        self.second = second
        self.reason = reason

    def with_arguments(self, arguments: Sequence[ProvidedType]) -> AmbiguousResolutionError:
        """Copy of this error annotated with the call's argument types."""
        return type(self)(self.first, self.second, arguments, self.reason)


class CatalogInconsistencyError(AmbiguousResolutionError):
    """Ambiguity that can only come from a broken catalog or comparator.

    Raised for duplicate exact matches, or when the exact match does not win
    the specificity reduction.
    """

    fatal = True


class InvalidQueryError(ValueError):
    """Raised when member query predicates contradict each other."""

    pass
