"""Resolution results.

Usage:
    result = try_resolve(candidates, (Primitive.INT,))
    if result.ok:
        use(result.candidate)
    else:
        report(result.error)

    result.unwrap()  # candidate, or raises the stored error
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from sigresolve.core.errors import ResolutionError

C = TypeVar("C")


@dataclass(frozen=True, slots=True)
class ResolutionResult(Generic[C]):
    """Outcome of one resolution call: exactly one of candidate or error."""

    candidate: C | None = None
    error: ResolutionError | None = None

    def __post_init__(self) -> None:
        if (self.candidate is None) == (self.error is None):
            raise ValueError("ResolutionResult needs exactly one of candidate or error")

    @property
    def ok(self) -> bool:
        """True if a candidate was resolved."""
        return self.error is None

    def unwrap(self) -> C:
        """Return the resolved candidate.

        Raises:
            ResolutionError: The stored NoMatch/Ambiguous error, with its
                traceback reset so repeated raises do not accumulate frames.
        """
        if self.error is not None:
            raise self.error.with_traceback(None)
        return self.candidate  # type: ignore[return-value]
