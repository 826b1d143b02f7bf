"""Candidate functionality: classification and specificity ordering."""

from sigresolve.core.candidate.models import Candidate, Signature
from sigresolve.core.candidate.operations import (
    classify_candidate,
    is_less_specialized,
    more_specific,
    position_vote,
)

__all__ = [
    # Models
    "Candidate",
    "Signature",
    # Operations
    "classify_candidate",
    "more_specific",
    "is_less_specialized",
    "position_vote",
]
