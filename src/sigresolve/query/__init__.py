"""Query functionality: fluent member lookup and type matchers."""

from sigresolve.query.models import (
    MatchMode,
    MemberQuery,
    TypeMatcher,
    accepting,
    assignable_to,
    is_type,
    matching,
)
from sigresolve.query.operations import (
    find_matching_constructor,
    find_matching_method,
    match_anywhere,
    matches_member,
    validate_query,
)

__all__ = [
    # Models
    "MemberQuery",
    "TypeMatcher",
    "MatchMode",
    "is_type",
    "assignable_to",
    "accepting",
    "matching",
    # Operations
    "find_matching_method",
    "find_matching_constructor",
    "matches_member",
    "match_anywhere",
    "validate_query",
]
