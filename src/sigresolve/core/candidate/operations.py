"""Candidate classification and specificity ordering.

Pure functions. Both operate on a single candidate or a single pair; the
resolver decides what to do with the answers.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from sigresolve.core.candidate.models import Candidate
from sigresolve.core.errors import AmbiguousResolutionError
from sigresolve.core.types import (
    Classification,
    ParameterType,
    Primitive,
    ProvidedType,
    boxed,
    classify,
    is_subclass,
)

C = TypeVar("C", bound=Candidate)


def classify_candidate(
    candidate: Candidate, arguments: Sequence[ProvidedType]
) -> Classification:
    """Classify a whole candidate against a provided argument list.

    Any INVALID position makes the candidate INVALID; all EXACT positions make
    it EXACT; anything else is COMPATIBLE.

    Args:
        candidate: Candidate to check.
        arguments: Provided argument types, one per position.

    Returns:
        Classification of the candidate. Arity mismatch is INVALID.
    """
    declared = candidate.parameter_types
    if len(declared) != len(arguments):
        return Classification.INVALID

    result = Classification.EXACT
    for provided, parameter in zip(arguments, declared, strict=True):
        match classify(provided, parameter):
            case Classification.INVALID:
                return Classification.INVALID
            case Classification.COMPATIBLE:
                result = Classification.COMPATIBLE
    return result


def is_less_specialized(a: ParameterType, b: ParameterType) -> bool:
    """Check if slot type `a` accepts a strictly wider range of inputs than `b`.

    A primitive is wider than any reference. Between primitives, the widening target
    is the wider one. Between references, the supertype (compared in boxed
    form) is the wider one.
    """
    if a == b:
        return False
    a_primitive = isinstance(a, Primitive)
    b_primitive = isinstance(b, Primitive)
    if a_primitive and b_primitive:
        return b.widens_to(a)  # type: ignore[union-attr]
    if a_primitive != b_primitive:
        return a_primitive
    return is_subclass(boxed(b), boxed(a))


def position_vote(a: ParameterType, b: ParameterType) -> int | None:
    """Compare one parameter position of two candidates.

    Returns:
        0 if identical, +1 if `b` is more specific, -1 if `a` is more
        specific, None if the two types cannot be ordered.
    """
    if a == b:
        return 0
    if is_less_specialized(a, b):
        return 1
    if is_less_specialized(b, a):
        return -1
    return None


def more_specific(a: C, b: C) -> C:
    """Pick the candidate that accepts the narrower range of inputs.

    Every position is compared. The pair is ambiguous when some position
    favours `a` and another favours `b`, when a position holds unrelated
    types, or when no position favours either.

    Args:
        a: Applicable candidate.
        b: Applicable candidate with the same arity.

    Returns:
        The more specific of the two.

    Raises:
        ValueError: If arities differ.
        AmbiguousResolutionError: If no strict order exists.
    """
    a_types = a.parameter_types
    b_types = b.parameter_types
    if len(a_types) != len(b_types):
        raise ValueError(
            f"Cannot compare candidates of different arity: {len(a_types)} and {len(b_types)}"
        )

    favours_a = favours_b = False
    for index, (a_type, b_type) in enumerate(zip(a_types, b_types, strict=True)):
        vote = position_vote(a_type, b_type)
        if vote is None:
            raise AmbiguousResolutionError(
                a, b, reason=f"unrelated parameter types at position {index}"
            )
        favours_a = favours_a or vote < 0
        favours_b = favours_b or vote > 0

    if favours_a and favours_b:
        raise AmbiguousResolutionError(a, b, reason="parameter positions disagree")
    if not (favours_a or favours_b):
        raise AmbiguousResolutionError(a, b, reason="parameter types are equally specific")
    return a if favours_a else b
