"""Tests for the type compatibility oracle.

Critical Invariants:
1. Every type is EXACT against itself
2. A primitive and its wrapper are EXACT in both directions
3. Widening is one-way: COMPATIBLE forward, INVALID backward
4. NULL fits every reference slot and no primitive slot
5. classify never raises, whatever it is handed
"""

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sigresolve.core.types import (
    NULL,
    Boolean,
    Boxed,
    Byte,
    Character,
    Classification,
    Double,
    Float,
    Integer,
    Long,
    Number,
    Primitive,
    Short,
    argument_types,
    boxed,
    classify,
    is_assignable,
    is_subclass,
    type_name,
    type_of,
    unboxed,
    widens,
)


class Animal:
    pass


class Dog(Animal):
    pass


reference_types = [object, str, int, float, bytes, list, Animal, Dog, Number, Integer, Double]
primitives = st.sampled_from(list(Primitive))
references = st.sampled_from(reference_types)
any_type = st.one_of(primitives, references)

WIDENINGS = [
    (Primitive.BYTE, Primitive.SHORT),
    (Primitive.BYTE, Primitive.INT),
    (Primitive.BYTE, Primitive.DOUBLE),
    (Primitive.SHORT, Primitive.INT),
    (Primitive.CHAR, Primitive.INT),
    (Primitive.CHAR, Primitive.LONG),
    (Primitive.INT, Primitive.LONG),
    (Primitive.INT, Primitive.FLOAT),
    (Primitive.INT, Primitive.DOUBLE),
    (Primitive.LONG, Primitive.FLOAT),
    (Primitive.FLOAT, Primitive.DOUBLE),
]


@given(any_type)
def test_identity_is_exact(t):
    """PROPERTY: classify(T, T) = EXACT for every type."""
    assert classify(t, t) is Classification.EXACT


@given(primitives)
def test_primitive_and_wrapper_are_exact_both_ways(p):
    """PROPERTY: A primitive and its boxed wrapper are interchangeable."""
    assert classify(p.boxed, p) is Classification.EXACT
    assert classify(p, p.boxed) is Classification.EXACT


@pytest.mark.parametrize(("narrow", "wide"), WIDENINGS)
def test_widening_is_one_way(narrow, wide):
    """CRITICAL: Widening never runs backwards.

    Why: f(long) must accept an int argument, but f(int) must reject a long.
    """
    assert classify(narrow, wide) is Classification.COMPATIBLE
    assert classify(wide, narrow) is Classification.INVALID


def test_boolean_never_widens():
    for p in Primitive:
        if p is not Primitive.BOOLEAN:
            assert classify(Primitive.BOOLEAN, p) is Classification.INVALID
            assert classify(p, Primitive.BOOLEAN) is Classification.INVALID


def test_char_and_short_do_not_convert():
    assert classify(Primitive.CHAR, Primitive.SHORT) is Classification.INVALID
    assert classify(Primitive.SHORT, Primitive.CHAR) is Classification.INVALID
    assert classify(Primitive.BYTE, Primitive.CHAR) is Classification.INVALID


@given(references)
def test_null_fits_reference_slots(t):
    """PROPERTY: NULL is COMPATIBLE with any reference type."""
    assert classify(NULL, t) is Classification.COMPATIBLE


@given(primitives)
def test_null_never_fits_primitive_slots(p):
    """PROPERTY: NULL is INVALID against any primitive."""
    assert classify(NULL, p) is Classification.INVALID


def test_subclass_is_compatible():
    assert classify(Dog, Animal) is Classification.COMPATIBLE
    assert classify(Animal, Dog) is Classification.INVALID
    assert classify(str, object) is Classification.COMPATIBLE


def test_primitive_boxes_into_reference_supertypes():
    """CRITICAL: A primitive is accepted by its wrapper's supertypes."""
    assert classify(Primitive.INT, Number) is Classification.COMPATIBLE
    assert classify(Primitive.INT, object) is Classification.COMPATIBLE
    assert classify(Primitive.BOOLEAN, Number) is Classification.INVALID
    assert classify(Primitive.INT, Long) is Classification.INVALID


def test_wrapper_unboxes_then_widens():
    assert classify(Integer, Primitive.LONG) is Classification.COMPATIBLE
    assert classify(Long, Primitive.INT) is Classification.INVALID


def test_python_builtins_are_plain_references():
    """Python's int is a reference type, unrelated to the primitive kinds."""
    assert classify(int, Primitive.INT) is Classification.INVALID
    assert classify(Primitive.INT, int) is Classification.INVALID
    assert classify(bool, int) is Classification.COMPATIBLE


@given(st.one_of(any_type, st.just(NULL)), any_type)
def test_classify_is_total(provided, declared):
    """PROPERTY: classify returns a Classification for every input."""
    assert classify(provided, declared) in set(Classification)


def test_classify_handles_typing_constructs():
    assert classify(list[int], list) is Classification.INVALID
    assert classify(str, list[int]) is Classification.INVALID


def test_is_assignable_mirrors_classify():
    assert is_assignable(Primitive.INT, Primitive.LONG)
    assert is_assignable(Integer, Primitive.INT)
    assert not is_assignable(NULL, Primitive.INT)


def test_boxed_and_unboxed():
    assert boxed(Primitive.CHAR) is Character
    assert boxed(str) is str
    assert unboxed(Boolean) is Primitive.BOOLEAN
    assert unboxed(Primitive.FLOAT) is Primitive.FLOAT
    assert unboxed(str) is None
    assert unboxed(Number) is None


def test_wrapper_classes_are_boxes():
    for p in Primitive:
        assert issubclass(p.boxed, Boxed)
        assert p.boxed.primitive is p
    for cls in (Byte, Short, Integer, Long, Float, Double):
        assert issubclass(cls, Number)


def test_widens_is_strict():
    assert widens(Primitive.INT, Primitive.LONG)
    assert not widens(Primitive.INT, Primitive.INT)


def test_is_subclass_never_raises():
    assert is_subclass(Dog, Animal)
    assert not is_subclass(Primitive.INT, object)
    assert not is_subclass(list[int], list)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, NULL),
        (Integer(5), Integer),
        (Character("x"), Character),
        ("text", str),
        (5, int),
        (Dog(), Dog),
    ],
)
def test_type_of(value: Any, expected):
    assert type_of(value) is expected


def test_argument_types():
    assert argument_types(Integer(1), None, "x") == (Integer, NULL, str)
    assert argument_types() == ()


def test_type_name():
    assert type_name(Primitive.INT) == "int"
    assert type_name(NULL) == "null"
    assert type_name(Dog) == "Dog"
    assert repr(Primitive.LONG) == "long"
