"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from sigresolve import Primitive, Signature
from sigresolve.catalog import IntrospectionCatalog, StaticCatalog


@pytest.fixture
def catalog():
    """Fresh IntrospectionCatalog instance."""
    return IntrospectionCatalog()


@pytest.fixture
def static_catalog():
    """Empty StaticCatalog instance."""
    return StaticCatalog()


@pytest.fixture
def f_int():
    return Signature((Primitive.INT,), name="f_int")


@pytest.fixture
def f_long():
    return Signature((Primitive.LONG,), name="f_long")


@pytest.fixture
def f_double():
    return Signature((Primitive.DOUBLE,), name="f_double")


@pytest.fixture
def f_str():
    return Signature((str,), name="f_str")


@pytest.fixture
def f_object():
    return Signature((object,), name="f_object")
