# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from tests.utils import Point
from typedcollection import TypedCollection


@pytest.fixture
def int_collection():
    """Integer collection holding [1, 2, 3]."""
    return TypedCollection("integer", [1, 2, 3])


@pytest.fixture
def empty_ints():
    return TypedCollection("integer")


@pytest.fixture
def point_collection():
    """Point collection holding two points."""
    return TypedCollection(Point, [Point(1, 2), Point(3, 4)])


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from typedcollection.core.errors import CollectionError, IndexNotFoundError, TypeMismatchError, UnknownTypeError

    return (CollectionError, TypeMismatchError, IndexNotFoundError, UnknownTypeError)
