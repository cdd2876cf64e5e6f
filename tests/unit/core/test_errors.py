# tests/unit/core/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


def test_error_hierarchy(error_classes):
    CollectionError, TypeMismatchError, IndexNotFoundError, UnknownTypeError = error_classes
    assert issubclass(TypeMismatchError, CollectionError)
    assert issubclass(IndexNotFoundError, CollectionError)
    assert issubclass(UnknownTypeError, CollectionError)


def test_errors_are_builtin_compatible(error_classes):
    _, TypeMismatchError, IndexNotFoundError, UnknownTypeError = error_classes
    assert issubclass(TypeMismatchError, TypeError)
    assert issubclass(IndexNotFoundError, LookupError)
    assert issubclass(UnknownTypeError, ValueError)


def test_collection_error_base():
    from typedcollection.core.errors import CollectionError

    error = CollectionError("Base error")
    assert str(error) == "Base error"
    assert isinstance(error, Exception)
    assert str(CollectionError()) == ""


def test_type_mismatch_error_attributes():
    from typedcollection.core.errors import TypeMismatchError

    error = TypeMismatchError("integer", "str")
    assert error.expected == "integer"
    assert error.actual == "str"
    assert str(error) == 'Trying to add a value of wrong type: "integer" expected, but "str" was given.'


def test_index_not_found_error_attributes():
    from typedcollection.core.errors import IndexNotFoundError

    error = IndexNotFoundError(7)
    assert error.index == 7
    assert str(error) == "Index 7 out of range"
    assert str(IndexNotFoundError("name")) == "Index 'name' out of range"


def test_unknown_type_error_attributes():
    from typedcollection.core.errors import UnknownTypeError

    error = UnknownTypeError("no.such.Thing")
    assert error.value_type == "no.such.Thing"
    assert "no.such.Thing" in str(error)
