# typedcollection/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Hashable


class CollectionError(Exception):
    """
    Base exception class for errors raised by typed collections.
    """


class TypeMismatchError(CollectionError, TypeError):
    """
    Raised when a value does not satisfy the collection's declared value type.

    :param expected: Description of the declared value type.
    :param actual: Name of the rejected value's type.
    """

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(
            f'Trying to add a value of wrong type: "{expected}" expected, but "{actual}" was given.'
        )
        self.expected = expected
        self.actual = actual


class IndexNotFoundError(CollectionError, LookupError):
    """
    Raised when a requested index is not present in the collection.
    """

    def __init__(self, index: Hashable) -> None:
        super().__init__(f"Index {index!r} out of range")
        self.index = index


class UnknownTypeError(CollectionError, ValueError):
    """
    Raised when a value type descriptor names neither a basic kind nor a class.
    """

    def __init__(self, value_type: Any) -> None:
        super().__init__(f"Unknown value type: {value_type!r}")
        self.value_type = value_type
