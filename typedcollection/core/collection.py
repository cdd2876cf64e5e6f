# typedcollection/core/collection.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from typedcollection.core.errors import IndexNotFoundError, TypeMismatchError
from typedcollection.core.validations import TypeRule, describe_type, resolve_value_type
from typedcollection.interfaces.protocols import SelfConvertible
from typedcollection.interfaces.types import Index, KeyMap, PlainStructure, ValueTypeDescriptor

logger = logging.getLogger(__name__)


def _is_int_key(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _normalize_key(key: Any) -> Any:
    """Store bools and integral numbers under the int they hash equal to."""
    if isinstance(key, bool):
        return int(key)
    if isinstance(key, numbers.Real) and not isinstance(key, int) and math.isfinite(key) and key == int(key):
        return int(key)
    return key


class TypedCollection:
    """
    Ordered, index-addressable container that only accepts values of one
    declared type.

    The value type is either a basic kind name ("integer", "string", "bool",
    ...) checked with a registered predicate, or a class / runtime-checkable
    protocol (given directly or as a dotted path) checked with isinstance.
    The rule is resolved once, at construction.

    Values are appended under auto-incrementing integer indices; set() may
    place them under any hashable key. Insertion order is preserved.

    Stored values are not copied. A mutable value changed by the caller after
    insertion is not re-validated.

    Not thread-safe: callers sharing a collection between threads must
    serialize access themselves.
    """

    def __init__(self, value_type: ValueTypeDescriptor, items: Iterable[Any] = ()) -> None:
        """
        Create a collection and add the initial items in order.

        :param value_type: Basic kind name, class, protocol, or dotted class path.
        :param items: Initial values, each validated as by add().
        :raises UnknownTypeError: If value_type cannot be resolved.
        :raises TypeMismatchError: If an initial item has the wrong type.
        """
        self._value_type = value_type
        self._rule: TypeRule = resolve_value_type(value_type)
        self._store: Dict[Index, Any] = {}
        self._next_index = 0
        self.set_items(items)

    @property
    def value_type(self) -> ValueTypeDescriptor:
        """The descriptor the collection was declared with."""
        return self._value_type

    @property
    def is_basic_type(self) -> bool:
        return self._rule.is_basic

    def is_valid_type(self, value: Any) -> bool:
        return self._rule.check(value)

    def _validate(self, value: Any) -> None:
        if not self.is_valid_type(value):
            logger.debug("Rejected %s for collection of %s", describe_type(value), self._rule.describe())
            raise TypeMismatchError(self._rule.describe(), describe_type(value))

    def set_items(self, items: Iterable[Any]) -> None:
        """Append every item in order. Items before a bad one stay added."""
        for item in items:
            self.add(item)

    def add(self, value: Any) -> int:
        """
        Append a value under the next sequential index.

        :return: The index the value was stored under.
        :raises TypeMismatchError: If the value has the wrong type.
        """
        self._validate(value)
        index = self._next_index
        self._store[index] = value
        self._next_index += 1
        return index

    def set(self, index: Index, value: Any) -> None:
        """
        Store a value under ``index``, inserting or overwriting.

        :raises TypeMismatchError: If the value has the wrong type.
        """
        self._validate(value)
        index = _normalize_key(index)
        self._store[index] = value
        if _is_int_key(index) and index >= self._next_index:
            self._next_index = index + 1

    def remove(self, index: Index) -> None:
        if not self.exists(index):
            raise IndexNotFoundError(index)
        del self._store[index]

    def get(self, index: Index) -> Any:
        try:
            return self._store[index]
        except (KeyError, TypeError):
            raise IndexNotFoundError(index) from None

    def exists(self, index: Index) -> bool:
        try:
            return index in self._store
        except TypeError:
            # unhashable, so it cannot be a key
            return False

    def get_first(self) -> Optional[Any]:
        """Earliest-inserted value, or None when empty. Does not mutate."""
        for value in self._store.values():
            return value
        return None

    def get_last(self) -> Optional[Any]:
        """Latest-inserted value, or None when empty. Does not mutate."""
        for value in reversed(self._store.values()):
            return value
        return None

    def pop_last(self) -> Optional[Any]:
        """
        Remove and return the latest-inserted value, or None when empty.

        The next append index becomes one past the highest remaining integer index.
        """
        if not self._store:
            return None
        _, value = self._store.popitem()
        self._next_index = max((k for k in self._store if _is_int_key(k)), default=-1) + 1
        return value

    def shift_first(self) -> Optional[Any]:
        """
        Remove and return the earliest-inserted value, or None when empty.

        Remaining integer indices are renumbered from 0 in order; other keys
        keep their names and relative positions.
        """
        if not self._store:
            return None
        first = next(iter(self._store))
        value = self._store.pop(first)

        renumbered: Dict[Index, Any] = {}
        position = 0
        for key, item in self._store.items():
            if _is_int_key(key):
                renumbered[position] = item
                position += 1
            else:
                renumbered[key] = item
        self._store = renumbered
        self._next_index = position
        return value

    def count(self) -> int:
        return len(self._store)

    def to_array(self) -> PlainStructure:
        """
        Convert the collection into plain lists/dicts.

        Basic kinds are returned as stored. Otherwise each element that
        implements SelfConvertible is replaced by its own to_array() result.
        Dense indices 0..n-1 give a list; any other key set gives a dict.
        """
        if self.is_basic_type:
            converted = dict(self._store)
        else:
            converted = {
                key: element.to_array() if isinstance(element, SelfConvertible) else element
                for key, element in self._store.items()
            }

        if list(converted) == list(range(len(converted))):
            return list(converted.values())
        return converted

    def items(self) -> List[Tuple[Index, Any]]:
        """Snapshot of (index, value) pairs in current order."""
        return list(self._store.items())

    def clear(self) -> None:
        logger.debug("Clearing %d entries", len(self._store))
        self._store = {}
        self._next_index = 0

    def change_key(self, old_key: Index, new_key: Index) -> None:
        """
        Move the value at ``old_key`` to ``new_key``.

        The value is read before removal, so ``old_key == new_key`` is safe.
        An existing value at ``new_key`` is overwritten.

        :raises IndexNotFoundError: If old_key is absent.
        """
        value = self.get(old_key)
        self.remove(old_key)
        self.set(new_key, value)
        logger.debug("Moved index %r to %r", old_key, new_key)

    def change_multiple_keys(self, keys_map: KeyMap) -> None:
        """
        Apply change_key for each (old, new) pair in mapping order.

        Not atomic: if a pair fails, pairs applied before it stay applied and
        the IndexNotFoundError propagates.
        """
        for old_key, new_key in keys_map.items():
            self.change_key(old_key, new_key)

    def __iter__(self) -> Iterator[Tuple[Index, Any]]:
        return iter(self.items())

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, index: object) -> bool:
        return self.exists(index)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rule.describe()!r}, {self._store!r})"
