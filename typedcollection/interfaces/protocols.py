# typedcollection/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SelfConvertible(Protocol):
    """
    Protocol for elements that know how to flatten themselves.

    Methods:
        to_array(): Returns a plain nested structure (lists, dicts, scalars)
            describing the element.

    Runtime Invariants:
    - to_array() does not mutate the element.
    - The returned structure is owned by the caller.
    """

    def to_array(self) -> Any:
        """Return a plain nested representation of this element."""
        ...
