"""typedcollection: homogeneous, ordered, index-addressable collections

This package provides a container that enforces a declared element type on
every insertion.

Responsibilities:
    - Type validation against basic kinds or classes/protocols
    - Positional access and insert-or-overwrite by index
    - Stack/queue endpoint operations
    - Recursive conversion to plain lists and dicts
    - Index remapping

Interactions:
    - Client code through the public API
    - Python type system for isinstance / protocol checks
    - Logging system for diagnostics

Cross-cutting Concerns:
    Thread Safety:
        - Collections are not thread-safe; callers serialize access
        - The basic type registry is guarded by a lock

    Error Handling:
        - Structured error hierarchy rooted at CollectionError
        - Missing indices raise, empty endpoint operations return None

    Logging:
        - Module-level loggers, debug records only on the hot path
        - No handlers configured by the library
"""

from typedcollection.core.collection import TypedCollection
from typedcollection.core.errors import (
    CollectionError,
    IndexNotFoundError,
    TypeMismatchError,
    UnknownTypeError,
)
from typedcollection.core.validations import basic_type_names, register_basic_type, unregister_basic_type
from typedcollection.interfaces.abc import CollectionContract
from typedcollection.interfaces.protocols import SelfConvertible

__version__ = "0.1.0"

__all__ = [
    "CollectionContract",
    "CollectionError",
    "IndexNotFoundError",
    "SelfConvertible",
    "TypeMismatchError",
    "TypedCollection",
    "UnknownTypeError",
    "basic_type_names",
    "register_basic_type",
    "unregister_basic_type",
]
