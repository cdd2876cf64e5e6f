# typedcollection/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import importlib
import logging
import numbers
import re
import threading
from collections.abc import Iterable, Mapping, Sized
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from typedcollection.core.errors import UnknownTypeError
from typedcollection.interfaces.types import Predicate, ValueTypeDescriptor

logger = logging.getLogger(__name__)

_NUMERIC_STRING = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

_SCALARS = (bool, int, float, str)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_float(value: Any) -> bool:
    return isinstance(value, float)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_numeric(value: Any) -> bool:
    """Numbers of any kind, or strings holding a decimal/exponent number. Never bool."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Number):
        return True
    if isinstance(value, str):
        return _NUMERIC_STRING.match(value) is not None
    return False


def _is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALARS)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple, dict))


def _is_dict(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_object(value: Any) -> bool:
    return value is not None and not isinstance(value, _SCALARS + (bytes, list, tuple, dict))


def _is_iterable(value: Any) -> bool:
    return isinstance(value, Iterable)


def _is_countable(value: Any) -> bool:
    return isinstance(value, Sized)


def _is_null(value: Any) -> bool:
    return value is None


def _is_bytes(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray))


_registry_lock = threading.Lock()
_basic_types: Dict[str, Predicate] = {
    "integer": _is_integer,
    "int": _is_integer,
    "long": _is_integer,
    "float": _is_float,
    "double": _is_float,
    "string": _is_string,
    "str": _is_string,
    "bool": _is_bool,
    "boolean": _is_bool,
    "numeric": _is_numeric,
    "scalar": _is_scalar,
    "array": _is_array,
    "list": _is_array,
    "dict": _is_dict,
    "object": _is_object,
    "callable": callable,
    "iterable": _is_iterable,
    "countable": _is_countable,
    "null": _is_null,
    "none": _is_null,
    "bytes": _is_bytes,
}


def register_basic_type(name: str, predicate: Predicate) -> None:
    """
    Register a basic kind so collections declared with ``name`` validate
    values with ``predicate``. Names are case-insensitive.

    Collections created before the call keep the rule they resolved.

    :param name: Kind name, e.g. ``"uuid"``.
    :param predicate: Callable returning True for acceptable values.
    :raises ValueError: If the name is empty or the predicate is not callable.
    """
    if not name or not isinstance(name, str):
        raise ValueError("Basic type name must be a non-empty string")
    if not callable(predicate):
        raise ValueError("Basic type predicate must be callable")

    key = name.lower()
    with _registry_lock:
        if key in _basic_types:
            logger.warning("Replacing predicate for basic type %r", key)
        _basic_types[key] = predicate


def unregister_basic_type(name: str) -> None:
    """Remove a basic kind. Unknown names are ignored."""
    with _registry_lock:
        _basic_types.pop(name.lower(), None)


def basic_type_names() -> List[str]:
    """Sorted names of every registered basic kind."""
    with _registry_lock:
        return sorted(_basic_types)


def get_basic_predicate(name: str) -> Optional[Predicate]:
    with _registry_lock:
        return _basic_types.get(name.lower())


@dataclass(frozen=True)
class PrimitiveKind:
    """Type rule for a basic kind: a named predicate."""

    name: str
    predicate: Predicate

    is_basic = True

    def check(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def describe(self) -> str:
        return self.name


@dataclass(frozen=True)
class RequiredCapability:
    """Type rule for a class, ABC or runtime-checkable protocol."""

    required: type

    is_basic = False

    def check(self, value: Any) -> bool:
        # isinstance walks subclasses, ABC registrations and protocol members
        return isinstance(value, self.required)

    def describe(self) -> str:
        return describe_class(self.required)


TypeRule = Union[PrimitiveKind, RequiredCapability]


def describe_class(cls: type) -> str:
    module = getattr(cls, "__module__", None)
    name = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", repr(cls))
    if module in (None, "builtins"):
        return name
    return f"{module}.{name}"


def describe_type(value: Any) -> str:
    """Name of a value's type, as used in TypeMismatchError messages."""
    return describe_class(type(value))


def _import_dotted(path: str) -> Any:
    module_name, _, attr = path.rpartition(".")
    if not module_name:
        return None
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return None
    return getattr(module, attr, None)


def _capability_for(value_type: Any, descriptor: ValueTypeDescriptor) -> RequiredCapability:
    if not isinstance(value_type, type):
        raise UnknownTypeError(descriptor)
    try:
        isinstance(None, value_type)
    except TypeError as e:
        # e.g. a Protocol without @runtime_checkable
        raise UnknownTypeError(descriptor) from e
    return RequiredCapability(value_type)


def resolve_value_type(value_type: ValueTypeDescriptor) -> TypeRule:
    """
    Turn a value type descriptor into a type rule.

    Strings are looked up in the basic kind registry first, then imported as a
    dotted ``module.ClassName`` path. Classes and runtime-checkable protocols
    are used directly.

    :param value_type: Kind name, class, or dotted path.
    :return: PrimitiveKind or RequiredCapability.
    :raises UnknownTypeError: If the descriptor cannot be resolved.
    """
    if isinstance(value_type, str):
        predicate = get_basic_predicate(value_type)
        if predicate is not None:
            logger.debug("Resolved %r to basic type", value_type)
            return PrimitiveKind(value_type, predicate)
        rule = _capability_for(_import_dotted(value_type), value_type)
        logger.debug("Resolved %r to class %s", value_type, rule.describe())
        return rule

    return _capability_for(value_type, value_type)
