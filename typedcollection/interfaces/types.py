# typedcollection/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Dict, Hashable, List, Mapping, Union

Index = Hashable
Predicate = Callable[[Any], bool]
KeyMap = Mapping[Hashable, Hashable]

# Result of to_array(): a list for dense 0..n-1 keys, a dict otherwise.
PlainStructure = Union[List[Any], Dict[Hashable, Any]]

# A basic kind name, a class or protocol, or a dotted path to one.
ValueTypeDescriptor = Union[str, type]
