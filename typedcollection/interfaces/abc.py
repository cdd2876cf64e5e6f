# typedcollection/interfaces/abc.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Iterable, Iterator, List, Optional, Protocol, Tuple, runtime_checkable

from typedcollection.interfaces.types import Index, KeyMap, PlainStructure


@runtime_checkable
class CollectionContract(Protocol):
    """
    Protocol defining the typed collection interface.

    Runtime Invariants:
    - Every stored value satisfied the declared value type when inserted
    - The declared value type never changes after construction
    - Removing an index leaves every other index untouched
    - Insertion order is preserved

    Error Handling:
    - Insertions of the wrong type raise TypeMismatchError
    - get/remove/change_key on a missing index raise IndexNotFoundError
    - Endpoint reads and pops return None on an empty collection

    Thread Safety:
    - None. Callers sharing a collection between threads hold their own lock.
    """

    @property
    def value_type(self) -> Any: ...

    @property
    def is_basic_type(self) -> bool: ...

    def is_valid_type(self, value: Any) -> bool: ...

    def set_items(self, items: Iterable[Any]) -> None: ...

    def add(self, value: Any) -> Index: ...

    def set(self, index: Index, value: Any) -> None: ...

    def remove(self, index: Index) -> None: ...

    def get(self, index: Index) -> Any: ...

    def exists(self, index: Index) -> bool: ...

    def get_first(self) -> Optional[Any]: ...

    def get_last(self) -> Optional[Any]: ...

    def pop_last(self) -> Optional[Any]: ...

    def shift_first(self) -> Optional[Any]: ...

    def count(self) -> int: ...

    def to_array(self) -> PlainStructure: ...

    def items(self) -> List[Tuple[Index, Any]]: ...

    def clear(self) -> None: ...

    def change_key(self, old_key: Index, new_key: Index) -> None: ...

    def change_multiple_keys(self, keys_map: KeyMap) -> None: ...

    def __iter__(self) -> Iterator[Tuple[Index, Any]]: ...

    def __len__(self) -> int: ...
