"""MultiValueMapping protocol: shared interface for attribute collections.

A structural protocol so consumers can accept any name-keyed collection
of multi-valued attributes without coupling to ``AttributeMap``.
"""

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A mapping where each name can carry multiple values.

    ``get_list`` returns all values for a name.
    ``first`` returns the earliest value for a name.

    Defined with explicit dunder methods because Python 3.14 Protocols
    cannot inherit from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> Any: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get_list(self, key: str) -> list[Any]: ...
    def first(self, key: str, default: Any = None) -> Any: ...
