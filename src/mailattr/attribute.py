"""A named attribute holding zero, one, or many values.

Models a mail header that may repeat (``To``, ``Received``). Values live
in an ordered ``dict`` keyed by positional ``int`` or explicit ``str``,
so the attribute reads like a small ordered map::

    to = Attribute("to", ["alice@example.com", "bob@example.com"])
    to[0]           # "alice@example.com"
    to[None] = "carol@example.com"   # append
    str(to)         # "alice@example.com, bob@example.com, carol@example.com"

Reads of missing keys return ``None`` rather than raising.
"""

import logging
from collections.abc import ItemsView, Iterable, Iterator, KeysView, Mapping, ValuesView
from datetime import datetime
from typing import Any

from mailattr._internal.dates import coerce_datetime
from mailattr._internal.types import Key, Transform
from mailattr.errors import EmptyAttributeError, InvalidStateError

logger = logging.getLogger("mailattr.attribute")

# Values that add() treats as a batch rather than a single value
_BATCH_TYPES = (list, tuple, set, frozenset, Mapping)


def _same(a: Any, b: Any) -> bool:
    """Strict equality: same type and equal value."""
    return type(a) is type(b) and a == b


def _render(value: Any) -> str:
    return "" if value is None else str(value)


class Attribute:
    """A named, ordered, possibly multi-valued attribute.

    Mutators return ``self`` so calls chain::

        attr.add("a").add(["b", "c"]).remove(0)
    """

    __slots__ = ("_name", "_next_index", "_separator", "_values")

    def __init__(self, name: str, value: Any = None, *, separator: str = ", ") -> None:
        self._values: dict[Key, Any] = {}
        self._next_index = 0
        self._separator = separator
        self.set_name(name)
        self.add(value)

    # -- Name --

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self.set_name(name)

    def set_name(self, name: str) -> "Attribute":
        """Rename the attribute.

        Raises:
            InvalidStateError: *name* is empty.
        """
        if not name:
            msg = "Attribute name must be a non-empty string"
            raise InvalidStateError(msg)
        self._name = name
        return self

    def get_name(self) -> str:
        return self._name

    # -- Access --

    def get(self, key: Key = 0) -> Any:
        """Return the value at *key*, or ``None`` if absent."""
        return self._values.get(key)

    def has(self, key: Key = 0) -> bool:
        """Whether *key* is present. A stored ``None`` counts as present."""
        return key in self._values

    def exists(self, key: Key = 0) -> bool:
        return self.has(key)

    def contains(self, value: Any) -> bool:
        """Whether some stored value has the same type as *value* and equals it."""
        return any(_same(stored, value) for stored in self._values.values())

    def first(self) -> Any:
        """Return the earliest value in iteration order, or ``None`` if empty."""
        return next(iter(self._values.values()), None)

    def last(self) -> Any:
        """Return the latest value in iteration order, or ``None`` if empty."""
        return next(reversed(self._values.values()), None)

    def all(self) -> dict[Key, Any]:
        """Return a copy of the key -> value mapping."""
        return dict(self._values)

    def count(self) -> int:
        return len(self._values)

    def keys(self) -> KeysView[Key]:
        return self._values.keys()

    def values(self) -> ValuesView[Any]:
        return self._values.values()

    def items(self) -> ItemsView[Key, Any]:
        return self._values.items()

    # -- Mutation --

    def set(self, value: Any, key: Key | None = 0) -> "Attribute":
        """Store *value* at *key*.

        ``key=None`` appends at the next positional index. Any other key
        overwrites the slot, or creates it if absent.
        """
        if key is None:
            key = self._next_index
        if isinstance(key, int) and key >= self._next_index:
            self._next_index = key + 1
        self._values[key] = value
        return self

    def remove(self, key: Key = 0) -> "Attribute":
        """Delete the value at *key*. Missing keys are ignored."""
        self._values.pop(key, None)
        return self

    def add(self, value: Any, strict: bool = False) -> "Attribute":
        """Add one value, or each value of a sequence.

        ``None`` is ignored; lists, tuples, sets and other attributes are
        merged element by element. Mappings contribute their values; their
        keys are not kept.
        """
        if isinstance(value, (*_BATCH_TYPES, Attribute)):
            return self.merge(value, strict)
        if value is not None:
            self.attach(value, strict)
        return self

    def merge(self, values: "Iterable[Any] | Mapping[Any, Any] | Attribute", strict: bool = False) -> "Attribute":
        """Attach every element of *values* in order."""
        if isinstance(values, (Attribute, Mapping)):
            values = list(values.values())
        for value in values:
            self.attach(value, strict)
        return self

    def attach(self, value: Any, strict: bool = False) -> "Attribute":
        """Append *value*. With *strict*, skip it if already contained."""
        if strict and self.contains(value):
            logger.debug("Skipping duplicate value for %r: %r", self._name, value)
            return self
        return self.set(value, None)

    # -- Conversion --

    def to_string(self) -> str:
        return self._separator.join(_render(value) for value in self._values.values())

    def to_array(self) -> dict[Key, Any]:
        """Snapshot of the key -> value mapping (same as ``all()``)."""
        return self.all()

    def to_date(self) -> datetime:
        """Return the first value as a ``datetime``.

        Raises:
            EmptyAttributeError: The attribute is empty or its first value is ``None``.
            DateParseError: The first value is not a recognised date.
        """
        value = self.first()
        if value is None:
            raise EmptyAttributeError(self._name)
        return coerce_datetime(value)

    def resolve(self) -> str | dict[Key, Any]:
        """Return the mapping when multi-valued, otherwise the string form."""
        if self.count() > 1:
            return self.to_array()
        return self.to_string()

    def map(self, transform: Transform) -> list[Any]:
        """Apply *transform* to each value and return the results."""
        return [transform(value) for value in self._values.values()]

    # -- Protocols --

    def __call__(self) -> str | dict[Key, Any]:
        return self.resolve()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Attribute({self._name!r}, {self._values!r})"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Key]:
        return iter(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __getitem__(self, key: Key) -> Any:
        return self.get(key)

    def __setitem__(self, key: Key | None, value: Any) -> None:
        self.set(value, key)

    def __delitem__(self, key: Key) -> None:
        self.remove(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self._name == other._name and self._values == other._values

    __hash__ = None  # type: ignore[assignment]
