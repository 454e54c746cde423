"""Ordered, name-keyed collection of attributes.

Implements ``Mapping[str, Attribute]`` and the ``MultiValueMapping``
protocol. One ``Attribute`` per distinct name; repeated names accumulate
values on the same attribute. Names are case-insensitive unless
``AttributeConfig.case_sensitive`` is set.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from mailattr.attribute import Attribute
from mailattr.config import AttributeConfig

logger = logging.getLogger("mailattr.collection")


class AttributeMap(Mapping[str, Attribute]):
    """Ordered attributes keyed by name.

    ``__getitem__`` returns the ``Attribute`` and raises ``KeyError`` if missing.
    ``get_list`` returns all values for a name.

    Usage::

        headers = AttributeMap([("To", "a@example.com"), ("to", "b@example.com")])
        headers["TO"].count()        # 2
        headers.get_list("received") # []
    """

    __slots__ = ("_attributes", "_config", "_names")

    def __init__(
        self,
        pairs: Iterable[tuple[str, Any]] = (),
        *,
        config: AttributeConfig | None = None,
    ) -> None:
        self._config = config or AttributeConfig()
        self._attributes: dict[str, Attribute] = {}
        # Normalised key -> name the attribute was stored under
        self._names: dict[str, str] = {}
        for name, value in pairs:
            self.add(name, value)

    @property
    def config(self) -> AttributeConfig:
        return self._config

    def _key(self, name: str) -> str:
        return name if self._config.case_sensitive else name.lower()

    def __getitem__(self, key: str) -> Attribute:
        return self._attributes[self._key(key)]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._key(key) in self._attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        items = ", ".join(f"{self._names[key]!r}: {attr.resolve()!r}" for key, attr in self._attributes.items())
        return f"AttributeMap({{{items}}})"

    def add(self, name: str, value: Any, strict: bool | None = None) -> Attribute:
        """Add *value* under *name*, creating the attribute on first use.

        *strict* defaults to ``config.strict``. Returns the attribute.
        """
        if strict is None:
            strict = self._config.strict
        key = self._key(name)
        attribute = self._attributes.get(key)
        if attribute is None:
            logger.debug("Creating attribute %r", name)
            attribute = Attribute(name, separator=self._config.separator)
            self._attributes[key] = attribute
            self._names[key] = name
        return attribute.add(value, strict)

    def set(self, name: str, value: Any) -> Attribute:
        """Replace whatever is stored under *name* with a fresh attribute."""
        attribute = Attribute(name, value, separator=self._config.separator)
        key = self._key(name)
        self._attributes[key] = attribute
        self._names[key] = name
        return attribute

    def remove(self, name: str) -> None:
        """Drop the attribute for *name*. Missing names are ignored."""
        key = self._key(name)
        self._attributes.pop(key, None)
        self._names.pop(key, None)

    def get_list(self, key: str) -> list[Any]:
        """Return all values for *key*, or ``[]`` if missing."""
        attribute = self.get(key)
        if attribute is None:
            return []
        return list(attribute.values())

    def first(self, key: str, default: Any = None) -> Any:
        """Return the first value for *key*, or *default* if missing or empty."""
        attribute = self.get(key)
        if attribute is None or attribute.count() == 0:
            return default
        return attribute.first()

    def to_dict(self) -> dict[str, Any]:
        """Resolve every attribute: a string when single-valued, else its mapping.

        Keyed by the name each attribute was stored under, so renaming an
        attribute afterwards cannot collapse two entries.
        """
        return {self._names[key]: attr.resolve() for key, attr in self._attributes.items()}
