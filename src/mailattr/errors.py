"""mailattr exception hierarchy.

Shared by ``Attribute`` and ``AttributeMap`` so callers catch one set of
types. Reading a missing key is never an error; only name validation and
date conversion raise.
"""

from typing import Any


class MailAttrError(Exception):
    """Base for all mailattr-specific errors."""


class InvalidStateError(MailAttrError, ValueError):
    """Raised when an attribute is given an empty name."""


class DateParseError(MailAttrError, ValueError):
    """Raised by ``Attribute.to_date()`` when the first value is not a date.

    The parser's own exception is chained as ``__cause__``.
    """

    def __init__(self, value: Any, detail: str = "") -> None:
        self.value = value
        self.detail = detail or f"Unrecognised date format: {value!r}"
        super().__init__(self.detail)


class EmptyAttributeError(MailAttrError, LookupError):
    """Raised by ``Attribute.to_date()`` when there is no first value."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Attribute {name!r} has no value to convert")
