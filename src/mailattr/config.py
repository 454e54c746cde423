"""Attribute configuration.

AttributeConfig is a frozen dataclass, immutable after creation and shared
by every attribute an ``AttributeMap`` creates.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AttributeConfig:
    """Collection-wide attribute settings. Immutable after creation.

    All fields have sensible defaults for mail headers::

        config = AttributeConfig(separator="; ", strict=True)
    """

    # Joiner used by str(attribute)
    separator: str = ", "

    # Header names are case-insensitive in RFC 5322
    case_sensitive: bool = False

    # Default dedup mode for AttributeMap.add()
    strict: bool = False
