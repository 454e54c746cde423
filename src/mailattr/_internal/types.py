"""Shared type aliases used across mailattr modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Slot key in an attribute: positional int or explicit string
Key: TypeAlias = int | str

# Callable passed to Attribute.map()
Transform: TypeAlias = Callable[[Any], Any]
