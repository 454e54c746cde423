"""mailattr: named, multi-valued attributes for mail headers.

A header such as ``To`` or ``Received`` can repeat. ``Attribute`` holds
every value of one header in order; ``AttributeMap`` holds one
``Attribute`` per name.

Basic usage::

    from mailattr import Attribute

    received = Attribute("received", ["from a by b", "from b by c"])
    received.count()     # 2
    str(received)        # "from a by b, from b by c"

    date = Attribute("date", "Fri, 01 Jan 2021 00:00:00 +0000")
    date.to_date()       # datetime(2021, 1, 1, tzinfo=timezone.utc)
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "Attribute",
    "AttributeConfig",
    "AttributeMap",
    "DateParseError",
    "EmptyAttributeError",
    "InvalidStateError",
    "MailAttrError",
    "MultiValueMapping",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Attribute": "mailattr.attribute",
    "AttributeConfig": "mailattr.config",
    "AttributeMap": "mailattr.collection",
    "DateParseError": "mailattr.errors",
    "EmptyAttributeError": "mailattr.errors",
    "InvalidStateError": "mailattr.errors",
    "MailAttrError": "mailattr.errors",
    "MultiValueMapping": "mailattr._internal.multimap",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import mailattr`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
