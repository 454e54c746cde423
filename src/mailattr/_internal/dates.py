"""Date coercion for attribute values.

ISO 8601 first, then RFC 2822 (the format
of ``Date:`` and ``Received:`` mail headers).
"""

import logging
from datetime import date, datetime, time
from email.utils import parsedate_to_datetime
from typing import Any

from mailattr.errors import DateParseError

logger = logging.getLogger("mailattr.dates")


def coerce_datetime(value: Any) -> datetime:
    """Return *value* as a ``datetime``.

    A ``datetime`` is returned as-is (same object). A bare ``date`` becomes
    midnight of that day. Anything else is parsed from ``str(value)``.

    Only two text formats are accepted: ISO 8601 (``datetime.fromisoformat``)
    and RFC 2822 mail dates (``email.utils.parsedate_to_datetime``), which
    also covers IMAP INTERNALDATE. Free-form prose such as
    ``"January 1, 2021"`` is rejected.

    Raises:
        DateParseError: The text matches neither ISO 8601 nor RFC 2822.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)

    text = str(value).strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Not an ISO 8601 date, trying RFC 2822: %r", text)

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError) as exc:
        raise DateParseError(value) from exc
