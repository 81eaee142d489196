"""Epoch conversion utilities.

This module provides the stateless functions that convert between calendar
values (datetime) and seconds since 1970-01-01T00:00:00, including the
overflow split used by 32-bit timestamps.

Examples:
    >>> import datetime
    >>> from unixtime.convert import to_unix_seconds, from_unix_seconds
    >>> to_unix_seconds(datetime.datetime(1970, 1, 2))
    86400
    >>> from_unix_seconds(86400)
    datetime.datetime(1970, 1, 2, 0, 0)
"""

from __future__ import annotations

from unixtime.convert.epoch import (
    from_unix_seconds,
    from_unix_seconds_utc,
    split_overflow,
    to_timestamp32,
    to_unix_seconds,
)

__all__ = [
    "to_unix_seconds",
    "split_overflow",
    "to_timestamp32",
    "from_unix_seconds",
    "from_unix_seconds_utc",
]
