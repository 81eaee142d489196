"""Conversions between calendar values and epoch seconds.

This module provides the pure conversion functions used by UnixTime32 and
UnixTime64. All of them measure wall clock time against the naive epoch
1970-01-01T00:00:00: the kind (tzinfo) of an input datetime never shifts the
result, it is only carried over to the output.

Functions:
    to_unix_seconds: Whole seconds between the epoch and a datetime.
    split_overflow: Split elapsed seconds into a 32-bit counter and overflow.
    to_timestamp32: Convert a datetime to (counter, overflow).
    from_unix_seconds: Build a datetime from seconds and an overflow count.
    from_unix_seconds_utc: Same, interpreting the seconds in a UTC offset.

The 32-bit counter wraps every 2**32 seconds. The overflow count says how
many full periods to add back.

Examples:
    >>> import datetime
    >>> to_timestamp32(datetime.datetime(2018, 3, 21, 14, 5, 9))
    (1521641109, 0)

    >>> from_unix_seconds(500, overflow_count=1)
    datetime.datetime(2106, 2, 7, 6, 36, 36)
"""

from __future__ import annotations

import builtins
import datetime as _datetime
import logging

from unixtime._internal.checked import whole_seconds
from unixtime._internal.constants import (
    EPOCH,
    OVERFLOW_SHIFT,
    SECONDS_PER_OVERFLOW,
    UINT32_MAX,
)
from unixtime.errors import OverflowError
from unixtime.units.kind import DateTimeKind

logger = logging.getLogger(__name__)


def to_unix_seconds(value: _datetime.datetime) -> int:
    """Return the whole seconds elapsed between the epoch and value.

    Sub-second precision is truncated toward zero, so one microsecond
    before the epoch is 0, not -1.

    Examples:
        >>> import datetime
        >>> to_unix_seconds(datetime.datetime(1969, 12, 31))
        -86400
    """
    if not isinstance(value, _datetime.datetime):
        raise TypeError(f"expected datetime, got {type(value).__name__}")
    return whole_seconds(value.replace(tzinfo=None) - EPOCH)


def split_overflow(elapsed: int) -> tuple[int, int]:
    """Split non-negative elapsed seconds into (counter, overflow).

    Values that fit the unsigned 32-bit counter are returned with an
    overflow of 0; larger values keep the low 32 bits as counter and the
    remaining high bits as overflow count.

    Raises:
        OverflowError: If elapsed is negative.

    Examples:
        >>> split_overflow(2**32 + 500)
        (500, 1)
    """
    if elapsed < 0:
        raise OverflowError(
            f"{elapsed} seconds is before 1970-01-01 and cannot be held by a "
            "32-bit unsigned timestamp"
        )
    if elapsed > UINT32_MAX:
        return elapsed & UINT32_MAX, elapsed >> OVERFLOW_SHIFT
    return elapsed, 0


def to_timestamp32(value: _datetime.datetime) -> tuple[int, int]:
    """Convert a datetime to a 32-bit counter and its overflow count.

    Raises:
        OverflowError: If value is before 1970-01-01.
    """
    timestamp, overflow = split_overflow(to_unix_seconds(value))
    if overflow:
        logger.debug(
            "%s exceeds the 32-bit range: timestamp=%d overflow=%d",
            value.isoformat(),
            timestamp,
            overflow,
        )
    return timestamp, overflow


def _shift(
    base: _datetime.datetime,
    seconds: int,
    offset: _datetime.timedelta = _datetime.timedelta(0),
) -> _datetime.datetime:
    try:
        return base - offset + _datetime.timedelta(seconds=seconds)
    except builtins.OverflowError as exc:
        raise OverflowError(
            f"{seconds} seconds from {base.isoformat()} is outside the datetime range"
        ) from exc


def from_unix_seconds(
    seconds: int,
    kind: DateTimeKind = DateTimeKind.UNSPECIFIED,
    overflow_count: int = 0,
) -> _datetime.datetime:
    """Create a datetime from epoch seconds.

    Args:
        seconds: Seconds since 1970-01-01T00:00:00.
        kind: Kind stamped on the result.
        overflow_count: Number of 2**32 second periods to add.

    Returns:
        epoch(kind) + seconds + overflow_count * 2**32 seconds.

    Raises:
        OverflowError: If the result is outside the datetime range.
    """
    return _shift(kind.epoch(), seconds + overflow_count * SECONDS_PER_OVERFLOW)


def from_unix_seconds_utc(
    seconds: int,
    utc_offset: _datetime.timedelta,
    overflow_count: int = 0,
) -> _datetime.datetime:
    """Create a UTC datetime from epoch seconds counted in a local offset.

    The seconds are read as wall clock time of a zone utc_offset ahead of
    UTC; the offset is removed to get the UTC instant.

    Examples:
        >>> import datetime
        >>> from_unix_seconds_utc(3600, datetime.timedelta(hours=1))
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)

    Raises:
        OverflowError: If the result is outside the datetime range.
    """
    if not isinstance(utc_offset, _datetime.timedelta):
        raise TypeError(f"utc_offset must be a timedelta, got {type(utc_offset).__name__}")
    return _shift(
        DateTimeKind.UTC.epoch(),
        seconds + overflow_count * SECONDS_PER_OVERFLOW,
        utc_offset,
    )


__all__ = [
    "to_unix_seconds",
    "split_overflow",
    "to_timestamp32",
    "from_unix_seconds",
    "from_unix_seconds_utc",
]
