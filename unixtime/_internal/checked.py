"""Fixed-width integer arithmetic.

Python integers never overflow, so the behaviour of the fixed-width counters
is spelled out here: the unsigned 32-bit counter uses checked arithmetic,
the signed 64-bit counter wraps in two's complement.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

from unixtime._internal.constants import (
    INT64_MAX,
    INT64_MIN,
    MICROS_PER_SECOND,
    UINT32_MAX,
    UINT32_MIN,
)
from unixtime.errors import OverflowError


def whole_seconds(delta: _datetime.timedelta) -> int:
    """Return the whole seconds of a timedelta, truncated toward zero.

    timedelta normalises negative spans to a negative day count plus
    positive seconds and microseconds, so floor division would round
    -1.5s to -2s. The remainder is dropped instead.

    Examples:
        >>> whole_seconds(_datetime.timedelta(seconds=1, microseconds=999_999))
        1
        >>> whole_seconds(_datetime.timedelta(seconds=-1, microseconds=-500_000))
        -1
    """
    micros = (delta.days * 86_400 + delta.seconds) * MICROS_PER_SECOND + delta.microseconds
    seconds = abs(micros) // MICROS_PER_SECOND
    return seconds if micros >= 0 else -seconds


def checked_add_uint32(value: int, seconds: int) -> int:
    """Add a non-negative number of seconds to an unsigned 32-bit counter.

    Raises:
        OverflowError: If the sum exceeds 2**32 - 1.
    """
    result = value + seconds
    if result > UINT32_MAX:
        raise OverflowError(
            f"{value} + {seconds} exceeds the 32-bit timestamp maximum {UINT32_MAX}"
        )
    return result


def checked_sub_uint32(value: int, seconds: int) -> int:
    """Subtract a non-negative number of seconds from an unsigned 32-bit counter.

    Raises:
        OverflowError: If the difference drops below zero.
    """
    result = value - seconds
    if result < UINT32_MIN:
        raise OverflowError(
            f"{value} - {seconds} is below the 32-bit timestamp minimum {UINT32_MIN}"
        )
    return result


def add_uint32(value: int, seconds: int) -> int:
    """Add a signed delta to an unsigned 32-bit counter.

    The sign is normalised first: adding a negative delta subtracts its
    magnitude. Both directions are checked.
    """
    if seconds < 0:
        return checked_sub_uint32(value, -seconds)
    return checked_add_uint32(value, seconds)


def sub_uint32(value: int, seconds: int) -> int:
    """Subtract a signed delta from an unsigned 32-bit counter.

    Subtracting a negative delta adds its magnitude.
    """
    if seconds < 0:
        return checked_add_uint32(value, -seconds)
    return checked_sub_uint32(value, seconds)


def wrap_int64(value: int) -> int:
    """Reduce an integer to the signed 64-bit range (two's complement).

    Examples:
        >>> wrap_int64(2**63)
        -9223372036854775808
        >>> wrap_int64(-1)
        -1
    """
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return ((value - INT64_MIN) & 0xFFFF_FFFF_FFFF_FFFF) + INT64_MIN


__all__ = [
    "whole_seconds",
    "checked_add_uint32",
    "checked_sub_uint32",
    "add_uint32",
    "sub_uint32",
    "wrap_int64",
]
