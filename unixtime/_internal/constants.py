"""Internal constants for unixtime.

These constants define the integer limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

# Time unit conversions
MICROS_PER_SECOND: int = 1_000_000
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE

# Unsigned 32-bit counter
UINT32_MIN: int = 0
UINT32_MAX: int = 0xFFFF_FFFF

# Signed 32-bit input range accepted by UnixTime32.from_signed
INT32_MIN: int = -(1 << 31)
INT32_MAX: int = (1 << 31) - 1

# Signed 64-bit counter
INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1

# Seconds covered by one wraparound of the 32-bit counter
OVERFLOW_SHIFT: int = 32
SECONDS_PER_OVERFLOW: int = 1 << OVERFLOW_SHIFT  # 4_294_967_296

# Naive 1970-01-01T00:00:00, the wall clock reference for every conversion
EPOCH: _datetime.datetime = _datetime.datetime(1970, 1, 1)

# Default strftime-style patterns
INTEROP_PATTERN: str = "%Y-%m-%dT%H:%M:%S"  # 2018-03-21T14:05:09
DISPLAY_PATTERN: str = "%Y-%m-%d %H:%M:%S"  # 2018-03-21 14:05:09


__all__ = [
    "MICROS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "UINT32_MIN",
    "UINT32_MAX",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "OVERFLOW_SHIFT",
    "SECONDS_PER_OVERFLOW",
    "EPOCH",
    "INTEROP_PATTERN",
    "DISPLAY_PATTERN",
]
