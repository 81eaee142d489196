"""UnixTime64: 8-byte signed seconds-since-epoch timestamp."""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar

from unixtime._internal.checked import wrap_int64
from unixtime._internal.constants import INT64_MAX, INT64_MIN
from unixtime._internal.validation import validate_integer
from unixtime.config import FormatConfig
from unixtime.convert.epoch import from_unix_seconds, from_unix_seconds_utc, to_unix_seconds
from unixtime.core._base import UnixTimeBase
from unixtime.units.kind import DateTimeKind


class UnixTime64(UnixTimeBase):
    """A 64-bit signed Unix timestamp.

    Negative values are dates before 1970. The range covers every datetime
    many times over, so there is no overflow count to manage and arithmetic
    wraps silently in two's complement like a native int64.

    Examples:
        >>> UnixTime64(-86400).to_datetime()
        datetime.datetime(1969, 12, 31, 0, 0)

        >>> UnixTime64.parse("2018-03-21T14:05:09").timestamp
        1521641109
    """

    __slots__ = ()

    SIZE: ClassVar[int] = 8
    STRUCT_FORMAT: ClassVar[str] = "q"
    MIN_TIMESTAMP: ClassVar[int] = INT64_MIN
    MAX_TIMESTAMP: ClassVar[int] = INT64_MAX
    _SIGNED: ClassVar[bool] = True

    @classmethod
    def from_datetime(cls, value: _datetime.datetime) -> UnixTime64:
        """Create a UnixTime64 from a calendar value (whole seconds)."""
        return cls._from_internal(to_unix_seconds(value))

    def to_datetime(
        self,
        kind: DateTimeKind = DateTimeKind.UNSPECIFIED,
        overflow_count: int = 0,
    ) -> _datetime.datetime:
        """Return the calendar value of this timestamp.

        overflow_count adds 2**32 second periods. It only exists to mirror
        UnixTime32 and defaults to 0, not to the configured default.

        Raises:
            OverflowError: If the result is outside the datetime range.
        """
        validate_integer("overflow_count", overflow_count)
        return from_unix_seconds(self._timestamp, kind, overflow_count)

    def to_utc_datetime(
        self,
        utc_offset: _datetime.timedelta,
        overflow_count: int = 0,
    ) -> _datetime.datetime:
        """Return the UTC calendar value of a timestamp counted in local time."""
        validate_integer("overflow_count", overflow_count)
        return from_unix_seconds_utc(self._timestamp, utc_offset, overflow_count)

    def _calendar(self, config: FormatConfig | None) -> _datetime.datetime:
        return self.to_datetime()

    # Arithmetic operators

    def __add__(self, other: object) -> UnixTime64:
        """Add seconds (int) or a timedelta, truncated to whole seconds."""
        seconds = self._delta_seconds(other)
        if seconds is None:
            return NotImplemented
        return UnixTime64._from_internal(wrap_int64(self._timestamp + seconds))

    def __sub__(self, other: object) -> UnixTime64:
        """Subtract seconds (int) or a timedelta, truncated to whole seconds."""
        seconds = self._delta_seconds(other)
        if seconds is None:
            return NotImplemented
        return UnixTime64._from_internal(wrap_int64(self._timestamp - seconds))


__all__ = ["UnixTime64"]
