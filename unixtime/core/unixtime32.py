"""UnixTime32: 4-byte unsigned seconds-since-epoch timestamp.

The counter wraps after 2**32 seconds. Calendar values beyond the wrap are
reconstructed with an overflow count: the number of full 2**32 second
periods to add back. The count is not stored in the 4 bytes; callers pass
it explicitly or rely on FormatConfig.default_overflow_count.
"""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar

from unixtime._internal.checked import add_uint32, sub_uint32
from unixtime._internal.constants import INT32_MAX, INT32_MIN, UINT32_MAX, UINT32_MIN
from unixtime._internal.validation import validate_integer, validate_range
from unixtime.config import FormatConfig, resolve
from unixtime.convert.epoch import from_unix_seconds, from_unix_seconds_utc, to_timestamp32
from unixtime.core._base import UnixTimeBase
from unixtime.errors import OverflowError
from unixtime.units.kind import DateTimeKind


class UnixTime32(UnixTimeBase):
    """A 32-bit unsigned Unix timestamp.

    UnixTime32 holds seconds since 1970-01-01T00:00:00 in the range
    [0, 2**32 - 1] and packs into exactly 4 bytes. Arithmetic is checked:
    a result outside the range raises OverflowError instead of wrapping.

    Ordering and equality compare the counter only. Two values from
    different overflow periods with the same counter are equal; the type
    cannot tell them apart.

    Attributes:
        timestamp: The raw counter.

    Examples:
        >>> import datetime
        >>> t = UnixTime32.from_datetime(datetime.datetime(2018, 3, 21, 14, 5, 9))
        >>> t.timestamp
        1521641109
        >>> str(t)
        '2018-03-21T14:05:09'

        >>> str(t + 60)
        '2018-03-21T14:06:09'

        >>> UnixTime32(0) - 1
        Traceback (most recent call last):
        ...
        unixtime.errors.OverflowError: 0 - 1 is below the 32-bit timestamp minimum 0
    """

    __slots__ = ()

    SIZE: ClassVar[int] = 4
    STRUCT_FORMAT: ClassVar[str] = "I"
    MIN_TIMESTAMP: ClassVar[int] = UINT32_MIN
    MAX_TIMESTAMP: ClassVar[int] = UINT32_MAX
    _SIGNED: ClassVar[bool] = False

    @classmethod
    def from_signed(cls, value: int) -> UnixTime32:
        """Create a UnixTime32 from a signed 32-bit integer.

        Raises:
            OverflowError: If value is negative or outside the signed
                32-bit range.
        """
        validate_integer("value", value)
        validate_range("value", value, INT32_MIN, INT32_MAX)
        if value < 0:
            raise OverflowError(f"negative value {value} cannot be a 32-bit unsigned timestamp")
        return cls._from_internal(value)

    @classmethod
    def from_datetime(cls, value: _datetime.datetime) -> UnixTime32:
        """Create a UnixTime32 from a calendar value.

        Any overflow count is discarded. Use from_datetime_with_overflow()
        when the value may lie beyond the wraparound.

        Raises:
            OverflowError: If value is before 1970-01-01.
        """
        timestamp, _ = to_timestamp32(value)
        return cls._from_internal(timestamp)

    @classmethod
    def from_datetime_with_overflow(cls, value: _datetime.datetime) -> tuple[UnixTime32, int]:
        """Create a UnixTime32 and return it with its overflow count.

        Examples:
            >>> import datetime
            >>> t, overflow = UnixTime32.from_datetime_with_overflow(
            ...     datetime.datetime(2106, 2, 7, 6, 36, 36))
            >>> t.timestamp, overflow
            (500, 1)

        Raises:
            OverflowError: If value is before 1970-01-01.
        """
        timestamp, overflow = to_timestamp32(value)
        return cls._from_internal(timestamp), overflow

    def to_datetime(
        self,
        kind: DateTimeKind = DateTimeKind.UNSPECIFIED,
        overflow_count: int | None = None,
        *,
        config: FormatConfig | None = None,
    ) -> _datetime.datetime:
        """Return the calendar value of this timestamp.

        Args:
            kind: Kind stamped on the result.
            overflow_count: Number of 2**32 second periods to add. None uses
                the configured default_overflow_count.
            config: Configuration to read the default from.

        Raises:
            OverflowError: If the result is outside the datetime range.
        """
        return from_unix_seconds(self._timestamp, kind, self._overflow(overflow_count, config))

    def to_utc_datetime(
        self,
        utc_offset: _datetime.timedelta,
        overflow_count: int | None = None,
        *,
        config: FormatConfig | None = None,
    ) -> _datetime.datetime:
        """Return the UTC calendar value of a timestamp counted in local time.

        The counter is read as wall clock seconds of a zone utc_offset ahead
        of UTC.

        Examples:
            >>> import datetime
            >>> UnixTime32(7200).to_utc_datetime(datetime.timedelta(hours=2))
            datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
        """
        return from_unix_seconds_utc(
            self._timestamp, utc_offset, self._overflow(overflow_count, config)
        )

    @staticmethod
    def _overflow(overflow_count: int | None, config: FormatConfig | None) -> int:
        if overflow_count is None:
            return resolve(config).default_overflow_count
        return validate_integer("overflow_count", overflow_count)

    def _calendar(self, config: FormatConfig | None) -> _datetime.datetime:
        return self.to_datetime(config=config)

    # Arithmetic operators

    def __add__(self, other: object) -> UnixTime32:
        """Add seconds (int) or a timedelta, truncated to whole seconds.

        Raises:
            OverflowError: If the result leaves [0, 2**32 - 1].
        """
        seconds = self._delta_seconds(other)
        if seconds is None:
            return NotImplemented
        return UnixTime32._from_internal(add_uint32(self._timestamp, seconds))

    def __sub__(self, other: object) -> UnixTime32:
        """Subtract seconds (int) or a timedelta, truncated to whole seconds.

        Raises:
            OverflowError: If the result leaves [0, 2**32 - 1].
        """
        seconds = self._delta_seconds(other)
        if seconds is None:
            return NotImplemented
        return UnixTime32._from_internal(sub_uint32(self._timestamp, seconds))


__all__ = ["UnixTime32"]
