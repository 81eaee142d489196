"""Behaviour shared by the fixed-width timestamp types.

UnixTime32 and UnixTime64 differ in width, signedness, overflow handling
and arithmetic. Everything else lives here: construction from a raw
counter, ordering, hashing, string and binary conversion.
"""

from __future__ import annotations

import datetime as _datetime
import sys
from typing import ClassVar, Literal, TypeVar

from unixtime._internal.checked import whole_seconds
from unixtime._internal.validation import validate_integer, validate_range
from unixtime.config import FormatConfig, resolve
from unixtime.format.pattern import format_datetime, parse_datetime

T = TypeVar("T", bound="UnixTimeBase")

ByteOrder = Literal["little", "big"]


class UnixTimeBase:
    """Seconds since 1970-01-01T00:00:00 held in a fixed-width integer.

    Subclasses define the width (SIZE), the integer range and the
    conversion to and from datetime: a ``from_datetime`` classmethod and a
    ``_calendar(config)`` method returning the naive calendar value.
    """

    __slots__ = ("_timestamp",)

    SIZE: ClassVar[int]
    STRUCT_FORMAT: ClassVar[str]
    MIN_TIMESTAMP: ClassVar[int]
    MAX_TIMESTAMP: ClassVar[int]
    _SIGNED: ClassVar[bool]

    def __init__(self, timestamp: int) -> None:
        """Create a timestamp from a raw counter value.

        Raises:
            TypeError: If timestamp is not an integer.
            OverflowError: If timestamp does not fit the counter.
        """
        validate_integer("timestamp", timestamp)
        validate_range("timestamp", timestamp, self.MIN_TIMESTAMP, self.MAX_TIMESTAMP)
        self._timestamp: int = timestamp

    @classmethod
    def _from_internal(cls: type[T], timestamp: int) -> T:
        """Create an instance from a counter already known to be in range."""
        instance = object.__new__(cls)
        instance._timestamp = timestamp
        return instance

    @classmethod
    def from_bytes(cls: type[T], data: bytes, byteorder: ByteOrder = sys.byteorder) -> T:
        """Read a timestamp from its fixed-width binary form.

        Raises:
            ValueError: If data is not exactly SIZE bytes long.
        """
        if len(data) != cls.SIZE:
            raise ValueError(
                f"{cls.__name__} needs exactly {cls.SIZE} bytes, got {len(data)}"
            )
        return cls._from_internal(int.from_bytes(data, byteorder, signed=cls._SIGNED))

    @classmethod
    def parse(cls: type[T], text: str, config: FormatConfig | None = None) -> T:
        """Parse a string produced by str() / to_string().

        The text must match the interop pattern. The parsed value is read
        as a wall clock of unspecified kind.

        Raises:
            FormatError: If text does not match the interop pattern.
        """
        parsed = parse_datetime(text, resolve(config).interop_pattern)
        return cls.from_datetime(parsed.replace(tzinfo=None))

    @classmethod
    def now(cls: type[T]) -> T:
        """Return the current local wall clock time."""
        return cls.from_datetime(_datetime.datetime.now())

    @classmethod
    def utc_now(cls: type[T]) -> T:
        """Return the current UTC time."""
        return cls.from_datetime(_datetime.datetime.now(_datetime.timezone.utc))

    @property
    def timestamp(self) -> int:
        """Return the raw counter: seconds since 1970-01-01T00:00:00."""
        return self._timestamp

    @property
    def datetime(self) -> _datetime.datetime:
        """Return the naive calendar value using the default overflow."""
        return self._calendar(None)

    @staticmethod
    def _delta_seconds(other: object) -> int | None:
        """Return other as whole seconds, or None if it is not a delta."""
        if isinstance(other, _datetime.timedelta):
            return whole_seconds(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    # String conversion

    def format(self, pattern: str, config: FormatConfig | None = None) -> str:
        """Format the calendar value with an arbitrary pattern."""
        return format_datetime(self._calendar(config), pattern)

    def to_string(self, config: FormatConfig | None = None) -> str:
        """Return the interop representation, e.g. '2018-03-21T14:05:09'."""
        return self.format(resolve(config).interop_pattern, config)

    def to_display_string(self, config: FormatConfig | None = None) -> str:
        """Return the display representation, e.g. '2018-03-21 14:05:09'."""
        return self.format(resolve(config).display_pattern, config)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._timestamp})"

    # Binary layout

    def to_bytes(self, byteorder: ByteOrder = sys.byteorder) -> bytes:
        """Return the SIZE-byte binary form of the counter."""
        return self._timestamp.to_bytes(self.SIZE, byteorder, signed=self._SIGNED)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __int__(self) -> int:
        return self._timestamp

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._timestamp == other._timestamp

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._timestamp != other._timestamp

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._timestamp < other._timestamp

    def __le__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._timestamp <= other._timestamp

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._timestamp > other._timestamp

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._timestamp >= other._timestamp

    def __hash__(self) -> int:
        return hash(self._timestamp)

    def __reduce__(self) -> tuple[type, tuple[int]]:
        return (type(self), (self._timestamp,))


__all__ = ["UnixTimeBase"]
