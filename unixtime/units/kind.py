"""DateTimeKind enumeration.

This module provides the DateTimeKind enum, the tag that tells whether a
calendar value is naive, local time or UTC. It is layered on the standard
library's tzinfo:

    UNSPECIFIED  naive datetime (tzinfo is None)
    UTC          aware datetime with datetime.timezone.utc
    LOCAL        aware datetime with the host's local offset
"""

from __future__ import annotations

import datetime as _datetime
from enum import Enum

from unixtime._internal.constants import EPOCH


def _local_tzinfo() -> _datetime.tzinfo | None:
    # Fixed offset of the host zone at the time of the call
    return _datetime.datetime.now().astimezone().tzinfo


class DateTimeKind(Enum):
    """Kind of a calendar value.

    The kind only stamps the result of a conversion; it never shifts the
    wall clock fields.

    Examples:
        >>> import datetime
        >>> DateTimeKind.of(datetime.datetime(2024, 1, 15))
        <DateTimeKind.UNSPECIFIED: 'unspecified'>

        >>> DateTimeKind.UTC.epoch()
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """

    UNSPECIFIED = "unspecified"
    LOCAL = "local"
    UTC = "utc"

    @classmethod
    def of(cls, value: _datetime.datetime) -> DateTimeKind:
        """Return the kind of a datetime.

        A zero offset named "UTC" is UTC, whichever tzinfo class carries it
        (timezone.utc, zoneinfo "UTC"). Any other aware datetime, including a
        zero offset under another name such as "GMT", is reported as LOCAL.
        """
        if value.tzinfo is None:
            return cls.UNSPECIFIED
        if value.utcoffset() == _datetime.timedelta(0) and value.tzname() == "UTC":
            return cls.UTC
        return cls.LOCAL

    def tzinfo(self) -> _datetime.tzinfo | None:
        """Return the tzinfo used to stamp values of this kind."""
        if self is DateTimeKind.UTC:
            return _datetime.timezone.utc
        if self is DateTimeKind.LOCAL:
            return _local_tzinfo()
        return None

    def epoch(self) -> _datetime.datetime:
        """Return 1970-01-01T00:00:00 stamped with this kind."""
        return EPOCH.replace(tzinfo=self.tzinfo())

    def stamp(self, value: _datetime.datetime) -> _datetime.datetime:
        """Return value with its wall clock kept and its kind replaced."""
        return value.replace(tzinfo=self.tzinfo())


__all__ = ["DateTimeKind"]
