"""unixtime: fixed-width Unix timestamps for binary interop.

unixtime provides seconds-since-1970 value types that occupy exactly 4 or 8
bytes, for structures and protocols that exchange compact timestamps, while
still converting to and from datetime for application code.

Core Types:
    UnixTime32: Unsigned 32-bit seconds, extended past the wraparound with
        an overflow count
    UnixTime64: Signed 64-bit seconds

Units:
    DateTimeKind: UNSPECIFIED/LOCAL/UTC tag for calendar values

Configuration:
    FormatConfig: Interop pattern, display pattern, default overflow count
    get_config, configure, reset_config, override_config

Exceptions:
    UnixTimeError: Base exception
    OverflowError: Value does not fit the timestamp
    FormatError: Text or pattern does not match

Example:
    >>> import datetime
    >>> from unixtime import UnixTime32
    >>> t = UnixTime32.from_datetime(datetime.datetime(2018, 3, 21, 14, 5, 9))
    >>> t.timestamp
    1521641109
    >>> UnixTime32.parse(str(t)) == t
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from unixtime.core.unixtime32 import UnixTime32
from unixtime.core.unixtime64 import UnixTime64

# Units
from unixtime.units.kind import DateTimeKind

# Configuration
from unixtime.config import (
    FormatConfig,
    configure,
    get_config,
    override_config,
    reset_config,
    set_config,
)

# Exceptions
from unixtime.errors import (
    FormatError,
    OverflowError,
    UnixTimeError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "UnixTime32",
    "UnixTime64",
    # Units
    "DateTimeKind",
    # Configuration
    "FormatConfig",
    "get_config",
    "set_config",
    "configure",
    "reset_config",
    "override_config",
    # Exceptions
    "UnixTimeError",
    "OverflowError",
    "FormatError",
]
