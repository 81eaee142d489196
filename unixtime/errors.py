"""unixtime exception hierarchy.

All unixtime-specific exceptions inherit from UnixTimeError. Each one also
derives from the closest built-in exception so callers catching the
standard types keep working.
"""

from __future__ import annotations

import builtins


class UnixTimeError(Exception):
    """Base exception for all unixtime errors."""

    pass


class OverflowError(UnixTimeError, builtins.OverflowError):
    """A value does not fit the fixed-width timestamp.

    Raised when a construction, conversion or checked arithmetic operation
    would produce a timestamp outside the representable range.

    Examples:
        - UnixTime32(0) - 1
        - UnixTime32(2**32 - 1) + 1
        - UnixTime32.from_signed(-5)
        - Converting a date before 1970 to UnixTime32
    """

    pass


class FormatError(UnixTimeError, ValueError):
    """Text or pattern does not match the expected format.

    Examples:
        - parse() text that does not match the interop pattern
        - A configured pattern with an unsupported directive
    """

    pass


__all__ = [
    "UnixTimeError",
    "OverflowError",
    "FormatError",
]
