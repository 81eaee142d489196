"""Timestamp formatting and parsing.

This module provides functions for converting calendar values to and from
strings with strftime-style patterns:

Functions:
    format_datetime: Format a datetime using a pattern.
    parse_datetime: Parse a string using a pattern.

Examples:
    >>> import datetime
    >>> from unixtime.format import format_datetime
    >>> format_datetime(datetime.datetime(2024, 1, 15, 14, 30, 45), "%Y-%m-%d %H:%M:%S")
    '2024-01-15 14:30:45'
"""

from __future__ import annotations

from unixtime.format.pattern import format_datetime, parse_datetime

__all__: list[str] = [
    "format_datetime",
    "parse_datetime",
]
