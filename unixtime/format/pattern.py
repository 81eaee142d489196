"""strftime-style formatting and parsing.

This module formats and parses standard library datetimes with a small,
locale independent subset of strftime directives. Unlike time.strftime the
output never depends on the C library or the current locale, which keeps
interop strings stable across hosts.

Supported Directives:
    %Y - 4-digit year (e.g., 2024)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %H - 2-digit hour, 24-hour (00-23)
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %f - Microseconds (000000-999999)
    %z - UTC offset (+0000, -0530)
    %Z - Timezone name (UTC, +05:30)
    %% - Literal %

Functions:
    format_datetime: Format a datetime using a pattern.
    parse_datetime: Parse a string using a pattern.

Examples:
    >>> import datetime
    >>> dt = datetime.datetime(2018, 3, 21, 14, 5, 9)
    >>> format_datetime(dt, "%Y-%m-%dT%H:%M:%S")
    '2018-03-21T14:05:09'

    >>> parse_datetime("2018-03-21 14:05:09", "%Y-%m-%d %H:%M:%S")
    datetime.datetime(2018, 3, 21, 14, 5, 9)
"""

from __future__ import annotations

import datetime as _datetime
import re

from unixtime._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from unixtime.errors import FormatError

_SUPPORTED = "%Y, %m, %d, %H, %M, %S, %f, %z, %Z, %%"

# Mapping of format directives to their patterns for parsing
_PARSE_PATTERNS: dict[str, str] = {
    "%Y": r"(?P<year>\d{4})",  # 4-digit year
    "%m": r"(?P<month>\d{2})",  # 2-digit month
    "%d": r"(?P<day>\d{2})",  # 2-digit day
    "%H": r"(?P<hour>\d{2})",  # 2-digit hour
    "%M": r"(?P<minute>\d{2})",  # 2-digit minute
    "%S": r"(?P<second>\d{2})",  # 2-digit second
    "%f": r"(?P<microsecond>\d{6})",  # 6-digit microsecond
    "%z": r"(?P<tz_offset>[+-]\d{4})",  # UTC offset
    "%Z": r"(?P<tz_name>UTC|[+-]\d{2}:\d{2})",  # Timezone name
    "%%": r"%",  # Literal %
}


def _split(pattern: str) -> list[str]:
    """Split a pattern into directives and literal characters.

    Raises:
        FormatError: If the pattern is not a string or ends with a lone '%'.
    """
    if not isinstance(pattern, str):
        raise FormatError(f"pattern must be a string, got {type(pattern).__name__}")
    tokens = []
    i = 0
    while i < len(pattern):
        if pattern[i] == "%":
            if i + 1 >= len(pattern):
                raise FormatError(f"pattern {pattern!r} ends with a lone '%'")
            tokens.append(pattern[i : i + 2])
            i += 2
        else:
            tokens.append(pattern[i])
            i += 1
    return tokens


def _offset_parts(offset: _datetime.timedelta) -> tuple[str, int, int]:
    seconds = int(offset.total_seconds())
    sign = "+" if seconds >= 0 else "-"
    seconds = abs(seconds)
    return sign, seconds // SECONDS_PER_HOUR, (seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE


def format_datetime(value: _datetime.datetime, pattern: str) -> str:
    """Format a datetime using a strftime-style pattern.

    Args:
        value: The datetime to format.
        pattern: Pattern with %-directives.

    Returns:
        Formatted string.

    Raises:
        FormatError: If the pattern contains an unsupported directive.

    Examples:
        >>> import datetime
        >>> format_datetime(datetime.datetime(2024, 1, 15, 14, 30), "%Y/%m/%d %H:%M")
        '2024/01/15 14:30'

        >>> utc = datetime.timezone.utc
        >>> format_datetime(datetime.datetime(2024, 1, 15, tzinfo=utc), "%Y-%m-%d %Z")
        '2024-01-15 UTC'
    """
    result = []
    for token in _split(pattern):
        if len(token) == 2:
            result.append(_format_directive(value, token))
        else:
            result.append(token)
    return "".join(result)


def _format_directive(value: _datetime.datetime, directive: str) -> str:
    """Format a single directive.

    Raises:
        FormatError: If the directive is unsupported.
    """
    if directive == "%%":
        return "%"
    elif directive == "%Y":
        return f"{value.year:04d}"
    elif directive == "%m":
        return f"{value.month:02d}"
    elif directive == "%d":
        return f"{value.day:02d}"
    elif directive == "%H":
        return f"{value.hour:02d}"
    elif directive == "%M":
        return f"{value.minute:02d}"
    elif directive == "%S":
        return f"{value.second:02d}"
    elif directive == "%f":
        return f"{value.microsecond:06d}"
    elif directive == "%z":
        offset = value.utcoffset()
        if offset is None:
            return ""  # Python strftime returns empty string for naive datetimes
        sign, hours, minutes = _offset_parts(offset)
        return f"{sign}{hours:02d}{minutes:02d}"
    elif directive == "%Z":
        offset = value.utcoffset()
        if offset is None:
            return ""
        if value.tzinfo == _datetime.timezone.utc:
            return "UTC"
        sign, hours, minutes = _offset_parts(offset)
        return f"{sign}{hours:02d}:{minutes:02d}"

    raise FormatError(
        f"unsupported directive: {directive}. Supported: {_SUPPORTED}"
    )


def parse_datetime(text: str, pattern: str) -> _datetime.datetime:
    """Parse a string using a strftime-style pattern.

    The whole string must match. Missing time components default to 0,
    missing date components are an error. The result is naive unless the
    pattern contains %z or %Z.

    Args:
        text: The string to parse.
        pattern: Pattern with %-directives.

    Returns:
        The parsed datetime.

    Raises:
        FormatError: If the string doesn't match the pattern, the pattern
            is invalid, or a parsed field is out of range.

    Examples:
        >>> parse_datetime("2024-01-15", "%Y-%m-%d")
        datetime.datetime(2024, 1, 15, 0, 0)
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got {type(text).__name__}")

    match = re.fullmatch(_pattern_to_regex(pattern), text)
    if not match:
        raise FormatError(f"string {text!r} does not match pattern {pattern!r}")

    groups = match.groupdict()

    year = groups.get("year")
    month = groups.get("month")
    day = groups.get("day")
    if year is None or month is None or day is None:
        raise FormatError(
            f"pattern {pattern!r} must contain year, month and day directives"
        )

    tzinfo = None
    if groups.get("tz_offset"):
        offset = groups["tz_offset"]
        tzinfo = _parse_offset(offset[0], offset[1:3], offset[3:5])
    elif groups.get("tz_name"):
        name = groups["tz_name"]
        if name == "UTC":
            tzinfo = _datetime.timezone.utc
        else:
            tzinfo = _parse_offset(name[0], name[1:3], name[4:6])

    try:
        return _datetime.datetime(
            int(year),
            int(month),
            int(day),
            int(groups.get("hour") or 0),
            int(groups.get("minute") or 0),
            int(groups.get("second") or 0),
            int(groups.get("microsecond") or 0),
            tzinfo=tzinfo,
        )
    except ValueError as exc:
        raise FormatError(f"string {text!r} is not a valid date and time: {exc}") from exc


def _parse_offset(sign: str, hours: str, minutes: str) -> _datetime.timezone:
    offset = _datetime.timedelta(hours=int(hours), minutes=int(minutes))
    if sign == "-":
        offset = -offset
    try:
        return _datetime.timezone(offset)
    except ValueError as exc:
        raise FormatError(f"UTC offset {sign}{hours}{minutes} is out of range") from exc


def _pattern_to_regex(pattern: str) -> str:
    """Convert a strftime-style pattern to a regex.

    Raises:
        FormatError: If the pattern contains unsupported or repeated
            directives.
    """
    result = []
    seen = set()
    for token in _split(pattern):
        if len(token) == 1:
            # Escape regex special characters
            result.append(re.escape(token))
            continue
        if token not in _PARSE_PATTERNS:
            raise FormatError(
                f"unsupported directive: {token}. Supported: {_SUPPORTED}"
            )
        if token != "%%":
            if token in seen:
                raise FormatError(f"directive {token} appears more than once in {pattern!r}")
            seen.add(token)
        result.append(_PARSE_PATTERNS[token])
    return "".join(result)


__all__ = ["format_datetime", "parse_datetime"]
