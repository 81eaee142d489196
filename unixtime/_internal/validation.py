"""Validation utilities for unixtime.

This module provides the integer checks used when a timestamp is built from
a raw number. Range violations are overflows, not bad input: the value is a
valid integer that simply does not fit the fixed-width counter.

This module is not part of the public API.
"""

from __future__ import annotations

from unixtime.errors import OverflowError


def validate_integer(name: str, value: object) -> int:
    """Validate that a value is a plain integer.

    Args:
        name: Parameter name used in the error message.
        value: The value to check.

    Returns:
        The value, unchanged.

    Raises:
        TypeError: If value is not an int (bool is rejected too).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def validate_range(name: str, value: int, min_val: int, max_val: int) -> int:
    """Validate that an integer lies within [min_val, max_val].

    Args:
        name: Parameter name used in the error message.
        value: The integer to check.
        min_val: Inclusive lower bound.
        max_val: Inclusive upper bound.

    Returns:
        The value, unchanged.

    Raises:
        OverflowError: If value is out of range.

    Examples:
        >>> validate_range("timestamp", 5, 0, 10)
        5
        >>> validate_range("timestamp", -1, 0, 10)
        Traceback (most recent call last):
        ...
        unixtime.errors.OverflowError: timestamp must be between 0 and 10, got -1
    """
    if value < min_val or value > max_val:
        raise OverflowError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )
    return value


__all__ = [
    "validate_integer",
    "validate_range",
]
