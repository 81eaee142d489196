"""Internal utilities for unixtime.

This module contains private implementation details:
    - Constants and integer limits
    - Fixed-width checked and wrapping arithmetic
    - Integer range validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from unixtime._internal.checked import (
    add_uint32,
    sub_uint32,
    whole_seconds,
    wrap_int64,
)
from unixtime._internal.validation import validate_integer, validate_range

__all__: list[str] = [
    "add_uint32",
    "sub_uint32",
    "whole_seconds",
    "wrap_int64",
    "validate_integer",
    "validate_range",
]
