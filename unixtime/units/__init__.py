"""Temporal units and enumerations.

This module provides:
    - DateTimeKind: UNSPECIFIED/LOCAL/UTC tag for calendar values
"""

from __future__ import annotations

from unixtime.units.kind import DateTimeKind

__all__: list[str] = [
    "DateTimeKind",
]
