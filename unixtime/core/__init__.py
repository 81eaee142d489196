"""Core timestamp types.

This module provides the fixed-width timestamp types:
    - UnixTime32: 4-byte unsigned seconds with overflow-count extension
    - UnixTime64: 8-byte signed seconds
"""

from __future__ import annotations

from unixtime.core.unixtime32 import UnixTime32
from unixtime.core.unixtime64 import UnixTime64

__all__: list[str] = [
    "UnixTime32",
    "UnixTime64",
]
