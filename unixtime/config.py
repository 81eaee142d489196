"""Process-wide format configuration.

FormatConfig holds the two string patterns and the default overflow count
used when a caller does not pass them explicitly. Every operation that reads
the configuration also accepts an explicit ``config=`` (or
``overflow_count=``) argument, so the process-wide value is only the default
path.

Thread safety:
    The current configuration is a single reference to an immutable
    FormatConfig. Readers always see one complete configuration, old or new.
    Writers are last-writer-wins. Using override_config() from several
    threads at the same time is undefined: the blocks restore whatever was
    current when they started, in whatever order they exit.

Patterns are not validated when they are set. A malformed pattern raises
FormatError at the next format or parse call that uses it.

Examples:
    >>> from unixtime.config import configure, get_config, reset_config
    >>> get_config().interop_pattern
    '%Y-%m-%dT%H:%M:%S'
    >>> _ = configure(default_overflow_count=1)
    >>> get_config().default_overflow_count
    1
    >>> _ = reset_config()
"""

from __future__ import annotations

import dataclasses
import logging
from contextlib import contextmanager
from typing import Any, Iterator

from unixtime._internal.constants import DISPLAY_PATTERN, INTEROP_PATTERN

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class FormatConfig:
    """Formatting patterns and overflow default.

    Attributes:
        interop_pattern: Pattern for machine-to-machine strings, used by
            str(), to_string() and parse().
        display_pattern: Pattern for human display, used by
            to_display_string().
        default_overflow_count: Number of 2**32 second periods added by
            UnixTime32 when no overflow count is passed.
    """

    interop_pattern: str = INTEROP_PATTERN
    display_pattern: str = DISPLAY_PATTERN
    default_overflow_count: int = 0

    def __post_init__(self) -> None:
        count = self.default_overflow_count
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(
                f"default_overflow_count must be an integer, got {type(count).__name__}"
            )

    def replace(self, **changes: Any) -> FormatConfig:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = FormatConfig()

_current: FormatConfig = DEFAULT_CONFIG


def get_config() -> FormatConfig:
    """Return the process-wide configuration."""
    return _current


def set_config(config: FormatConfig) -> FormatConfig:
    """Install a new process-wide configuration.

    Returns:
        The previously installed configuration.
    """
    global _current

    if not isinstance(config, FormatConfig):
        raise TypeError(f"expected FormatConfig, got {type(config).__name__}")
    previous = _current
    _current = config
    logger.debug("format configuration changed: %r", config)
    return previous


def configure(**changes: Any) -> FormatConfig:
    """Replace selected fields of the process-wide configuration.

    Args:
        **changes: Any of interop_pattern, display_pattern,
            default_overflow_count.

    Returns:
        The newly installed configuration.
    """
    config = _current.replace(**changes)
    set_config(config)
    return config


def reset_config() -> FormatConfig:
    """Restore the default configuration and return it."""
    set_config(DEFAULT_CONFIG)
    return DEFAULT_CONFIG


@contextmanager
def override_config(**changes: Any) -> Iterator[FormatConfig]:
    """Temporarily replace fields of the process-wide configuration.

    Examples:
        >>> from unixtime import UnixTime32
        >>> with override_config(interop_pattern="%Y/%m/%d"):
        ...     str(UnixTime32(0))
        '1970/01/01'
    """
    config = _current.replace(**changes)
    previous = set_config(config)
    try:
        yield config
    finally:
        set_config(previous)


def resolve(config: FormatConfig | None) -> FormatConfig:
    """Return config, or the process-wide configuration when it is None."""
    return _current if config is None else config


__all__ = [
    "FormatConfig",
    "DEFAULT_CONFIG",
    "get_config",
    "set_config",
    "configure",
    "reset_config",
    "override_config",
    "resolve",
]
