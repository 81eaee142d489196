"""Tests for unixtime package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations

import builtins


def test_import_unixtime() -> None:
    """Import unixtime package succeeds."""
    import unixtime

    assert hasattr(unixtime, "__version__")
    assert unixtime.__version__ == "0.1.0"


def test_public_names() -> None:
    """Every name in __all__ is importable from the package."""
    import unixtime

    for name in unixtime.__all__:
        assert hasattr(unixtime, name), name


def test_import_core_module() -> None:
    from unixtime import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    from unixtime import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    from unixtime import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    from unixtime import convert

    assert hasattr(convert, "__all__")


def test_import_internal_module() -> None:
    from unixtime import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import unixtime.errors succeeds with all exception classes."""
    from unixtime.errors import FormatError, OverflowError, UnixTimeError

    assert issubclass(OverflowError, UnixTimeError)
    assert issubclass(FormatError, UnixTimeError)
    assert issubclass(UnixTimeError, Exception)

    # Built-in handlers still catch them
    assert issubclass(OverflowError, builtins.OverflowError)
    assert issubclass(FormatError, ValueError)


def test_import_constants() -> None:
    """Import unixtime._internal.constants succeeds."""
    from unixtime._internal.constants import (
        INT64_MAX,
        INT64_MIN,
        SECONDS_PER_OVERFLOW,
        UINT32_MAX,
    )

    assert UINT32_MAX == 2**32 - 1
    assert SECONDS_PER_OVERFLOW == 2**32
    assert INT64_MIN == -(2**63)
    assert INT64_MAX == 2**63 - 1


def test_core_types_define_conversions() -> None:
    """Each timestamp type supplies its own calendar conversions."""
    from unixtime.core._base import UnixTimeBase
    from unixtime.core.unixtime32 import UnixTime32
    from unixtime.core.unixtime64 import UnixTime64

    for name in ("from_datetime", "_calendar"):
        assert name not in vars(UnixTimeBase)
        assert name in vars(UnixTime32)
        assert name in vars(UnixTime64)
