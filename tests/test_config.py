"""Tests for the process-wide format configuration."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from unixtime import (
    FormatConfig,
    UnixTime32,
    UnixTime64,
    configure,
    get_config,
    override_config,
    reset_config,
    set_config,
)
from unixtime.config import DEFAULT_CONFIG
from unixtime.errors import FormatError


class TestFormatConfig:
    """Tests for the FormatConfig value."""

    def test_defaults(self) -> None:
        config = FormatConfig()
        assert config.interop_pattern == "%Y-%m-%dT%H:%M:%S"
        assert config.display_pattern == "%Y-%m-%d %H:%M:%S"
        assert config.default_overflow_count == 0

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            FormatConfig().default_overflow_count = 1  # type: ignore[misc]

    def test_replace(self) -> None:
        config = FormatConfig().replace(default_overflow_count=2)
        assert config.default_overflow_count == 2
        assert config.interop_pattern == FormatConfig().interop_pattern

    def test_overflow_count_type(self) -> None:
        with pytest.raises(TypeError):
            FormatConfig(default_overflow_count="1")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            FormatConfig(default_overflow_count=True)

    def test_patterns_not_validated(self) -> None:
        """Any string is accepted as a pattern."""
        config = FormatConfig(interop_pattern="%Q")
        assert config.interop_pattern == "%Q"


class TestProcessConfig:
    """Tests for get_config, set_config, configure and reset_config."""

    def test_starts_with_defaults(self) -> None:
        assert get_config() == DEFAULT_CONFIG

    def test_configure(self) -> None:
        result = configure(display_pattern="%d.%m.%Y")
        assert result is get_config()
        assert get_config().display_pattern == "%d.%m.%Y"
        assert UnixTime32(0).to_display_string() == "01.01.1970"

    def test_configure_unknown_field(self) -> None:
        with pytest.raises(TypeError):
            configure(pattern="%Y")

    def test_set_config_returns_previous(self) -> None:
        custom = FormatConfig(interop_pattern="%Y")
        previous = set_config(custom)
        assert previous == DEFAULT_CONFIG
        assert str(UnixTime64(0)) == "1970"

    def test_set_config_type(self) -> None:
        with pytest.raises(TypeError):
            set_config({"interop_pattern": "%Y"})  # type: ignore[arg-type]

    def test_reset(self) -> None:
        configure(default_overflow_count=3)
        reset_config()
        assert get_config() == DEFAULT_CONFIG

    def test_invalid_pattern_fails_at_use(self) -> None:
        """A bad pattern is only reported by format and parse calls."""
        configure(interop_pattern="%Y-%Q")
        with pytest.raises(FormatError):
            str(UnixTime32(0))
        with pytest.raises(FormatError):
            UnixTime32.parse("1970-01")

    @pytest.mark.parametrize("pattern", [None, 123])
    def test_non_string_pattern_fails_at_use(self, pattern: object) -> None:
        """A configured pattern that is not a string raises FormatError."""
        configure(interop_pattern=pattern, display_pattern=pattern)
        with pytest.raises(FormatError, match="pattern must be a string"):
            str(UnixTime32(0))
        with pytest.raises(FormatError, match="pattern must be a string"):
            UnixTime32(0).to_display_string()
        with pytest.raises(FormatError, match="pattern must be a string"):
            UnixTime32.parse("1970-01-01T00:00:00")

    def test_explicit_config_wins(self) -> None:
        """Passing a config ignores the process-wide one."""
        configure(interop_pattern="%Y")
        explicit = FormatConfig()
        assert UnixTime32(0).to_string(explicit) == "1970-01-01T00:00:00"
        assert UnixTime32.parse("1970-01-01T00:00:00", explicit) == UnixTime32(0)

    def test_logs_changes(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="unixtime.config")
        configure(default_overflow_count=1)
        assert "format configuration changed" in caplog.text


class TestOverrideConfig:
    """Tests for the override_config context manager."""

    def test_override_and_restore(self) -> None:
        with override_config(interop_pattern="%Y/%m/%d") as config:
            assert config is get_config()
            assert str(UnixTime32(0)) == "1970/01/01"
        assert str(UnixTime32(0)) == "1970-01-01T00:00:00"

    def test_yields_installed_config(self) -> None:
        """The block receives the config it installed, even if replaced later."""
        with override_config(default_overflow_count=2) as config:
            configure(default_overflow_count=5)
            assert config.default_overflow_count == 2
            assert get_config().default_overflow_count == 5
        assert get_config() == DEFAULT_CONFIG

    def test_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with override_config(default_overflow_count=1):
                raise RuntimeError("boom")
        assert get_config().default_overflow_count == 0

    def test_nested(self) -> None:
        with override_config(default_overflow_count=1):
            with override_config(interop_pattern="%Y"):
                assert str(UnixTime32(0)) == "2106"
            assert str(UnixTime32(0)) == "2106-02-07T06:28:16"
        assert str(UnixTime32(0)) == "1970-01-01T00:00:00"
