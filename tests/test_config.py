"""Tests for datesugar.config."""

import logging
import stat
import tomllib
from pathlib import Path

import pytest

from datesugar.config import (
    DEFAULT_CONFIG,
    create_default_config,
    get_config_path,
    get_day_overflow,
    get_log_level,
    load_config,
    save_config,
    set_option,
)
from datesugar.domain.models import DayOverflow


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, isolated_config: Path) -> None:
        """Should live under XDG_CONFIG_HOME."""
        assert get_config_path() == isolated_config

    def test_falls_back_to_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Should use ~/.config when XDG_CONFIG_HOME is unset."""
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_path() == tmp_path / ".config" / "datesugar" / "config.toml"


class TestLoadSave:
    """Tests for load_config, save_config and create_default_config."""

    def test_missing_file_returns_defaults(self, isolated_config: Path) -> None:
        """Should not require the file to exist."""
        assert not isolated_config.exists()
        assert load_config() == DEFAULT_CONFIG

    def test_create_default_config(self, isolated_config: Path) -> None:
        """Should write defaults with 600 permissions."""
        create_default_config()

        assert isolated_config.exists()
        assert stat.S_IMODE(isolated_config.stat().st_mode) == 0o600
        assert load_config() == DEFAULT_CONFIG

    def test_file_values_override_defaults(self, tmp_path: Path) -> None:
        """Should merge file contents over defaults."""
        path = tmp_path / "custom.toml"
        save_config({"day_overflow": "roll"}, path)

        config = load_config(path)
        assert config["day_overflow"] == "roll"
        assert config["log_level"] == DEFAULT_CONFIG["log_level"]

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Should propagate parse errors."""
        path = tmp_path / "broken.toml"
        path.write_text("day_overflow = ")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)


class TestGetters:
    """Tests for get_day_overflow and get_log_level."""

    def test_day_overflow_default(self) -> None:
        """Should default to clamping."""
        assert get_day_overflow({}) is DayOverflow.CLAMP

    def test_day_overflow_roll(self) -> None:
        """Should parse 'roll'."""
        assert get_day_overflow({"day_overflow": "roll"}) is DayOverflow.ROLL

    def test_day_overflow_invalid(self) -> None:
        """Should name the valid choices in the error."""
        with pytest.raises(ValueError, match="clamp, roll"):
            get_day_overflow({"day_overflow": "wrap"})

    def test_log_level_case_insensitive(self) -> None:
        """Should accept lower-case level names."""
        assert get_log_level({"log_level": "debug"}) == logging.DEBUG

    def test_log_level_invalid(self) -> None:
        """Should reject unknown level names."""
        with pytest.raises(ValueError):
            get_log_level({"log_level": "LOUD"})


class TestSetOption:
    """Tests for set_option."""

    def test_sets_and_persists(self, isolated_config: Path) -> None:
        """Should write the new value to disk."""
        set_option("day_overflow", "ROLL")
        assert load_config(isolated_config)["day_overflow"] == "roll"

    def test_log_level_upper_cased(self, isolated_config: Path) -> None:
        """Should store the canonical level name."""
        config = set_option("log_level", "info")
        assert config["log_level"] == "INFO"

    def test_unknown_key(self) -> None:
        """Should raise KeyError for unknown options."""
        with pytest.raises(KeyError):
            set_option("timezone", "UTC")

    def test_invalid_value_not_saved(self, isolated_config: Path) -> None:
        """Should leave the file untouched on a bad value."""
        with pytest.raises(ValueError):
            set_option("day_overflow", "wrap")
        assert not isolated_config.exists()
