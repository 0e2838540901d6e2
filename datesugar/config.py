"""Configuration file management for datesugar."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from datesugar.domain.models import DayOverflow

DEFAULT_CONFIG: dict[str, Any] = {
    "day_overflow": DayOverflow.CLAMP.value,
    "log_level": "WARNING",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "datesugar" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(dict(DEFAULT_CONFIG), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file, filling in defaults.

    A missing file is not an error; the defaults are returned.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the file isn't valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config = dict(DEFAULT_CONFIG)
    if not config_path.exists():
        return config

    with open(config_path, "rb") as f:
        config.update(tomllib.load(f))
    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_day_overflow(config: dict[str, Any]) -> DayOverflow:
    """Read the day overflow policy from a loaded config.

    Raises:
        ValueError: If the configured policy is unknown.
    """
    raw = config.get("day_overflow", DEFAULT_CONFIG["day_overflow"])
    try:
        return DayOverflow(raw)
    except ValueError as e:
        choices = ", ".join(p.value for p in DayOverflow)
        raise ValueError(f"Invalid day_overflow '{raw}' (expected one of: {choices})") from e


def get_log_level(config: dict[str, Any]) -> int:
    """Read the log level from a loaded config.

    Raises:
        ValueError: If the level name is unknown.
    """
    name = str(config.get("log_level", DEFAULT_CONFIG["log_level"])).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Invalid log_level '{name}' (expected one of: {', '.join(LOG_LEVELS)})")
    return logging.getLevelNamesMapping()[name]


def set_option(key: str, value: str, config_path: Path | None = None) -> dict[str, Any]:
    """Validate and persist a single config option.

    Args:
        key: Option name.
        value: New value.
        config_path: Path to config file. If None, uses default location.

    Returns:
        The updated configuration.

    Raises:
        KeyError: If the option doesn't exist.
        ValueError: If the value is invalid for the option.
    """
    if key not in DEFAULT_CONFIG:
        raise KeyError(key)

    config = load_config(config_path)
    if key == "day_overflow":
        config[key] = get_day_overflow({key: value.lower()}).value
    elif key == "log_level":
        get_log_level({key: value})
        config[key] = value.upper()

    save_config(config, config_path)
    return config
