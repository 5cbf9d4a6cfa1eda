"""Configuration file management for tally."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tally.domain.ledger import parse_amount
from tally.domain.models import DEFAULT_BALANCE, Money
from tally.errors import ConfigError
from tally.logging import LEVEL_MAP


@dataclass(frozen=True)
class LedgerConfig:
    """Immutable settings for a tally session."""

    initial_balance: Money = DEFAULT_BALANCE
    log_level: str = "WARNING"


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
    return get_xdg_config_home() / "tally" / "config.toml"


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary, empty if the file doesn't exist.

    Raises:
        ConfigError: If the file isn't valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return {}

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e


def parse_config(config: dict[str, Any]) -> LedgerConfig:
    """Validate a configuration dictionary.

    Args:
        config: Raw configuration, as returned by load_config.

    Returns:
        Parsed settings, with defaults for missing keys.

    Raises:
        ConfigError: If a value is invalid.
    """
    initial_balance = DEFAULT_BALANCE
    raw_balance = config.get("initial_balance")
    if raw_balance is not None:
        # bool is an int subclass
        if isinstance(raw_balance, bool) or not isinstance(raw_balance, (str, int, float)):
            raise ConfigError(f"initial_balance must be a number, got {raw_balance!r}")
        if isinstance(raw_balance, float):
            # Fixed-point text, never exponent notation
            raw_balance = format(raw_balance, "f")
        parsed = parse_amount(str(raw_balance))
        if parsed is None:
            raise ConfigError(f"initial_balance must be a non-negative amount, got {raw_balance!r}")
        initial_balance = parsed

    log_level = config.get("log_level", LedgerConfig.log_level)
    if not isinstance(log_level, str) or log_level.upper() not in LEVEL_MAP:
        raise ConfigError(f"log_level must be one of {', '.join(LEVEL_MAP)}, got {log_level!r}")

    return LedgerConfig(initial_balance=initial_balance, log_level=log_level.upper())


def get_ledger_config(config_path: Path | None = None) -> LedgerConfig:
    """Load and validate settings from the config file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Parsed settings; defaults when no config file exists.
    """
    return parse_config(load_config(config_path))
