"""Configuration file management for ledger."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from ledger.domain.models import DEFAULT_CURRENCY
from ledger.store.schema import get_default_db_path


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
    return get_xdg_config_home() / "ledger" / "config.toml"


def default_config() -> dict[str, Any]:
    return {
        "database": str(get_default_db_path()),
        "default_currency": DEFAULT_CURRENCY.code,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config(), f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    A missing file yields an empty configuration.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return {}

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def get_db_path(config: dict[str, Any]) -> Path:
    """Database path from config, falling back to the XDG default."""
    database = config.get("database")
    if database:
        return Path(database).expanduser()
    return get_default_db_path()


def get_default_currency(config: dict[str, Any]) -> str:
    return str(config.get("default_currency") or DEFAULT_CURRENCY.code)
