"""Tests for ledger.config."""

import os
import stat
import tomllib
from pathlib import Path

import pytest

from ledger.config import (
    create_default_config,
    get_config_path,
    get_db_path,
    get_default_currency,
    load_config,
)


class TestConfig:
    """Tests for loading and creating the config file."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "missing.toml") == {}

    def test_default_config_written_privately(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
        config_path = tmp_path / "ledger" / "config.toml"

        create_default_config(config_path)

        config = load_config(config_path)
        assert config["default_currency"] == "USD"
        assert get_db_path(config) == tmp_path / "data" / "ledger" / "ledger.db"
        assert stat.S_IMODE(os.stat(config_path).st_mode) == 0o600

    def test_config_path_follows_xdg(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "ledger" / "config.toml"

    def test_database_override(self, tmp_path: Path) -> None:
        assert get_db_path({"database": str(tmp_path / "x.db")}) == tmp_path / "x.db"

    def test_default_currency(self) -> None:
        assert get_default_currency({}) == "USD"
        assert get_default_currency({"default_currency": "IDR"}) == "IDR"

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"
        config_path.write_text("database = ")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(config_path)
