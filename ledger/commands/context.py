"""Shared helpers for commands: opening the ledger and reporting save failures."""

import sys
import tomllib
from pathlib import Path

from rich.console import Console

from ledger.config import get_config_path, get_db_path, get_default_currency, load_config
from ledger.state import LedgerState
from ledger.store.gateway import PersistenceGateway

console = Console()


def open_ledger(config_path: Path | None = None) -> LedgerState:
    """Load configuration and the persisted ledger state.

    Exits with status 1 if the config file is not valid TOML.
    """
    try:
        config = load_config(config_path)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file {config_path or get_config_path()}: {e}[/red]", style="bold")
        sys.exit(1)

    gateway = PersistenceGateway(get_db_path(config), default_currency=get_default_currency(config))
    return LedgerState.load(gateway)


def warn_if_unsaved(state: LedgerState) -> None:
    """Tell the user when the last write did not reach the database."""
    if not state.last_save_ok:
        console.print("[yellow]Warning: changes could not be saved and will be lost when ledger exits[/yellow]")
