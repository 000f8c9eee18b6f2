"""Admin commands for initialization."""

import sqlite3
import sys
import tomllib
from pathlib import Path

from ledger.commands.context import console
from ledger.config import create_default_config, get_config_path, get_db_path, load_config
from ledger.store.schema import database_exists, init_database


def init_command(force: bool = False, config_path: Path | None = None) -> None:
    """Initialize ledger database and configuration."""
    if config_path is None:
        config_path = get_config_path()

    config_exists = config_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if config_exists and not force:
            db_path = get_db_path(load_config(config_path))
            console.print("[red]Initialization failed:[/red]", style="bold")
            console.print(f"  Config already exists: {config_path}")
            if database_exists(db_path):
                console.print(f"  Database already exists: {db_path}")
            console.print("\n[yellow]Use 'ledger init --force' to overwrite the config[/yellow]")
            sys.exit(1)

        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

        db_path = get_db_path(load_config(config_path))
        console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
        init_database(db_path)
        console.print("[green]✓[/green] Database initialized")

        console.print("\n[green]Initialization complete![/green]", style="bold")
        console.print(f"[dim]Database: {db_path}[/dim]")
        console.print(f"[dim]Config: {config_path}[/dim]")

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file {config_path}: {e}[/red]", style="bold")
        sys.exit(1)
