"""Database schema initialization for the key-value store."""

import os
import sqlite3
from pathlib import Path


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_default_db_path() -> Path:
    """Get the default database path (XDG compliant)."""
    return get_xdg_data_home() / "ledger" / "ledger.db"


def database_exists(db_path: Path) -> bool:
    return db_path.exists()


def init_database(db_path: Path) -> None:
    """Initialize the database with the key-value table.

    Args:
        db_path: Path to the database file.

    Raises:
        sqlite3.Error: If database initialization fails.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """
        )
        conn.commit()

    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        conn.close()
