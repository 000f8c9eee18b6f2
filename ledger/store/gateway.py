"""Persistence gateway for the two ledger blobs.

The gateway reads and writes whole JSON snapshots under two keys. Reads that
fail, or return malformed data, are treated as "nothing stored". Writes that
fail are reported to an error hook and otherwise ignored: the in-memory state
stays authoritative and the next successful write stores the full snapshot.
"""

import logging
import sqlite3
from collections.abc import Callable
from pathlib import Path

from ledger.domain.models import DEFAULT_CURRENCY, Expense, Settings
from ledger.store.codec import CorruptDataError, decode_expenses, decode_settings
from ledger.store.schema import init_database

EXPENSES_KEY = "expenses-collection"
SETTINGS_KEY = "settings"

ErrorHook = Callable[[str, Exception], None]

logger = logging.getLogger(__name__)


def log_save_error(key: str, error: Exception) -> None:
    """Default error hook: log the failed write."""
    logger.warning("Failed to save %s: %s", key, error)


class PersistenceGateway:
    """Key-value persistence backed by a SQLite table."""

    def __init__(
        self,
        db_path: Path,
        on_error: ErrorHook | None = None,
        default_currency: str = DEFAULT_CURRENCY.code,
    ) -> None:
        self.db_path = db_path
        self.on_error = on_error or log_save_error
        self.default_currency = default_currency

    def _connect(self) -> sqlite3.Connection:
        if not self.db_path.exists():
            init_database(self.db_path)
        return sqlite3.connect(self.db_path)

    def get(self, key: str) -> str | None:
        """Read the value stored under `key`.

        Raises:
            sqlite3.Error: If the database operation fails.
        """
        conn = self._connect()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value.

        Raises:
            sqlite3.Error: If the database operation fails.
        """
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    "INSERT INTO kv (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, value),
                )
        finally:
            conn.close()

    def _read(self, key: str) -> str | None:
        try:
            return self.get(key)
        except (sqlite3.Error, OSError) as e:
            logger.warning("Failed to load %s: %s", key, e)
            return None

    def load(self) -> tuple[list[Expense] | None, Settings | None]:
        """Load the expense collection and settings.

        Returns:
            Tuple of (expenses, settings); either is None when absent,
            unreadable or malformed.
        """
        expenses: list[Expense] | None = None
        settings: Settings | None = None

        raw_expenses = self._read(EXPENSES_KEY)
        if raw_expenses is not None:
            try:
                expenses = decode_expenses(raw_expenses)
            except CorruptDataError as e:
                logger.warning("Ignoring malformed %s: %s", EXPENSES_KEY, e)

        raw_settings = self._read(SETTINGS_KEY)
        if raw_settings is not None:
            try:
                settings = decode_settings(raw_settings, self.default_currency)
            except CorruptDataError as e:
                logger.warning("Ignoring malformed %s: %s", SETTINGS_KEY, e)

        logger.debug(
            "Loaded %s expenses, settings %s",
            len(expenses) if expenses is not None else "no",
            "present" if settings is not None else "absent",
        )
        return expenses, settings

    def save(self, key: str, payload: str) -> bool:
        """Write a full snapshot under `key`.

        Returns:
            True on success. On failure the error hook is called and False
            is returned; nothing is raised.
        """
        try:
            self.set(key, payload)
        except (sqlite3.Error, OSError) as e:
            self.on_error(key, e)
            return False
        logger.debug("Saved %s (%d bytes)", key, len(payload))
        return True
