"""Store layer - provides persistence for the application.

This module re-exports the public persistence API for easy importing.
"""

from ledger.store.codec import (
    CorruptDataError,
    decode_expenses,
    decode_settings,
    encode_expenses,
    encode_settings,
)
from ledger.store.gateway import EXPENSES_KEY, SETTINGS_KEY, PersistenceGateway, log_save_error
from ledger.store.schema import database_exists, get_default_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_default_db_path",
    "init_database",
    # Codec
    "CorruptDataError",
    "decode_expenses",
    "decode_settings",
    "encode_expenses",
    "encode_settings",
    # Gateway
    "EXPENSES_KEY",
    "SETTINGS_KEY",
    "PersistenceGateway",
    "log_save_error",
]
