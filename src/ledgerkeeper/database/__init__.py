"""Database layer for ledgerkeeper application."""

from ledgerkeeper.database.base import Database, PRIMARY_TABLE, LEGACY_TABLE
from ledgerkeeper.database.factories import create_database, create_sqlite_database

__all__ = [
    "Database",
    "PRIMARY_TABLE",
    "LEGACY_TABLE",
    "create_database",
    "create_sqlite_database",
]
