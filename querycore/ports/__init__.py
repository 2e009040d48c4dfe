"""Public port exports for concrete adapter implementations."""

from .db_api import Dialect, Driver, MySQLDialect, PostgresDialect, SQLiteDialect

__all__ = [
    "Driver",
    "Dialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
]
