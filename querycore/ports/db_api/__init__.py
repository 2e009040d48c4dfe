"""DB-API driver, statement registry, and dialect exports."""

from .dialects import Dialect, MySQLDialect, PostgresDialect, SQLiteDialect
from .driver import Driver
from .statements import DEFAULT_IDENTIFIER, PreparedStatement, StatementRegistry

__all__ = [
    "DEFAULT_IDENTIFIER",
    "Dialect",
    "Driver",
    "MySQLDialect",
    "PostgresDialect",
    "PreparedStatement",
    "SQLiteDialect",
    "StatementRegistry",
]
