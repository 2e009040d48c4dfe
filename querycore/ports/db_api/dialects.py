"""Concrete SQL dialect implementations for DB-API adapters."""

from __future__ import annotations

from typing import Any, Optional

from ...core.pagination import limit_clause


class Dialect:
    """Base dialect that defines placeholder, paging, and transaction syntax."""

    name: str = "generic"
    paramstyle: str = "named"
    begin_sql: str = "BEGIN"

    def placeholder(self, key: str) -> str:
        """Return parameter placeholder for current param style."""

        if self.paramstyle == "named":
            return f":{key}"
        if self.paramstyle == "pyformat":
            return f"%({key})s"
        if self.paramstyle == "qmark":
            return "?"
        if self.paramstyle == "format":
            return "%s"
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")

    def limit_clause(self, limit: int, offset: Optional[int] = None) -> str:
        """Return `LIMIT` clause for a page of `limit` rows."""

        return limit_clause(limit, offset)

    def get_lastrowid(self, cursor: Any) -> Optional[int]:
        """Extract `lastrowid` from DB-API cursor when available."""

        return getattr(cursor, "lastrowid", None)


class SQLiteDialect(Dialect):
    """SQLite dialect (`:name` parameters)."""

    name = "sqlite"
    paramstyle = "named"


class PostgresDialect(Dialect):
    """PostgreSQL dialect (`%(name)s` parameters, `LIMIT ... OFFSET ...`)."""

    name = "postgres"
    paramstyle = "pyformat"

    def limit_clause(self, limit: int, offset: Optional[int] = None) -> str:
        if offset is None:
            return f"LIMIT {limit}"
        return f"LIMIT {limit} OFFSET {offset}"


class MySQLDialect(Dialect):
    """MySQL dialect (`%(name)s` parameters)."""

    name = "mysql"
    paramstyle = "pyformat"
    begin_sql = "START TRANSACTION"
