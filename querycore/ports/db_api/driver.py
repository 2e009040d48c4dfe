"""DB-API query driver: bind expansion, statement slots, and transactions."""

from __future__ import annotations

import contextlib
import logging
from typing import Any, Iterator, Mapping, Optional

from ...core.binds import NAMED_PARAMSTYLES, ExpandedQuery, expand
from ...core.contracts import ConnectionPort, CursorPort, DialectPort
from ...core.exceptions import QueryException, UnexpectedResultException
from ...core.pagination import SORT_ASCENDING, build_page_limits
from ...core.types import BindParams, ExecutionResult, MaybeRow, NamedParams, Row, Rows
from .dialects import SQLiteDialect
from .statements import DEFAULT_IDENTIFIER, PreparedStatement, StatementRegistry

logger = logging.getLogger(__name__)


class Driver:
    """Runs SQL with named binds against one caller-owned DB-API connection.

    The driver never opens or closes the connection. Every error raised by
    the connection is re-raised as `QueryException` with the original error
    as its cause.
    """

    def __init__(self, conn: ConnectionPort | Any, dialect: Optional[DialectPort] = None):
        """Create query driver.

        Args:
            conn: DB-API connection object.
            dialect: SQL dialect with a named paramstyle. SQLite when omitted.
        """

        self.conn = conn
        self.dialect = dialect if dialect is not None else SQLiteDialect()
        if self.dialect.paramstyle not in NAMED_PARAMSTYLES:
            raise ValueError(
                f"Driver requires a named paramstyle, got: {self.dialect.paramstyle}"
            )
        self.statements = StatementRegistry()
        self._in_transaction = False

    def simple_fetch(self, sql: str, bind: Optional[BindParams] = None) -> Rows:
        """Expand, prepare, and run a query; return every row."""

        bind = {} if bind is None else bind
        try:
            query = self.prepare_bind(sql, bind)
            self.prepare(query.sql)
            return self.fetch(query.bind)
        except Exception as exc:
            raise QueryException(
                "SIMPLE_QUERY_EXCEPTION", sql=sql, bind=bind, cause=exc
            ) from exc

    def simple_fetch_one(self, sql: str, bind: Optional[BindParams] = None) -> MaybeRow:
        """Return the only row of a query, or `None` when there is none.

        Raises:
            UnexpectedResultException: The query returned more than one row.
            QueryException: The query failed.
        """

        bind = {} if bind is None else bind
        rows = self.simple_fetch(sql, bind)
        if not rows:
            return None
        if len(rows) > 1:
            raise UnexpectedResultException(sql=sql, bind=bind, rows=rows)
        return rows[0]

    def simple_execute(self, sql: str, bind: Optional[BindParams] = None) -> ExecutionResult:
        """Expand, prepare, and run a write statement."""

        bind = {} if bind is None else bind
        try:
            query = self.prepare_bind(sql, bind)
            self.prepare(query.sql)
            return self.execute(query.bind)
        except Exception as exc:
            raise QueryException(
                "SIMPLE_EXECUTE_EXCEPTION", sql=sql, bind=bind, cause=exc
            ) from exc

    def prepare(self, sql: str, identifier: str = DEFAULT_IDENTIFIER) -> Driver:
        """Register `sql` under `identifier`, replacing any previous statement."""

        if not sql or not sql.strip():
            raise QueryException("PREPARE_EXCEPTION: empty SQL", sql=sql)
        self.statements.prepare(sql, identifier)
        return self

    def execute(
        self, bind: Optional[NamedParams] = None, identifier: str = DEFAULT_IDENTIFIER
    ) -> ExecutionResult:
        """Run the statement under `identifier` and summarize the write.

        Bind values must already be expanded (see `prepare_bind`). The cursor
        is closed before returning, so the same identifier can run again.

        Raises:
            StatementNotFound: No statement is registered under `identifier`.
            QueryException: The driver rejected the statement or bind values.
        """

        statement = self.statements.get(identifier)
        params = {} if bind is None else bind
        try:
            with contextlib.closing(self.conn.cursor()) as cur:
                cur.execute(statement.sql, params)
                result = ExecutionResult(
                    last_insert_id=int(self.dialect.get_lastrowid(cur) or 0),
                    row_count=_row_count(cur),
                )
        except Exception as exc:
            raise QueryException(
                "EXECUTE_EXCEPTION", sql=statement.sql, bind=params, cause=exc
            ) from exc

        logger.debug(
            "Executed statement %r: %d rows, last insert id %d",
            identifier,
            result.row_count,
            result.last_insert_id,
        )
        return result

    def fetch(
        self, bind: Optional[NamedParams] = None, identifier: str = DEFAULT_IDENTIFIER
    ) -> Rows:
        """Run the statement under `identifier` and return all rows.

        Returns an empty list when the driver reports no rows.

        Raises:
            StatementNotFound: No statement is registered under `identifier`.
            QueryException: The driver rejected the statement or bind values.
        """

        statement = self.statements.get(identifier)
        params = {} if bind is None else bind
        try:
            rows = self._fetch_rows(statement, params)
        except Exception as exc:
            raise QueryException(
                "FETCH_EXCEPTION", sql=statement.sql, bind=params, cause=exc
            ) from exc

        logger.debug("Fetched %d rows with statement %r", len(rows), identifier)
        return rows

    def clear(self, identifier: str = DEFAULT_IDENTIFIER) -> Driver:
        """Release the statement under `identifier`."""

        self.statements.clear(identifier)
        return self

    def prepare_bind(self, sql: str, bind: Optional[BindParams]) -> ExpandedQuery:
        """Expand list-valued binds using this driver's placeholder syntax."""

        return expand(sql, bind, self.dialect)

    def build_page_limits(
        self,
        sort_field: str = "",
        sort_direction: str = SORT_ASCENDING,
        limit: Optional[int] = None,
        page: Optional[int] = None,
    ) -> str:
        """Build an `ORDER BY`/`LIMIT` fragment in this driver's dialect."""

        return build_page_limits(
            sort_field, sort_direction, limit, page, dialect=self.dialect
        )

    def begin_transaction(self) -> Driver:
        """Start a transaction on the connection.

        On a sqlite3 connection that opens transactions implicitly, writes run
        outside `begin_transaction` are committed first, as they would be on
        an autocommit connection.
        """

        try:
            begin = getattr(self.conn, "begin", None)
            if callable(begin):
                begin()
            elif self._commit_implicit_sqlite_transaction():
                logger.debug("Transaction already opened by the sqlite3 module")
            else:
                with contextlib.closing(self.conn.cursor()) as cur:
                    cur.execute(self.dialect.begin_sql)
        except Exception as exc:
            raise QueryException(
                "TRANSACTION_EXCEPTION", sql=self.dialect.begin_sql, cause=exc
            ) from exc
        self._in_transaction = True
        logger.debug("Transaction started")
        return self

    def commit(self) -> Driver:
        self._in_transaction = False
        try:
            self.conn.commit()
        except Exception as exc:
            raise QueryException("TRANSACTION_EXCEPTION", sql="COMMIT", cause=exc) from exc
        logger.debug("Transaction committed")
        return self

    def rollback(self) -> Driver:
        self._in_transaction = False
        try:
            self.conn.rollback()
        except Exception as exc:
            raise QueryException("TRANSACTION_EXCEPTION", sql="ROLLBACK", cause=exc) from exc
        logger.debug("Transaction rolled back")
        return self

    @contextlib.contextmanager
    def transaction(self) -> Iterator[Driver]:
        """Provide begin/commit/rollback transaction scope."""

        self.begin_transaction()
        try:
            yield self
        except BaseException:
            self.rollback()
            raise
        self.commit()

    def _commit_implicit_sqlite_transaction(self) -> bool:
        """Commit writes the sqlite3 module wrapped in an implicit transaction.

        Returns whether the module keeps a transaction open after the commit
        (`autocommit=False` connections), in which case no `BEGIN` is sent.
        """

        conn = self.conn
        if getattr(self.dialect, "name", "").lower() != "sqlite":
            return False
        if getattr(conn, "isolation_level", None) is None:
            return False
        if self._in_transaction or not getattr(conn, "in_transaction", False):
            return False
        conn.commit()
        return bool(getattr(conn, "in_transaction", False))

    def _fetch_rows(self, statement: PreparedStatement, params: NamedParams) -> Rows:
        with contextlib.closing(self.conn.cursor()) as cur:
            cur.execute(statement.sql, params)
            rows = cur.fetchall()
            if not rows:
                return []
            return [self._row_to_mapping(cur, row) for row in rows]

    def _row_to_mapping(self, cursor: CursorPort, row: Any) -> Row:
        """Normalize row object to a dict.

        Supports mapping rows (and `sqlite3.Row`) directly and tuple/list rows
        via `cursor.description`.
        """

        if isinstance(row, Mapping):
            return dict(row)

        if isinstance(row, (tuple, list)):
            desc = getattr(cursor, "description", None)
            if not desc:
                raise TypeError(
                    "Cursor has no description; cannot map tuple rows to dict."
                )
            cols = [d[0] for d in desc]
            return dict(zip(cols, row))

        keys = getattr(row, "keys", None)
        if callable(keys):
            return {key: row[key] for key in keys()}

        raise TypeError(f"Unsupported row type: {type(row)}")


def _row_count(cursor: Any) -> int:
    count = getattr(cursor, "rowcount", None)
    if count is None:
        return -1
    return int(count)
