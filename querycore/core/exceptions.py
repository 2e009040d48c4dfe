"""Error types raised by the query layer and its configuration helpers.

`QueryException` and its subclasses report that a query could not run.
`UnexpectedResultException` reports that a query ran but returned more rows
than the caller allowed. The two are kept apart so callers can tell a broken
query from an ambiguous lookup.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence


class QueryException(Exception):
    """Query could not be expanded, prepared, or executed.

    Attributes:
        message: Short error code or description.
        sql: SQL text the caller submitted, when known.
        bind: Bind parameters the caller submitted, when known.
        cause: Underlying exception, also available as `__cause__`.
    """

    code = "QUERY_EXCEPTION"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        sql: Optional[str] = None,
        bind: Optional[Mapping[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message or self.code
        self.sql = sql
        self.bind = bind
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        text = self.message
        if self.cause is not None:
            text += f": {self.cause}"
        if self.sql:
            text += f" [sql: {self.sql}]"
        return text


class EmptyListBind(QueryException):
    """A list-valued bind parameter was empty."""

    code = "BIND_PARAM_EMPTY"

    def __init__(self, name: str, *, sql: str, bind: Mapping[str, Any]):
        self.name = name
        super().__init__(f"{self.code}: {name!r}", sql=sql, bind=bind)


class BindNameConflict(QueryException):
    """Expanding a list bind produced a name that is already bound."""

    code = "BIND_PARAM_CONFLICT"

    def __init__(self, name: str, *, sql: str, bind: Mapping[str, Any]):
        self.name = name
        super().__init__(f"{self.code}: {name!r}", sql=sql, bind=bind)


class StatementNotFound(QueryException):
    """No prepared statement is registered under the identifier."""

    code = "STATEMENT_NOT_FOUND"

    def __init__(self, identifier: str, *, bind: Optional[Mapping[str, Any]] = None):
        self.identifier = identifier
        super().__init__(f"{self.code}: {identifier!r}", bind=bind)


class UnexpectedResultException(Exception):
    """Query returned more rows than the call allows."""

    code = "SIMPLE_FETCH_ONE_RETURNED_MORE_THAN_ONE_RESULT"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        sql: Optional[str] = None,
        bind: Optional[Mapping[str, Any]] = None,
        rows: Sequence[Mapping[str, Any]] = (),
    ):
        self.message = message or self.code
        self.sql = sql
        self.bind = bind
        self.rows = list(rows)
        super().__init__(self.message)


class ConfigurationError(Exception):
    """Configuration could not be imported or read."""


class EnvironmentException(ConfigurationError):
    """Environment registry rejected a read or write."""
