"""Core port contracts used by binds, pagination, repositories, and adapters."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, Optional, Protocol, Sequence

from .types import BindParams, ExecutionResult, MaybeRow, NamedParams, Rows

if TYPE_CHECKING:
    from .binds import ExpandedQuery


class DialectPort(Protocol):
    """Dialect behavior required by bind expansion and pagination."""

    name: str
    paramstyle: str
    begin_sql: str

    def placeholder(self, key: str) -> str: ...

    def limit_clause(self, limit: int, offset: Optional[int] = None) -> str: ...

    def get_lastrowid(self, cursor: Any) -> Optional[int]: ...


class CursorPort(Protocol):
    """Subset of a DB-API 2.0 cursor used by the driver."""

    description: Optional[Sequence[Sequence[Any]]]
    rowcount: int

    def execute(self, operation: str, parameters: Any = ...) -> Any: ...

    def fetchall(self) -> Optional[Sequence[Any]]: ...

    def close(self) -> None: ...


class ConnectionPort(Protocol):
    """Subset of a DB-API 2.0 connection used by the driver."""

    def cursor(self) -> CursorPort: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class DriverPort(Protocol):
    """Query execution behavior required by repositories."""

    dialect: DialectPort

    def simple_fetch(self, sql: str, bind: Optional[BindParams] = None) -> Rows: ...

    def simple_fetch_one(self, sql: str, bind: Optional[BindParams] = None) -> MaybeRow: ...

    def simple_execute(
        self, sql: str, bind: Optional[BindParams] = None
    ) -> ExecutionResult: ...

    def prepare(self, sql: str, identifier: str = ...) -> DriverPort: ...

    def clear(self, identifier: str = ...) -> DriverPort: ...

    def prepare_bind(self, sql: str, bind: Optional[BindParams]) -> ExpandedQuery: ...

    def begin_transaction(self) -> DriverPort: ...

    def commit(self) -> DriverPort: ...

    def rollback(self) -> DriverPort: ...

    def execute(
        self, bind: Optional[NamedParams] = None, identifier: str = ...
    ) -> ExecutionResult: ...

    def fetch(self, bind: Optional[NamedParams] = None, identifier: str = ...) -> Rows: ...

    def transaction(self) -> AbstractContextManager[Any]: ...

    def build_page_limits(
        self,
        sort_field: str = ...,
        sort_direction: str = ...,
        limit: Optional[int] = None,
        page: Optional[int] = None,
    ) -> str: ...
