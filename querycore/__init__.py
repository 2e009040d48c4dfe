"""SQL query execution over DB-API connections."""

from .core import (
    SORT_ASCENDING,
    SORT_DESCENDING,
    BindNameConflict,
    Configuration,
    ConfigurationError,
    EmptyListBind,
    EnvFileImporter,
    Environment,
    EnvironmentException,
    ExecutionResult,
    ExpandedQuery,
    MappingImporter,
    QueryException,
    Repository,
    StatementNotFound,
    SystemEnvImporter,
    UnexpectedResultException,
    build_page_limits,
    expand,
)
from .ports import Dialect, Driver, MySQLDialect, PostgresDialect, SQLiteDialect

__all__ = [
    "Driver",
    "Dialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "ExpandedQuery",
    "ExecutionResult",
    "expand",
    "build_page_limits",
    "SORT_ASCENDING",
    "SORT_DESCENDING",
    "Repository",
    "Configuration",
    "MappingImporter",
    "EnvFileImporter",
    "SystemEnvImporter",
    "Environment",
    "QueryException",
    "EmptyListBind",
    "BindNameConflict",
    "StatementNotFound",
    "UnexpectedResultException",
    "ConfigurationError",
    "EnvironmentException",
]
