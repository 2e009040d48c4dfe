"""Public core API for bind expansion, paging, errors, and configuration."""

from .binds import ExpandedQuery, expand, is_list_bind
from .configuration import (
    Configuration,
    EnvFileImporter,
    Importer,
    MappingImporter,
    SystemEnvImporter,
)
from .environment import Environment
from .exceptions import (
    BindNameConflict,
    ConfigurationError,
    EmptyListBind,
    EnvironmentException,
    QueryException,
    StatementNotFound,
    UnexpectedResultException,
)
from .pagination import SORT_ASCENDING, SORT_DESCENDING, build_page_limits
from .repository import Repository
from .types import ExecutionResult

__all__ = [
    "ExpandedQuery",
    "expand",
    "is_list_bind",
    "build_page_limits",
    "SORT_ASCENDING",
    "SORT_DESCENDING",
    "ExecutionResult",
    "Repository",
    "Configuration",
    "Importer",
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
