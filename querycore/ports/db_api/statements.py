"""Identifier-keyed table of prepared statements for one connection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from ...core.exceptions import StatementNotFound

logger = logging.getLogger(__name__)

DEFAULT_IDENTIFIER = "single"


@dataclass(frozen=True)
class PreparedStatement:
    """SQL registered under an identifier, ready to run with bind values."""

    identifier: str
    sql: str


class StatementRegistry:
    """Statement slots keyed by caller-chosen identifiers.

    Several slots can be live at once so a caller can interleave statements
    on one connection. The registry is not thread-safe.
    """

    def __init__(self) -> None:
        self._statements: Dict[str, PreparedStatement] = {}

    def prepare(self, sql: str, identifier: str = DEFAULT_IDENTIFIER) -> PreparedStatement:
        """Register `sql` under `identifier`, replacing any previous statement."""

        statement = PreparedStatement(identifier=identifier, sql=sql)
        self._statements[identifier] = statement
        logger.debug("Prepared statement %r: %s", identifier, sql)
        return statement

    def get(self, identifier: str = DEFAULT_IDENTIFIER) -> PreparedStatement:
        statement = self._statements.get(identifier)
        if statement is None:
            raise StatementNotFound(identifier)
        return statement

    def clear(self, identifier: str = DEFAULT_IDENTIFIER) -> None:
        """Release the statement under `identifier`. Missing slots are ignored."""

        if self._statements.pop(identifier, None) is not None:
            logger.debug("Cleared statement %r", identifier)

    def identifiers(self) -> List[str]:
        return list(self._statements)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._statements

    def __len__(self) -> int:
        return len(self._statements)
