"""Key/value registry with write-protected ("important") entries."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict

from .configuration import Importer
from .exceptions import EnvironmentException

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Z0-9_]+$")


@dataclass
class _Entry:
    value: Any
    important: bool = False


class Environment:
    """Registry of upper-case environment keys.

    Keys are upper-cased on every read and write. A key stored with
    `important=True` can never be overwritten.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, _Entry] = {}

    def has(self, key: str) -> bool:
        return key.upper() in self._entries

    def is_important(self, key: str) -> bool:
        entry = self._entries.get(key.upper())
        if entry is None:
            raise EnvironmentException("ENV_VAR_NOT_FOUND")
        return entry.important

    def set(self, key: str, value: Any, important: bool = False) -> None:
        """Store a value.

        Raises:
            EnvironmentException: The key is already stored as important, or
                contains characters other than `A-Z`, `0-9` and `_`.
        """

        key = key.upper()
        current = self._entries.get(key)
        if current is not None:
            if current.important:
                raise EnvironmentException("CANNOT_OVERWRITE_IMPORTANT_ENV")
            logger.debug("Overwriting environment key %s", key)
        if not _KEY_PATTERN.match(key):
            raise EnvironmentException("INVALID_ENV_KEY")
        self._entries[key] = _Entry(value=value, important=important)

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._entries.get(key.upper())
        if entry is None:
            return default
        return entry.value

    def import_from(self, importer: Importer, important: bool = False) -> None:
        """Store every value produced by `importer`."""

        for key, value in importer.to_dict().items():
            self.set(key, value, important)
