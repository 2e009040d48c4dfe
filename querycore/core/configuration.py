"""Sectioned configuration container and its importer strategies."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Protocol, Union

from dotenv import dotenv_values

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Importer(Protocol):
    """Source of configuration key/value pairs."""

    def to_dict(self) -> Dict[str, Any]: ...


class MappingImporter:
    """Import values from an in-memory mapping."""

    def __init__(self, values: Mapping[str, Any]):
        self._values = dict(values)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)


class EnvFileImporter:
    """Import values from a `.env` file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        if not self.path.is_file():
            raise ConfigurationError(f"Env file does not exist: {self.path}")
        self._values = dict(dotenv_values(self.path))

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)


class SystemEnvImporter:
    """Import a snapshot of the process environment.

    Args:
        prefix: Keep only variables starting with this prefix and strip it
            from the imported keys.
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def to_dict(self) -> Dict[str, Any]:
        if not self.prefix:
            return dict(os.environ)
        size = len(self.prefix)
        return {
            key[size:]: value
            for key, value in os.environ.items()
            if key.startswith(self.prefix) and len(key) > size
        }


class Configuration:
    """Configuration values grouped by section.

    Build one instance at startup and pass it to whatever needs it.
    """

    def __init__(self) -> None:
        self._sections: Dict[str, Dict[str, Any]] = {}

    def import_section(self, section: str, importer: Importer) -> Configuration:
        """Replace `section` with the values produced by `importer`."""

        values = importer.to_dict()
        self._sections[section] = dict(values)
        logger.debug("Imported configuration section %r (%d keys)", section, len(values))
        return self

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Return one value, or `default` when the section or key is missing."""

        values = self._sections.get(section)
        if values is None or values.get(key) is None:
            return default
        return values[key]

    def section(self, section: str) -> Dict[str, Any]:
        """Return a copy of one section (empty when missing)."""

        return dict(self._sections.get(section, {}))

    def sections(self) -> List[str]:
        return list(self._sections)

    def __contains__(self, section: object) -> bool:
        return section in self._sections
