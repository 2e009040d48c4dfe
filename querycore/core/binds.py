"""Bind parameter expansion for list-valued named parameters.

A bind such as `{"ids": [1, 2, 3]}` cannot be sent to a DB-API driver as-is.
`expand` rewrites every `:ids` token in the SQL into `:ids_0, :ids_1, :ids_2`
and replaces the list with one scalar parameter per element, so callers can
write `WHERE id IN (:ids)`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .contracts import DialectPort
from .exceptions import BindNameConflict, EmptyListBind
from .types import BindParams, NamedParams

logger = logging.getLogger(__name__)

NAMED_PARAMSTYLES = ("named", "pyformat")

_SCALAR_SEQUENCE_TYPES = (str, bytes, bytearray, memoryview)


@dataclass(frozen=True)
class ExpandedQuery:
    """SQL and bind parameters where no bind value is a list."""

    sql: str
    bind: NamedParams


def is_list_bind(value: Any) -> bool:
    """Return whether a bind value must be expanded into several placeholders."""

    return isinstance(value, SequenceABC) and not isinstance(value, _SCALAR_SEQUENCE_TYPES)


def expand(
    sql: str, bind: Optional[BindParams], dialect: Optional[DialectPort] = None
) -> ExpandedQuery:
    """Expand list-valued binds into uniquely named scalar placeholders.

    Args:
        sql: SQL template with named placeholders.
        bind: Mapping of parameter name to scalar or non-empty sequence.
        dialect: Dialect that renders placeholder tokens. `:name` when omitted.

    Returns:
        Rewritten SQL and flat bind mapping. `bind` itself is not modified.

    Raises:
        EmptyListBind: A list-valued bind is empty.
        BindNameConflict: A generated name is already used by another bind.
        ValueError: The dialect uses a positional paramstyle.
    """

    if not bind:
        return ExpandedQuery(sql, {})

    placeholder = _placeholder_renderer(dialect)
    out_sql = sql
    out_bind: NamedParams = dict(bind)

    for name, value in bind.items():
        if not is_list_bind(value):
            continue
        if len(value) == 0:
            raise EmptyListBind(name, sql=sql, bind=bind)

        keys = [f"{name}_{index}" for index in range(len(value))]
        for key in keys:
            if key in out_bind:
                raise BindNameConflict(key, sql=sql, bind=bind)

        del out_bind[name]
        out_bind.update(zip(keys, value))

        replacement = ", ".join(placeholder(key) for key in keys)
        out_sql = _token_pattern(placeholder(name)).sub(lambda _match: replacement, out_sql)
        logger.debug("Expanded list bind %r into %d placeholders", name, len(keys))

    return ExpandedQuery(out_sql, out_bind)


def _placeholder_renderer(dialect: Optional[DialectPort]) -> Callable[[str], str]:
    if dialect is None:
        return lambda key: f":{key}"
    if dialect.paramstyle not in NAMED_PARAMSTYLES:
        raise ValueError(
            f"Named binds require a named paramstyle, got: {dialect.paramstyle}"
        )
    return dialect.placeholder


def _token_pattern(token: str) -> re.Pattern[str]:
    # `:id` must not match the head of `:ids`.
    return re.compile(re.escape(token) + r"(?![A-Za-z0-9_])")
