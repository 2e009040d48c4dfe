"""Appendable `ORDER BY ... LIMIT ...` fragments for paged listings.

Sort field and direction are inserted verbatim. Validate them against an
allow-list before passing user input here.
"""

from __future__ import annotations

from typing import Optional

from .contracts import DialectPort

SORT_ASCENDING = "ASC"
SORT_DESCENDING = "DESC"


def limit_clause(limit: int, offset: Optional[int] = None) -> str:
    """Render `LIMIT` in the `LIMIT offset, count` form (SQLite, MySQL)."""

    if offset is None:
        return f"LIMIT {limit}"
    return f"LIMIT {offset}, {limit}"


def build_page_limits(
    sort_field: str = "",
    sort_direction: str = SORT_ASCENDING,
    limit: Optional[int] = None,
    page: Optional[int] = None,
    *,
    dialect: Optional[DialectPort] = None,
) -> str:
    """Build an `ORDER BY`/`LIMIT` fragment to append to a `SELECT`.

    Args:
        sort_field: Column to order by. No ordering when empty.
        sort_direction: `ASC` or `DESC`. Empty means ascending.
        limit: Page size. No limit unless positive.
        page: Zero-based page index. Offset is `limit * page` when positive.
        dialect: Dialect that renders the limit clause.

    Returns:
        SQL fragment without leading whitespace, or an empty string.
    """

    parts = []
    if sort_field:
        parts.append(f"ORDER BY {sort_field} {sort_direction or SORT_ASCENDING}")

    if limit is not None and limit > 0:
        offset = limit * page if page is not None and page > 0 else None
        render = dialect.limit_clause if dialect is not None else limit_clause
        parts.append(render(limit, offset))

    return " ".join(parts).lstrip()
