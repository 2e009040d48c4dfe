"""Base class for hand-written SQL repositories."""

from __future__ import annotations

from typing import Optional

from .contracts import DriverPort
from .pagination import SORT_ASCENDING
from .types import BindParams, ExecutionResult, MaybeRow, Rows


class Repository:
    """Repository backed by a `DriverPort` implementation.

    Subclasses write their own SQL and run it through the protected helpers.
    """

    def __init__(self, driver: DriverPort):
        self.driver = driver

    def _fetch(self, sql: str, bind: Optional[BindParams] = None) -> Rows:
        return self.driver.simple_fetch(sql, bind)

    def _fetch_one(self, sql: str, bind: Optional[BindParams] = None) -> MaybeRow:
        return self.driver.simple_fetch_one(sql, bind)

    def _execute(self, sql: str, bind: Optional[BindParams] = None) -> ExecutionResult:
        return self.driver.simple_execute(sql, bind)

    def _page(
        self,
        sort_field: str = "",
        sort_direction: str = SORT_ASCENDING,
        limit: Optional[int] = None,
        page: Optional[int] = None,
    ) -> str:
        return self.driver.build_page_limits(sort_field, sort_direction, limit, page)
