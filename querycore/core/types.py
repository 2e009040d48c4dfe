"""Shared core types used across contracts, binds, and ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

Scalar = Any
BindValue = Union[Scalar, Sequence[Scalar]]
BindParams = Mapping[str, BindValue]
NamedParams = Dict[str, Scalar]

Row = Dict[str, Any]
Rows = List[Row]
MaybeRow = Optional[Row]


@dataclass(frozen=True)
class ExecutionResult:
    """Summary of a write statement.

    Attributes:
        last_insert_id: Row id reported by the driver, `0` when it has none.
        row_count: Affected rows as reported by the cursor (`-1` if unknown).
    """

    last_insert_id: int
    row_count: int
