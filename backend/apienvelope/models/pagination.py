from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, Field


class SortDirection(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


class Pagination(BaseModel):
    sort_column: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    total: int = Field(default=1, ge=0)
    page_size: int = Field(default=10, ge=1)
    page_index: int = Field(default=1, ge=1)

    # None means "unknown"; it is distinct from False and is omitted on the wire.
    has_more: bool | None = None
    next_token: str | None = None
    execution_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "total": self.total,
            "sort": {
                "column": self.sort_column,
                "direction": self.sort_direction.value,
            },
            "pageSize": self.page_size,
            "pageIndex": self.page_index,
            "nextToken": self.next_token,
            "executionId": self.execution_id,
        }
        if self.has_more is not None:
            payload["hasMore"] = self.has_more
        return payload
