"""Value objects carried through the response envelope."""

from __future__ import annotations

from apienvelope.models.audit import AuditRecord, AuditStatus
from apienvelope.models.pagination import Pagination, SortDirection
from apienvelope.models.status import Status, StatusType, create_status_object

__all__ = [
    "AuditRecord",
    "AuditStatus",
    "Pagination",
    "SortDirection",
    "Status",
    "StatusType",
    "create_status_object",
]
