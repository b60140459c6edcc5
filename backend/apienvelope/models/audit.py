from __future__ import annotations

import dataclasses
import enum
from typing import Any


class AuditStatus(str, enum.Enum):
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


@dataclasses.dataclass(slots=True)
class AuditRecord:
    """Per-request audit trail, finalized by the audit stage after the response.

    Contract:
    - ``message`` and ``stack_error`` are appended to, never replaced.
    - Owned by a single request; not shared across requests.
    """

    trace_id: str | None = None
    method: str | None = None
    path: str | None = None
    message: str = ""
    stack_error: str = ""
    status: AuditStatus = AuditStatus.PENDING
    status_code: int | None = None

    def append_message(self, text: str) -> None:
        self.message += text

    def append_stack(self, text: str) -> None:
        self.stack_error += text

    def mark_failed(self) -> None:
        self.status = AuditStatus.FAILED

    def as_dict(self) -> dict[str, Any]:
        return {
            "trace_id": self.trace_id,
            "method": self.method,
            "path": self.path,
            "message": self.message,
            "stack_error": self.stack_error,
            "status": self.status.value,
            "status_code": self.status_code,
        }
