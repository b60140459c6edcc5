from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel


class StatusType(str, enum.Enum):
    SUCCESS = "SUCCESS"
    PARTIAL_SUCCESS = "PARTIAL_SUCCESS"
    WARNING = "WARNING"
    INFO = "INFO"
    ERROR = "ERROR"


class Status(BaseModel):
    code: int = 200
    message: str = ""
    description: str = ""

    def __init__(
        self, code: int = 200, message: str = "", description: str = "", **data: Any
    ) -> None:
        # Positional construction: Status(404, "Not found", "...").
        super().__init__(
            code=code, message=str(message), description=str(description), **data
        )


_STATUS_TYPES: dict[int, StatusType] = {
    **{code: StatusType.SUCCESS for code in (200, 201, 202, 203, 204, 205)},
    206: StatusType.PARTIAL_SUCCESS,
    299: StatusType.WARNING,
    **{code: StatusType.INFO for code in (301, 302, 303, 304)},
    **{
        code: StatusType.ERROR
        for code in (400, 401, 403, 404, 405, 409, 412, 428, 500, 501, 503)
    },
}


def status_type_for(code: int) -> StatusType | None:
    return _STATUS_TYPES.get(code)


def create_status_object(status: Status) -> dict[str, Any]:
    """Map a Status to the envelope's ``status`` block.

    Codes outside the fixed table leave ``type`` unset rather than failing.
    """

    out: dict[str, Any] = {}
    status_type = status_type_for(status.code)
    if status_type is not None:
        out["type"] = status_type.value
    out["message"] = status.message
    if status.description:
        out["description"] = status.description
    return out
