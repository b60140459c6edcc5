"""Envelope construction for success payloads and errors.

Every response body has the shape::

    {"data": {...}, "status": {"type": ..., "message": ..., "description"?: ...},
     "pagination"?: {...}}

``send_response`` and ``handle_error`` return ``True`` when the request carries
an audit record and the audit stage should run after the response, ``False``
otherwise.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any, Protocol

from fastapi.responses import JSONResponse

from apienvelope.core.errors import NoResponseError, ResponseError, ServerError
from apienvelope.models.audit import AuditRecord, AuditStatus
from apienvelope.models.pagination import Pagination
from apienvelope.models.status import Status, create_status_object


logger = logging.getLogger(__name__)

AUDIT_MESSAGE_PREFIX = "Message Logged: "


class ResponseSink(Protocol):
    def set_status_code(self, code: int) -> None: ...

    def write_json(self, body: dict[str, Any]) -> None: ...


class BufferedResponse:
    """ResponseSink that keeps the status and body until the host asks for a Response."""

    def __init__(self) -> None:
        self.status_code: int | None = None
        self.body: dict[str, Any] | None = None

    @property
    def written(self) -> bool:
        return self.body is not None

    def set_status_code(self, code: int) -> None:
        self.status_code = code

    def write_json(self, body: dict[str, Any]) -> None:
        if self.body is not None:
            raise RuntimeError("response body already written")
        self.body = body

    def to_response(self, headers: dict[str, str] | None = None) -> JSONResponse:
        if self.body is None:
            raise RuntimeError("response body was never written")
        return JSONResponse(
            status_code=self.status_code or 200,
            content=self.body,
            headers=headers,
        )


def get_audit(request: Any) -> AuditRecord | None:
    state = getattr(request, "state", None)
    audit = getattr(state, "audit", None)
    if isinstance(audit, AuditRecord):
        return audit
    return None


def build_envelope(
    items: Any = None,
    status: Status | None = None,
    pagination: Pagination | None = None,
) -> dict[str, Any]:
    envelope: dict[str, Any] = {"data": items if items is not None else {}}
    if pagination is not None:
        envelope["pagination"] = pagination.to_payload()
    envelope["status"] = create_status_object(status or Status())
    return envelope


def send_response(
    request: Any,
    response: ResponseSink,
    items: Any = None,
    status: Status | None = None,
    pagination: Pagination | None = None,
) -> bool:
    status = status or Status()
    envelope = build_envelope(items, status, pagination)

    response.set_status_code(status.code)
    response.write_json(envelope)

    audit = get_audit(request)
    if audit is None:
        return False
    audit.status_code = status.code
    if audit.status is AuditStatus.PENDING and status.code < 400:
        audit.status = AuditStatus.SUCCESS
    return True


def _format_stack(err: BaseException) -> str:
    return "".join(traceback.format_exception(type(err), err, err.__traceback__))


def handle_error(err: BaseException, request: Any, response: ResponseSink) -> bool:
    """Log ``err`` and, unless it is a NoResponseError, write its error envelope."""

    logger.error(
        "Request failed: %s",
        err,
        exc_info=(type(err), err, err.__traceback__),
    )

    error: ResponseError
    match err:
        case NoResponseError():
            return False
        case ResponseError():
            error = err
        case _:
            # Foreign exception text never reaches the client.
            error = ServerError()

    audit = get_audit(request)
    if audit is not None:
        audit.append_message(AUDIT_MESSAGE_PREFIX + (error.message or error.description))
        audit.append_stack(_format_stack(err))
        audit.mark_failed()

    return send_response(
        request,
        response,
        {},
        Status(error.status or 500, error.message, error.description),
    )
