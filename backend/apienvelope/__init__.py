"""Uniform JSON response envelopes and error classification for FastAPI services."""

from __future__ import annotations

from apienvelope.core.errors import ClientError, NoResponseError, ResponseError, ServerError
from apienvelope.core.messages import ErrorMessage
from apienvelope.models import (
    AuditRecord,
    AuditStatus,
    Pagination,
    SortDirection,
    Status,
    StatusType,
    create_status_object,
)
from apienvelope.responses import (
    BufferedResponse,
    ResponseSink,
    build_envelope,
    handle_error,
    send_response,
)

__all__ = [
    "AuditRecord",
    "AuditStatus",
    "BufferedResponse",
    "ClientError",
    "ErrorMessage",
    "NoResponseError",
    "Pagination",
    "ResponseError",
    "ResponseSink",
    "ServerError",
    "SortDirection",
    "Status",
    "StatusType",
    "build_envelope",
    "create_status_object",
    "handle_error",
    "send_response",
]
