from __future__ import annotations

import logging
import uuid
from typing import Protocol

from fastapi import FastAPI, Request

from apienvelope.api.handlers import error_response
from apienvelope.core.settings import Settings
from apienvelope.models.audit import AuditRecord, AuditStatus


class AuditSink(Protocol):
    def persist(self, record: AuditRecord) -> None: ...


class LoggingAuditSink:
    """Audit stage: one structured log line per finished request."""

    def __init__(self, logger_name: str = "apienvelope.audit") -> None:
        self._logger = logging.getLogger(logger_name)

    def persist(self, record: AuditRecord) -> None:
        level = logging.WARNING if record.status is AuditStatus.FAILED else logging.INFO
        self._logger.log(
            level,
            "audit trace_id=%s method=%s path=%s status=%s status_code=%s message=%r",
            record.trace_id,
            record.method,
            record.path,
            record.status.value,
            record.status_code,
            record.message,
            extra={"audit": record.as_dict()},
        )


def install_middleware(
    app: FastAPI, settings: Settings, sink: AuditSink | None = None
) -> None:
    audit_sink = sink or LoggingAuditSink()
    trace_header = settings.trace_header

    @app.middleware("http")
    async def _trace_and_audit_middleware(request: Request, call_next):
        trace_id = request.headers.get(trace_header) or str(uuid.uuid4())
        request.state.trace_id = trace_id
        request.state.trace_header = trace_header
        request.state.audit_continue = False
        if settings.audit_enabled:
            request.state.audit = AuditRecord(
                trace_id=trace_id,
                method=request.method,
                path=request.url.path,
            )

        try:
            response = await call_next(request)
        except Exception as exc:
            # Unhandled route errors get the same envelope as registered ones.
            response = error_response(request, exc)

        response.headers[trace_header] = trace_id
        if getattr(request.state, "audit_continue", False):
            audit_sink.persist(request.state.audit)
        return response
