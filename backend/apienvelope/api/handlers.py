from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from apienvelope.core.errors import ClientError, ResponseError, ServerError
from apienvelope.core.messages import ErrorMessage, default_message
from apienvelope.models.pagination import Pagination
from apienvelope.models.status import Status
from apienvelope.responses import BufferedResponse, handle_error, send_response


def _with_trace_id_header(
    request: Request, headers: dict[str, str] | None = None
) -> dict[str, str] | None:
    """Return headers merged with the trace id header when one was assigned."""

    trace_id = getattr(request.state, "trace_id", None)
    header = getattr(request.state, "trace_header", None) or "X-Trace-Id"
    if not trace_id:
        return headers
    merged: dict[str, str] = dict(headers or {})
    merged[header] = trace_id
    return merged


def envelope_response(
    request: Request,
    items: Any = None,
    status: Status | None = None,
    pagination: Pagination | None = None,
) -> JSONResponse:
    """Success path for route handlers: wrap ``items`` in the standard envelope."""

    sink = BufferedResponse()
    request.state.audit_continue = send_response(request, sink, items, status, pagination)
    return sink.to_response(headers=_with_trace_id_header(request))


def error_response(
    request: Request, exc: BaseException, headers: dict[str, str] | None = None
) -> Response:
    sink = BufferedResponse()
    request.state.audit_continue = handle_error(exc, request, sink)
    merged = _with_trace_id_header(request, headers)
    if not sink.written:
        # NoResponseError: the host still needs a Response object, so send no body.
        return Response(status_code=getattr(exc, "status", 500), headers=merged)
    return sink.to_response(headers=merged)


def _from_http_exception(exc: StarletteHTTPException) -> ResponseError:
    code = exc.status_code
    if 400 <= code < 500:
        message = exc.detail if isinstance(exc.detail, str) else default_message(code)
        error: ResponseError = ClientError(code, message)
    else:
        error = ServerError(code, default_message(code))
    error.__cause__ = exc
    return error


def _from_validation_error(exc: RequestValidationError) -> ClientError:
    messages = "; ".join(err.get("msg", "validation error") for err in exc.errors())
    error = ClientError(400, ErrorMessage.BAD_REQUEST_400, messages)
    error.__cause__ = exc
    return error


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ResponseError)
    async def _response_error_handler(request: Request, exc: ResponseError) -> Response:
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> Response:
        return error_response(request, _from_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
        return error_response(request, _from_http_exception(exc), headers=exc.headers)

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> Response:
        # Only reached when the audit middleware is not installed.
        return error_response(request, exc)
