from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from apienvelope.api.handlers import envelope_response
from apienvelope.core.errors import ServerError
from apienvelope.core.messages import ErrorMessage
from apienvelope.core.settings import Settings, get_settings


router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz(request: Request) -> JSONResponse:
    return envelope_response(request, {"status": "ok"})


@router.get("/readyz")
async def readyz(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    # Readiness: the configuration must be usable.
    if not isinstance(logging.getLevelName(settings.log_level.upper()), int):
        raise ServerError(
            503,
            ErrorMessage.SERVICE_UNAVAILABLE_503,
            f"Unknown log level: {settings.log_level}",
        )
    if not settings.trace_header.strip():
        raise ServerError(
            503,
            ErrorMessage.SERVICE_UNAVAILABLE_503,
            "Trace header name is empty",
        )
    return envelope_response(request, {"status": "ready"})
