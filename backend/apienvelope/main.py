from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apienvelope.api.handlers import install_error_handlers
from apienvelope.api.middleware import AuditSink, install_middleware
from apienvelope.api.router import api_router
from apienvelope.core.logging import configure_logging
from apienvelope.core.settings import get_settings


logger = logging.getLogger(__name__)


def create_app(audit_sink: AuditSink | None = None) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_allow_origin],
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["Content-Type", "Authorization", settings.trace_header],
    )
    install_middleware(app, settings, sink=audit_sink)
    install_error_handlers(app)

    app.include_router(api_router)

    logger.info(
        "%s ready (audit_enabled=%s)", settings.app_name, settings.audit_enabled
    )
    return app


app = create_app()
