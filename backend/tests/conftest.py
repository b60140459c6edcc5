from __future__ import annotations

from pathlib import Path
import sys
from types import SimpleNamespace
from typing import Callable

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient


# Ensure `import apienvelope.*` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from apienvelope.models.audit import AuditRecord  # noqa: E402


class RecordingAuditSink:
    def __init__(self) -> None:
        self.records: list[AuditRecord] = []

    def persist(self, record: AuditRecord) -> None:
        self.records.append(record)


def _make_request(audit: AuditRecord | None = None) -> SimpleNamespace:
    """Minimal stand-in for a Starlette Request: only ``state`` is read."""

    state = SimpleNamespace()
    if audit is not None:
        state.audit = audit
    return SimpleNamespace(state=state)


@pytest.fixture()
def make_request() -> Callable[..., SimpleNamespace]:
    return _make_request


@pytest.fixture()
def audit_sink() -> RecordingAuditSink:
    return RecordingAuditSink()


@pytest.fixture()
def make_app(
    monkeypatch: pytest.MonkeyPatch, audit_sink: RecordingAuditSink
) -> Callable[..., FastAPI]:
    def _make(router: APIRouter | None = None, **env: str) -> FastAPI:
        monkeypatch.setenv("APIENVELOPE_AUDIT_ENABLED", "true")
        monkeypatch.setenv("APIENVELOPE_LOG_LEVEL", "INFO")
        for key, value in env.items():
            monkeypatch.setenv(f"APIENVELOPE_{key.upper()}", value)

        # Clear settings cache so env overrides apply.
        from apienvelope.core.settings import get_settings

        get_settings.cache_clear()

        from apienvelope.main import create_app

        app = create_app(audit_sink=audit_sink)
        if router is not None:
            app.include_router(router)
        return app

    return _make


@pytest.fixture()
def client(make_app: Callable[..., FastAPI]) -> TestClient:
    return TestClient(make_app())
