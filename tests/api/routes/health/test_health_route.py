"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json

import pytest

from api.routes.health import router as health_router
from api.routes.health.router import health_check, readiness_check
from utils.errors import CodecUnavailableError


@pytest.mark.asyncio
async def test_health_reports_service_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "wecom-test")

    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "wecom-test"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_codec(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _unavailable():
        raise CodecUnavailableError("wecom credentials not configured")

    monkeypatch.setattr(health_router, "get_envelope_codec", _unavailable)

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["codec"] == {
        "status": "failed",
        "error": "wecom credentials not configured",
    }


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_codec_builds(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("WECOM_TOKEN", "QDG6eK")
    monkeypatch.setenv("WECOM_ENCODING_AES_KEY", "jWmYm7qr5nMoAUwZRjGtBxmz3KA1tkAj3ykkR6q2B2C")

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["codec"]["status"] == "ok"
