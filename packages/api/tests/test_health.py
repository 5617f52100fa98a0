# This project was developed with assistance from AI tools.
"""Tests for the health probe."""

from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import OperationalError
from warranty_store import get_db_service


def _service(ping_error=None) -> MagicMock:
    service = MagicMock()
    service.ping = AsyncMock(side_effect=ping_error)
    return service


def test_health_ok(make_client, app):
    app.dependency_overrides[get_db_service] = lambda: _service()
    resp = make_client(user=None).get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "db": "connected"}


def test_health_db_down_is_500(make_client, app):
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    app.dependency_overrides[get_db_service] = lambda: _service(error)
    resp = make_client(user=None).get("/api/health")
    assert resp.status_code == 500
    body = resp.json()
    assert body["code"] == "db_unavailable"
    assert body["status"] == 500
