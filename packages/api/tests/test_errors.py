# This project was developed with assistance from AI tools.
"""Tests for the error envelope and request correlation ids."""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from warranty_store import Roof

from warranty_api.core.config import settings
from warranty_api.core.errors import (
    ConflictError,
    IntegrationUnavailableError,
    NotFoundError,
    ValidationError,
    WarrantyAPIError,
)

from .factories import make_roof
from .mock_db import TEST_USER, configure_app, make_mock_session

_INVOICE = {
    "roofId": "r-1a",
    "vendor": "Acme Roofing",
    "invoiceDate": "2026-01-10",
    "amount": "950.00",
}


def test_error_hierarchy_status_codes():
    assert ValidationError("x").status_code == 422
    assert NotFoundError("Roof", "r-9").status_code == 404
    assert ConflictError("x").status_code == 409
    assert IntegrationUnavailableError("x").status_code == 503
    assert isinstance(NotFoundError("Roof", "r-9"), WarrantyAPIError)
    assert ConflictError("x", code="duplicate").code == "duplicate"


def test_request_id_echoed_in_body_and_header(make_client):
    resp = make_client(make_mock_session()).get(
        "/api/warranties/WT-404", headers={"X-Request-ID": "req-123"}
    )
    assert resp.status_code == 404
    assert resp.json()["request_id"] == "req-123"
    assert resp.headers["X-Request-ID"] == "req-123"


def test_request_id_generated_when_absent(make_client):
    resp = make_client(make_mock_session(items=[])).get("/api/claims")
    assert resp.status_code == 200
    assert resp.headers["X-Request-ID"]


def test_body_validation_lists_fields(make_client):
    resp = make_client(make_mock_session()).post("/api/invoices", json={"vendor": "Acme"})
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "validation_error"
    fields = {f["field"] for f in body["fields"]}
    assert "body.roofId" in fields
    assert "body.invoiceDate" in fields


def test_unknown_route_uses_envelope(make_client):
    resp = make_client().get("/api/nothing-here")
    assert resp.status_code == 404
    body = resp.json()
    assert body["code"] == "not_found"
    assert body["status"] == 404


def test_integrity_error_maps_to_conflict(make_client):
    session = make_mock_session(objects={Roof: {"r-1a": make_roof()}})
    session.commit = AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("duplicate key")))
    resp = make_client(session).post("/api/invoices", json=_INVOICE)
    assert resp.status_code == 409
    assert resp.json()["code"] == "conflict"


def test_store_error_hides_detail_by_default(make_client, monkeypatch):
    monkeypatch.setattr(settings, "EXPOSE_ERROR_DETAIL", False)
    session = make_mock_session()
    session.execute = AsyncMock(side_effect=SQLAlchemyError("password=hunter2 connection reset"))
    resp = make_client(session).get("/api/invoices")
    assert resp.status_code == 500
    body = resp.json()
    assert body["code"] == "store_error"
    assert "hunter2" not in body["error"]


def test_store_error_detail_when_enabled(make_client, monkeypatch):
    monkeypatch.setattr(settings, "EXPOSE_ERROR_DETAIL", True)
    session = make_mock_session()
    session.execute = AsyncMock(side_effect=SQLAlchemyError("connection reset"))
    resp = make_client(session).get("/api/invoices")
    assert resp.status_code == 500
    assert "connection reset" in resp.json()["error"]


def test_unhandled_exception_is_generic_500(app):
    session = make_mock_session()
    session.execute = AsyncMock(side_effect=RuntimeError("boom"))
    configure_app(app, session, TEST_USER)
    client = TestClient(app, raise_server_exceptions=False)
    resp = client.get("/api/claims")
    assert resp.status_code == 500
    body = resp.json()
    assert body["code"] == "internal_error"
    assert "boom" not in body["error"]
