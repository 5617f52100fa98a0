# This project was developed with assistance from AI tools.
"""Route tests for roof history records: access logs, invoices, inspections."""

import pytest
from warranty_store import AccessLog, Invoice, InvoiceStatus, Roof

from .factories import make_access_log, make_inspection, make_invoice, make_roof
from .mock_db import make_mock_session


def _with_roof(extra=None):
    return make_mock_session(objects={Roof: {"r-1a": make_roof()}, **(extra or {})})


# ---------------------------------------------------------------------------
# Access logs
# ---------------------------------------------------------------------------


def test_list_access_logs(make_client):
    logs = [make_access_log("al-3"), make_access_log("al-1")]
    resp = make_client(make_mock_session(items=logs)).get("/api/access-logs", params={"roofId": "r-1a"})
    assert resp.status_code == 200
    body = resp.json()
    assert [log["id"] for log in body] == ["al-3", "al-1"]
    assert body[0]["accessedAt"].startswith("2025-12-08T09:30:00")
    assert body[0]["roofId"] == "r-1a"


def test_create_access_log(make_client):
    session = _with_roof()
    resp = make_client(session).post(
        "/api/access-logs",
        json={
            "roofId": "r-1a",
            "person": "Dana Ruiz",
            "company": "Summit Solar",
            "purpose": "Panel survey",
            "accessedAt": "2026-02-03T10:00:00Z",
            "duration": "1 hr",
        },
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"].startswith("al-")
    assert body["person"] == "Dana Ruiz"
    assert body["accessedAt"].startswith("2026-02-03T10:00:00")
    session.commit.assert_awaited_once()


def test_create_access_log_unknown_roof_is_404(make_client):
    resp = make_client(make_mock_session()).post(
        "/api/access-logs",
        json={"roofId": "r-404", "person": "Dana", "accessedAt": "2026-02-03T10:00:00Z"},
    )
    assert resp.status_code == 404
    assert "r-404" in resp.json()["error"]


def test_create_access_log_duplicate_id_is_409(make_client):
    session = _with_roof({AccessLog: {"al-1": make_access_log()}})
    resp = make_client(session).post(
        "/api/access-logs",
        json={"id": "al-1", "roofId": "r-1a", "person": "Dana", "accessedAt": "2026-02-03T10:00:00Z"},
    )
    assert resp.status_code == 409


# ---------------------------------------------------------------------------
# Invoices
# ---------------------------------------------------------------------------


def test_list_invoices_with_filters(make_client):
    resp = make_client(make_mock_session(items=[make_invoice()])).get(
        "/api/invoices", params={"roofId": "r-1a", "flagged": "true", "status": "review"}
    )
    assert resp.status_code == 200
    [invoice] = resp.json()
    assert invoice["amount"] == "4200.00"
    assert invoice["flagged"] is True
    assert invoice["flagReason"].startswith("Seam separation")
    assert invoice["status"] == "review"


def test_list_invoices_rejects_unknown_status(make_client):
    resp = make_client().get("/api/invoices", params={"status": "void"})
    assert resp.status_code == 422


def test_create_invoice_defaults_to_review(make_client):
    session = _with_roof()
    resp = make_client(session).post(
        "/api/invoices",
        json={"roofId": "r-1a", "vendor": "Acme Roofing", "invoiceDate": "2026-01-10", "amount": "950.00"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "review"
    assert body["flagged"] is False
    assert body["amount"] == "950.00"
    assert body["invoiceDate"] == "2026-01-10"


def test_create_invoice_rejects_negative_amount(make_client):
    resp = make_client(_with_roof()).post(
        "/api/invoices",
        json={"roofId": "r-1a", "vendor": "Acme", "invoiceDate": "2026-01-10", "amount": "-5"},
    )
    assert resp.status_code == 422


@pytest.mark.parametrize("target", ["paid", "warranty"])
def test_settle_invoice_under_review(make_client, target):
    invoice = make_invoice()
    session = make_mock_session(objects={Invoice: {"inv-1": invoice}})
    resp = make_client(session).patch("/api/invoices/inv-1", json={"status": target})
    assert resp.status_code == 200
    assert resp.json()["status"] == target
    assert invoice.status == InvoiceStatus(target)
    session.commit.assert_awaited_once()


@pytest.mark.parametrize(
    ("current", "target"),
    [("paid", "review"), ("paid", "warranty"), ("warranty", "paid"), ("review", "review")],
)
def test_invalid_invoice_transition_is_409(make_client, current, target):
    invoice = make_invoice(status=InvoiceStatus(current))
    session = make_mock_session(objects={Invoice: {"inv-1": invoice}})
    resp = make_client(session).patch("/api/invoices/inv-1", json={"status": target})
    assert resp.status_code == 409
    assert resp.json()["code"] == "invalid_transition"
    assert invoice.status == InvoiceStatus(current)
    session.commit.assert_not_awaited()


def test_settle_unknown_invoice_is_404(make_client):
    resp = make_client(make_mock_session()).patch("/api/invoices/inv-9", json={"status": "paid"})
    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Inspections
# ---------------------------------------------------------------------------


def test_list_inspections(make_client):
    resp = make_client(make_mock_session(items=[make_inspection()])).get(
        "/api/inspections", params={"status": "completed"}
    )
    assert resp.status_code == 200
    [inspection] = resp.json()
    assert inspection["score"] == 87
    assert inspection["moistureData"] is True
    assert inspection["inspectionType"] == "Biannual + MRI Scan"


def test_create_scheduled_inspection(make_client):
    session = _with_roof()
    resp = make_client(session).post(
        "/api/inspections",
        json={"roofId": "r-1a", "inspectionDate": "2026-06-15", "status": "scheduled"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"].startswith("insp-")
    assert body["score"] is None
    assert body["photos"] == 0


def test_inspection_score_is_bounded(make_client):
    resp = make_client(_with_roof()).post(
        "/api/inspections",
        json={"roofId": "r-1a", "inspectionDate": "2025-12-10", "status": "completed", "score": 140},
    )
    assert resp.status_code == 422
    assert any(f["field"] == "body.score" for f in resp.json()["fields"])
