# This project was developed with assistance from AI tools.
"""Route tests for warranty claims and their timelines."""

from datetime import date

from sqlalchemy.dialects import postgresql
from warranty_store import Roof

from .factories import make_claim, make_roof
from .mock_db import make_mock_session, make_result

# Event dates deliberately out of order; stored order wins
CL1_EVENTS = [
    (date(2025, 10, 1), "Claim filed with Versico."),
    (date(2025, 10, 8), "Versico acknowledged receipt."),
    (date(2025, 10, 22), "Versico field rep inspected."),
    (date(2025, 10, 20), "Claim approved."),
    (date(2025, 11, 18), "Repair completed."),
]


def test_get_claim_keeps_stored_event_order(make_client):
    claim = make_claim(events=CL1_EVENTS)
    resp = make_client(make_mock_session(single=claim)).get("/api/claims/cl-1")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "approved"
    assert body["amount"] == "3200.00"
    assert [ev["event"] for ev in body["events"]] == [text for _, text in CL1_EVENTS]
    assert [ev["sortOrder"] for ev in body["events"]] == [0, 1, 2, 3, 4]
    assert body["events"][3]["eventDate"] == "2025-10-20"


def test_get_unknown_claim_is_404(make_client):
    resp = make_client(make_mock_session(single=None)).get("/api/claims/cl-9")
    assert resp.status_code == 404


def test_list_claims_by_roof_and_status(make_client):
    claims = [make_claim("cl-2", roof_id="r-1a", status="in-progress")]
    session = make_mock_session(items=claims)
    resp = make_client(session).get("/api/claims", params={"roofId": "r-1a", "status": "in-progress"})
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()] == ["cl-2"]
    assert resp.json()[0]["events"] == []

    stmt = session.execute.await_args.args[0]
    sql = str(stmt.compile(dialect=postgresql.dialect()))
    assert "claims.roof_id =" in sql
    assert "claims.status =" in sql


def test_create_claim_with_initial_timeline(make_client):
    session = make_mock_session(objects={Roof: {"r-3b": make_roof("r-3b", "prop-3")}})
    resp = make_client(session).post(
        "/api/claims",
        json={
            "roofId": "r-3b",
            "manufacturer": "Versico",
            "filedOn": "2025-10-01",
            "amount": "3200.00",
            "events": [
                {"eventDate": "2025-10-01", "event": "Filed"},
                {"eventDate": "2025-09-28", "event": "Backdated note"},
                {"event": "Undated follow-up"},
            ],
        },
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"].startswith("cl-")
    assert body["status"] == "in-progress"
    assert [ev["event"] for ev in body["events"]] == ["Filed", "Backdated note", "Undated follow-up"]
    assert [ev["sortOrder"] for ev in body["events"]] == [0, 1, 2]
    assert body["events"][2]["eventDate"] is None
    session.commit.assert_awaited_once()


def test_create_claim_for_unknown_roof_is_404(make_client):
    resp = make_client(make_mock_session()).post(
        "/api/claims",
        json={"roofId": "r-404", "manufacturer": "GAF", "filedOn": "2026-01-10"},
    )
    assert resp.status_code == 404


def test_add_event_appends_after_last(make_client):
    session = make_mock_session(results=[make_result(single="cl-1"), make_result(scalar=5)])
    resp = make_client(session).post(
        "/api/claims/cl-1/events", json={"eventDate": "2025-12-01", "event": "Final walkthrough."}
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["claimId"] == "cl-1"
    assert body["sortOrder"] == 5
    assert body["event"] == "Final walkthrough."

    lock_stmt = session.execute.await_args_list[0].args[0]
    assert "FOR UPDATE" in str(lock_stmt.compile(dialect=postgresql.dialect()))


def test_first_event_on_empty_timeline_gets_zero(make_client):
    session = make_mock_session(results=[make_result(single="cl-3"), make_result(scalar=0)])
    resp = make_client(session).post("/api/claims/cl-3/events", json={"event": "Opened."})
    assert resp.status_code == 201
    assert resp.json()["sortOrder"] == 0


def test_add_event_to_unknown_claim_is_404(make_client):
    session = make_mock_session(results=[make_result(single=None)])
    resp = make_client(session).post("/api/claims/cl-9/events", json={"event": "Nope."})
    assert resp.status_code == 404
    session.add.assert_not_called()


def test_add_event_requires_text(make_client):
    resp = make_client().post("/api/claims/cl-1/events", json={"event": ""})
    assert resp.status_code == 422
