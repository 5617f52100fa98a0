# This project was developed with assistance from AI tools.
"""Route tests for the account tree (owners, managers, properties, roofs, warranties)."""

from warranty_store import Owner, Property, PropertyManager, Roof, RoofWarranty

from .factories import make_owner_tree, make_roof
from .mock_db import make_mock_session, make_result

_WARRANTY = {
    "manufacturer": "Carlisle",
    "warrantyType": "Golden Seal",
    "startDate": "2026-02-01",
    "endDate": "2046-02-01",
    "requirements": ["Annual inspection"],
}


def test_list_accounts_returns_nested_tree(make_client):
    client = make_client(make_mock_session(items=[make_owner_tree()]))
    resp = client.get("/api/accounts")
    assert resp.status_code == 200
    [owner] = resp.json()
    assert owner["id"] == "own-1"
    assert [pm["id"] for pm in owner["propertyManagers"]] == ["pm-1"]
    [prop] = owner["properties"]
    assert prop["managedBy"] == "pm-1"
    [roof] = prop["roofs"]
    assert roof["sqFt"] == 22000
    assert roof["warranty"]["manufacturer"] == "GAF"
    assert roof["warranty"]["compliance"] == "current"
    assert roof["warranty"]["requirements"] == ["Biannual inspection by certified contractor"]


def test_get_account(make_client):
    client = make_client(make_mock_session(single=make_owner_tree()))
    resp = client.get("/api/accounts/own-1")
    assert resp.status_code == 200
    assert resp.json()["properties"][0]["id"] == "prop-1"


def test_get_unknown_account_is_404(make_client):
    resp = make_client(make_mock_session(single=None)).get("/api/accounts/own-9")
    assert resp.status_code == 404
    assert resp.json()["code"] == "not_found"


def test_create_owner_generates_id(make_client):
    session = make_mock_session()
    resp = make_client(session).post("/api/accounts", json={"name": "Harbor Point LLC"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"].startswith("own-")
    assert body["name"] == "Harbor Point LLC"
    session.commit.assert_awaited_once()


def test_create_owner_duplicate_id_is_409(make_client):
    session = make_mock_session(objects={Owner: {"own-1": Owner(id="own-1", name="Existing")}})
    resp = make_client(session).post("/api/accounts", json={"id": "own-1", "name": "Again"})
    assert resp.status_code == 409
    assert resp.json()["code"] == "duplicate"


def test_create_owner_rejects_blank_name(make_client):
    resp = make_client().post("/api/accounts", json={"name": ""})
    assert resp.status_code == 422


def test_create_manager_for_unknown_owner_is_404(make_client):
    resp = make_client(make_mock_session()).post(
        "/api/accounts/own-9/managers", json={"name": "Keystone"}
    )
    assert resp.status_code == 404


def test_create_manager(make_client):
    session = make_mock_session(objects={Owner: {"own-1": Owner(id="own-1", name="VCP")}})
    resp = make_client(session).post(
        "/api/accounts/own-1/managers", json={"id": "pm-9", "name": "Keystone", "phone": "615-555-0100"}
    )
    assert resp.status_code == 201
    assert resp.json() == {
        "id": "pm-9",
        "ownerId": "own-1",
        "name": "Keystone",
        "contact": None,
        "email": None,
        "phone": "615-555-0100",
        "notes": None,
    }


def test_create_property_with_foreign_manager_is_422(make_client):
    session = make_mock_session(
        objects={
            Owner: {"own-1": Owner(id="own-1", name="VCP")},
            PropertyManager: {"pm-2": PropertyManager(id="pm-2", owner_id="own-2", name="Other")},
        }
    )
    resp = make_client(session).post(
        "/api/accounts/own-1/properties", json={"name": "Depot", "managedBy": "pm-2"}
    )
    assert resp.status_code == 422
    assert resp.json()["fields"][0]["field"] == "managedBy"
    session.add.assert_not_called()


def test_create_property_with_own_manager(make_client):
    session = make_mock_session(
        objects={
            Owner: {"own-1": Owner(id="own-1", name="VCP")},
            PropertyManager: {"pm-1": PropertyManager(id="pm-1", owner_id="own-1", name="Cornerstone")},
        }
    )
    resp = make_client(session).post(
        "/api/accounts/own-1/properties",
        json={"id": "prop-9", "name": "Depot", "address": "1 Rail Way", "managedBy": "pm-1"},
    )
    assert resp.status_code == 201
    assert resp.json()["managedBy"] == "pm-1"
    assert resp.json()["ownerId"] == "own-1"


def test_create_roof_with_warranty(make_client):
    session = make_mock_session(
        objects={Property: {"prop-1": Property(id="prop-1", owner_id="own-1", name="Riverside")}}
    )
    resp = make_client(session).post(
        "/api/accounts/properties/prop-1/roofs",
        json={"id": "r-9", "section": "Annex", "sqFt": 8000, "membraneType": "EPDM", "warranty": _WARRANTY},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] == "r-9"
    assert body["propertyId"] == "prop-1"
    assert body["warranty"]["roofId"] == "r-9"
    # No inspection history yet
    assert body["warranty"]["compliance"] == "at-risk"
    assert session.add.call_count == 2
    session.commit.assert_awaited_once()


def test_create_roof_without_warranty(make_client):
    session = make_mock_session(
        objects={Property: {"prop-1": Property(id="prop-1", owner_id="own-1", name="Riverside")}}
    )
    resp = make_client(session).post("/api/accounts/properties/prop-1/roofs", json={"section": "Annex"})
    assert resp.status_code == 201
    assert resp.json()["warranty"] is None
    assert resp.json()["id"].startswith("r-")


def test_warranty_end_must_follow_start(make_client):
    resp = make_client().post(
        "/api/accounts/roofs/r-1a/warranty",
        json={**_WARRANTY, "endDate": "2026-01-01"},
    )
    assert resp.status_code == 422
    assert resp.json()["code"] == "validation_error"


def test_second_warranty_on_roof_is_409(make_client):
    session = make_mock_session(
        results=[make_result(single=1)],
        objects={Roof: {"r-1a": make_roof()}},
    )
    resp = make_client(session).post("/api/accounts/roofs/r-1a/warranty", json=_WARRANTY)
    assert resp.status_code == 409
    session.add.assert_not_called()


def test_attach_warranty_with_explicit_compliance(make_client):
    session = make_mock_session(
        results=[make_result(single=None)],
        objects={Roof: {"r-2a": make_roof("r-2a", warranty=False)}},
    )
    resp = make_client(session).post(
        "/api/accounts/roofs/r-2a/warranty", json={**_WARRANTY, "compliance": "current"}
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["compliance"] == "current"
    assert body["roofId"] == "r-2a"
    added = session.add.call_args.args[0]
    assert isinstance(added, RoofWarranty)
