#!/usr/bin/env python3
# This project was developed with assistance from AI tools.
"""Live smoke suite for the Roof Warranty API.

Exercises every route group, response shapes, and the error envelope
against a running server instance.

Prerequisites:
  - API server running on localhost:8000
  - Database seeded (python -m warranty_api.seed)

Usage:
  ./scripts/live-tests.py                      # full suite
  ./scripts/live-tests.py --base http://host:8000
  ./scripts/live-tests.py --section pricing    # one section only
"""

import argparse
import asyncio
import sys
import uuid

import httpx

HEADERS = {"Origin": "http://localhost:5173"}

# ---------------------------------------------------------------------------
# Test runner
# ---------------------------------------------------------------------------

PASS = 0
FAIL = 0
ERRORS: list[str] = []
SECTION = ""


def section(name: str):
    global SECTION
    SECTION = name
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}\n")


def ok(name: str, passed: bool, detail: str = ""):
    global PASS, FAIL
    if passed:
        PASS += 1
        print(f"  PASS  {name}")
    else:
        FAIL += 1
        msg = f"[{SECTION}] {name}: {detail}" if detail else f"[{SECTION}] {name}"
        ERRORS.append(msg)
        print(f"  FAIL  {name} -- {detail}")


def has_keys(d: dict, *keys: str) -> bool:
    return all(k in d for k in keys)


def is_envelope(body: dict, status: int) -> bool:
    return has_keys(body, "error", "code", "status", "request_id") and body["status"] == status


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


async def test_health(c: httpx.AsyncClient):
    section("Health")
    r = await c.get("/api/health")
    ok("GET /api/health returns 200", r.status_code == 200, f"got {r.status_code}")
    ok("db connected", r.json().get("db") == "connected")
    ok("request id echoed", bool(r.headers.get("X-Request-ID")))


async def test_auth(c: httpx.AsyncClient) -> str | None:
    section("Auth")
    email = f"smoke-{uuid.uuid4().hex[:8]}@example.com"
    r = await c.post("/api/auth/register", json={"email": email, "password": "smoke-test-pw"})
    ok("register returns 201", r.status_code == 201, f"got {r.status_code}")
    if r.status_code != 201:
        return None
    tokens = r.json()
    ok("register returns token pair", has_keys(tokens, "accessToken", "refreshToken", "user"))
    ok("password hash not exposed", "passwordHash" not in tokens["user"])

    r = await c.post("/api/auth/login", json={"email": email, "password": "wrong-password"})
    ok("wrong password is 401", r.status_code == 401)
    ok("401 uses error envelope", is_envelope(r.json(), 401))

    r = await c.post("/api/auth/refresh", json={"refreshToken": tokens["refreshToken"]})
    ok("refresh returns access token", r.status_code == 200 and "accessToken" in r.json())

    r = await c.get("/api/claims")
    ok("gated route without token is 401", r.status_code == 401, f"got {r.status_code}")
    ok("WWW-Authenticate header set", r.headers.get("WWW-Authenticate") == "Bearer")

    r = await c.get("/api/claims", headers={"Authorization": "Bearer not.a.token"})
    ok("garbage token is 401 token_invalid", r.json().get("code") == "token_invalid")
    return tokens["accessToken"]


async def test_catalog(c: httpx.AsyncClient):
    section("Warranty catalog")
    r = await c.get("/api/warranties")
    ok("GET /api/warranties returns 200", r.status_code == 200)
    entries = r.json()
    ok("catalog not empty", len(entries) > 0)
    ratings = [e["rating"] for e in entries if e["rating"] is not None]
    ok("sorted by rating descending", ratings == sorted(ratings, reverse=True))
    ok("unrated entries last", all(e["rating"] is None for e in entries[len(ratings):]))
    ok("membranes decoded as list", all(isinstance(e["membranes"], list) for e in entries))

    r = await c.get("/api/warranties", params={"membrane": "TPO", "category": "Single-Ply"})
    filtered = r.json()
    ok(
        "membrane + category filter",
        all("TPO" in e["membranes"] and e["category"] == "Single-Ply" for e in filtered),
        f"{len(filtered)} rows",
    )

    r = await c.get("/api/warranties/WT-115")
    ok("GET /api/warranties/WT-115", r.status_code == 200 and r.json().get("id") == "WT-115")
    r = await c.get("/api/warranties/WT-000")
    ok("unknown warranty is 404", r.status_code == 404 and is_envelope(r.json(), 404))


async def test_pricing(c: httpx.AsyncClient):
    section("Pricing")
    r = await c.get("/api/pricing/summary")
    ok("GET /api/pricing/summary returns 200", r.status_code == 200)
    summaries = r.json()
    base = summaries.get("WT-115", {}).get("base") or {}
    ok("WT-115 base summary present", has_keys(base, "count", "min", "max", "mean", "current"))
    ok("amounts are decimal strings", all(isinstance(base.get(k), str) for k in ("min", "mean")))
    ok(
        "min <= mean <= max",
        bool(base) and float(base["min"]) <= float(base["mean"]) <= float(base["max"]),
    )

    r = await c.post(
        "/api/pricing/submissions",
        json={"warrantyId": "WT-142", "feeType": "psf", "amount": "0.0925"},
    )
    ok("create submission returns 201", r.status_code == 201, f"got {r.status_code}")
    if r.status_code == 201:
        sub_id = r.json()["id"]
        r = await c.post(f"/api/pricing/submissions/{sub_id}/withdraw")
        ok("withdraw returns withdrawn", r.json().get("status") == "withdrawn")
        r = await c.post(f"/api/pricing/submissions/{sub_id}/withdraw")
        ok("second withdraw is 409", r.status_code == 409)

    r = await c.post(
        "/api/pricing/submissions",
        json={"warrantyId": "WT-142", "feeType": "psf", "amount": "-1"},
    )
    ok("negative amount is 422", r.status_code == 422 and "fields" in r.json())

    r = await c.get("/api/pricing/external")
    ok("external pricing answers 200 or 503", r.status_code in (200, 503), f"got {r.status_code}")


async def test_accounts(c: httpx.AsyncClient):
    section("Accounts")
    r = await c.get("/api/accounts")
    ok("GET /api/accounts returns 200", r.status_code == 200)
    owners = r.json()
    ok("owners have nested tree", all(has_keys(o, "propertyManagers", "properties") for o in owners))
    roofs = [roof for o in owners for p in o["properties"] for roof in p["roofs"]]
    ok("roofs carry warranty", any(roof.get("warranty") for roof in roofs))


async def test_records(c: httpx.AsyncClient):
    section("Roof history")
    for path in ("/api/access-logs", "/api/invoices", "/api/inspections", "/api/claims"):
        r = await c.get(path, params={"roofId": "r-1a"})
        ok(f"GET {path}?roofId=r-1a", r.status_code == 200 and isinstance(r.json(), list))

    r = await c.get("/api/invoices", params={"flagged": "true"})
    ok("flagged filter", all(inv["flagged"] for inv in r.json()))

    r = await c.post(
        "/api/invoices",
        json={"roofId": "r-1a", "vendor": "Smoke Roofing", "invoiceDate": "2026-01-10", "amount": "10.00"},
    )
    ok("create invoice returns 201", r.status_code == 201)
    if r.status_code == 201:
        inv_id = r.json()["id"]
        r = await c.patch(f"/api/invoices/{inv_id}", json={"status": "paid"})
        ok("review -> paid", r.json().get("status") == "paid")
        r = await c.patch(f"/api/invoices/{inv_id}", json={"status": "warranty"})
        ok("paid -> warranty is 409", r.status_code == 409)

    r = await c.get("/api/claims/cl-1")
    events = r.json().get("events", [])
    ok("claim events in stored order", [e["sortOrder"] for e in events] == list(range(len(events))))


async def test_error_handling(c: httpx.AsyncClient):
    section("Error handling")
    r = await c.get("/api/does-not-exist")
    ok("unknown route is 404 envelope", r.status_code == 404 and is_envelope(r.json(), 404))
    r = await c.post("/api/claims", json={})
    ok("empty body is 422 envelope", r.status_code == 422 and is_envelope(r.json(), 422))
    r = await c.get("/api/claims", headers={"X-Request-ID": "smoke-rid"})
    ok("client request id preserved", r.headers.get("X-Request-ID") == "smoke-rid")


async def test_openapi(c: httpx.AsyncClient):
    section("OpenAPI")
    r = await c.get("/openapi.json")
    ok("GET /openapi.json returns 200", r.status_code == 200)
    paths = r.json().get("paths", {})
    ok("pricing summary documented", "/api/pricing/summary" in paths)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

SECTIONS = {
    "catalog": test_catalog,
    "pricing": test_pricing,
    "accounts": test_accounts,
    "records": test_records,
    "errors": test_error_handling,
    "openapi": test_openapi,
}


async def main():
    parser = argparse.ArgumentParser(description="Live smoke suite for the Roof Warranty API")
    parser.add_argument("--base", default="http://localhost:8000", help="API base URL")
    parser.add_argument("--section", choices=[*SECTIONS, "all"], default="all")
    args = parser.parse_args()

    print("=" * 60)
    print("  LIVE TEST SUITE -- Roof Warranty API")
    print("=" * 60)

    async with httpx.AsyncClient(base_url=args.base, headers=HEADERS, timeout=15) as c:
        try:
            r = await c.get("/api/health")
            if r.status_code != 200:
                print(f"\n  Server returned {r.status_code} on /api/health -- is the database up?")
                sys.exit(2)
        except httpx.ConnectError:
            print(f"\n  Cannot connect to server at {args.base} -- is it running?")
            sys.exit(2)

        await test_health(c)
        token = await test_auth(c)
        if token is None:
            print("\n  No access token; gated sections skipped")
        else:
            c.headers["Authorization"] = f"Bearer {token}"
            for name, run in SECTIONS.items():
                if args.section in (name, "all"):
                    await run(c)

    print(f"\n{'=' * 60}")
    print(f"  RESULTS: {PASS} passed, {FAIL} failed")
    print(f"{'=' * 60}")

    if ERRORS:
        print("\nFailures:")
        for e in ERRORS:
            print(f"  - {e}")

    sys.exit(0 if FAIL == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
