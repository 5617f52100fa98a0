# This project was developed with assistance from AI tools.
"""Shared fixtures for API tests.

The real app from ``warranty_api.main`` is a module singleton.
``_clean_overrides`` clears dependency_overrides after every test so one
test's mock session never leaks into the next.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from warranty_api.core.config import settings
from warranty_api.main import app as real_app

from .mock_db import TEST_USER, configure_app, make_mock_session


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _auth_enabled(monkeypatch):
    """Run every test with the real gate unless a test overrides it."""
    monkeypatch.setattr(settings, "AUTH_DISABLED", False)


@pytest.fixture
def app():
    """Return the real FastAPI app with all routers mounted."""
    return real_app


@pytest.fixture
def make_client(app):
    """Factory fixture: mock DB session + authenticated user, return TestClient."""

    def _make(session: AsyncMock | None = None, user=TEST_USER) -> TestClient:
        configure_app(app, session if session is not None else make_mock_session(), user)
        return TestClient(app)

    return _make
