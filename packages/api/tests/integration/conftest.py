# This project was developed with assistance from AI tools.
"""Integration test fixtures -- real PostgreSQL, no mocks.

A session-scoped container (started once per test run) provides PostgreSQL;
Alembic migrates it to head. Tests that seed replace the whole demo dataset,
so each one starts from a freshly seeded store.

These tests carry the `integration` marker, which the default run deselects.
Run them with a Docker daemon available:

    pytest -m integration
"""

import os

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer
from warranty_store import DatabaseService

_DB_DIR = os.path.join(os.path.dirname(__file__), "..", "..", "..", "db")


# ---------------------------------------------------------------------------
# Session-scoped: container + migrations
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def pg_container():
    with PostgresContainer(
        image="postgres:16-alpine",
        username="test",
        password="test",
        dbname="test",
    ) as pg:
        yield pg


@pytest.fixture(scope="session")
def db_url(pg_container):
    """Async DB URL for asyncpg."""
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    return f"postgresql+asyncpg://test:test@{host}:{port}/test"


@pytest.fixture(scope="session")
def sync_db_url(pg_container):
    """Sync DB URL for Alembic (psycopg2)."""
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    return f"postgresql://test:test@{host}:{port}/test"


@pytest.fixture(scope="session", autouse=True)
def _run_migrations(sync_db_url):
    from alembic import command
    from alembic.config import Config

    os.environ["DATABASE_URL"] = sync_db_url
    alembic_cfg = Config(os.path.join(_DB_DIR, "alembic.ini"))
    alembic_cfg.set_main_option("script_location", os.path.join(_DB_DIR, "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", sync_db_url)
    command.upgrade(alembic_cfg, "head")


# ---------------------------------------------------------------------------
# Function-scoped: service, seeded store, HTTP client
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_service(db_url):
    service = DatabaseService(engine=create_async_engine(db_url, poolclass=NullPool))
    yield service
    await service.dispose()


@pytest_asyncio.fixture
async def seeded(db_service):
    """Seed the demo dataset; returns the seeder summary."""
    from warranty_api.services.seed.seeder import seed_demo_data

    async with db_service.session() as session:
        return await seed_demo_data(session)


@pytest_asyncio.fixture
async def api_client(db_service):
    """Async client on the real app, the real store, and a fixed caller."""
    from warranty_api.main import app
    from warranty_api.middleware.auth import get_current_user

    from ..mock_db import TEST_USER

    app.state.db_service = db_service
    app.dependency_overrides[get_current_user] = lambda: TEST_USER
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
