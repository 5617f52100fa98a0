# This project was developed with assistance from AI tools.
"""Async engine, session factory, and request-scoped session dependencies.

The engine is owned by a ``DatabaseService`` instance that the API creates
once at startup (FastAPI lifespan) and disposes on shutdown. Handlers never
reach for a module-level engine; they receive a session through ``get_db``,
which looks the service up on ``request.app.state``.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from starlette.requests import Request

from .config import DatabaseSettings, db_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all store models."""


class DatabaseService:
    """Owns the connection pool and hands out short-lived sessions."""

    def __init__(
        self,
        engine: AsyncEngine | None = None,
        settings: DatabaseSettings | None = None,
    ):
        if engine is None:
            settings = settings or db_settings
            engine = create_async_engine(
                settings.DATABASE_URL,
                echo=settings.SQL_ECHO,
                pool_pre_ping=True,
                pool_size=settings.POOL_SIZE,
                max_overflow=settings.MAX_OVERFLOW,
            )
        self.engine = engine
        self.session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session that is rolled back on error and always closed."""
        session = self.session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def ping(self) -> None:
        """Round-trip ``SELECT 1``. Raises whatever the driver raises."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Database engine disposed")


def get_db_service(request: Request) -> DatabaseService:
    """FastAPI dependency: the service created by the application lifespan."""
    service = getattr(request.app.state, "db_service", None)
    if service is None:
        raise RuntimeError("DatabaseService not initialised; is the app lifespan running?")
    return service


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency: one session per request."""
    service = get_db_service(request)
    async with service.session() as session:
        yield session
