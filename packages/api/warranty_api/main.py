# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from warranty_store import DatabaseService
from warranty_store.config import DatabaseSettings

from . import __version__
from .core.config import settings
from .core.errors import AuthError, ConflictError, StoreError, WarrantyAPIError
from .core.logging import configure_logging
from .middleware.auth import get_current_user
from .middleware.cors import configure_cors
from .middleware.request_id import RequestIDMiddleware, resolve_request_id
from .routes import (
    access_logs,
    accounts,
    auth,
    claims,
    health,
    inspections,
    invoices,
    pricing,
    warranties,
)
from .schemas.error import ErrorResponse, FieldError

logger = logging.getLogger(__name__)

_HTTP_STATUS_CODES: dict[int, str] = {
    400: "bad_request",
    401: "auth_required",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    413: "payload_too_large",
    422: "validation_error",
    500: "internal_error",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown lifecycle."""
    configure_logging(settings.LOG_LEVEL, sql_echo=settings.SQL_ECHO)
    app.state.db_service = DatabaseService(
        settings=DatabaseSettings(DATABASE_URL=settings.DATABASE_URL, SQL_ECHO=settings.SQL_ECHO)
    )
    if settings.AUTH_DISABLED:
        logger.warning("AUTH_DISABLED=true: every request runs as the dev user")
    logger.info(
        "Pricing spreadsheet integration: %s",
        "configured" if settings.SHEETS_API_URL else "disabled",
    )
    yield
    await app.state.db_service.dispose()


def _error_response(
    request: Request,
    status_code: int,
    message: str,
    code: str,
    fields: list[dict] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=message,
        code=code,
        status=status_code,
        request_id=resolve_request_id(request),
        fields=[FieldError(**f) for f in fields] if fields else None,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def warranty_error_handler(request: Request, exc: WarrantyAPIError):
    """Domain errors carry their own status and code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return _error_response(request, exc.status_code, exc.message, exc.code, exc.fields, headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Pydantic validation errors -> 422 with one entry per offending field."""
    fields = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]
    return _error_response(request, 422, "Request validation failed", "validation_error", fields)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    code = _HTTP_STATUS_CODES.get(exc.status_code, "http_error")
    return _error_response(request, exc.status_code, str(exc.detail), code)


async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Constraint violations the services did not pre-check (e.g. a racing insert)."""
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    err = ConflictError("Request conflicts with existing data")
    return _error_response(request, err.status_code, err.message, err.code)


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
    message = str(exc) if settings.EXPOSE_ERROR_DETAIL else "Database operation failed"
    err = StoreError(message)
    return _error_response(request, err.status_code, err.message, err.code)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = resolve_request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    return _error_response(request, 500, "An unexpected error occurred.", "internal_error")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Roof Warranty API",
        description="Roof warranty portfolio, catalog and pricing service",
        version=__version__,
        lifespan=lifespan,
    )

    configure_cors(app, settings)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(WarrantyAPIError, warranty_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    prefix = settings.API_PREFIX
    gated = [Depends(get_current_user)]

    # Public
    app.include_router(health.router, prefix=f"{prefix}/health", tags=["health"])
    app.include_router(auth.router, prefix=f"{prefix}/auth", tags=["auth"])

    # Behind the auth gate
    app.include_router(
        warranties.router, prefix=f"{prefix}/warranties", tags=["warranties"], dependencies=gated
    )
    app.include_router(
        pricing.router, prefix=f"{prefix}/pricing", tags=["pricing"], dependencies=gated
    )
    app.include_router(
        accounts.router, prefix=f"{prefix}/accounts", tags=["accounts"], dependencies=gated
    )
    app.include_router(
        access_logs.router, prefix=f"{prefix}/access-logs", tags=["access-logs"], dependencies=gated
    )
    app.include_router(
        invoices.router, prefix=f"{prefix}/invoices", tags=["invoices"], dependencies=gated
    )
    app.include_router(
        inspections.router, prefix=f"{prefix}/inspections", tags=["inspections"], dependencies=gated
    )
    app.include_router(
        claims.router, prefix=f"{prefix}/claims", tags=["claims"], dependencies=gated
    )

    return app


app = create_app()
