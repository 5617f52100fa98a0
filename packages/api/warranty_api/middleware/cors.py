# This project was developed with assistance from AI tools.
"""CORS policy wiring.

``strict`` serves CORS headers to ALLOWED_ORIGINS only. ``permissive`` allows
every origin and logs the ones that are not on the list, so a deployment can
see who would break before tightening.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ..core.config import Settings

logger = logging.getLogger(__name__)

_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
_HEADERS = ["Authorization", "Content-Type", "X-Request-ID"]


class UnlistedOriginLoggingMiddleware(BaseHTTPMiddleware):
    """Log requests whose Origin is outside the configured list."""

    def __init__(self, app, allowed_origins: list[str]):
        super().__init__(app)
        self.allowed_origins = set(allowed_origins)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        origin = request.headers.get("origin")
        if origin and origin not in self.allowed_origins:
            logger.warning("CORS: allowing unlisted origin %s (permissive policy)", origin)
        return await call_next(request)


def configure_cors(app: FastAPI, settings: Settings) -> None:
    if settings.CORS_POLICY == "permissive":
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=".*",
            allow_credentials=True,
            allow_methods=_METHODS,
            allow_headers=_HEADERS,
        )
        # Added last so it runs first and sees preflight requests too
        app.add_middleware(
            UnlistedOriginLoggingMiddleware, allowed_origins=settings.ALLOWED_ORIGINS
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=_METHODS,
            allow_headers=_HEADERS,
        )
    logger.info(
        "CORS policy=%s allowed_origins=%s", settings.CORS_POLICY, settings.ALLOWED_ORIGINS
    )
