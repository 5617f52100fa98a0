# This project was developed with assistance from AI tools.
"""Per-request correlation id.

Accepts an incoming ``X-Request-ID`` header or generates a UUID4, stores it
in a ContextVar so log records and error bodies can pick it up, and echoes
it back on the response.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


def resolve_request_id(request: Request) -> str:
    """Request id for error bodies: context value, then header, then a fresh UUID."""
    return (
        get_request_id()
        or request.headers.get(REQUEST_ID_HEADER)
        or str(uuid.uuid4())
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = _request_id_ctx.set(rid)
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            _request_id_ctx.reset(token)
