# This project was developed with assistance from AI tools.
"""
JWT authentication gate.

Verifies the ``Authorization: Bearer <token>`` header with the shared HS256
secret, attaches the identity to ``request.state.user`` and provides the
FastAPI dependencies used by routers. Verification is self-contained: the
gate never touches the database, so it rejects bad credentials even when
the store is down.

Set AUTH_DISABLED=true to bypass validation (tests / local dev).
"""

import logging
from typing import Annotated

from fastapi import Depends, Request

from ..core.auth import ACCESS, decode_token
from ..core.config import settings
from ..core.errors import AuthError
from ..schemas.auth import UserContext

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "Bearer "

_DISABLED_USER = UserContext(
    user_id="dev-user",
    email="dev@roof-warranty.local",
    name="Dev User",
)


def _extract_token(request: Request) -> str:
    """Return the raw token or raise ``auth_required`` / ``auth_malformed``."""
    header = request.headers.get("Authorization")
    if not header:
        raise AuthError("Authentication required", code="auth_required")
    if not header.startswith(_BEARER_PREFIX) or not header[len(_BEARER_PREFIX):].strip():
        raise AuthError("Authorization header must be 'Bearer <token>'", code="auth_malformed")
    return header[len(_BEARER_PREFIX):].strip()


async def get_current_user(request: Request) -> UserContext:
    """FastAPI dependency: validate the bearer token and return UserContext.

    When AUTH_DISABLED=true, returns a dev user without token validation.
    """
    if settings.AUTH_DISABLED:
        request.state.user = _DISABLED_USER
        return _DISABLED_USER

    try:
        token = _extract_token(request)
        payload = decode_token(token, expected_type=ACCESS)
    except AuthError as exc:
        logger.info(
            "Auth rejected: %s %s code=%s", request.method, request.url.path, exc.code
        )
        raise

    user = UserContext(user_id=payload.sub, email=payload.email, name=payload.name)
    request.state.user = user
    return user


# Type alias for use in route signatures
CurrentUser = Annotated[UserContext, Depends(get_current_user)]
