# This project was developed with assistance from AI tools.
"""App users and the credential exchange behind ``/auth``."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import AppUser

from ..core.auth import (
    REFRESH,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    verify_password,
)
from ..core.config import settings
from ..core.errors import AuthError, ConflictError
from ..schemas.auth import RegisterRequest

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user_by_email(session: AsyncSession, email: str) -> AppUser | None:
    result = await session.execute(
        select(AppUser).where(func.lower(AppUser.email) == _normalize_email(email))
    )
    return result.scalar_one_or_none()


async def register_user(session: AsyncSession, data: RegisterRequest) -> AppUser:
    email = _normalize_email(data.email)
    if await get_user_by_email(session, email) is not None:
        raise ConflictError(f"User {email} already exists", code="duplicate")

    user = AppUser(email=email, name=data.name, password_hash=hash_password(data.password))
    session.add(user)
    await session.commit()
    await session.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return user


async def authenticate(session: AsyncSession, email: str, password: str) -> AppUser:
    """Return the user for valid credentials; raise AuthError otherwise."""
    user = await get_user_by_email(session, email)
    if not verify_password(password, user.password_hash if user else None):
        logger.warning("Failed login attempt")
        raise AuthError("Invalid email or password", code="invalid_credentials")

    user.last_login_at = datetime.now(UTC)
    await session.commit()
    return user


def issue_tokens(user: AppUser) -> dict[str, Any]:
    subject = str(user.id)
    return {
        "accessToken": create_access_token(subject, email=user.email, name=user.name or ""),
        "refreshToken": create_refresh_token(subject, email=user.email, name=user.name or ""),
        "tokenType": "bearer",
        "expiresIn": settings.ACCESS_TOKEN_MINUTES * 60,
    }


def refresh_access_token(refresh_token: str) -> dict[str, Any]:
    """New access token from a valid refresh token. No database access."""
    claims = decode_token(refresh_token, expected_type=REFRESH)
    return {
        "accessToken": create_access_token(claims.sub, email=claims.email, name=claims.name),
        "tokenType": "bearer",
        "expiresIn": settings.ACCESS_TOKEN_MINUTES * 60,
    }
