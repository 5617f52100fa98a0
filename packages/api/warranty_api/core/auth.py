# This project was developed with assistance from AI tools.
"""Pure auth utility functions with no FastAPI or HTTP dependencies.

Token issuance/verification (PyJWT, HS256) and password hashing (bcrypt).
Used by the request gate in ``middleware/auth.py`` and by the credential
exchange service; neither path touches the database here.
"""

from datetime import UTC, datetime, timedelta

import bcrypt
import jwt

from ..schemas.auth import TokenPayload
from .config import settings
from .errors import AuthError

ACCESS = "access"
REFRESH = "refresh"

# Checked when the email is unknown so login timing does not reveal it
_DUMMY_HASH = bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt()).decode("utf-8")


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        bcrypt.checkpw(password.encode("utf-8"), _DUMMY_HASH.encode("utf-8"))
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def _issue(
    subject: str,
    token_type: str,
    lifetime: timedelta,
    *,
    email: str = "",
    name: str = "",
    now: datetime | None = None,
) -> str:
    issued_at = now or datetime.now(UTC)
    claims = {
        "sub": subject,
        "email": email,
        "name": name,
        "type": token_type,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def create_access_token(
    subject: str, *, email: str = "", name: str = "", now: datetime | None = None
) -> str:
    return _issue(
        subject,
        ACCESS,
        timedelta(minutes=settings.ACCESS_TOKEN_MINUTES),
        email=email,
        name=name,
        now=now,
    )


def create_refresh_token(
    subject: str, *, email: str = "", name: str = "", now: datetime | None = None
) -> str:
    return _issue(
        subject,
        REFRESH,
        timedelta(minutes=settings.REFRESH_TOKEN_MINUTES),
        email=email,
        name=name,
        now=now,
    )


def decode_token(token: str, expected_type: str = ACCESS) -> TokenPayload:
    """Verify signature and expiry and return the claims.

    Raises:
        AuthError: ``token_expired`` when past ``exp``; ``token_invalid`` for
            a bad signature, undecodable token, missing ``sub`` or ``type``,
            or a token of the wrong type.
    """
    try:
        claims = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp", "type"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthError("Token has expired", code="token_expired") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthError("Invalid token", code="token_invalid") from exc

    if claims["type"] != expected_type:
        raise AuthError("Invalid token", code="token_invalid")
    if not claims.get("sub"):
        raise AuthError("Invalid token", code="token_invalid")

    return TokenPayload(**claims)
