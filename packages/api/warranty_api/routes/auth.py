# This project was developed with assistance from AI tools.
"""Credential exchange: register, login, refresh, whoami.

Register, login and refresh are public; ``/me`` sits behind the gate.
"""

from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import get_db

from ..middleware.auth import CurrentUser
from ..schemas.auth import LoginRequest, RefreshRequest, RegisterRequest
from ..services import users
from ..services.mapping import map_app_user

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    user = await users.register_user(session, body)
    return {"user": map_app_user(user), **users.issue_tokens(user)}


@router.post("/login")
async def login(
    body: LoginRequest,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    user = await users.authenticate(session, body.email, body.password)
    return {"user": map_app_user(user), **users.issue_tokens(user)}


@router.post("/refresh")
async def refresh(body: RefreshRequest) -> dict[str, Any]:
    return users.refresh_access_token(body.refresh_token)


@router.get("/me")
async def me(user: CurrentUser) -> dict[str, str]:
    """Identity decoded from the presented access token."""
    return {"userId": user.user_id, "email": user.email, "name": user.name}
