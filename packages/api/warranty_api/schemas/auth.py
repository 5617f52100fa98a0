# This project was developed with assistance from AI tools.
"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import CamelModel


class UserContext(BaseModel):
    """Injected by the auth gate into every authenticated request."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    email: str = ""
    name: str = ""


class TokenPayload(BaseModel):
    """Decoded JWT claims."""

    sub: str
    email: str = ""
    name: str = ""
    type: str = "access"
    iat: int | None = None
    exp: int


class RegisterRequest(CamelModel):
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=8, max_length=128)
    name: str | None = Field(default=None, max_length=255)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class LoginRequest(CamelModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=128)


class RefreshRequest(CamelModel):
    refresh_token: str = Field(min_length=1)
