"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from onboarding.models import Role


class RegisterRequest(BaseModel):
    """Registration body. Presence and format are checked by AuthService."""

    email: str | None = Field(default=None, description="Email address (login name)")
    password: str | None = Field(default=None, description="Password, at least 8 characters")
    role: str | None = Field(default=None, description="customer (default) or admin")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str | None = Field(default=None, description="Email address")
    password: str | None = Field(default=None, description="Password")


class UserOut(BaseModel):
    """Public view of a user (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: str


class AuthResponse(BaseModel):
    """Returned by register and login."""

    message: str
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    user: UserOut


class CurrentUser(BaseModel):
    """Authenticated caller decoded from the bearer token."""

    id: int
    email: str
    role: Role
