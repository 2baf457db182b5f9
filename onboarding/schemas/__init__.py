"""Pydantic request/response schemas."""

from onboarding.schemas.applications import (
    ApplicationCreate,
    ApplicationCreated,
    ApplicationOut,
    StatusUpdate,
    StatusUpdated,
)
from onboarding.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    UserOut,
)
from onboarding.schemas.health import HealthResponse

__all__ = [
    "ApplicationCreate",
    "ApplicationCreated",
    "ApplicationOut",
    "AuthResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "RegisterRequest",
    "StatusUpdate",
    "StatusUpdated",
    "UserOut",
]
