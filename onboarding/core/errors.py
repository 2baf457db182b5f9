"""
Typed failures raised by services and access-control dependencies.

Every failure carries the HTTP status it maps to; ``onboarding.main`` is the
single place that turns them into responses.
"""

from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse


class OnboardingError(Exception):
    """Base class for all client-facing failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, **details: Any) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Response body: ``{"error": message}`` plus any extra details."""
        return {"error": self.message, **self.details}


class ValidationError(OnboardingError):
    """Missing or malformed input; always correctable by the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(OnboardingError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class NotFoundError(OnboardingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ForbiddenError(OnboardingError):
    """Identity is valid but the role is not allowed."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Insufficient permissions"


class AuthError(OnboardingError):
    """401 family. Responses carry a ``WWW-Authenticate: Bearer`` header."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication failed"


class UnauthorizedError(AuthError):
    """Bad credentials at login."""

    default_message = "Invalid credentials"


class UnauthenticatedError(AuthError):
    """No bearer token on a protected route."""

    default_message = "No token provided"


class InvalidTokenError(AuthError):
    """Token signature or structure is invalid."""

    default_message = "Invalid token"


class TokenExpiredError(AuthError):
    default_message = "Token expired"


async def onboarding_error_handler(request: Request, exc: OnboardingError) -> JSONResponse:
    """Convert an OnboardingError into its JSON response."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=headers,
    )
