"""Registration and login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from onboarding.api.deps import get_auth_service
from onboarding.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserOut
from onboarding.services.auth import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    """
    Create an account and return a JWT for it.
    Role defaults to customer. 400 on invalid input, 409 if the email is taken.
    """
    result = auth_service.register(body.email, body.password, body.role)
    return AuthResponse(
        message="User registered successfully",
        token=result.token,
        user=UserOut.model_validate(result.user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = auth_service.login(body.email, body.password)
    return AuthResponse(
        message="Login successful",
        token=result.token,
        user=UserOut.model_validate(result.user),
    )
