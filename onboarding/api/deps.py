"""Service providers and access-control dependencies (get_current_user, authorize)."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from onboarding.core.config import settings
from onboarding.core.database import get_db
from onboarding.core.errors import ForbiddenError, UnauthenticatedError
from onboarding.models import Role
from onboarding.schemas.auth import CurrentUser
from onboarding.services.applications import ApplicationService
from onboarding.services.auth import AuthService
from onboarding.stores import SqlApplicationStore, SqlUserStore

# auto_error=False: a missing or non-Bearer header yields None and we raise our own 401.
security = HTTPBearer(auto_error=False)


def get_application_service(
    db: Annotated[Session, Depends(get_db)],
) -> ApplicationService:
    return ApplicationService(
        SqlApplicationStore(db),
        default_product_type=settings.DEFAULT_PRODUCT_TYPE,
    )


def get_auth_service(db: Annotated[Session, Depends(get_db)]) -> AuthService:
    return AuthService(
        SqlUserStore(db),
        allow_admin_registration=settings.ALLOW_ADMIN_SELF_REGISTRATION,
    )


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the caller's identity.

    The identity is also stored on ``request.state.user``.

    Raises UnauthenticatedError when the header is absent or not ``Bearer <token>``,
    InvalidTokenError / TokenExpiredError when the token does not verify.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("No token provided")
    current_user = auth_service.verify_token(credentials.credentials)
    request.state.user = current_user
    return current_user


def authorize(*roles: Role) -> Callable[..., CurrentUser]:
    """
    Build a dependency that lets the request through only for the given roles.

    Usage: ``Depends(authorize(Role.ADMIN))``. Raises ForbiddenError otherwise.
    """
    allowed = frozenset(roles)

    def _check_role(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role not in allowed:
            raise ForbiddenError("Insufficient permissions")
        return current_user

    return _check_role


require_admin = authorize(Role.ADMIN)
