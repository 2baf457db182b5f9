"""Auth service: registration, login and token verification."""

import logging
from dataclasses import dataclass

from onboarding.core.errors import (
    ConflictError,
    InvalidTokenError,
    UnauthorizedError,
    ValidationError,
)
from onboarding.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    create_access_token,
    decode_access_token,
    hash_password,
    is_valid_email,
    verify_password,
)
from onboarding.models import Role, User
from onboarding.schemas.auth import CurrentUser
from onboarding.stores import UserStore

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password so accounts cannot be enumerated.
INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class AuthResult:
    """Token plus the public view of the authenticated user."""

    token: str
    user: User


class AuthService:
    """Register and log in users; issue and verify bearer tokens."""

    def __init__(self, store: UserStore, allow_admin_registration: bool = True) -> None:
        self.store = store
        self.allow_admin_registration = allow_admin_registration

    def register(
        self,
        email: str | None,
        password: str | None,
        role: str | None = None,
    ) -> AuthResult:
        """
        Create a user and return a token for it.

        Raises ValidationError for missing/malformed input and ConflictError
        when the email is already registered. The password is only ever hashed.
        """
        if not email or not password:
            raise ValidationError("Email and password are required")
        if not is_valid_email(email):
            raise ValidationError("Invalid email format")
        if len(password) < PASSWORD_MIN_LEN:
            raise ValidationError(
                f"Password must be at least {PASSWORD_MIN_LEN} characters"
            )
        if len(password) > PASSWORD_MAX_LEN:
            raise ValidationError(
                f"Password must be at most {PASSWORD_MAX_LEN} characters"
            )
        user_role = _parse_role(role)
        if user_role is Role.ADMIN and not self.allow_admin_registration:
            raise ValidationError("Invalid role", validRoles=[Role.CUSTOMER.value])

        if self.store.find_by_email(email) is not None:
            raise ConflictError("User already exists")

        user = self.store.create(
            email=email,
            password_hash=hash_password(password),
            role=user_role,
        )
        logger.info("User registered: id=%s role=%s", user.id, user.role)
        return AuthResult(token=self._issue_token(user), user=user)

    def login(self, email: str | None, password: str | None) -> AuthResult:
        """Verify credentials and return a fresh token."""
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.store.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt for %s", email)
            raise UnauthorizedError(INVALID_CREDENTIALS)
        return AuthResult(token=self._issue_token(user), user=user)

    def verify_token(self, token: str) -> CurrentUser:
        """
        Decode a bearer token into the caller's identity.

        Raises TokenExpiredError for an expired token and InvalidTokenError for
        anything else that does not verify or lacks the expected claims.
        """
        payload = decode_access_token(token)
        try:
            return CurrentUser(
                id=int(payload["sub"]),
                email=payload["email"],
                role=Role(payload["role"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError("Invalid token payload") from e

    @staticmethod
    def _issue_token(user: User) -> str:
        return create_access_token(user_id=user.id, email=user.email, role=user.role)


def _parse_role(role: str | None) -> Role:
    if role is None or role == "":
        return Role.CUSTOMER
    try:
        return Role(role)
    except ValueError:
        raise ValidationError(
            "Invalid role", validRoles=[r.value for r in Role]
        ) from None
