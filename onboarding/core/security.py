"""Password hashing and JWT creation/verification for authentication."""

import re
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from onboarding.core.config import settings
from onboarding.core.errors import InvalidTokenError, TokenExpiredError

# Simple local@domain.tld shape; no whitespace (a trailing newline included) and exactly one '@'.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Min/max lengths for password validation. bcrypt only reads the first 72 bytes.
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    email: str,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token carrying userId, email, role, iat and exp."""
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "userId": user_id,
        "email": email,
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, userId, email, role, exp, iat).

    Raises TokenExpiredError when exp has passed and InvalidTokenError for
    any other signature or structure problem.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError() from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e
