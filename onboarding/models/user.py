"""ORM model for user accounts (auth and RBAC)."""

import enum
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Integer, String, func

from onboarding.models.base import Base


class Role(str, enum.Enum):
    """Roles a user can hold; embedded in issued tokens."""

    CUSTOMER = "customer"
    ADMIN = "admin"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'customer' or 'admin' (stored as a plain string column)
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default=Role.CUSTOMER.value)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
