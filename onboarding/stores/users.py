"""Credential store: user lookup and creation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from onboarding.core.errors import ConflictError
from onboarding.models import Role, User


@runtime_checkable
class UserStore(Protocol):
    """Persistence port for user accounts. Email is unique."""

    def create(self, email: str, password_hash: str, role: Role) -> User:
        """Insert a user. Raises ConflictError if the email is taken."""

    def find_by_email(self, email: str) -> User | None:
        """Exact (case-sensitive) email match."""

    def find_by_id(self, user_id: int) -> User | None:
        """Return the user or None."""


class SqlUserStore:
    """UserStore backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, email: str, password_hash: str, role: Role) -> User:
        user = User(email=email, password_hash=password_hash, role=role.value)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email.
            self.db.rollback()
            raise ConflictError("User already exists") from e
        self.db.refresh(user)
        return user

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)
