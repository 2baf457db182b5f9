"""Application store: the only component that reads or writes application rows."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

from sqlalchemy.orm import Session

from onboarding.models import Application, ApplicationStatus


@runtime_checkable
class ApplicationStore(Protocol):
    """
    Minimal persistence port for applications.

    Implementations return ORM ``Application`` instances; services never cache them.
    """

    def create(
        self,
        first_name: str,
        last_name: str,
        email: str,
        product_type: str,
        user_id: int | None = None,
    ) -> Application:
        """Insert a new application with status ``submitted``."""

    def find_all(self) -> list[Application]:
        """All applications, most recently created first."""

    def find_by_id(self, application_id: int) -> Application | None:
        """Return the application or None."""

    def update_status(
        self, application_id: int, status: ApplicationStatus
    ) -> Application | None:
        """Set status and updated_at; None if no row matches."""

    def delete(self, application_id: int) -> bool:
        """Delete the row; False if it did not exist."""


class SqlApplicationStore:
    """ApplicationStore backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(
        self,
        first_name: str,
        last_name: str,
        email: str,
        product_type: str,
        user_id: int | None = None,
    ) -> Application:
        application = Application(
            user_id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            product_type=product_type,
            status=ApplicationStatus.SUBMITTED.value,
        )
        self.db.add(application)
        self.db.commit()
        self.db.refresh(application)
        return application

    def find_all(self) -> list[Application]:
        return (
            self.db.query(Application)
            .order_by(Application.created_at.desc(), Application.id.desc())
            .all()
        )

    def find_by_id(self, application_id: int) -> Application | None:
        return self.db.get(Application, application_id)

    def update_status(
        self, application_id: int, status: ApplicationStatus
    ) -> Application | None:
        application = self.db.get(Application, application_id)
        if application is None:
            return None
        application.status = status.value
        application.updated_at = datetime.now(UTC)
        self.db.commit()
        self.db.refresh(application)
        return application

    def delete(self, application_id: int) -> bool:
        deleted = (
            self.db.query(Application)
            .filter(Application.id == application_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0
