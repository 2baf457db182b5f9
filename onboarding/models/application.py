"""ORM models for onboarding applications and their (future) documents."""

import enum
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from onboarding.models.base import Base


class ApplicationStatus(str, enum.Enum):
    """
    Lifecycle status of an application.

    Every status can be set from every other one; no workflow order is enforced.
    """

    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Application(Base):
    """Onboarding request submitted by an applicant."""

    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Informational link to the submitting user, not ownership.
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    product_type = Column(String(100), nullable=False, default="checking")
    status = Column(
        String(50),
        nullable=False,
        default=ApplicationStatus.SUBMITTED.value,
        index=True,
    )
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


class Document(Base):
    """Uploaded supporting document. Schema only; nothing reads or writes it yet."""

    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    application_id = Column(
        Integer,
        ForeignKey("applications.id", ondelete="CASCADE"),
        nullable=True,
    )
    document_type = Column(String(50), nullable=False)
    file_path = Column(String(500), nullable=True)
    uploaded_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
