"""SQLAlchemy ORM models."""

from onboarding.models.application import Application, ApplicationStatus, Document
from onboarding.models.base import Base
from onboarding.models.user import Role, User

__all__ = ["Application", "ApplicationStatus", "Base", "Document", "Role", "User"]
