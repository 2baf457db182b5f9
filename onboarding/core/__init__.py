"""Core app configuration and database."""

from onboarding.core.config import get_settings, settings
from onboarding.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
