"""Persistence collaborators for users and applications."""

from onboarding.stores.applications import ApplicationStore, SqlApplicationStore
from onboarding.stores.users import SqlUserStore, UserStore

__all__ = ["ApplicationStore", "SqlApplicationStore", "SqlUserStore", "UserStore"]
