"""Application service: validation and lifecycle of onboarding applications."""

import logging

from onboarding.core.errors import NotFoundError, ValidationError
from onboarding.core.security import is_valid_email
from onboarding.models import Application, ApplicationStatus
from onboarding.stores import ApplicationStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["firstName", "lastName", "email"]
VALID_STATUSES = [s.value for s in ApplicationStatus]


class ApplicationService:
    """
    Submit, list, fetch and re-status applications.

    Every read goes to the store; nothing is cached between calls.
    """

    def __init__(self, store: ApplicationStore, default_product_type: str = "checking") -> None:
        self.store = store
        self.default_product_type = default_product_type

    def submit(
        self,
        first_name: str | None,
        last_name: str | None,
        email: str | None,
        product_type: str | None = None,
        user_id: int | None = None,
    ) -> Application:
        """
        Create an application with status ``submitted``.

        Raises ValidationError when a required field is missing/empty or the
        email is malformed. The same email may submit any number of times.
        """
        if not first_name or not last_name or not email:
            raise ValidationError("Missing required fields", required=REQUIRED_FIELDS)
        if not is_valid_email(email):
            raise ValidationError("Invalid email format")

        application = self.store.create(
            first_name=first_name,
            last_name=last_name,
            email=email,
            product_type=product_type or self.default_product_type,
            user_id=user_id,
        )
        logger.info(
            "Application submitted: id=%s product_type=%s",
            application.id,
            application.product_type,
        )
        return application

    def list(self) -> list[Application]:
        """All applications, most recent first. Empty list when there are none."""
        return self.store.find_all()

    def get_by_id(self, application_id: int) -> Application:
        application = self.store.find_by_id(application_id)
        if application is None:
            raise NotFoundError("Application not found")
        return application

    def update_status(self, application_id: int, status: str | None) -> Application:
        """
        Move an application to ``status``. Any status may follow any other.

        Raises ValidationError for a missing or unknown status (the stored row is
        left untouched) and NotFoundError when no application has this id.
        """
        if not status:
            raise ValidationError("Status is required")
        try:
            new_status = ApplicationStatus(status)
        except ValueError:
            raise ValidationError("Invalid status", validStatuses=VALID_STATUSES) from None

        application = self.store.update_status(application_id, new_status)
        if application is None:
            raise NotFoundError("Application not found")
        logger.info("Application %s status set to %s", application_id, new_status.value)
        return application
