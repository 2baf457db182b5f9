"""Public submission endpoint and the admin application views."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from onboarding.api.deps import get_application_service, require_admin
from onboarding.schemas.applications import (
    ApplicationCreate,
    ApplicationCreated,
    ApplicationOut,
    StatusUpdate,
    StatusUpdated,
)
from onboarding.services.applications import ApplicationService

router = APIRouter()
admin_router = APIRouter(dependencies=[Depends(require_admin)])


@router.post("", response_model=ApplicationCreated, status_code=status.HTTP_201_CREATED)
def submit_application(
    body: ApplicationCreate,
    service: Annotated[ApplicationService, Depends(get_application_service)],
) -> ApplicationCreated:
    """Submit an onboarding application. No authentication required."""
    application = service.submit(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        product_type=body.product_type,
    )
    return ApplicationCreated(application_id=application.id, status=application.status)


@admin_router.get("", response_model=list[ApplicationOut])
def list_applications(
    service: Annotated[ApplicationService, Depends(get_application_service)],
) -> list[ApplicationOut]:
    """All applications, most recent first (admin only)."""
    return [ApplicationOut.model_validate(a) for a in service.list()]


@admin_router.get("/{application_id}", response_model=ApplicationOut)
def get_application(
    application_id: int,
    service: Annotated[ApplicationService, Depends(get_application_service)],
) -> ApplicationOut:
    return ApplicationOut.model_validate(service.get_by_id(application_id))


@admin_router.put("/{application_id}/status", response_model=StatusUpdated)
def update_application_status(
    application_id: int,
    body: StatusUpdate,
    service: Annotated[ApplicationService, Depends(get_application_service)],
) -> StatusUpdated:
    """
    Set an application's status (submitted, under_review, approved, rejected).

    Any status may be set from any other; 400 for an unknown status, 404 for an unknown id.
    """
    application = service.update_status(application_id, body.status)
    return StatusUpdated(
        id=application.id,
        status=application.status,
        updated_at=application.updated_at,
    )
