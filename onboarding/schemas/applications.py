"""Request/response schemas for application endpoints (camelCase on the wire)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApplicationCreate(CamelModel):
    """Applicant submission. Required-field checks happen in ApplicationService."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    product_type: str | None = Field(default=None, description="Defaults to 'checking'")


class ApplicationCreated(CamelModel):
    application_id: int
    status: str


class ApplicationOut(CamelModel):
    """Full application record as shown to admins."""

    id: int
    user_id: int | None = None
    first_name: str
    last_name: str
    email: str
    product_type: str
    status: str
    created_at: datetime
    updated_at: datetime


class StatusUpdate(CamelModel):
    status: str | None = Field(
        default=None,
        description="One of submitted, under_review, approved, rejected",
    )


class StatusUpdated(CamelModel):
    id: int
    status: str
    updated_at: datetime
