"""Project intake API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from solarflow.domain.enums import CreditApprovalStatus
from solarflow.schemas.evaluation import ProjectProgressResponse


class CreateProjectRequest(BaseModel):
    """Request body for POST /projects.

    customer may correct the name and address copied from the credit approval;
    any other keys are stored as customer attributes (readable by rules as
    customer.<key>).
    """

    credit_approval_id: str = Field(..., min_length=1)
    customer: dict[str, Any] = Field(default_factory=dict)


class CreditApprovalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    status: CreditApprovalStatus
    organization_id: str
    approved_amount: float
    customer_name: str
    customer_email: str
    customer_address: str


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    address: str
    organization_id: str
    attributes: dict[str, Any]


class ProjectResponse(BaseModel):
    """Stored project with its cached stage progress."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    credit_approval_id: str
    organization_id: str
    status: str
    active_stages: list[str]
    current_stage_name: str | None = None
    created_at: datetime | None = None
    attributes: dict[str, Any]


class ProjectIntakeResponse(BaseModel):
    """Response for POST /projects: the new records and their first evaluation."""

    model_config = ConfigDict(from_attributes=True)

    project: ProjectResponse
    customer: CustomerResponse
    progress: ProjectProgressResponse
