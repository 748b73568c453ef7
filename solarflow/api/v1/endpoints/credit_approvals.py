"""Credit approval API: approvals a project can be opened from."""

from typing import Annotated

from fastapi import APIRouter, Depends

from solarflow.api.v1.dependencies import get_project_service
from solarflow.application.use_cases import ProjectService
from solarflow.schemas.project import CreditApprovalResponse

router = APIRouter()


@router.get("", response_model=list[CreditApprovalResponse])
async def list_approved_credit_approvals(
    service: Annotated[ProjectService, Depends(get_project_service)],
):
    approvals = await service.list_approved_credit_approvals()
    return [CreditApprovalResponse.model_validate(a) for a in approvals]
