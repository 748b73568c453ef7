"""Cross-project submission listing; state=submitted is the admin review queue."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from solarflow.api.v1.dependencies import get_submission_service
from solarflow.application.use_cases import SubmissionService
from solarflow.domain.enums import SubmissionState
from solarflow.schemas.submission import SubmissionResponse

router = APIRouter()


@router.get("", response_model=list[SubmissionResponse])
async def list_submissions_by_state(
    service: Annotated[SubmissionService, Depends(get_submission_service)],
    state: Annotated[SubmissionState, Query()] = SubmissionState.SUBMITTED,
):
    """List submissions in state across projects, oldest submission first."""
    submissions = await service.list_by_state(state)
    return [SubmissionResponse.model_validate(s) for s in submissions]
