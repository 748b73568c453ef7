"""Submission API: installer answers and admin reviews.

Every write re-evaluates the project and returns the new progress alongside
the saved submission.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from solarflow.api.v1.dependencies import get_submission_service
from solarflow.application.use_cases import SubmissionService
from solarflow.domain.value_objects import FileReference
from solarflow.schemas.submission import (
    ReviewSubmissionRequest,
    SubmissionOutcomeResponse,
    SubmissionResponse,
    SubmitAnswerRequest,
)

router = APIRouter()

SubmissionServiceDep = Annotated[SubmissionService, Depends(get_submission_service)]


@router.get("/{project_id}/submissions", response_model=list[SubmissionResponse])
async def list_project_submissions(project_id: str, service: SubmissionServiceDep):
    """List the project's answers ordered by question id."""
    submissions = await service.list_for_project(project_id)
    return [SubmissionResponse.model_validate(s) for s in submissions]


@router.put(
    "/{project_id}/submissions/{question_id}",
    response_model=SubmissionOutcomeResponse,
)
async def submit_answer(
    project_id: str,
    question_id: str,
    body: SubmitAnswerRequest,
    service: SubmissionServiceDep,
):
    """Create or overwrite the answer to one question (state becomes submitted)."""
    file = FileReference(**body.file.model_dump()) if body.file else None
    outcome = await service.submit_answer(
        project_id,
        question_id,
        body.installer_id,
        value=body.value,
        file=file,
    )
    return SubmissionOutcomeResponse.model_validate(outcome)


@router.post(
    "/{project_id}/submissions/{question_id}/review",
    response_model=SubmissionOutcomeResponse,
)
async def review_submission(
    project_id: str,
    question_id: str,
    body: ReviewSubmissionRequest,
    service: SubmissionServiceDep,
):
    """Approve or reject a submitted answer; 409 if it is not awaiting review."""
    outcome = await service.review_submission(
        project_id,
        question_id,
        body.decision,
        body.admin_id,
        feedback=body.feedback,
    )
    return SubmissionOutcomeResponse.model_validate(outcome)
