"""Submission API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from solarflow.domain.enums import ReviewDecision, SubmissionState
from solarflow.schemas.evaluation import ProjectProgressResponse


class FileReferenceSchema(BaseModel):
    """Uploaded file metadata (the file itself lives in object storage)."""

    model_config = ConfigDict(from_attributes=True)

    storage_path: str = Field(..., min_length=1)
    filename: str = Field(..., min_length=1)
    content_type: str = ""
    size_bytes: int = Field(default=0, ge=0)
    download_url: str = ""


class SubmitAnswerRequest(BaseModel):
    """Request body for PUT /projects/{project_id}/submissions/{question_id}."""

    installer_id: str = Field(..., min_length=1)
    value: str | int | float | bool | None = None
    file: FileReferenceSchema | None = None


class ReviewSubmissionRequest(BaseModel):
    """Request body for POST .../submissions/{question_id}/review."""

    decision: ReviewDecision
    admin_id: str = Field(..., min_length=1)
    feedback: str | None = Field(default=None, max_length=2000)


class SubmissionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    question_id: str
    state: SubmissionState
    value: Any = None
    file: FileReferenceSchema | None = None
    submitted_by: str | None = None
    submitted_at: datetime | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    feedback: str | None = None


class SubmissionOutcomeResponse(BaseModel):
    """The saved submission and the project state recomputed after it."""

    model_config = ConfigDict(from_attributes=True)

    submission: SubmissionResponse
    progress: ProjectProgressResponse
