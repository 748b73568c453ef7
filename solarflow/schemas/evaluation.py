"""Evaluation API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from solarflow.domain.enums import RequiredActionReason


class RequiredActionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    project_id: str
    question_id: str
    reason: RequiredActionReason
    stage_context: str = Field(..., description='Owning stage id, or "derived".')


class EvaluationResultResponse(BaseModel):
    """Derived project state; id lists follow configuration order."""

    model_config = ConfigDict(from_attributes=True)

    is_eligible: bool
    visible_questions: list[str]
    visible_sections: list[str]
    completed_sections: list[str]
    active_stages: list[str]
    required_actions: list[RequiredActionResponse]


class ProjectProgressResponse(BaseModel):
    """Response for GET (preview) and POST (refresh) /projects/{project_id}/evaluation."""

    model_config = ConfigDict(from_attributes=True)

    project_id: str
    result: EvaluationResultResponse
    newly_activated_stages: list[str]
    current_stage_name: str | None = None
    stage_advanced: bool
