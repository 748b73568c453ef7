"""Evaluation API: stored-project evaluation and the context debugger."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from solarflow.api.v1.dependencies import get_evaluate_project_use_case
from solarflow.application.services import evaluate
from solarflow.application.use_cases import EvaluateProjectUseCase
from solarflow.infrastructure.serialization import context_from_dict, result_to_dict
from solarflow.schemas.evaluation import EvaluationResultResponse, ProjectProgressResponse

router = APIRouter()

EvaluateProjectDep = Annotated[EvaluateProjectUseCase, Depends(get_evaluate_project_use_case)]


@router.get("/projects/{project_id}/evaluation", response_model=ProjectProgressResponse)
async def preview_project_evaluation(project_id: str, use_case: EvaluateProjectDep):
    """Evaluate the stored project without writing anything back."""
    progress = await use_case.execute(project_id, persist=False)
    return ProjectProgressResponse.model_validate(progress)


@router.post("/projects/{project_id}/evaluation", response_model=ProjectProgressResponse)
async def refresh_project_evaluation(project_id: str, use_case: EvaluateProjectDep):
    """Evaluate the stored project and refresh its cached active stages."""
    progress = await use_case.execute(project_id)
    return ProjectProgressResponse.model_validate(progress)


@router.post("/debug/evaluate", response_model=EvaluationResultResponse)
async def debug_evaluate(context: Annotated[dict[str, Any], Body()]):
    """Evaluate an inline context document; nothing is read from or written to the store."""
    result = evaluate(context_from_dict(context))
    return EvaluationResultResponse.model_validate(result_to_dict(result))
