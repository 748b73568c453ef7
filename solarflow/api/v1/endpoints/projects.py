"""Project API: intake from a credit approval, listing and lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from solarflow.api.v1.dependencies import get_project_service
from solarflow.application.use_cases import ProjectService
from solarflow.schemas.project import (
    CreateProjectRequest,
    ProjectIntakeResponse,
    ProjectResponse,
)

router = APIRouter()

ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]


@router.get("", response_model=list[ProjectResponse])
async def list_projects(service: ProjectServiceDep):
    """List projects, oldest first."""
    projects = await service.list_projects()
    return [ProjectResponse.model_validate(p) for p in projects]


@router.post("", response_model=ProjectIntakeResponse, status_code=status.HTTP_201_CREATED)
async def create_project(body: CreateProjectRequest, service: ProjectServiceDep):
    """Open a project for an approved credit decision and evaluate it once."""
    intake = await service.create_project(body.credit_approval_id, body.customer)
    return ProjectIntakeResponse.model_validate(intake)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: str, service: ProjectServiceDep):
    project = await service.get_project(project_id)
    return ProjectResponse.model_validate(project)
