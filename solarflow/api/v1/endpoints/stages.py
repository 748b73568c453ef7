"""Stage configuration API: thin routes delegating to ConfigurationService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from solarflow.api.v1.dependencies import RepositoriesDep, get_configuration_service
from solarflow.application.use_cases import ConfigurationService
from solarflow.domain.exceptions import ResourceNotFoundException
from solarflow.infrastructure.serialization import stage_from_dict, stage_to_dict
from solarflow.schemas.configuration import StageResponse, StageWrite

router = APIRouter()


@router.get("", response_model=list[StageResponse])
async def list_stages(repos: RepositoriesDep):
    """List all stages ordered by their pipeline order."""
    stages = sorted(await repos.stages.list_all(), key=lambda s: s.order)
    return [StageResponse.model_validate(stage_to_dict(s)) for s in stages]


@router.get("/{stage_id}", response_model=StageResponse)
async def get_stage(stage_id: str, repos: RepositoriesDep):
    stage = await repos.stages.get_by_id(stage_id)
    if not stage:
        raise ResourceNotFoundException("stage", stage_id)
    return StageResponse.model_validate(stage_to_dict(stage))


@router.put("/{stage_id}", response_model=StageResponse)
async def put_stage(
    stage_id: str,
    body: StageWrite,
    service: Annotated[ConfigurationService, Depends(get_configuration_service)],
):
    """Create or replace a stage. Rejected with 422 on cycles or unknown sections."""
    stage = stage_from_dict({"id": stage_id, **body.model_dump(mode="json")})
    saved = await service.save_stage(stage)
    return StageResponse.model_validate(stage_to_dict(saved))


@router.delete("/{stage_id}", status_code=204)
async def delete_stage(
    stage_id: str,
    service: Annotated[ConfigurationService, Depends(get_configuration_service)],
):
    """Delete a stage; 409 while another stage requires it."""
    await service.delete_stage(stage_id)
    return Response(status_code=204)
