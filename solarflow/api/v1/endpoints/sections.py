"""Section configuration API: thin routes delegating to ConfigurationService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from solarflow.api.v1.dependencies import RepositoriesDep, get_configuration_service
from solarflow.application.use_cases import ConfigurationService
from solarflow.domain.exceptions import ResourceNotFoundException
from solarflow.infrastructure.serialization import section_from_dict, section_to_dict
from solarflow.schemas.configuration import SectionResponse, SectionWrite

router = APIRouter()


@router.get("", response_model=list[SectionResponse])
async def list_sections(repos: RepositoriesDep):
    sections = await repos.sections.list_all()
    return [SectionResponse.model_validate(section_to_dict(s)) for s in sections]


@router.get("/{section_id}", response_model=SectionResponse)
async def get_section(section_id: str, repos: RepositoriesDep):
    section = await repos.sections.get_by_id(section_id)
    if not section:
        raise ResourceNotFoundException("section", section_id)
    return SectionResponse.model_validate(section_to_dict(section))


@router.put("/{section_id}", response_model=SectionResponse)
async def put_section(
    section_id: str,
    body: SectionWrite,
    service: Annotated[ConfigurationService, Depends(get_configuration_service)],
):
    """Create or replace a section.

    Rejected with 422 when the section depends on itself, closes a dependency
    cycle or lists questions that do not exist.
    """
    section = section_from_dict({"id": section_id, **body.model_dump(mode="json")})
    saved = await service.save_section(section)
    return SectionResponse.model_validate(section_to_dict(saved))


@router.delete("/{section_id}", status_code=204)
async def delete_section(
    section_id: str,
    service: Annotated[ConfigurationService, Depends(get_configuration_service)],
):
    """Delete a section; 409 while other sections depend on it or stages assign it."""
    await service.delete_section(section_id)
    return Response(status_code=204)
