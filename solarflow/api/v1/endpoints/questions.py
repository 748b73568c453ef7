"""Question configuration API: thin routes delegating to ConfigurationService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from solarflow.api.v1.dependencies import RepositoriesDep, get_configuration_service
from solarflow.application.use_cases import ConfigurationService
from solarflow.domain.exceptions import ResourceNotFoundException
from solarflow.infrastructure.serialization import question_from_dict, question_to_dict
from solarflow.schemas.configuration import QuestionResponse, QuestionWrite

router = APIRouter()


@router.get("", response_model=list[QuestionResponse])
async def list_questions(repos: RepositoriesDep):
    questions = await repos.questions.list_all()
    return [QuestionResponse.model_validate(question_to_dict(q)) for q in questions]


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(question_id: str, repos: RepositoriesDep):
    question = await repos.questions.get_by_id(question_id)
    if not question:
        raise ResourceNotFoundException("question", question_id)
    return QuestionResponse.model_validate(question_to_dict(question))


@router.put("/{question_id}", response_model=QuestionResponse)
async def put_question(
    question_id: str,
    body: QuestionWrite,
    service: Annotated[ConfigurationService, Depends(get_configuration_service)],
):
    """Create or replace a question. data_type is derived from question_type."""
    question = question_from_dict({"id": question_id, **body.model_dump(mode="json")})
    saved = await service.save_question(question)
    return QuestionResponse.model_validate(question_to_dict(saved))


@router.delete("/{question_id}", status_code=204)
async def delete_question(
    question_id: str,
    service: Annotated[ConfigurationService, Depends(get_configuration_service)],
):
    """Delete a question and strip it from sections; 409 while a rule reads it."""
    await service.delete_question(question_id)
    return Response(status_code=204)
