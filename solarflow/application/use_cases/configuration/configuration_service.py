"""Configuration writes: validate stages, sections and questions before persisting.

A candidate with any validator error is rejected with ConfigurationException
and nothing is written. Deletes run the reference guard first.
"""

from __future__ import annotations

from solarflow.application.interfaces.repositories import (
    IQuestionRepository,
    ISectionRepository,
    IStageRepository,
)
from solarflow.application.services import reference_guard
from solarflow.application.services.dependency_validator import (
    validate_question_rule,
    validate_section_content,
    validate_section_dependencies,
    validate_stage_content,
    validate_stage_dependencies,
)
from solarflow.domain.entities import QuestionEntity, SectionEntity, StageEntity
from solarflow.domain.exceptions import (
    ConfigurationException,
    ReferentialIntegrityException,
    ResourceNotFoundException,
)
from solarflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _reject_if_invalid(entity_type: str, entity_id: str, errors: list[str]) -> None:
    if errors:
        logger.warning(
            "Rejected %s %s: %s", entity_type, entity_id, "; ".join(errors)
        )
        raise ConfigurationException(entity_type, entity_id, errors)


class ConfigurationService:
    """Validated create/update/delete of global workflow configuration."""

    def __init__(
        self,
        stage_repo: IStageRepository,
        section_repo: ISectionRepository,
        question_repo: IQuestionRepository,
    ) -> None:
        self._stage_repo = stage_repo
        self._section_repo = section_repo
        self._question_repo = question_repo

    async def save_section(self, section: SectionEntity) -> SectionEntity:
        """Validate dependencies and question references, then upsert.

        Raises:
            ConfigurationException: On self-dependency, cycles or dangling question ids.
        """
        sections = await self._section_repo.list_all()
        questions = await self._question_repo.list_all()
        errors = validate_section_dependencies(section, sections)
        errors.extend(validate_section_content(section, questions))
        _reject_if_invalid("section", section.id, errors)
        return await self._section_repo.save(section)

    async def save_stage(self, stage: StageEntity) -> StageEntity:
        """Validate required stages and assigned sections, then upsert.

        Raises:
            ConfigurationException: On self-dependency, cycles or dangling section ids.
        """
        stages = await self._stage_repo.list_all()
        sections = await self._section_repo.list_all()
        errors = validate_stage_dependencies(stage, stages)
        errors.extend(validate_stage_content(stage, sections))
        _reject_if_invalid("stage", stage.id, errors)
        return await self._stage_repo.save(stage)

    async def save_question(self, question: QuestionEntity) -> QuestionEntity:
        """Validate the conditional rule reference, then upsert.

        Raises:
            ConfigurationException: If the rule points at itself or at nothing.
        """
        questions = await self._question_repo.list_all()
        _reject_if_invalid(
            "question", question.id, validate_question_rule(question, questions)
        )
        return await self._question_repo.save(question)

    async def delete_section(self, section_id: str) -> None:
        """Delete a section no other section depends on and no stage assigns.

        Raises:
            ResourceNotFoundException: If the section does not exist.
            ReferentialIntegrityException: If it is still referenced.
        """
        if not await self._section_repo.get_by_id(section_id):
            raise ResourceNotFoundException("section", section_id)
        blocking = reference_guard.sections_depending_on(
            section_id, await self._section_repo.list_all()
        )
        blocking.extend(
            reference_guard.stages_assigning(section_id, await self._stage_repo.list_all())
        )
        if blocking:
            raise ReferentialIntegrityException("section", section_id, blocking)
        await self._section_repo.delete(section_id)

    async def delete_stage(self, stage_id: str) -> None:
        """Delete a stage no other stage requires.

        Raises:
            ResourceNotFoundException: If the stage does not exist.
            ReferentialIntegrityException: If another stage's activation rules name it.
        """
        if not await self._stage_repo.get_by_id(stage_id):
            raise ResourceNotFoundException("stage", stage_id)
        blocking = reference_guard.stages_requiring(
            stage_id, await self._stage_repo.list_all()
        )
        if blocking:
            raise ReferentialIntegrityException("stage", stage_id, blocking)
        await self._stage_repo.delete(stage_id)

    async def delete_question(self, question_id: str) -> None:
        """Delete a question no conditional rule reads, removing it from its sections.

        Raises:
            ResourceNotFoundException: If the question does not exist.
            ReferentialIntegrityException: If a question or section rule references it.
        """
        if not await self._question_repo.get_by_id(question_id):
            raise ResourceNotFoundException("question", question_id)
        sections = await self._section_repo.list_all()
        blocking = reference_guard.items_referencing_question(
            question_id, await self._question_repo.list_all(), sections
        )
        if blocking:
            raise ReferentialIntegrityException("question", question_id, blocking)
        await self._question_repo.delete(question_id)
        for section in sections:
            if section.contains_question(question_id) or (
                section.question_order and question_id in section.question_order
            ):
                await self._section_repo.save(section.without_question(question_id))
