"""Tests for ConfigurationService (validated writes and guarded deletes, memory repos)."""

import pytest

from solarflow.application.use_cases import ConfigurationService
from solarflow.domain.entities import (
    ActivationRules,
    QuestionEntity,
    SectionEntity,
    StageEntity,
)
from solarflow.domain.enums import RuleOperator
from solarflow.domain.exceptions import (
    ConfigurationException,
    ReferentialIntegrityException,
    ResourceNotFoundException,
)
from solarflow.domain.value_objects import ConditionalRule


@pytest.fixture
def service(repos) -> ConfigurationService:
    return ConfigurationService(repos["stages"], repos["sections"], repos["questions"])


async def test_save_section_rejects_cycle_and_persists_nothing(service, repos) -> None:
    await service.save_section(SectionEntity(id="a", name="A"))
    await service.save_section(SectionEntity(id="b", name="B", depends_on_section_ids=["a"]))

    with pytest.raises(ConfigurationException) as exc_info:
        await service.save_section(
            SectionEntity(id="a", name="A", depends_on_section_ids=["b"])
        )
    assert exc_info.value.errors
    stored = await repos["sections"].get_by_id("a")
    assert stored.depends_on_section_ids == []


async def test_save_section_rejects_dangling_questions(service) -> None:
    with pytest.raises(ConfigurationException) as exc_info:
        await service.save_section(
            SectionEntity(id="a", name="A", required_question_ids=["ghost"])
        )
    assert exc_info.value.errors == ['Required question ID "ghost" does not exist.']


async def test_save_stage_validates_requirements_and_sections(service) -> None:
    await service.save_section(SectionEntity(id="sec1", name="Roof"))
    await service.save_stage(StageEntity(id="s1", name="Survey", section_ids=["sec1"]))

    with pytest.raises(ConfigurationException) as exc_info:
        await service.save_stage(
            StageEntity(
                id="s2",
                name="Install",
                section_ids=["ghost"],
                activation_rules=ActivationRules(required_stage_ids=["s2"]),
            )
        )
    assert len(exc_info.value.errors) == 2


async def test_save_question_rejects_self_reference(service) -> None:
    with pytest.raises(ConfigurationException):
        await service.save_question(
            QuestionEntity(
                id="q1",
                label="Roof",
                conditional_rule=ConditionalRule("q1", RuleOperator.EQUALS, "x"),
            )
        )


async def test_delete_section_blocked_by_dependents_and_stages(service) -> None:
    await service.save_section(SectionEntity(id="a", name="Site"))
    await service.save_section(SectionEntity(id="b", name="Design", depends_on_section_ids=["a"]))
    await service.save_stage(StageEntity(id="s1", name="Survey", section_ids=["a"]))

    with pytest.raises(ReferentialIntegrityException) as exc_info:
        await service.delete_section("a")
    assert exc_info.value.details["blocking_items"] == ["Section: Design", "Stage: Survey"]


async def test_delete_section_when_unreferenced(service, repos) -> None:
    await service.save_section(SectionEntity(id="a", name="Site"))
    await service.delete_section("a")
    assert await repos["sections"].get_by_id("a") is None


async def test_delete_missing_items_raise_not_found(service) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.delete_section("nope")
    with pytest.raises(ResourceNotFoundException):
        await service.delete_stage("nope")
    with pytest.raises(ResourceNotFoundException):
        await service.delete_question("nope")


async def test_delete_stage_blocked_by_requiring_stage(service) -> None:
    await service.save_stage(StageEntity(id="s1", name="Survey"))
    await service.save_stage(
        StageEntity(
            id="s2",
            name="Install",
            activation_rules=ActivationRules(required_stage_ids=["s1"]),
        )
    )
    with pytest.raises(ReferentialIntegrityException):
        await service.delete_stage("s1")
    await service.delete_stage("s2")
    await service.delete_stage("s1")


async def test_delete_question_blocked_by_rule(service) -> None:
    await service.save_question(QuestionEntity(id="q1", label="Has HOA"))
    await service.save_question(
        QuestionEntity(
            id="q2",
            label="HOA contact",
            conditional_rule=ConditionalRule("q1", RuleOperator.EQUALS, "yes"),
        )
    )
    with pytest.raises(ReferentialIntegrityException) as exc_info:
        await service.delete_question("q1")
    assert exc_info.value.details["blocking_items"] == ["Question: HOA contact"]


async def test_delete_question_strips_it_from_sections(service, repos) -> None:
    await service.save_question(QuestionEntity(id="q1", label="Roof"))
    await service.save_question(QuestionEntity(id="q2", label="Pitch"))
    await service.save_section(
        SectionEntity(
            id="a",
            name="Roof",
            required_question_ids=["q1", "q2"],
            question_order=["q2", "q1"],
        )
    )
    await service.delete_question("q1")

    section = await repos["sections"].get_by_id("a")
    assert section.required_question_ids == ["q2"]
    assert section.question_order == ["q2"]
    assert await repos["questions"].get_by_id("q1") is None
