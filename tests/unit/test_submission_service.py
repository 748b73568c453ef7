"""Tests for SubmissionService and EvaluateProjectUseCase (memory repos)."""

import pytest

from solarflow.application.use_cases import (
    ConfigurationService,
    EvaluateProjectUseCase,
    SubmissionService,
)
from solarflow.domain.entities import (
    ActivationRules,
    QuestionEntity,
    SectionEntity,
    StageEntity,
)
from solarflow.domain.enums import (
    QuestionType,
    RequiredActionReason,
    ReviewDecision,
    SubmissionState,
)
from solarflow.domain.exceptions import (
    InvalidSubmissionTransitionException,
    ResourceNotFoundException,
    ValidationException,
)
from solarflow.domain.value_objects import FileReference
from tests.conftest import PROJECT_ID, seed_project


@pytest.fixture
def evaluator(repos) -> EvaluateProjectUseCase:
    return EvaluateProjectUseCase(
        project_repo=repos["projects"],
        stage_repo=repos["stages"],
        section_repo=repos["sections"],
        question_repo=repos["questions"],
        submission_repo=repos["submissions"],
    )


@pytest.fixture
def service(repos, evaluator) -> SubmissionService:
    return SubmissionService(
        project_repo=repos["projects"],
        question_repo=repos["questions"],
        submission_repo=repos["submissions"],
        evaluator=evaluator,
    )


@pytest.fixture
async def workflow(repos, store) -> None:
    """Survey (roof photo, approval required) -> Install (requires Survey)."""
    seed_project(store)
    config = ConfigurationService(repos["stages"], repos["sections"], repos["questions"])
    await config.save_question(
        QuestionEntity(
            id="roof_photo",
            label="Roof photo",
            question_type=QuestionType.FILE_UPLOAD,
            requires_approval=True,
        )
    )
    await config.save_question(QuestionEntity(id="roof_type", label="Roof type"))
    await config.save_section(
        SectionEntity(
            id="roof",
            name="Roof",
            required_question_ids=["roof_photo", "roof_type"],
        )
    )
    await config.save_section(SectionEntity(id="panels", name="Panels"))
    await config.save_stage(StageEntity(id="survey", name="Site Survey", section_ids=["roof"], order=1))
    await config.save_stage(
        StageEntity(
            id="install",
            name="Installation",
            section_ids=["panels"],
            order=2,
            activation_rules=ActivationRules(required_stage_ids=["survey"]),
        )
    )


_PHOTO = FileReference(
    storage_path="projects/lease-1/roof.jpg",
    filename="roof.jpg",
    content_type="image/jpeg",
    size_bytes=2048,
)


async def test_evaluate_project_caches_active_stages(workflow, evaluator, repos) -> None:
    progress = await evaluator.execute(PROJECT_ID)

    assert progress.result.active_stages == ("survey",)
    assert progress.newly_activated_stages == ["survey"]
    assert progress.current_stage_name == "Site Survey"
    project = await repos["projects"].get_project(PROJECT_ID)
    assert project.active_stages == ["survey"]

    again = await evaluator.execute(PROJECT_ID)
    assert again.newly_activated_stages == []
    assert not again.stage_advanced


async def test_evaluate_unknown_project_raises(evaluator) -> None:
    with pytest.raises(ResourceNotFoundException):
        await evaluator.execute("missing")


async def test_submit_review_cycle_advances_stage(workflow, service) -> None:
    outcome = await service.submit_answer(PROJECT_ID, "roof_type", "inst-1", value="Composite")
    assert outcome.submission.state == SubmissionState.SUBMITTED
    assert outcome.submission.submitted_by == "inst-1"

    outcome = await service.submit_answer(PROJECT_ID, "roof_photo", "inst-1", file=_PHOTO)
    reasons = {a.question_id: a.reason for a in outcome.progress.result.required_actions}
    # Any submitted answer in an incomplete section is reported as pending.
    assert reasons == {
        "roof_photo": RequiredActionReason.AWAITING_APPROVAL,
        "roof_type": RequiredActionReason.AWAITING_APPROVAL,
    }

    outcome = await service.review_submission(
        PROJECT_ID, "roof_photo", ReviewDecision.APPROVED, "admin-1"
    )
    assert outcome.submission.state == SubmissionState.APPROVED
    assert outcome.progress.result.completed_sections == ("roof", "panels")
    assert outcome.progress.newly_activated_stages == ["install"]
    assert outcome.progress.current_stage_name == "Installation"


async def test_rejection_then_resubmission(workflow, service) -> None:
    await service.submit_answer(PROJECT_ID, "roof_photo", "inst-1", file=_PHOTO)
    outcome = await service.review_submission(
        PROJECT_ID, "roof_photo", ReviewDecision.REJECTED, "admin-1", feedback="Too dark"
    )
    assert outcome.submission.feedback == "Too dark"
    reasons = {a.question_id: a.reason for a in outcome.progress.result.required_actions}
    assert reasons["roof_photo"] == RequiredActionReason.REJECTED

    outcome = await service.submit_answer(PROJECT_ID, "roof_photo", "inst-1", file=_PHOTO)
    assert outcome.submission.state == SubmissionState.SUBMITTED
    assert outcome.submission.feedback is None


async def test_review_requires_submitted_answer(workflow, service) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.review_submission(
            PROJECT_ID, "roof_type", ReviewDecision.APPROVED, "admin-1"
        )
    await service.submit_answer(PROJECT_ID, "roof_type", "inst-1", value="Tile")
    await service.review_submission(PROJECT_ID, "roof_type", ReviewDecision.APPROVED, "admin-1")
    with pytest.raises(InvalidSubmissionTransitionException):
        await service.review_submission(
            PROJECT_ID, "roof_type", ReviewDecision.REJECTED, "admin-1"
        )


async def test_answer_shape_is_checked(workflow, service) -> None:
    with pytest.raises(ValidationException):
        await service.submit_answer(PROJECT_ID, "roof_photo", "inst-1", value="not a file")
    with pytest.raises(ValidationException):
        await service.submit_answer(PROJECT_ID, "roof_type", "inst-1", value="   ")


async def test_submit_unknown_project_or_question(workflow, service) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.submit_answer("missing", "roof_type", "inst-1", value="x")
    with pytest.raises(ResourceNotFoundException):
        await service.submit_answer(PROJECT_ID, "missing", "inst-1", value="x")


async def test_preview_evaluation_leaves_project_untouched(workflow, evaluator, repos) -> None:
    progress = await evaluator.execute(PROJECT_ID, persist=False)

    assert progress.newly_activated_stages == ["survey"]
    assert progress.current_stage_name == "Site Survey"
    project = await repos["projects"].get_project(PROJECT_ID)
    assert project.active_stages == []
    assert project.current_stage_name is None


async def test_list_for_project_orders_by_question(workflow, service) -> None:
    await service.submit_answer(PROJECT_ID, "roof_type", "inst-1", value="Tile")
    await service.submit_answer(PROJECT_ID, "roof_photo", "inst-1", file=_PHOTO)

    listed = await service.list_for_project(PROJECT_ID)
    assert [s.question_id for s in listed] == ["roof_photo", "roof_type"]
    with pytest.raises(ResourceNotFoundException):
        await service.list_for_project("missing")


async def test_review_queue_lists_submitted_answers(workflow, service) -> None:
    await service.submit_answer(PROJECT_ID, "roof_photo", "inst-1", file=_PHOTO)
    await service.submit_answer(PROJECT_ID, "roof_type", "inst-1", value="Tile")
    await service.review_submission(PROJECT_ID, "roof_type", ReviewDecision.APPROVED, "admin-1")

    queue = await service.list_by_state(SubmissionState.SUBMITTED)
    assert [s.question_id for s in queue] == ["roof_photo"]
    approved = await service.list_by_state(SubmissionState.APPROVED)
    assert [s.question_id for s in approved] == ["roof_type"]
