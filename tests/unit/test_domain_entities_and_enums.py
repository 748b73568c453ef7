"""Tests for domain entities, their state machine and enums."""

from datetime import datetime, timezone

import pytest

from solarflow.domain.entities import (
    CreditApprovalEntity,
    QuestionEntity,
    SectionEntity,
    SubmissionEntity,
    submission_id_for,
)
from solarflow.domain.enums import (
    CreditApprovalStatus,
    QuestionType,
    ReviewDecision,
    StorageType,
    SubmissionState,
)
from solarflow.domain.exceptions import InvalidSubmissionTransitionException
from solarflow.domain.value_objects import FileReference

_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("question_type", "storage_type"),
    [
        (QuestionType.FILE_UPLOAD, StorageType.FILE),
        (QuestionType.NUMBER, StorageType.NUMBER),
        (QuestionType.BOOLEAN, StorageType.BOOLEAN),
        (QuestionType.DATE, StorageType.DATE),
        (QuestionType.TEXT, StorageType.STRING),
        (QuestionType.SELECT, StorageType.STRING),
    ],
)
def test_question_data_type_follows_question_type(question_type, storage_type) -> None:
    question = QuestionEntity(id="q1", label="Q", question_type=question_type)
    assert question.data_type == storage_type


def test_section_display_order() -> None:
    section = SectionEntity(
        id="s",
        name="S",
        required_question_ids=["q1", "q2"],
        optional_question_ids=["q3", "q1"],
    )
    assert section.display_question_ids() == ["q1", "q2", "q3"]
    section.question_order = ["q3", "q1", "q2"]
    assert section.display_question_ids() == ["q3", "q1", "q2"]


def test_section_without_question_strips_every_list() -> None:
    section = SectionEntity(
        id="s",
        name="S",
        required_question_ids=["q1", "q2"],
        optional_question_ids=["q1"],
        question_order=["q2", "q1"],
    )
    stripped = section.without_question("q1")
    assert stripped.required_question_ids == ["q2"]
    assert stripped.optional_question_ids == []
    assert stripped.question_order == ["q2"]
    assert section.required_question_ids == ["q1", "q2"]


def test_credit_approval_is_approved() -> None:
    assert CreditApprovalEntity(id="c", status=CreditApprovalStatus.APPROVED).is_approved
    assert not CreditApprovalEntity(id="c", status=CreditApprovalStatus.UNAPPROVED).is_approved


def test_submission_id_is_deterministic() -> None:
    assert submission_id_for("p1", "q1") == "p1__q1"
    assert SubmissionEntity.empty("p1", "q1").id == "p1__q1"


def test_submit_then_approve() -> None:
    submission = SubmissionEntity.empty("p1", "q1")
    assert not submission.counts_as_answered
    submission.submit("installer-1", _NOW, value="Composite")
    assert submission.state == SubmissionState.SUBMITTED
    assert submission.counts_as_answered
    submission.review(ReviewDecision.APPROVED, "admin-1", _NOW, feedback="ignored")
    assert submission.state == SubmissionState.APPROVED
    assert submission.reviewed_by == "admin-1"
    assert submission.feedback is None


def test_rejected_submission_can_be_resubmitted() -> None:
    submission = SubmissionEntity.empty("p1", "q1")
    submission.submit("installer-1", _NOW, value="blurry")
    submission.review(ReviewDecision.REJECTED, "admin-1", _NOW, feedback="Photo is blurry")
    assert submission.state == SubmissionState.REJECTED
    assert submission.feedback == "Photo is blurry"
    assert not submission.counts_as_answered

    file = FileReference(
        storage_path="projects/p1/roof.jpg",
        filename="roof.jpg",
        content_type="image/jpeg",
        size_bytes=1024,
    )
    submission.submit("installer-1", _NOW, file=file)
    assert submission.state == SubmissionState.SUBMITTED
    assert submission.file == file
    assert submission.feedback is None
    assert submission.reviewed_by is None


@pytest.mark.parametrize("state", [SubmissionState.EMPTY, SubmissionState.APPROVED, SubmissionState.REJECTED])
def test_review_is_only_legal_from_submitted(state) -> None:
    submission = SubmissionEntity.empty("p1", "q1")
    submission.state = state
    with pytest.raises(InvalidSubmissionTransitionException) as exc_info:
        submission.review(ReviewDecision.APPROVED, "admin-1", _NOW)
    assert exc_info.value.details["from_state"] == state.value
    assert exc_info.value.error_code == "INVALID_TRANSITION"
