"""Submission writes: installer answers and admin reviews, each followed by re-evaluation."""

from __future__ import annotations

from typing import Any

from solarflow.application.dtos.submission import SubmissionOutcome
from solarflow.application.interfaces.repositories import (
    IProjectRepository,
    IQuestionRepository,
    ISubmissionRepository,
)
from solarflow.application.use_cases.evaluation import EvaluateProjectUseCase
from solarflow.domain.entities import QuestionEntity, SubmissionEntity
from solarflow.domain.enums import QuestionType, ReviewDecision, SubmissionState
from solarflow.domain.exceptions import ResourceNotFoundException, ValidationException
from solarflow.domain.value_objects import FileReference
from solarflow.shared.telemetry.logging import get_logger
from solarflow.shared.utils.datetime import utc_now

logger = get_logger(__name__)


def _check_answer_shape(
    question: QuestionEntity, value: Any, file: FileReference | None
) -> None:
    """File questions take a file reference; every other type takes a value."""
    if question.question_type == QuestionType.FILE_UPLOAD:
        if file is None:
            raise ValidationException(
                f"Question {question.id} expects a file reference", field="file"
            )
    elif value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationException(
            f"Question {question.id} expects a non-empty value", field="value"
        )


class SubmissionService:
    """Writes one submission per (project, question) and recomputes project state."""

    def __init__(
        self,
        project_repo: IProjectRepository,
        question_repo: IQuestionRepository,
        submission_repo: ISubmissionRepository,
        evaluator: EvaluateProjectUseCase,
    ) -> None:
        self._project_repo = project_repo
        self._question_repo = question_repo
        self._submission_repo = submission_repo
        self._evaluator = evaluator

    async def _require_question(self, question_id: str) -> QuestionEntity:
        question = await self._question_repo.get_by_id(question_id)
        if not question:
            raise ResourceNotFoundException("question", question_id)
        return question

    async def list_for_project(self, project_id: str) -> list[SubmissionEntity]:
        """Return the project's submissions ordered by question id.

        Raises:
            ResourceNotFoundException: If the project does not exist.
        """
        if not await self._project_repo.get_project(project_id):
            raise ResourceNotFoundException("project", project_id)
        submissions = await self._submission_repo.list_by_project(project_id)
        return sorted(submissions, key=lambda s: s.question_id)

    async def list_by_state(self, state: SubmissionState) -> list[SubmissionEntity]:
        """Return submissions in state across projects, oldest submission first.

        With state=submitted this is the admin review queue.
        """
        submissions = await self._submission_repo.list_by_state(state)
        return sorted(
            submissions,
            key=lambda s: (s.submitted_at is None, s.submitted_at or 0, s.id),
        )

    async def submit_answer(
        self,
        project_id: str,
        question_id: str,
        installer_id: str,
        *,
        value: Any = None,
        file: FileReference | None = None,
    ) -> SubmissionOutcome:
        """Create or overwrite the answer and move it to submitted.

        Overwriting a rejected answer clears the rejection.

        Raises:
            ResourceNotFoundException: If the project or question does not exist.
            ValidationException: If the answer shape does not fit the question type.
        """
        if not await self._project_repo.get_project(project_id):
            raise ResourceNotFoundException("project", project_id)
        question = await self._require_question(question_id)
        _check_answer_shape(question, value, file)

        submission = await self._submission_repo.get_for_question(project_id, question_id)
        if submission is None:
            submission = SubmissionEntity.empty(project_id, question_id)
        submission.submit(installer_id, utc_now(), value=value, file=file)
        saved = await self._submission_repo.save(submission)
        logger.info("Submission saved for project %s question %s", project_id, question_id)

        progress = await self._evaluator.execute(project_id)
        return SubmissionOutcome(submission=saved, progress=progress)

    async def review_submission(
        self,
        project_id: str,
        question_id: str,
        decision: ReviewDecision,
        admin_id: str,
        feedback: str | None = None,
    ) -> SubmissionOutcome:
        """Approve or reject a submitted answer.

        Raises:
            ResourceNotFoundException: If no submission exists for the pair.
            InvalidSubmissionTransitionException: If the answer is not awaiting review.
        """
        submission = await self._submission_repo.get_for_question(project_id, question_id)
        if submission is None:
            raise ResourceNotFoundException("submission", f"{project_id}/{question_id}")
        submission.review(decision, admin_id, utc_now(), feedback=feedback)
        saved = await self._submission_repo.save(submission)
        logger.info(
            "Submission for project %s question %s %s by %s",
            project_id,
            question_id,
            decision.value,
            admin_id,
        )

        progress = await self._evaluator.execute(project_id)
        return SubmissionOutcome(submission=saved, progress=progress)
