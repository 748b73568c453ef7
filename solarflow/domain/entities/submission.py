"""Submission domain entity and its review state machine.

A submission is an installer's answer to one question on one project. There
is at most one per (project, question); re-submitting overwrites it in place.

Transitions:
    empty     -> submitted              (installer writes a value)
    submitted -> approved | rejected    (admin decision)
    rejected  -> submitted              (installer resubmits; clears feedback)
    approved  -> submitted              (installer changes an approved answer)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from solarflow.domain.enums import ReviewDecision, SubmissionState
from solarflow.domain.exceptions import InvalidSubmissionTransitionException
from solarflow.domain.value_objects import FileReference


def submission_id_for(project_id: str, question_id: str) -> str:
    """Return the deterministic submission id for a (project, question) pair."""
    return f"{project_id}__{question_id}"


@dataclass
class SubmissionEntity:
    """Domain entity for one answer within one project."""

    id: str
    project_id: str
    question_id: str
    state: SubmissionState = SubmissionState.EMPTY
    value: Any = None
    file: FileReference | None = None
    submitted_by: str | None = None
    submitted_at: datetime | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    feedback: str | None = None

    @classmethod
    def empty(cls, project_id: str, question_id: str) -> "SubmissionEntity":
        """Return a placeholder submission in the empty state."""
        return cls(
            id=submission_id_for(project_id, question_id),
            project_id=project_id,
            question_id=question_id,
        )

    @property
    def counts_as_answered(self) -> bool:
        """Whether the answer is present and not rejected (ignores approval)."""
        return self.state not in (SubmissionState.EMPTY, SubmissionState.REJECTED)

    def submit(
        self,
        installer_id: str,
        at: datetime,
        value: Any = None,
        file: FileReference | None = None,
    ) -> None:
        """Record a new answer, moving the submission to submitted.

        Any previous review (including a rejection) is cleared.
        """
        self.value = value
        self.file = file
        self.state = SubmissionState.SUBMITTED
        self.submitted_by = installer_id
        self.submitted_at = at
        self.reviewed_by = None
        self.reviewed_at = None
        self.feedback = None

    def review(
        self,
        decision: ReviewDecision,
        admin_id: str,
        at: datetime,
        feedback: str | None = None,
    ) -> None:
        """Apply an admin decision. Only submitted answers can be reviewed."""
        target = SubmissionState(decision.value)
        if self.state != SubmissionState.SUBMITTED:
            raise InvalidSubmissionTransitionException(
                self.question_id, self.state.value, target.value
            )
        self.state = target
        self.reviewed_by = admin_id
        self.reviewed_at = at
        self.feedback = feedback if decision == ReviewDecision.REJECTED else None
