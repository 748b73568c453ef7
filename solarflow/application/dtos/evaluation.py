"""DTOs for project evaluation: the input snapshot and the derived result."""

from dataclasses import dataclass, field
from typing import Any

from solarflow.domain.entities import (
    CreditApprovalEntity,
    CustomerEntity,
    ProjectEntity,
    QuestionEntity,
    SectionEntity,
    StageEntity,
    SubmissionEntity,
)
from solarflow.domain.enums import RequiredActionReason


@dataclass(frozen=True)
class EvaluationContext:
    """Immutable input bundle: one project plus global configuration and its submissions."""

    project: ProjectEntity
    customer: CustomerEntity
    credit_approval: CreditApprovalEntity
    stages: tuple[StageEntity, ...] = ()
    sections: tuple[SectionEntity, ...] = ()
    questions: tuple[QuestionEntity, ...] = ()
    submissions: tuple[SubmissionEntity, ...] = ()


@dataclass(frozen=True)
class RequiredAction:
    """Outstanding work on one required question (derived, never persisted)."""

    project_id: str
    question_id: str
    reason: RequiredActionReason
    stage_context: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "project_id": self.project_id,
            "question_id": self.question_id,
            "reason": self.reason.value,
            "stage_context": self.stage_context,
        }


@dataclass(frozen=True)
class EvaluationResult:
    """Derived project state. Id collections follow configuration order."""

    is_eligible: bool
    visible_questions: tuple[str, ...] = ()
    visible_sections: tuple[str, ...] = ()
    completed_sections: tuple[str, ...] = ()
    active_stages: tuple[str, ...] = ()
    required_actions: tuple[RequiredAction, ...] = ()

    @classmethod
    def ineligible(cls) -> "EvaluationResult":
        return cls(is_eligible=False)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation."""
        return {
            "is_eligible": self.is_eligible,
            "visible_questions": list(self.visible_questions),
            "visible_sections": list(self.visible_sections),
            "completed_sections": list(self.completed_sections),
            "active_stages": list(self.active_stages),
            "required_actions": [a.to_dict() for a in self.required_actions],
        }


@dataclass(frozen=True)
class ProjectProgress:
    """Outcome of re-evaluating a stored project."""

    project_id: str
    result: EvaluationResult
    newly_activated_stages: list[str] = field(default_factory=list)
    current_stage_name: str | None = None

    @property
    def stage_advanced(self) -> bool:
        return bool(self.newly_activated_stages)
