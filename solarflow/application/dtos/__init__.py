"""Application DTOs (use case inputs and results)."""

from solarflow.application.dtos.evaluation import (
    EvaluationContext,
    EvaluationResult,
    ProjectProgress,
    RequiredAction,
)
from solarflow.application.dtos.project import ProjectIntake
from solarflow.application.dtos.submission import SubmissionOutcome

__all__ = [
    "EvaluationContext",
    "EvaluationResult",
    "ProjectIntake",
    "ProjectProgress",
    "RequiredAction",
    "SubmissionOutcome",
]
