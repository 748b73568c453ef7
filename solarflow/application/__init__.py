"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the repository interfaces (Firestore, in-memory).
"""

from solarflow.application.dtos import (
    EvaluationContext,
    EvaluationResult,
    ProjectProgress,
    RequiredAction,
)
from solarflow.application.services.evaluation_engine import evaluate
from solarflow.application.use_cases import (
    ConfigurationService,
    EvaluateProjectUseCase,
    SubmissionService,
)

__all__ = [
    "ConfigurationService",
    "EvaluateProjectUseCase",
    "EvaluationContext",
    "EvaluationResult",
    "ProjectProgress",
    "RequiredAction",
    "SubmissionService",
    "evaluate",
]
