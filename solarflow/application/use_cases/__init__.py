"""Application use cases: one entry point per workflow."""

from solarflow.application.use_cases.configuration import ConfigurationService
from solarflow.application.use_cases.evaluation import EvaluateProjectUseCase
from solarflow.application.use_cases.projects import ProjectService
from solarflow.application.use_cases.submissions import SubmissionService

__all__ = [
    "ConfigurationService",
    "EvaluateProjectUseCase",
    "ProjectService",
    "SubmissionService",
]
