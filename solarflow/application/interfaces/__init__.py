"""Application ports (repository protocols)."""

from solarflow.application.interfaces.repositories import (
    IProjectRepository,
    IQuestionRepository,
    ISectionRepository,
    IStageRepository,
    ISubmissionRepository,
)

__all__ = [
    "IProjectRepository",
    "IQuestionRepository",
    "ISectionRepository",
    "IStageRepository",
    "ISubmissionRepository",
]
