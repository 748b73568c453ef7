"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for repositories and application use cases.
Routes depend only on these dependencies, not on infrastructure directly.

When database_backend is 'firestore', repositories use the Firestore REST client.
When database_backend is 'memory', they share the process-wide MemoryStore.
Switch backends via DATABASE_BACKEND in config.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends

from solarflow.application.interfaces.repositories import (
    IProjectRepository,
    IQuestionRepository,
    ISectionRepository,
    IStageRepository,
    ISubmissionRepository,
)
from solarflow.application.use_cases import (
    ConfigurationService,
    EvaluateProjectUseCase,
    ProjectService,
    SubmissionService,
)
from solarflow.core.config import get_settings
from solarflow.domain.exceptions import StoreNotConfiguredException
from solarflow.infrastructure.firebase.client import get_firestore_client
from solarflow.infrastructure.firebase.repositories import (
    FirestoreProjectRepository,
    FirestoreQuestionRepository,
    FirestoreSectionRepository,
    FirestoreStageRepository,
    FirestoreSubmissionRepository,
)
from solarflow.infrastructure.memory import (
    MemoryProjectRepository,
    MemoryQuestionRepository,
    MemorySectionRepository,
    MemoryStageRepository,
    MemorySubmissionRepository,
    get_memory_store,
)


@dataclass
class Repositories:
    """One repository per store concern, all on the same backend."""

    stages: IStageRepository
    sections: ISectionRepository
    questions: IQuestionRepository
    submissions: ISubmissionRepository
    projects: IProjectRepository


def get_repositories() -> Repositories:
    """Build repositories for the configured backend.

    Raises:
        StoreNotConfiguredException: Firestore selected but its client is not initialized.
    """
    if get_settings().database_backend == "firestore":
        client = get_firestore_client()
        if client is None:
            raise StoreNotConfiguredException()
        return Repositories(
            stages=FirestoreStageRepository(client),
            sections=FirestoreSectionRepository(client),
            questions=FirestoreQuestionRepository(client),
            submissions=FirestoreSubmissionRepository(client),
            projects=FirestoreProjectRepository(client),
        )
    store = get_memory_store()
    return Repositories(
        stages=MemoryStageRepository(store),
        sections=MemorySectionRepository(store),
        questions=MemoryQuestionRepository(store),
        submissions=MemorySubmissionRepository(store),
        projects=MemoryProjectRepository(store),
    )


RepositoriesDep = Annotated[Repositories, Depends(get_repositories)]


def get_configuration_service(repos: RepositoriesDep) -> ConfigurationService:
    return ConfigurationService(repos.stages, repos.sections, repos.questions)


def get_evaluate_project_use_case(repos: RepositoriesDep) -> EvaluateProjectUseCase:
    return EvaluateProjectUseCase(
        project_repo=repos.projects,
        stage_repo=repos.stages,
        section_repo=repos.sections,
        question_repo=repos.questions,
        submission_repo=repos.submissions,
    )


def get_submission_service(
    repos: RepositoriesDep,
    evaluator: Annotated[EvaluateProjectUseCase, Depends(get_evaluate_project_use_case)],
) -> SubmissionService:
    return SubmissionService(
        project_repo=repos.projects,
        question_repo=repos.questions,
        submission_repo=repos.submissions,
        evaluator=evaluator,
    )


def get_project_service(
    repos: RepositoriesDep,
    evaluator: Annotated[EvaluateProjectUseCase, Depends(get_evaluate_project_use_case)],
) -> ProjectService:
    return ProjectService(project_repo=repos.projects, evaluator=evaluator)
