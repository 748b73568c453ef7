"""Evaluate a stored project: load a snapshot, run the engine, cache active stages."""

from __future__ import annotations

from solarflow.application.dtos.evaluation import (
    EvaluationContext,
    EvaluationResult,
    ProjectProgress,
)
from solarflow.application.interfaces.repositories import (
    IProjectRepository,
    IQuestionRepository,
    ISectionRepository,
    IStageRepository,
    ISubmissionRepository,
)
from solarflow.application.services.evaluation_engine import evaluate
from solarflow.domain.entities import ProjectEntity, StageEntity
from solarflow.domain.exceptions import ResourceNotFoundException
from solarflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _current_stage_name(
    stages: list[StageEntity], result: EvaluationResult
) -> str | None:
    """Name of the highest-order active stage, or None when nothing is active."""
    active = [s for s in stages if s.id in result.active_stages]
    if not active:
        return None
    return max(active, key=lambda s: s.order).name


class EvaluateProjectUseCase:
    """Recompute-on-write: derive project state from scratch and cache it on the project."""

    def __init__(
        self,
        project_repo: IProjectRepository,
        stage_repo: IStageRepository,
        section_repo: ISectionRepository,
        question_repo: IQuestionRepository,
        submission_repo: ISubmissionRepository,
    ) -> None:
        self._project_repo = project_repo
        self._stage_repo = stage_repo
        self._section_repo = section_repo
        self._question_repo = question_repo
        self._submission_repo = submission_repo

    async def _load_project(self, project_id: str) -> ProjectEntity:
        project = await self._project_repo.get_project(project_id)
        if not project:
            raise ResourceNotFoundException("project", project_id)
        return project

    async def build_context(self, project_id: str) -> EvaluationContext:
        """Load the full snapshot the engine needs for one project.

        Raises:
            ResourceNotFoundException: If the project, its customer or its
                credit approval does not exist.
        """
        project = await self._load_project(project_id)
        customer = await self._project_repo.get_customer(project.customer_id)
        if not customer:
            raise ResourceNotFoundException("customer", project.customer_id)
        credit_approval = await self._project_repo.get_credit_approval(
            project.credit_approval_id
        )
        if not credit_approval:
            raise ResourceNotFoundException("credit_approval", project.credit_approval_id)
        return EvaluationContext(
            project=project,
            customer=customer,
            credit_approval=credit_approval,
            stages=tuple(await self._stage_repo.list_all()),
            sections=tuple(await self._section_repo.list_all()),
            questions=tuple(await self._question_repo.list_all()),
            submissions=tuple(await self._submission_repo.list_by_project(project_id)),
        )

    async def execute(self, project_id: str, *, persist: bool = True) -> ProjectProgress:
        """Evaluate the project and store active_stages/current_stage_name on it.

        With persist=False the project is left untouched and newly_activated_stages
        lists what a persisted run would activate.

        Returns:
            ProjectProgress with the result and the stages activated by this run.
        """
        context = await self.build_context(project_id)
        result = evaluate(context)

        project = context.project
        previous = set(project.active_stages)
        newly_activated = [sid for sid in result.active_stages if sid not in previous]
        current_name = _current_stage_name(list(context.stages), result)

        project.active_stages = list(result.active_stages)
        if current_name is not None:
            project.current_stage_name = current_name
        if persist:
            await self._project_repo.save_project(project)
            if newly_activated:
                logger.info(
                    "Project %s activated stages: %s", project_id, ", ".join(newly_activated)
                )
        return ProjectProgress(
            project_id=project_id,
            result=result,
            newly_activated_stages=newly_activated,
            current_stage_name=project.current_stage_name,
        )
