"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
Configuration is global (not project-scoped); submissions are per project.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from solarflow.domain.entities import (
        CreditApprovalEntity,
        CustomerEntity,
        ProjectEntity,
        QuestionEntity,
        SectionEntity,
        StageEntity,
        SubmissionEntity,
    )
    from solarflow.domain.enums import SubmissionState


class IStageRepository(Protocol):
    """Protocol for stage configuration storage (DIP)."""

    async def list_all(self) -> list[StageEntity]:
        """Return every stage."""

    async def get_by_id(self, stage_id: str) -> StageEntity | None:
        """Return stage by ID."""

    async def save(self, stage: StageEntity) -> StageEntity:
        """Upsert stage by ID."""

    async def delete(self, stage_id: str) -> None:
        """Delete stage by ID (no-op when missing)."""


class ISectionRepository(Protocol):
    """Protocol for section configuration storage (DIP)."""

    async def list_all(self) -> list[SectionEntity]:
        """Return every section."""

    async def get_by_id(self, section_id: str) -> SectionEntity | None:
        """Return section by ID."""

    async def save(self, section: SectionEntity) -> SectionEntity:
        """Upsert section by ID."""

    async def delete(self, section_id: str) -> None:
        """Delete section by ID (no-op when missing)."""


class IQuestionRepository(Protocol):
    """Protocol for question configuration storage (DIP)."""

    async def list_all(self) -> list[QuestionEntity]:
        """Return every question."""

    async def get_by_id(self, question_id: str) -> QuestionEntity | None:
        """Return question by ID."""

    async def save(self, question: QuestionEntity) -> QuestionEntity:
        """Upsert question by ID."""

    async def delete(self, question_id: str) -> None:
        """Delete question by ID (no-op when missing)."""


class ISubmissionRepository(Protocol):
    """Protocol for per-project submission storage (DIP)."""

    async def list_by_project(self, project_id: str) -> list[SubmissionEntity]:
        """Return all submissions for the project."""

    async def list_by_state(self, state: SubmissionState) -> list[SubmissionEntity]:
        """Return submissions in state across all projects (e.g. the review queue)."""

    async def get_for_question(
        self, project_id: str, question_id: str
    ) -> SubmissionEntity | None:
        """Return the single submission for (project, question), if any."""

    async def save(self, submission: SubmissionEntity) -> SubmissionEntity:
        """Upsert submission; one document per (project, question)."""


class IProjectRepository(Protocol):
    """Protocol for projects and the records they reference (DIP)."""

    async def list_projects(self) -> list[ProjectEntity]:
        """Return all projects."""

    async def get_project(self, project_id: str) -> ProjectEntity | None:
        """Return project by ID."""

    async def get_customer(self, customer_id: str) -> CustomerEntity | None:
        """Return customer by ID."""

    async def get_credit_approval(
        self, credit_approval_id: str
    ) -> CreditApprovalEntity | None:
        """Return credit approval by ID."""

    async def list_credit_approvals(self) -> list[CreditApprovalEntity]:
        """Return all credit approvals."""

    async def create_project(
        self, project: ProjectEntity, customer: CustomerEntity
    ) -> ProjectEntity:
        """Write a new project and the customer it was created for."""

    async def save_project(self, project: ProjectEntity) -> ProjectEntity:
        """Upsert project by ID."""
