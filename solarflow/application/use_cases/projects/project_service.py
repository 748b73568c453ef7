"""Project intake and lookups.

A project is opened from an approved credit decision: the customer record is
created from the approval (optionally corrected by the installer), then the
project is evaluated once so it starts with its initial active stages.
"""

from __future__ import annotations

from typing import Any

from solarflow.application.dtos.project import ProjectIntake
from solarflow.application.interfaces.repositories import IProjectRepository
from solarflow.application.use_cases.evaluation import EvaluateProjectUseCase
from solarflow.domain.entities import CreditApprovalEntity, CustomerEntity, ProjectEntity
from solarflow.domain.exceptions import ResourceNotFoundException, ValidationException
from solarflow.shared.telemetry.logging import get_logger
from solarflow.shared.utils.datetime import utc_now
from solarflow.shared.utils.generators import generate_cuid

logger = get_logger(__name__)


class ProjectService:
    """Creates projects from credit approvals and reads them back."""

    def __init__(
        self,
        project_repo: IProjectRepository,
        evaluator: EvaluateProjectUseCase,
    ) -> None:
        self._project_repo = project_repo
        self._evaluator = evaluator

    async def list_projects(self) -> list[ProjectEntity]:
        """Return all projects, oldest first."""
        projects = await self._project_repo.list_projects()
        return sorted(projects, key=lambda p: (p.created_at is None, p.created_at or 0, p.id))

    async def get_project(self, project_id: str) -> ProjectEntity:
        project = await self._project_repo.get_project(project_id)
        if not project:
            raise ResourceNotFoundException("project", project_id)
        return project

    async def list_approved_credit_approvals(self) -> list[CreditApprovalEntity]:
        """Credit approvals a new project can be opened from."""
        approvals = await self._project_repo.list_credit_approvals()
        return sorted((a for a in approvals if a.is_approved), key=lambda a: a.id)

    async def create_project(
        self, credit_approval_id: str, customer_data: dict[str, Any] | None = None
    ) -> ProjectIntake:
        """Create a customer and a project for an approved credit decision.

        customer_data overrides the name and address taken from the approval;
        any other keys become customer attributes.

        Raises:
            ResourceNotFoundException: If the credit approval does not exist.
            ValidationException: If the credit approval is not approved.
        """
        approval = await self._project_repo.get_credit_approval(credit_approval_id)
        if not approval:
            raise ResourceNotFoundException("credit_approval", credit_approval_id)
        if not approval.is_approved:
            raise ValidationException(
                f"Credit approval {credit_approval_id} is not approved",
                field="credit_approval_id",
            )

        data = dict(customer_data or {})
        name = data.pop("name", None) or approval.customer_name
        address = data.pop("address", None) or approval.customer_address
        if approval.customer_email:
            data.setdefault("email", approval.customer_email)

        customer = CustomerEntity(
            id=generate_cuid(),
            name=name,
            address=address,
            organization_id=approval.organization_id,
            attributes=data,
        )
        project = ProjectEntity(
            id=generate_cuid(),
            customer_id=customer.id,
            credit_approval_id=approval.id,
            organization_id=approval.organization_id,
            created_at=utc_now(),
        )
        await self._project_repo.create_project(project, customer)
        logger.info(
            "Project %s created for credit approval %s", project.id, credit_approval_id
        )

        progress = await self._evaluator.execute(project.id)
        return ProjectIntake(
            project=await self.get_project(project.id),
            customer=customer,
            progress=progress,
        )
