"""Firestore-backed project repository (implements IProjectRepository).

Credit approvals are owned by the wider platform and only read here. Projects
and customers are created by intake; after that only the project's stage
progress is written back.
"""

from __future__ import annotations

from solarflow.domain.entities import CreditApprovalEntity, CustomerEntity, ProjectEntity
from solarflow.infrastructure.firebase._rest_client import FirestoreRESTClient
from solarflow.infrastructure.firebase.collections import (
    COLLECTION_CREDIT_APPROVALS,
    COLLECTION_CUSTOMERS,
    COLLECTION_PROJECTS,
)
from solarflow.infrastructure.serialization import (
    credit_approval_from_dict,
    customer_from_dict,
    customer_to_dict,
    project_from_dict,
    project_to_dict,
)


class FirestoreProjectRepository:
    """Project, customer and credit approval lookups using Firestore."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._projects = client.collection(COLLECTION_PROJECTS)
        self._customers = client.collection(COLLECTION_CUSTOMERS)
        self._credit_approvals = client.collection(COLLECTION_CREDIT_APPROVALS)

    async def list_projects(self) -> list[ProjectEntity]:
        return [
            project_from_dict({**s.to_dict(), "id": s.id}) async for s in self._projects.stream()
        ]

    async def get_project(self, project_id: str) -> ProjectEntity | None:
        doc = await self._projects.document(project_id).get()
        if not doc:
            return None
        return project_from_dict({**doc.to_dict(), "id": doc.id})

    async def get_customer(self, customer_id: str) -> CustomerEntity | None:
        doc = await self._customers.document(customer_id).get()
        if not doc:
            return None
        return customer_from_dict({**doc.to_dict(), "id": doc.id})

    async def get_credit_approval(
        self, credit_approval_id: str
    ) -> CreditApprovalEntity | None:
        doc = await self._credit_approvals.document(credit_approval_id).get()
        if not doc:
            return None
        return credit_approval_from_dict({**doc.to_dict(), "id": doc.id})

    async def list_credit_approvals(self) -> list[CreditApprovalEntity]:
        return [
            credit_approval_from_dict({**s.to_dict(), "id": s.id})
            async for s in self._credit_approvals.stream()
        ]

    async def create_project(
        self, project: ProjectEntity, customer: CustomerEntity
    ) -> ProjectEntity:
        """Write the customer, then the project that references it."""
        await self._customers.document(customer.id).set(customer_to_dict(customer))
        await self._projects.document(project.id).set(project_to_dict(project))
        return project

    async def save_project(self, project: ProjectEntity) -> ProjectEntity:
        """Write only the progress fields so platform-owned fields are not overwritten."""
        doc = await self._projects.document(project.id).get()
        existing = doc.to_dict() if doc else {}
        data = project_to_dict(project)
        await self._projects.document(project.id).set(
            {
                **existing,
                "id": project.id,
                "active_stages": data["active_stages"],
                "current_stage_name": data["current_stage_name"],
            }
        )
        return project
