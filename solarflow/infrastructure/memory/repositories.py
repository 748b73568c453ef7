"""In-memory repository implementations backed by MemoryStore."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from solarflow.domain.entities import (
    CreditApprovalEntity,
    CustomerEntity,
    ProjectEntity,
    QuestionEntity,
    SectionEntity,
    StageEntity,
    SubmissionEntity,
    submission_id_for,
)
from solarflow.domain.enums import SubmissionState
from solarflow.infrastructure.firebase.collections import (
    COLLECTION_CREDIT_APPROVALS,
    COLLECTION_CUSTOMERS,
    COLLECTION_PROJECTS,
    COLLECTION_QUESTIONS,
    COLLECTION_SECTIONS,
    COLLECTION_STAGES,
    COLLECTION_SUBMISSIONS,
)
from solarflow.infrastructure.memory.store import MemoryStore
from solarflow.infrastructure.serialization import (
    credit_approval_from_dict,
    customer_from_dict,
    customer_to_dict,
    project_from_dict,
    project_to_dict,
    question_from_dict,
    question_to_dict,
    section_from_dict,
    section_to_dict,
    stage_from_dict,
    stage_to_dict,
    submission_from_dict,
    submission_to_dict,
)

T = TypeVar("T")


class _MemoryConfigRepository(Generic[T]):
    def __init__(
        self,
        store: MemoryStore,
        collection: str,
        from_dict: Callable[[dict[str, Any]], T],
        to_dict: Callable[[T], dict[str, Any]],
    ) -> None:
        self._store = store
        self._collection = collection
        self._from_dict = from_dict
        self._to_dict = to_dict

    async def list_all(self) -> list[T]:
        return [self._from_dict(d) for d in self._store.stream(self._collection)]

    async def get_by_id(self, entity_id: str) -> T | None:
        doc = self._store.get(self._collection, entity_id)
        return self._from_dict(doc) if doc is not None else None

    async def save(self, entity: T) -> T:
        data = self._to_dict(entity)
        self._store.set(self._collection, data["id"], data)
        return entity

    async def delete(self, entity_id: str) -> None:
        self._store.delete(self._collection, entity_id)


class MemoryStageRepository(_MemoryConfigRepository[StageEntity]):
    def __init__(self, store: MemoryStore) -> None:
        super().__init__(store, COLLECTION_STAGES, stage_from_dict, stage_to_dict)


class MemorySectionRepository(_MemoryConfigRepository[SectionEntity]):
    def __init__(self, store: MemoryStore) -> None:
        super().__init__(store, COLLECTION_SECTIONS, section_from_dict, section_to_dict)


class MemoryQuestionRepository(_MemoryConfigRepository[QuestionEntity]):
    def __init__(self, store: MemoryStore) -> None:
        super().__init__(store, COLLECTION_QUESTIONS, question_from_dict, question_to_dict)


class MemorySubmissionRepository:
    """Submissions keyed by "<project_id>__<question_id>"."""

    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    async def list_by_project(self, project_id: str) -> list[SubmissionEntity]:
        docs = self._store.where_equals(COLLECTION_SUBMISSIONS, "project_id", project_id)
        return [submission_from_dict(d) for d in docs]

    async def list_by_state(self, state: SubmissionState) -> list[SubmissionEntity]:
        docs = self._store.where_equals(COLLECTION_SUBMISSIONS, "state", state.value)
        return [submission_from_dict(d) for d in docs]

    async def get_for_question(
        self, project_id: str, question_id: str
    ) -> SubmissionEntity | None:
        doc = self._store.get(COLLECTION_SUBMISSIONS, submission_id_for(project_id, question_id))
        return submission_from_dict(doc) if doc is not None else None

    async def save(self, submission: SubmissionEntity) -> SubmissionEntity:
        doc_id = submission_id_for(submission.project_id, submission.question_id)
        self._store.set(
            COLLECTION_SUBMISSIONS, doc_id, {**submission_to_dict(submission), "id": doc_id}
        )
        return submission


class MemoryProjectRepository:
    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    async def list_projects(self) -> list[ProjectEntity]:
        return [project_from_dict(d) for d in self._store.stream(COLLECTION_PROJECTS)]

    async def get_project(self, project_id: str) -> ProjectEntity | None:
        doc = self._store.get(COLLECTION_PROJECTS, project_id)
        return project_from_dict(doc) if doc is not None else None

    async def get_customer(self, customer_id: str) -> CustomerEntity | None:
        doc = self._store.get(COLLECTION_CUSTOMERS, customer_id)
        return customer_from_dict(doc) if doc is not None else None

    async def get_credit_approval(
        self, credit_approval_id: str
    ) -> CreditApprovalEntity | None:
        doc = self._store.get(COLLECTION_CREDIT_APPROVALS, credit_approval_id)
        return credit_approval_from_dict(doc) if doc is not None else None

    async def list_credit_approvals(self) -> list[CreditApprovalEntity]:
        return [
            credit_approval_from_dict(d) for d in self._store.stream(COLLECTION_CREDIT_APPROVALS)
        ]

    async def create_project(
        self, project: ProjectEntity, customer: CustomerEntity
    ) -> ProjectEntity:
        self._store.set(COLLECTION_CUSTOMERS, customer.id, customer_to_dict(customer))
        self._store.set(COLLECTION_PROJECTS, project.id, project_to_dict(project))
        return project

    async def save_project(self, project: ProjectEntity) -> ProjectEntity:
        self._store.set(COLLECTION_PROJECTS, project.id, project_to_dict(project))
        return project
