"""Pytest configuration and fixtures for solarflow.

HTTP tests run against solarflow.main:app with the in-memory backend; the
process-wide MemoryStore is reset around every test.
"""

import os

os.environ.setdefault("DATABASE_BACKEND", "memory")

import pytest
from httpx import ASGITransport, AsyncClient

from solarflow.core.config import get_settings
from solarflow.domain.entities import (
    CreditApprovalEntity,
    CustomerEntity,
    ProjectEntity,
)
from solarflow.domain.enums import CreditApprovalStatus
from solarflow.infrastructure.memory import (
    MemoryProjectRepository,
    MemoryQuestionRepository,
    MemorySectionRepository,
    MemoryStageRepository,
    MemoryStore,
    MemorySubmissionRepository,
    get_memory_store,
    reset_memory_store,
)

get_settings.cache_clear()

from solarflow.main import app  # noqa: E402

PROJECT_ID = "lease-1"
CUSTOMER_ID = "cust-1"
CREDIT_APPROVAL_ID = "credit-1"


def make_project(**attributes) -> ProjectEntity:
    return ProjectEntity(
        id=PROJECT_ID,
        customer_id=CUSTOMER_ID,
        credit_approval_id=CREDIT_APPROVAL_ID,
        organization_id="org-1",
        attributes=attributes,
    )


def make_customer(**attributes) -> CustomerEntity:
    return CustomerEntity(id=CUSTOMER_ID, name="Ada Lovelace", attributes=attributes)


def make_credit_approval(
    status: CreditApprovalStatus = CreditApprovalStatus.APPROVED,
) -> CreditApprovalEntity:
    return CreditApprovalEntity(id=CREDIT_APPROVAL_ID, status=status, organization_id="org-1")


def seed_project(
    store: MemoryStore,
    *,
    approved: bool = True,
    project_attributes: dict | None = None,
) -> None:
    """Add the standard project, customer and credit approval documents to store."""
    store.add_project(
        {
            "id": PROJECT_ID,
            "customer_id": CUSTOMER_ID,
            "credit_approval_id": CREDIT_APPROVAL_ID,
            "organization_id": "org-1",
            **(project_attributes or {}),
        }
    )
    store.add_customer({"id": CUSTOMER_ID, "name": "Ada Lovelace", "state": "CA"})
    store.add_credit_approval(
        {
            "id": CREDIT_APPROVAL_ID,
            "status": "approved" if approved else "unapproved",
            "organization_id": "org-1",
        }
    )


@pytest.fixture(autouse=True)
def _fresh_memory_store():
    """Every test starts with an empty process-wide store."""
    reset_memory_store()
    yield
    reset_memory_store()


@pytest.fixture
def store() -> MemoryStore:
    return get_memory_store()


@pytest.fixture
def repos(store: MemoryStore) -> dict:
    """Memory repositories sharing one store, keyed by concern."""
    return {
        "stages": MemoryStageRepository(store),
        "sections": MemorySectionRepository(store),
        "questions": MemoryQuestionRepository(store),
        "submissions": MemorySubmissionRepository(store),
        "projects": MemoryProjectRepository(store),
    }


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
