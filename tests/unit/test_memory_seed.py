"""Tests for loading seed documents into the memory store."""

from pathlib import Path

import pytest

from solarflow.infrastructure.memory import MemoryProjectRepository, load_seed_document, load_seed_file

SEED_FILE = Path(__file__).resolve().parents[2] / "docs" / "seed-data.json"


async def test_seed_document_is_readable_through_repositories(store) -> None:
    count = load_seed_document(
        store,
        {"credit_approvals": [{"id": "ca_1", "status": "approved", "customer_name": "Ada"}]},
    )
    assert count == 1
    approval = await MemoryProjectRepository(store).get_credit_approval("ca_1")
    assert approval is not None and approval.is_approved
    assert approval.customer_name == "Ada"


def test_unknown_collection_or_missing_id_is_rejected(store) -> None:
    with pytest.raises(ValueError, match="Unknown collection"):
        load_seed_document(store, {"tenants": [{"id": "t1"}]})
    with pytest.raises(ValueError, match="with an id"):
        load_seed_document(store, {"stages": [{"name": "No id"}]})


def test_shipped_seed_file_loads(store) -> None:
    assert load_seed_file(store, SEED_FILE) > 0
    assert store.get("stages", "site_survey")["name"] == "Site Survey"
