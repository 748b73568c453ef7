"""In-process document store with the same collection layout as Firestore.

Documents are plain dicts produced by the shared serialization module and
are deep-copied on the way in and out, so callers never share state with
the store. Used for local development (DATABASE_BACKEND=memory) and tests.
"""

from __future__ import annotations

import copy
from typing import Any

from solarflow.infrastructure.firebase.collections import (
    COLLECTION_CREDIT_APPROVALS,
    COLLECTION_CUSTOMERS,
    COLLECTION_PROJECTS,
    COLLECTION_QUESTIONS,
    COLLECTION_SECTIONS,
    COLLECTION_STAGES,
    COLLECTION_SUBMISSIONS,
)

COLLECTIONS = (
    COLLECTION_STAGES,
    COLLECTION_SECTIONS,
    COLLECTION_QUESTIONS,
    COLLECTION_PROJECTS,
    COLLECTION_CUSTOMERS,
    COLLECTION_CREDIT_APPROVALS,
    COLLECTION_SUBMISSIONS,
)


class MemoryStore:
    """Collections of documents keyed by document id (insertion ordered)."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, dict[str, Any]]] = {c: {} for c in COLLECTIONS}

    def _collection(self, name: str) -> dict[str, dict[str, Any]]:
        return self._data.setdefault(name, {})

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        doc = self._collection(collection).get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        self._collection(collection)[doc_id] = copy.deepcopy(data)

    def delete(self, collection: str, doc_id: str) -> None:
        self._collection(collection).pop(doc_id, None)

    def stream(self, collection: str) -> list[dict[str, Any]]:
        return [copy.deepcopy(d) for d in self._collection(collection).values()]

    def where_equals(self, collection: str, field: str, value: Any) -> list[dict[str, Any]]:
        return [
            copy.deepcopy(d)
            for d in self._collection(collection).values()
            if d.get(field) == value
        ]

    def clear(self) -> None:
        for docs in self._data.values():
            docs.clear()

    # Seeding helpers for records owned by the wider platform.

    def add_project(self, data: dict[str, Any]) -> None:
        self.set(COLLECTION_PROJECTS, data["id"], data)

    def add_customer(self, data: dict[str, Any]) -> None:
        self.set(COLLECTION_CUSTOMERS, data["id"], data)

    def add_credit_approval(self, data: dict[str, Any]) -> None:
        self.set(COLLECTION_CREDIT_APPROVALS, data["id"], data)


_memory_store: MemoryStore | None = None


def get_memory_store() -> MemoryStore:
    """Return the process-wide memory store, creating it on first use."""
    global _memory_store
    if _memory_store is None:
        _memory_store = MemoryStore()
    return _memory_store


def reset_memory_store() -> None:
    """Drop the process-wide memory store (next get_memory_store() starts empty)."""
    global _memory_store
    _memory_store = None
