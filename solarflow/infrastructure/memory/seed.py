"""Load a seed document into the memory store.

The document maps collection names to lists of documents, each with an "id":

    {"credit_approvals": [{"id": "ca_1", "status": "approved", ...}], "stages": [...]}

Used at startup (MEMORY_SEED_PATH) so a local server has credit approvals to
open projects from and a starter configuration.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from solarflow.infrastructure.memory.store import COLLECTIONS, MemoryStore


def load_seed_document(store: MemoryStore, data: dict[str, Any]) -> int:
    """Write every document in data to store; return how many were written.

    Raises:
        ValueError: If a collection is unknown or a document has no id.
    """
    written = 0
    for collection, docs in data.items():
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection in seed document: {collection}")
        for doc in docs:
            if not isinstance(doc, dict) or not doc.get("id"):
                raise ValueError(f"Seed document in {collection} must be an object with an id")
            store.set(collection, doc["id"], doc)
            written += 1
    return written


def load_seed_file(store: MemoryStore, path: str | Path) -> int:
    """Read a JSON seed file and load it into store."""
    with Path(path).open(encoding="utf-8") as f:
        return load_seed_document(store, json.load(f))
