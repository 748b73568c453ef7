"""In-memory store and repositories (local development and tests)."""

from solarflow.infrastructure.memory.repositories import (
    MemoryProjectRepository,
    MemoryQuestionRepository,
    MemorySectionRepository,
    MemoryStageRepository,
    MemorySubmissionRepository,
)
from solarflow.infrastructure.memory.seed import load_seed_document, load_seed_file
from solarflow.infrastructure.memory.store import (
    MemoryStore,
    get_memory_store,
    reset_memory_store,
)

__all__ = [
    "MemoryProjectRepository",
    "MemoryQuestionRepository",
    "MemorySectionRepository",
    "MemoryStageRepository",
    "MemoryStore",
    "MemorySubmissionRepository",
    "get_memory_store",
    "load_seed_document",
    "load_seed_file",
    "reset_memory_store",
]
