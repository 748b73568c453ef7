"""Firestore-backed repository implementations (swappable with the in-memory store)."""

from solarflow.infrastructure.firebase.repositories.config_repo_firestore import (
    FirestoreQuestionRepository,
    FirestoreSectionRepository,
    FirestoreStageRepository,
)
from solarflow.infrastructure.firebase.repositories.project_repo_firestore import (
    FirestoreProjectRepository,
)
from solarflow.infrastructure.firebase.repositories.submission_repo_firestore import (
    FirestoreSubmissionRepository,
)

__all__ = [
    "FirestoreProjectRepository",
    "FirestoreQuestionRepository",
    "FirestoreSectionRepository",
    "FirestoreStageRepository",
    "FirestoreSubmissionRepository",
]
