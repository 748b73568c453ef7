"""Firestore-backed submission repository (implements ISubmissionRepository)."""

from __future__ import annotations

from solarflow.domain.entities import SubmissionEntity, submission_id_for
from solarflow.domain.enums import SubmissionState
from solarflow.infrastructure.firebase._rest_client import FirestoreRESTClient
from solarflow.infrastructure.firebase.collections import COLLECTION_SUBMISSIONS
from solarflow.infrastructure.serialization import (
    submission_from_dict,
    submission_to_dict,
)


class FirestoreSubmissionRepository:
    """One document per (project, question); the document id is derived from the pair."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._coll = client.collection(COLLECTION_SUBMISSIONS)

    async def list_by_project(self, project_id: str) -> list[SubmissionEntity]:
        """Return all submissions for the project (server-side equality query)."""
        query = self._coll.where_equals("project_id", project_id)
        return [submission_from_dict(s.to_dict()) async for s in query.stream()]

    async def list_by_state(self, state: SubmissionState) -> list[SubmissionEntity]:
        """Return submissions in state across all projects (server-side equality query)."""
        query = self._coll.where_equals("state", state.value)
        return [submission_from_dict(s.to_dict()) async for s in query.stream()]

    async def get_for_question(
        self, project_id: str, question_id: str
    ) -> SubmissionEntity | None:
        doc = await self._coll.document(submission_id_for(project_id, question_id)).get()
        if not doc:
            return None
        return submission_from_dict(doc.to_dict())

    async def save(self, submission: SubmissionEntity) -> SubmissionEntity:
        doc_id = submission_id_for(submission.project_id, submission.question_id)
        await self._coll.document(doc_id).set({**submission_to_dict(submission), "id": doc_id})
        return submission
