"""Firestore-backed workflow configuration repositories (stages, sections, questions)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from solarflow.domain.entities import QuestionEntity, SectionEntity, StageEntity
from solarflow.infrastructure.firebase._rest_client import FirestoreRESTClient
from solarflow.infrastructure.firebase.collections import (
    COLLECTION_QUESTIONS,
    COLLECTION_SECTIONS,
    COLLECTION_STAGES,
)
from solarflow.infrastructure.serialization import (
    question_from_dict,
    question_to_dict,
    section_from_dict,
    section_to_dict,
    stage_from_dict,
    stage_to_dict,
)

T = TypeVar("T")


class _FirestoreConfigRepository(Generic[T]):
    """Documents keyed by entity id; the id is also stored in the document body."""

    def __init__(
        self,
        client: FirestoreRESTClient,
        collection: str,
        from_dict: Callable[[dict[str, Any]], T],
        to_dict: Callable[[T], dict[str, Any]],
    ) -> None:
        self._coll = client.collection(collection)
        self._from_dict = from_dict
        self._to_dict = to_dict

    async def list_all(self) -> list[T]:
        items: list[T] = []
        async for snapshot in self._coll.stream():
            items.append(self._from_dict({**snapshot.to_dict(), "id": snapshot.id}))
        return items

    async def get_by_id(self, entity_id: str) -> T | None:
        doc = await self._coll.document(entity_id).get()
        if not doc:
            return None
        return self._from_dict({**doc.to_dict(), "id": doc.id})

    async def save(self, entity: T) -> T:
        data = self._to_dict(entity)
        await self._coll.document(data["id"]).set(data)
        return entity

    async def delete(self, entity_id: str) -> None:
        await self._coll.document(entity_id).delete()


class FirestoreStageRepository(_FirestoreConfigRepository[StageEntity]):
    """Stage repository using Firestore (implements IStageRepository)."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, COLLECTION_STAGES, stage_from_dict, stage_to_dict)


class FirestoreSectionRepository(_FirestoreConfigRepository[SectionEntity]):
    """Section repository using Firestore (implements ISectionRepository)."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, COLLECTION_SECTIONS, section_from_dict, section_to_dict)


class FirestoreQuestionRepository(_FirestoreConfigRepository[QuestionEntity]):
    """Question repository using Firestore (implements IQuestionRepository)."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, COLLECTION_QUESTIONS, question_from_dict, question_to_dict)
