"""Referential-integrity checks run before deleting configuration.

Each function returns labels of the items still referencing the target;
an empty list means the delete is safe.
"""

from collections.abc import Iterable

from solarflow.domain.entities import QuestionEntity, SectionEntity, StageEntity


def sections_depending_on(section_id: str, sections: Iterable[SectionEntity]) -> list[str]:
    """Sections listing section_id as a prerequisite."""
    return [
        f"Section: {s.name}"
        for s in sections
        if s.id != section_id and section_id in s.depends_on_section_ids
    ]


def stages_assigning(section_id: str, stages: Iterable[StageEntity]) -> list[str]:
    """Stages that still have section_id assigned."""
    return [f"Stage: {s.name}" for s in stages if s.owns_section(section_id)]


def stages_requiring(stage_id: str, stages: Iterable[StageEntity]) -> list[str]:
    """Stages whose activation rules name stage_id."""
    return [
        f"Stage: {s.name}"
        for s in stages
        if s.id != stage_id and stage_id in s.required_stage_ids
    ]


def items_referencing_question(
    question_id: str,
    questions: Iterable[QuestionEntity],
    sections: Iterable[SectionEntity],
) -> list[str]:
    """Questions and sections whose conditional rules read question_id."""
    items = [
        f"Question: {q.label}"
        for q in questions
        if q.id != question_id and q.references_question(question_id)
    ]
    items.extend(
        f"Section: {s.name}"
        for s in sections
        if s.conditional_question_rule is not None
        and s.conditional_question_rule.question_id == question_id
    )
    return items
