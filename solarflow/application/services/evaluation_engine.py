"""Evaluation engine: derives project state from configuration and submissions.

evaluate() is pure and deterministic. It runs a fixed pipeline where each
step reads only the outputs of earlier steps:

    eligibility -> question visibility -> section data-completion
    -> section visibility -> section completion -> stage completion
    -> stage activation -> required actions

No step walks the dependency graphs recursively, so a cyclic configuration
that bypassed validation still terminates.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from solarflow.application.dtos.evaluation import (
    EvaluationContext,
    EvaluationResult,
    RequiredAction,
)
from solarflow.application.services.rule_evaluator import CanonicalValueResolver
from solarflow.domain.entities import (
    QuestionEntity,
    SectionEntity,
    StageEntity,
    SubmissionEntity,
)
from solarflow.domain.enums import RequiredActionReason, SubmissionState
from solarflow.domain.exceptions import EngineInputException
from solarflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# stage_context for sections no stage owns.
UNASSIGNED_STAGE_CONTEXT = "derived"

_REQUIRED_CONTEXT_FIELDS = ("project", "customer", "credit_approval")
_COLLECTION_FIELDS = ("stages", "sections", "questions", "submissions")


def _check_context(context: EvaluationContext | None) -> None:
    """Raise EngineInputException when the context is malformed."""
    if context is None:
        raise EngineInputException("context", "Evaluation context is required")
    for name in _REQUIRED_CONTEXT_FIELDS:
        if getattr(context, name, None) is None:
            raise EngineInputException(name)
    for name in _COLLECTION_FIELDS:
        if getattr(context, name, None) is None:
            raise EngineInputException(name, f"Evaluation context collection is missing: {name}")


def _unique(ids: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(ids))


def _visible_questions(
    questions: Iterable[QuestionEntity], resolver: CanonicalValueResolver
) -> list[str]:
    return _unique(q.id for q in questions if resolver.check(q.conditional_rule))


def _required_visible(section: SectionEntity, visible_questions: frozenset[str]) -> list[str]:
    return [q for q in _unique(section.required_question_ids) if q in visible_questions]


def _question_satisfied(
    question_id: str,
    submissions: Mapping[str, SubmissionEntity],
    questions: Mapping[str, QuestionEntity],
) -> bool:
    submission = submissions.get(question_id)
    if submission is None or not submission.counts_as_answered:
        return False
    question = questions.get(question_id)
    if question is not None and question.requires_approval:
        return submission.state == SubmissionState.APPROVED
    return True


def _data_complete_sections(
    sections: list[SectionEntity],
    visible_questions: frozenset[str],
    submissions: Mapping[str, SubmissionEntity],
    questions: Mapping[str, QuestionEntity],
) -> list[str]:
    """Sections whose required, visible questions are all satisfied (ignores section visibility)."""
    return [
        s.id
        for s in sections
        if all(
            _question_satisfied(qid, submissions, questions)
            for qid in _required_visible(s, visible_questions)
        )
    ]


def _visible_sections(
    sections: list[SectionEntity],
    data_complete: frozenset[str],
    resolver: CanonicalValueResolver,
) -> list[str]:
    visible: list[str] = []
    for section in sections:
        if not all(dep in data_complete for dep in section.depends_on_section_ids):
            continue
        rule = section.conditional_question_rule
        if rule is not None and not resolver.check(rule.as_field_rule()):
            continue
        visible.append(section.id)
    return visible


def _completed_stages(
    stages: Iterable[StageEntity], completed_sections: frozenset[str]
) -> list[str]:
    """Stages with at least one section, all of them completed."""
    return [
        s.id
        for s in stages
        if s.section_ids and all(sid in completed_sections for sid in s.section_ids)
    ]


def _active_stages(
    stages: Iterable[StageEntity], completed_stages: frozenset[str]
) -> list[str]:
    return _unique(
        s.id
        for s in stages
        if all(sid in completed_stages for sid in s.required_stage_ids)
    )


def _owning_stage_by_section(stages: list[StageEntity]) -> dict[str, str]:
    """Map section id to the first owning stage by display order, then configuration order."""
    owners: dict[str, str] = {}
    ordered = sorted(enumerate(stages), key=lambda pair: (pair[1].order, pair[0]))
    for _, stage in ordered:
        for section_id in stage.section_ids:
            owners.setdefault(section_id, stage.id)
    return owners


def _action_reason(submission: SubmissionEntity | None) -> RequiredActionReason | None:
    if submission is None or submission.state == SubmissionState.EMPTY:
        return RequiredActionReason.MISSING
    if submission.state == SubmissionState.REJECTED:
        return RequiredActionReason.REJECTED
    if submission.state == SubmissionState.SUBMITTED:
        return RequiredActionReason.AWAITING_APPROVAL
    return None


def _required_actions(
    project_id: str,
    sections: list[SectionEntity],
    visible_sections: frozenset[str],
    completed_sections: frozenset[str],
    visible_questions: frozenset[str],
    submissions: Mapping[str, SubmissionEntity],
    stage_by_section: Mapping[str, str],
) -> list[RequiredAction]:
    actions: list[RequiredAction] = []
    for section in sections:
        if section.id not in visible_sections or section.id in completed_sections:
            continue
        stage_context = stage_by_section.get(section.id, UNASSIGNED_STAGE_CONTEXT)
        for qid in _required_visible(section, visible_questions):
            reason = _action_reason(submissions.get(qid))
            if reason is None:
                continue
            actions.append(
                RequiredAction(
                    project_id=project_id,
                    question_id=qid,
                    reason=reason,
                    stage_context=stage_context,
                )
            )
    return actions


def evaluate(context: EvaluationContext) -> EvaluationResult:
    """Derive visible/completed sections, active stages and required actions.

    Raises:
        EngineInputException: If the context lacks a project, customer,
            credit approval or one of its collections.
    """
    _check_context(context)

    if not context.credit_approval.is_approved:
        logger.debug("Project %s is not eligible (credit not approved)", context.project.id)
        return EvaluationResult.ineligible()

    resolver = CanonicalValueResolver(context.project, context.customer)
    questions_by_id: dict[str, QuestionEntity] = {}
    for q in context.questions:
        questions_by_id.setdefault(q.id, q)
    submissions_by_question: dict[str, SubmissionEntity] = {}
    for sub in context.submissions:
        submissions_by_question.setdefault(sub.question_id, sub)
    stages = list(context.stages)
    sections = [s for s in context.sections if not s.is_draft]

    visible_question_ids = _visible_questions(context.questions, resolver)
    visible_questions = frozenset(visible_question_ids)
    data_complete = frozenset(
        _data_complete_sections(
            sections, visible_questions, submissions_by_question, questions_by_id
        )
    )
    visible_sections = _visible_sections(sections, data_complete, resolver)
    visible_section_set = frozenset(visible_sections)
    completed_sections = [s for s in visible_sections if s in data_complete]
    completed_section_set = frozenset(completed_sections)
    completed_stages = frozenset(_completed_stages(stages, completed_section_set))
    active_stages = _active_stages(stages, completed_stages)
    actions = _required_actions(
        context.project.id,
        sections,
        visible_section_set,
        completed_section_set,
        visible_questions,
        submissions_by_question,
        _owning_stage_by_section(stages),
    )

    logger.debug(
        "Evaluated project %s: %d active stages, %d/%d sections complete, %d actions",
        context.project.id,
        len(active_stages),
        len(completed_sections),
        len(sections),
        len(actions),
    )
    return EvaluationResult(
        is_eligible=True,
        visible_questions=tuple(visible_question_ids),
        visible_sections=tuple(_unique(visible_sections)),
        completed_sections=tuple(_unique(completed_sections)),
        active_stages=tuple(active_stages),
        required_actions=tuple(actions),
    )
