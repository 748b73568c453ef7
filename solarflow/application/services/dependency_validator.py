"""Configuration validator: dependency graphs and dangling references.

Validators only report. They return a list of human-readable messages (empty
when valid) and never mutate or persist anything; callers decide whether to
block the save (see ConfigurationService).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from solarflow.application.services.rule_evaluator import is_canonical_path
from solarflow.domain.entities import QuestionEntity, SectionEntity, StageEntity

T = TypeVar("T")


def _dependency_chain(path: list[str], labels: dict[str, str]) -> str:
    return " -> ".join(f'"{labels.get(node, node)}"' for node in path)


def find_dependency_errors(
    candidate: T,
    existing: Iterable[T],
    *,
    kind: str,
    get_id: Callable[[T], str],
    get_label: Callable[[T], str],
    get_dependencies: Callable[[T], list[str]],
) -> list[str]:
    """Return self-reference and cycle errors the candidate would introduce.

    The walk runs over the prospective graph: the candidate replaces any
    stored version with the same id. Each walk keeps its own seen-set, so
    cycles elsewhere in the graph that do not reach the candidate are
    ignored rather than looped on.
    """
    candidate_id = get_id(candidate)
    candidate_label = get_label(candidate)
    graph: dict[str, list[str]] = {}
    labels: dict[str, str] = {}
    for item in existing:
        graph[get_id(item)] = list(get_dependencies(item) or [])
        labels[get_id(item)] = get_label(item)
    graph[candidate_id] = list(get_dependencies(candidate) or [])
    labels[candidate_id] = candidate_label

    errors: list[str] = []
    direct = list(dict.fromkeys(graph[candidate_id]))
    if candidate_id in direct:
        errors.append(f'{kind} "{candidate_label}" cannot depend on itself.')

    for dep_id in direct:
        if dep_id == candidate_id:
            continue
        stack: list[tuple[str, list[str]]] = [(dep_id, [candidate_id, dep_id])]
        seen: set[str] = set()
        while stack:
            current, path = stack.pop()
            if current == candidate_id:
                errors.append(
                    f'Circular dependency detected: {kind} "{candidate_label}" depends on '
                    f'"{labels.get(dep_id, dep_id)}", which eventually depends on '
                    f'"{candidate_label}" ({_dependency_chain(path, labels)}).'
                )
                break
            if current in seen:
                continue
            seen.add(current)
            for nxt in graph.get(current, []):
                stack.append((nxt, [*path, nxt]))
    return errors


def validate_section_dependencies(
    candidate: SectionEntity, all_sections: Iterable[SectionEntity]
) -> list[str]:
    """Return errors if the candidate section depends on itself or closes a cycle."""
    return find_dependency_errors(
        candidate,
        all_sections,
        kind="Section",
        get_id=lambda s: s.id,
        get_label=lambda s: s.name or s.id,
        get_dependencies=lambda s: s.depends_on_section_ids,
    )


def validate_stage_dependencies(
    candidate: StageEntity, all_stages: Iterable[StageEntity]
) -> list[str]:
    """Return errors if the candidate stage requires itself or closes a cycle."""
    return find_dependency_errors(
        candidate,
        all_stages,
        kind="Stage",
        get_id=lambda s: s.id,
        get_label=lambda s: s.name or s.id,
        get_dependencies=lambda s: s.required_stage_ids,
    )


def validate_section_content(
    candidate: SectionEntity, all_questions: Iterable[QuestionEntity]
) -> list[str]:
    """Return one error per required or optional question id that does not exist."""
    question_ids = {q.id for q in all_questions}
    errors = [
        f'Required question ID "{qid}" does not exist.'
        for qid in candidate.required_question_ids
        if qid not in question_ids
    ]
    errors.extend(
        f'Optional question ID "{qid}" does not exist.'
        for qid in candidate.optional_question_ids
        if qid not in question_ids
    )
    rule = candidate.conditional_question_rule
    if rule is not None and rule.question_id not in question_ids:
        errors.append(f'Conditional rule question ID "{rule.question_id}" does not exist.')
    return errors


def validate_stage_content(
    candidate: StageEntity, all_sections: Iterable[SectionEntity]
) -> list[str]:
    """Return one error per assigned section id that does not exist."""
    section_ids = {s.id for s in all_sections}
    return [
        f'Assigned section ID "{sid}" does not exist.'
        for sid in candidate.section_ids
        if sid not in section_ids
    ]


def validate_question_rule(
    candidate: QuestionEntity, all_questions: Iterable[QuestionEntity]
) -> list[str]:
    """Return errors for a conditional rule that references nothing or the question itself."""
    rule = candidate.conditional_rule
    if rule is None:
        return []
    if rule.field == candidate.id:
        return [f'Question "{candidate.label}" cannot depend on itself.']
    if is_canonical_path(rule.field):
        return []
    if rule.field not in {q.id for q in all_questions}:
        return [
            f'Conditional rule field "{rule.field}" is neither a canonical field '
            "nor an existing question ID."
        ]
    return []
