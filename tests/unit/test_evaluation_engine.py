"""Tests for the evaluation engine (pure function over an EvaluationContext)."""

import pytest

from solarflow.application.dtos.evaluation import EvaluationContext
from solarflow.application.services.evaluation_engine import (
    UNASSIGNED_STAGE_CONTEXT,
    evaluate,
)
from solarflow.domain.entities import (
    ActivationRules,
    QuestionEntity,
    SectionEntity,
    StageEntity,
    SubmissionEntity,
    submission_id_for,
)
from solarflow.domain.enums import (
    ConfigStatus,
    CreditApprovalStatus,
    RequiredActionReason,
    RuleOperator,
    SubmissionState,
)
from solarflow.domain.exceptions import EngineInputException
from solarflow.domain.value_objects import ConditionalRule, SectionConditionalRule
from tests.conftest import (
    PROJECT_ID,
    make_credit_approval,
    make_customer,
    make_project,
)


def _submission(question_id: str, state: SubmissionState, value="x") -> SubmissionEntity:
    return SubmissionEntity(
        id=submission_id_for(PROJECT_ID, question_id),
        project_id=PROJECT_ID,
        question_id=question_id,
        state=state,
        value=value,
    )


def _context(
    *,
    stages=(),
    sections=(),
    questions=(),
    submissions=(),
    credit_status=CreditApprovalStatus.APPROVED,
    project_attributes=None,
    customer_attributes=None,
) -> EvaluationContext:
    return EvaluationContext(
        project=make_project(**(project_attributes or {})),
        customer=make_customer(**(customer_attributes or {})),
        credit_approval=make_credit_approval(credit_status),
        stages=tuple(stages),
        sections=tuple(sections),
        questions=tuple(questions),
        submissions=tuple(submissions),
    )


def _baseline(*, requires_approval: bool = False, submissions=()) -> EvaluationContext:
    """S1 (no rules) -> sec1 (required q1) -> q1 (no rule)."""
    return _context(
        stages=[StageEntity(id="S1", name="Site Survey", section_ids=["sec1"])],
        sections=[SectionEntity(id="sec1", name="Roof", required_question_ids=["q1"])],
        questions=[
            QuestionEntity(id="q1", label="Roof type", requires_approval=requires_approval)
        ],
        submissions=submissions,
    )


# ---- Scenarios ----


def test_no_submissions_reports_missing_answer() -> None:
    result = evaluate(_baseline())
    assert result.is_eligible is True
    assert result.active_stages == ("S1",)
    assert result.completed_sections == ()
    assert result.visible_questions == ("q1",)
    assert result.visible_sections == ("sec1",)
    assert [(a.question_id, a.reason) for a in result.required_actions] == [
        ("q1", RequiredActionReason.MISSING)
    ]


def test_submitted_answer_completes_section() -> None:
    result = evaluate(_baseline(submissions=[_submission("q1", SubmissionState.SUBMITTED)]))
    assert result.completed_sections == ("sec1",)
    assert result.required_actions == ()


def test_approval_required_answer_waits_for_admin() -> None:
    result = evaluate(
        _baseline(
            requires_approval=True,
            submissions=[_submission("q1", SubmissionState.SUBMITTED)],
        )
    )
    assert result.completed_sections == ()
    assert [(a.question_id, a.reason) for a in result.required_actions] == [
        ("q1", RequiredActionReason.AWAITING_APPROVAL)
    ]


def test_approved_answer_completes_approval_gated_section() -> None:
    result = evaluate(
        _baseline(
            requires_approval=True,
            submissions=[_submission("q1", SubmissionState.APPROVED)],
        )
    )
    assert result.completed_sections == ("sec1",)
    assert result.required_actions == ()


def test_rejected_answer_blocks_section_with_rejected_action() -> None:
    result = evaluate(_baseline(submissions=[_submission("q1", SubmissionState.REJECTED)]))
    assert result.completed_sections == ()
    assert result.required_actions[0].reason == RequiredActionReason.REJECTED


def test_empty_placeholder_counts_as_missing() -> None:
    result = evaluate(
        _baseline(submissions=[_submission("q1", SubmissionState.EMPTY, value=None)])
    )
    assert result.required_actions[0].reason == RequiredActionReason.MISSING


# ---- Eligibility ----


def test_unapproved_credit_returns_empty_ineligible_result() -> None:
    ctx = _context(
        stages=[StageEntity(id="S1", name="Survey", section_ids=["sec1"])],
        sections=[SectionEntity(id="sec1", name="Roof")],
        questions=[QuestionEntity(id="q1", label="Roof type")],
        credit_status=CreditApprovalStatus.UNAPPROVED,
    )
    result = evaluate(ctx)
    assert result.to_dict() == {
        "is_eligible": False,
        "visible_questions": [],
        "visible_sections": [],
        "completed_sections": [],
        "active_stages": [],
        "required_actions": [],
    }


# ---- Section rules ----


def test_section_without_required_questions_is_vacuously_complete() -> None:
    ctx = _context(
        sections=[SectionEntity(id="sec1", name="Notes", optional_question_ids=["q1"])],
        questions=[QuestionEntity(id="q1", label="Notes")],
    )
    assert evaluate(ctx).completed_sections == ("sec1",)


def test_hidden_required_question_does_not_block_section() -> None:
    ctx = _context(
        sections=[SectionEntity(id="sec1", name="Battery", required_question_ids=["q1"])],
        questions=[
            QuestionEntity(
                id="q1",
                label="Battery model",
                conditional_rule=ConditionalRule("project.has_battery", RuleOperator.TRUE),
            )
        ],
        project_attributes={"has_battery": False},
    )
    result = evaluate(ctx)
    assert result.visible_questions == ()
    assert result.completed_sections == ("sec1",)
    assert result.required_actions == ()


def test_data_complete_section_behind_incomplete_prerequisite_is_not_completed() -> None:
    ctx = _context(
        sections=[
            SectionEntity(id="a", name="Site", required_question_ids=["q1"]),
            SectionEntity(id="b", name="Design", depends_on_section_ids=["a"]),
        ],
        questions=[QuestionEntity(id="q1", label="Address")],
    )
    result = evaluate(ctx)
    assert result.visible_sections == ("a",)
    assert "b" not in result.completed_sections


def test_prerequisite_completion_reveals_dependent_section() -> None:
    ctx = _context(
        sections=[
            SectionEntity(id="a", name="Site", required_question_ids=["q1"]),
            SectionEntity(id="b", name="Design", depends_on_section_ids=["a"]),
        ],
        questions=[QuestionEntity(id="q1", label="Address")],
        submissions=[_submission("q1", SubmissionState.SUBMITTED)],
    )
    result = evaluate(ctx)
    assert result.visible_sections == ("a", "b")
    assert result.completed_sections == ("a", "b")


def test_draft_sections_are_excluded_everywhere() -> None:
    ctx = _context(
        stages=[StageEntity(id="S1", name="Survey", section_ids=["draft"])],
        sections=[
            SectionEntity(id="draft", name="WIP", status=ConfigStatus.DRAFT),
            SectionEntity(id="after", name="After", depends_on_section_ids=["draft"]),
        ],
    )
    result = evaluate(ctx)
    assert result.visible_sections == ()
    assert result.completed_sections == ()


def test_section_question_rule_is_an_additional_gate() -> None:
    # Bare question ids resolve to UNRESOLVED: equals fails, not_equals passes.
    ctx = _context(
        sections=[
            SectionEntity(
                id="hidden",
                name="Hidden",
                conditional_question_rule=SectionConditionalRule(
                    "q1", RuleOperator.EQUALS, "yes"
                ),
            ),
            SectionEntity(
                id="shown",
                name="Shown",
                conditional_question_rule=SectionConditionalRule(
                    "q1", RuleOperator.NOT_EQUALS, "yes"
                ),
            ),
        ],
        questions=[QuestionEntity(id="q1", label="Has HOA")],
        submissions=[_submission("q1", SubmissionState.SUBMITTED, value="yes")],
    )
    assert evaluate(ctx).visible_sections == ("shown",)


def test_question_rule_on_submission_field_never_resolves() -> None:
    ctx = _context(
        questions=[
            QuestionEntity(
                id="q2",
                label="HOA contact",
                conditional_rule=ConditionalRule("submission.q1", RuleOperator.EQUALS, "yes"),
            )
        ],
        submissions=[_submission("q1", SubmissionState.SUBMITTED, value="yes")],
    )
    assert evaluate(ctx).visible_questions == ()


# ---- Stages ----


def test_stage_with_required_stage_activates_only_when_it_completes() -> None:
    stages = [
        StageEntity(id="s1", name="Survey", section_ids=["sec1"], order=1),
        StageEntity(
            id="s2",
            name="Install",
            order=2,
            activation_rules=ActivationRules(required_stage_ids=["s1"]),
        ),
    ]
    sections = [SectionEntity(id="sec1", name="Roof", required_question_ids=["q1"])]
    questions = [QuestionEntity(id="q1", label="Roof type")]

    before = evaluate(_context(stages=stages, sections=sections, questions=questions))
    after = evaluate(
        _context(
            stages=stages,
            sections=sections,
            questions=questions,
            submissions=[_submission("q1", SubmissionState.SUBMITTED)],
        )
    )
    assert before.active_stages == ("s1",)
    assert after.active_stages == ("s1", "s2")


def test_stage_without_sections_never_completes() -> None:
    ctx = _context(
        stages=[
            StageEntity(id="empty", name="Container"),
            StageEntity(
                id="next",
                name="Next",
                activation_rules=ActivationRules(required_stage_ids=["empty"]),
            ),
        ]
    )
    assert evaluate(ctx).active_stages == ("empty",)


def test_required_action_stage_context_uses_first_owning_stage_by_order() -> None:
    ctx = _context(
        stages=[
            StageEntity(id="late", name="Late", section_ids=["sec1"], order=5),
            StageEntity(id="early", name="Early", section_ids=["sec1"], order=1),
        ],
        sections=[
            SectionEntity(id="sec1", name="Roof", required_question_ids=["q1"]),
            SectionEntity(id="orphan", name="Orphan", required_question_ids=["q2"]),
        ],
        questions=[QuestionEntity(id="q1", label="A"), QuestionEntity(id="q2", label="B")],
    )
    contexts = {a.question_id: a.stage_context for a in evaluate(ctx).required_actions}
    assert contexts == {"q1": "early", "q2": UNASSIGNED_STAGE_CONTEXT}


def test_required_actions_carry_project_id() -> None:
    action = evaluate(_baseline()).required_actions[0]
    assert action.project_id == PROJECT_ID
    assert action.to_dict() == {
        "project_id": PROJECT_ID,
        "question_id": "q1",
        "reason": "missing",
        "stage_context": "S1",
    }


# ---- Robustness ----


def test_evaluate_is_idempotent() -> None:
    ctx = _baseline(requires_approval=True, submissions=[_submission("q1", SubmissionState.SUBMITTED)])
    assert evaluate(ctx).to_dict() == evaluate(ctx).to_dict()
    assert evaluate(ctx) == evaluate(ctx)


def test_cyclic_configuration_terminates() -> None:
    ctx = _context(
        stages=[
            StageEntity(id="a", name="A", activation_rules=ActivationRules(["b"])),
            StageEntity(id="b", name="B", activation_rules=ActivationRules(["a"])),
        ],
        sections=[
            SectionEntity(id="x", name="X", depends_on_section_ids=["y"]),
            SectionEntity(id="y", name="Y", depends_on_section_ids=["x"]),
        ],
    )
    result = evaluate(ctx)
    assert result.active_stages == ()
    # Both sections are vacuously data-complete, so each one's prerequisite is met.
    assert result.visible_sections == ("x", "y")


def test_missing_credit_approval_raises_engine_input_error() -> None:
    ctx = EvaluationContext(
        project=make_project(),
        customer=make_customer(),
        credit_approval=None,
    )
    with pytest.raises(EngineInputException) as exc_info:
        evaluate(ctx)
    assert exc_info.value.details == {"field": "credit_approval"}


def test_none_collection_raises_engine_input_error() -> None:
    ctx = EvaluationContext(
        project=make_project(),
        customer=make_customer(),
        credit_approval=make_credit_approval(),
        sections=None,
    )
    with pytest.raises(EngineInputException):
        evaluate(ctx)


def test_rule_literal_beyond_float_range_still_evaluates() -> None:
    ctx = _context(
        questions=[
            QuestionEntity(
                id="q1",
                label="Commercial meter",
                conditional_rule=ConditionalRule(
                    "project.system_size", RuleOperator.GREATER_THAN, 10**400
                ),
            )
        ],
        project_attributes={"system_size": 5},
    )
    assert evaluate(ctx).visible_questions == ()
