"""Workflow configuration API schemas (stages, sections, questions).

Write bodies omit the id (it comes from the path); responses carry it.
"""

from pydantic import BaseModel, Field

from solarflow.domain.enums import (
    ConfigStatus,
    QuestionType,
    RuleOperator,
    StageType,
    StorageType,
)

RuleValueField = str | int | float | bool | None


class ConditionalRuleSchema(BaseModel):
    """Question visibility rule."""

    field: str = Field(
        ...,
        min_length=1,
        description="Canonical path (project.system_size, customer.state) or question id.",
    )
    operator: RuleOperator
    value: RuleValueField = None


class SectionConditionalRuleSchema(BaseModel):
    """Section visibility rule anchored on one question's answer."""

    question_id: str = Field(..., min_length=1)
    operator: RuleOperator
    value: RuleValueField = None


class SelectOptionSchema(BaseModel):
    """One choice of a select question."""

    label: str = Field(..., min_length=1)
    value: RuleValueField = None


class QuestionWrite(BaseModel):
    """Request body for PUT /questions/{question_id}."""

    label: str = Field(..., min_length=1, max_length=500)
    question_type: QuestionType = QuestionType.TEXT
    instructions: str = ""
    mapped_field: str | None = Field(default=None, description="e.g. project.system_size")
    requires_approval: bool = False
    conditional_rule: ConditionalRuleSchema | None = None
    options: list[SelectOptionSchema] = Field(
        default_factory=list, description="Choices for select questions."
    )
    allowed_file_types: list[str] = Field(default_factory=list)
    max_file_size_mb: float | None = Field(default=None, gt=0)


class QuestionResponse(QuestionWrite):
    """Question as stored, with its derived storage type."""

    id: str
    data_type: StorageType


class SectionWrite(BaseModel):
    """Request body for PUT /sections/{section_id}."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    required_question_ids: list[str] = Field(default_factory=list)
    optional_question_ids: list[str] = Field(default_factory=list)
    question_order: list[str] | None = Field(
        default=None, description="Unified display order; defaults to required then optional."
    )
    depends_on_section_ids: list[str] = Field(default_factory=list)
    conditional_question_rule: SectionConditionalRuleSchema | None = None
    status: ConfigStatus = ConfigStatus.ACTIVE


class SectionResponse(SectionWrite):
    id: str


class ActivationRulesSchema(BaseModel):
    required_stage_ids: list[str] = Field(
        default_factory=list,
        description="All of these stages must be complete before the stage activates.",
    )


class StageWrite(BaseModel):
    """Request body for PUT /stages/{stage_id}."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    stage_type: StageType = StageType.TERMINAL
    status: ConfigStatus = ConfigStatus.ACTIVE
    section_ids: list[str] = Field(default_factory=list)
    activation_rules: ActivationRulesSchema = Field(default_factory=ActivationRulesSchema)
    order: int = Field(default=0, ge=0)
    is_visible_to_installer: bool = True


class StageResponse(StageWrite):
    id: str
