"""Application services: evaluation engine, rule evaluation and configuration validation."""

from solarflow.application.services.dependency_validator import (
    find_dependency_errors,
    validate_question_rule,
    validate_section_content,
    validate_section_dependencies,
    validate_stage_content,
    validate_stage_dependencies,
)
from solarflow.application.services.evaluation_engine import evaluate
from solarflow.application.services.rule_evaluator import (
    UNRESOLVED,
    CanonicalValueResolver,
    loose_equals,
)

__all__ = [
    "UNRESOLVED",
    "CanonicalValueResolver",
    "evaluate",
    "find_dependency_errors",
    "loose_equals",
    "validate_question_rule",
    "validate_section_content",
    "validate_section_dependencies",
    "validate_stage_content",
    "validate_stage_dependencies",
]
